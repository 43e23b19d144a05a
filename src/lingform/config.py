"""Configuration loading utilities for lingform."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ANALYZERS = ("charset", "script_profile", "stopwords", "langdetect", "script_language")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    display_language: str
    analyzers: tuple[str, ...]
    langdetect_seed: int
    workers: int


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("LINGFORM_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | tuple[str, ...]] = {
        "log_level": "INFO",
        "display_language": "eng",
        "analyzers": DEFAULT_ANALYZERS,
        "langdetect_seed": 0,
        "workers": 1,
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("LINGFORM_LOG_LEVEL", str(defaults["log_level"]))
    display_language = os.getenv("LINGFORM_DISPLAY_LANGUAGE", str(defaults["display_language"]))
    analyzers = _parse_list(
        "LINGFORM_ANALYZERS", os.getenv("LINGFORM_ANALYZERS"), defaults["analyzers"]
    )
    langdetect_seed = _parse_int(
        "LINGFORM_LANGDETECT_SEED", os.getenv("LINGFORM_LANGDETECT_SEED"), defaults["langdetect_seed"]
    )
    workers = _parse_int("LINGFORM_WORKERS", os.getenv("LINGFORM_WORKERS"), defaults["workers"])
    if workers < 1:
        raise ValueError(f"LINGFORM_WORKERS must be at least 1, got {workers}")

    return AppConfig(
        env=env,
        log_level=log_level,
        display_language=display_language,
        analyzers=analyzers,
        langdetect_seed=langdetect_seed,
        workers=workers,
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int | tuple[str, ...]]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    allowed = {"log_level", "display_language", "analyzers", "langdetect_seed", "workers"}
    resolved: dict[str, str | int | tuple[str, ...]] = {}
    for key, raw in payload.items():
        if key not in allowed:
            continue
        if key in {"langdetect_seed", "workers"}:
            resolved[key] = _coerce_int(key, raw)
        elif key == "analyzers":
            resolved[key] = _coerce_str_list(key, raw)
        else:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: object) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_list(name: str, raw: str | None, default: object) -> tuple[str, ...]:
    if raw is None:
        return _coerce_str_list(name, default)
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    if not items:
        raise ValueError(f"{name} must name at least one entry, got {raw!r}")
    return items


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")


def _coerce_str_list(name: str, value: object) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(_coerce_str(name, item) for item in value)
    raise ValueError(f"{name} must be a list of strings, got type {type(value).__name__}")
