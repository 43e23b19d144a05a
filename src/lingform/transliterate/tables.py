"""TOML mapping tables for table-driven transliteration standards."""

from __future__ import annotations

import logging
import threading
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType

from lingform.errors import InitializationError

logger = logging.getLogger(__name__)

_TABLE_PACKAGE = "lingform.transliterate"
_cache: dict[str, MappingTable] = {}
_cache_lock = threading.Lock()


@dataclass(frozen=True)
class MappingRule:
    """A contextual override tried before the plain letter map."""

    match: str
    value: str
    initial: bool = False
    after: str = ""
    before: str = ""

    @property
    def unconditional(self) -> bool:
        return not (self.initial or self.after or self.before)


@dataclass(frozen=True)
class MappingTable:
    """Source-script to target-script mapping under one standard."""

    table_id: str
    standard: str
    source: str
    target: str
    letters: Mapping[str, str]
    rules: tuple[MappingRule, ...] = ()

    @property
    def longest_match(self) -> int:
        lengths = [len(key) for key in self.letters] + [len(rule.match) for rule in self.rules]
        return max(lengths, default=1)


def load_table(name: str) -> MappingTable:
    """Load and cache the packaged table `tables/<name>.toml`.

    Failures are not cached; a later call retries the load.
    """
    with _cache_lock:
        cached = _cache.get(name)
        if cached is not None:
            return cached
        try:
            payload = tomllib.loads(_read_table_source(name))
            table = parse_table(payload)
        except (OSError, tomllib.TOMLDecodeError, KeyError, TypeError, ValueError) as exc:
            raise InitializationError(component=f"table {name}", detail=str(exc)) from exc
        _cache[name] = table
        logger.debug("Loaded transliteration table %s (%d letters)", name, len(table.letters))
        return table


def parse_table(payload: Mapping[str, object]) -> MappingTable:
    """Validate a decoded TOML document into a MappingTable."""
    letters = payload["letters"]
    if not isinstance(letters, dict):
        raise TypeError("letters must be a table")
    for key, value in letters.items():
        if not key or key != key.lower() or not isinstance(value, str):
            raise ValueError(f"invalid letter mapping {key!r} -> {value!r}")

    rules: list[MappingRule] = []
    for raw in payload.get("rules", []):
        if not isinstance(raw, dict):
            raise TypeError("rules must be an array of tables")
        rule = MappingRule(
            match=str(raw["match"]),
            value=str(raw["value"]),
            initial=bool(raw.get("initial", False)),
            after=str(raw.get("after", "")),
            before=str(raw.get("before", "")),
        )
        if not rule.match or rule.match != rule.match.lower():
            raise ValueError(f"rule match must be non-empty lowercase, got {rule.match!r}")
        rules.append(rule)

    return MappingTable(
        table_id=str(payload["id"]),
        standard=str(payload["standard"]),
        source=str(payload["source"]),
        target=str(payload["target"]),
        letters=MappingProxyType(dict(letters)),
        rules=tuple(rules),
    )


def clear_cache() -> None:
    with _cache_lock:
        _cache.clear()


def _read_table_source(name: str) -> str:
    return resources.files(_TABLE_PACKAGE).joinpath("tables", f"{name}.toml").read_text(encoding="utf-8")
