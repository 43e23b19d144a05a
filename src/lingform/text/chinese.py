"""Simplified/traditional Han conversion backed by OpenCC."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from opencc import OpenCC

HanVariant = Literal["Hans", "Hant", "Hani"]


@lru_cache(maxsize=4)
def _converter(config: str) -> OpenCC:
    return OpenCC(config)


def to_simplified(text: str) -> str:
    """Convert traditional Han characters to simplified ones."""
    if not text:
        return text
    return _converter("t2s").convert(text)


def to_traditional(text: str) -> str:
    """Convert simplified Han characters to traditional ones."""
    if not text:
        return text
    return _converter("s2t").convert(text)


def han_variant(text: str) -> HanVariant:
    """Classify Han text as simplified, traditional, or shared (Hani)."""
    simplified = to_simplified(text)
    traditional = to_traditional(text)
    if simplified == traditional:
        return "Hani"
    if text == simplified:
        return "Hans"
    if text == traditional:
        return "Hant"
    return "Hani"
