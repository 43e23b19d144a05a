"""Output variant identifiers and the transliterator contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from lingform.errors import UnknownTextTypeError


class TextType(Enum):
    """Named output variant of transformed text."""

    ORIGINAL = ("original", "Original Text")
    NORMALIZED_DISPLAY = ("display", "Text")
    NORMALIZED_INDEX = ("index", "Index Text")
    NORMALIZED_SCORING = ("scoring", "Scoring Text")
    BGN = ("bgn", "BGN Standard")
    GOST = ("gost", "GOST Standard")
    PINYIN = ("pinyin", "Pinyin")
    PINYIN_NUMERIC = ("pinyin_numeric", "Pinyin-Numeric")
    PINYIN_NO_TONE = ("pinyin_no_tone", "Pinyin-NoTone")
    WADE_GILES = ("wade_giles", "Wade-Giles")
    WADE_GILES_NO_TONE = ("wade_giles_no_tone", "Wade-Giles-NoTone")
    SIMPLIFIED = ("simplified", "Simplified")
    TRADITIONAL = ("traditional", "Traditional")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label

    @property
    def is_normalized(self) -> bool:
        return self in _NORMALIZED

    @classmethod
    def from_key(cls, key: str) -> TextType:
        """Resolve a machine key (case-insensitive) or member name."""
        folded = key.strip().casefold()
        for member in cls:
            if member.key == folded or member.name.casefold() == folded:
                return member
        raise UnknownTextTypeError(key)


_NORMALIZED = frozenset({TextType.NORMALIZED_DISPLAY, TextType.NORMALIZED_INDEX, TextType.NORMALIZED_SCORING})


@dataclass(frozen=True)
class TransformKey:
    """Identity of a transliterator: language, script pair and variant."""

    language: str
    source: str
    target: str
    text_type: TextType

    def __str__(self) -> str:
        return f"{self.language}-{self.source}-{self.target}/{self.text_type.key}"


class Transliterator(ABC):
    """Stateless script conversion under one named standard."""

    def __init__(self, key: TransformKey) -> None:
        self.key = key

    @property
    def text_type(self) -> TextType:
        return self.key.text_type

    @property
    def target(self) -> str:
        return self.key.target

    def __call__(self, text: str) -> str:
        if not text:
            return text
        return self.transliterate(text)

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """Convert non-empty text."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"
