"""Language capability contracts and the baseline normalizer."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Protocol

from lingform.text.normalize import DISPLAY, INDEX, SCORING, normalize_text
from lingform.transliterate.base import TransformKey


class Normalizer(Protocol):
    """Produces index, scoring and display forms of text."""

    normalizer_id: str
    remove_spaces_for_index: bool

    def normalize_for_index(self, text: str, remove_spaces: bool | None = None) -> str:
        """Uniqueness form; idempotent."""

    def normalize_for_scoring(self, text: str) -> str:
        """Fuzzy-matching form with marks decomposed."""

    def normalize_for_display(self, text: str) -> str:
        """Composed form for rendering."""


class Stemmer(Protocol):
    """Reduces an inflected word to its root form."""

    def stem(self, word: str) -> str:
        """Return the stem of a single word."""


@dataclass(frozen=True, eq=False)
class UnicodeNormalizer:
    """Baseline normalizer; languages override only the stages that differ.

    Empty and None inputs are returned as given.
    """

    normalizer_id: str = "unicode-baseline-v1"
    remove_spaces_for_index: bool = False
    keep_marks_on: frozenset[str] = field(default_factory=frozenset)
    # Applied before index normalization only.
    index_charmap: Mapping[int, str] = field(default_factory=dict)
    index_prepare: Callable[[str], str] | None = None

    def normalize_for_index(self, text: str, remove_spaces: bool | None = None) -> str:
        if not text:
            return text
        if remove_spaces is None:
            remove_spaces = self.remove_spaces_for_index
        options = replace(INDEX, remove_spaces=remove_spaces, keep_marks_on=self.keep_marks_on)
        if self.index_charmap:
            text = text.translate(self.index_charmap)
        if self.index_prepare is not None:
            text = self.index_prepare(unicodedata.normalize("NFKC", text))
        return normalize_text(text, options)

    def normalize_for_scoring(self, text: str) -> str:
        if not text:
            return text
        return normalize_text(text, SCORING)

    def normalize_for_display(self, text: str) -> str:
        if not text:
            return text
        return normalize_text(text, DISPLAY)


@dataclass(frozen=True)
class LanguagePack:
    """Capability bundle registered for one language code.

    Components are given as constructors so nothing is built until a
    transformer first needs it.
    """

    code: str
    name: str
    normalizer: Callable[[], Normalizer]
    stemmer: Callable[[], Stemmer] | None = None
    transliterators: tuple[TransformKey, ...] = ()

    @property
    def has_stemmer(self) -> bool:
        return self.stemmer is not None
