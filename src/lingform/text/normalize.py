"""Unicode normalization baseline shared by every language normalizer."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Literal

import regex

NormalForm = Literal["NFC", "NFD", "NFKC", "NFKD"]

_LINE_BREAK_RE = re.compile("\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")
_SPACES_RE = re.compile(r"\s+")
# Combining marks shared across scripts (accents, Arabic harakat); Indic vowel signs are not Inherited.
_MARK_RE = regex.compile(r"(?=\p{Script=Inherited})\p{Mn}")
_APOSTROPHES = frozenset("'‘’ʼ＇")
_DROPPED_FORMAT = frozenset("\ufeff\u200b")
PUNCTUATION_CHARMAP = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‛": "'",
        "“": '"',
        "”": '"',
        "„": '"',
        "«": '"',
        "»": '"',
        "‐": "-",
        "‑": "-",
        "‒": "-",
        "–": "-",
        "—": "-",
        "―": "-",
        "−": "-",
        "…": "...",
        "、": ",",
        "。": ".",
        "「": '"',
        "」": '"',
    }
)


@dataclass(frozen=True)
class NormalizeOptions:
    """Flags for one normalization pass."""

    form: NormalForm = "NFC"
    remove_line_breaks: bool = True
    remove_control: bool = True
    remove_spaces: bool = False
    squeeze_spaces: bool = False
    normalize_punctuation: bool = False
    remove_punctuation: bool = False
    remove_diacritics: bool = False
    casefold: bool = False
    # Precomposed letters whose marks survive `remove_diacritics` (e.g. Cyrillic й).
    keep_marks_on: frozenset[str] = field(default_factory=frozenset)


INDEX = NormalizeOptions(
    form="NFKD",
    squeeze_spaces=True,
    normalize_punctuation=True,
    remove_punctuation=True,
    remove_diacritics=True,
    casefold=True,
)
SCORING = NormalizeOptions(form="NFKD", squeeze_spaces=True, normalize_punctuation=True)
DISPLAY = NormalizeOptions(form="NFKC")


def normalize_text(text: str, options: NormalizeOptions) -> str:
    """Apply one normalization pass; empty input is returned unchanged."""
    if not text:
        return text

    compatibility = options.form in ("NFKC", "NFKD")
    value = unicodedata.normalize("NFKD" if compatibility else "NFD", text)
    value = value.replace("·", " ")
    if options.normalize_punctuation:
        value = value.translate(PUNCTUATION_CHARMAP)
    if options.remove_line_breaks or options.remove_spaces:
        value = _LINE_BREAK_RE.sub(" ", value)

    chars: list[str] = []
    for char in value:
        if char.isspace():
            if options.remove_spaces:
                continue
            if char == "\t" and options.remove_control:
                chars.append(" ")
                continue
            chars.append(char)
            continue
        category = unicodedata.category(char)
        if options.remove_control and (category == "Cc" or char in _DROPPED_FORMAT):
            continue
        if options.remove_punctuation and category.startswith("P"):
            if char not in _APOSTROPHES and not options.remove_spaces:
                chars.append(" ")
            continue
        if options.remove_punctuation and char in _APOSTROPHES:
            continue
        chars.append(char)
    value = "".join(chars)

    if options.casefold:
        value = value.casefold()
    if options.remove_diacritics:
        value = _strip_marks(value, options.keep_marks_on)
    if options.squeeze_spaces:
        value = _SPACES_RE.sub(" ", value).strip()

    return unicodedata.normalize(options.form, value)


def strip_diacritics(text: str) -> str:
    """Remove shared combining marks, keeping base characters."""
    return unicodedata.normalize("NFC", _strip_marks(text, frozenset()))


def _strip_marks(value: str, keep: frozenset[str]) -> str:
    if not keep:
        return _MARK_RE.sub("", unicodedata.normalize("NFD", value))
    composed = unicodedata.normalize("NFC", value)
    return "".join(
        char if char in keep else _MARK_RE.sub("", unicodedata.normalize("NFD", char)) for char in composed
    )
