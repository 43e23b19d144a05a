"""Chinese romanization (Pinyin, Wade-Giles) and Han script conversion."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterator
from itertools import groupby

from pypinyin import Style, lazy_pinyin

from lingform.iso.scripts import HAN
from lingform.text.chinese import to_simplified, to_traditional
from lingform.text.normalize import PUNCTUATION_CHARMAP
from lingform.text.scripts import classify_char
from lingform.transliterate.base import TransformKey, Transliterator
from lingform.transliterate.wadegiles import pinyin_to_wade_giles

_OPENING = ("Ps", "Pi")


class PinyinTransliterator(Transliterator):
    """Space-separated Hanyu Pinyin syllables in a pypinyin style."""

    def __init__(self, key: TransformKey, style: Style) -> None:
        super().__init__(key)
        self.style = style

    def transliterate(self, text: str) -> str:
        return join_syllables(romanize(text, self.style))


class WadeGilesTransliterator(Transliterator):
    """Wade-Giles derived from numbered-tone Pinyin."""

    def __init__(self, key: TransformKey, *, tones: bool) -> None:
        super().__init__(key)
        self.tones = tones

    def transliterate(self, text: str) -> str:
        tokens = romanize(text, Style.TONE3, convert=lambda syllable: pinyin_to_wade_giles(syllable, tone=self.tones))
        return join_syllables(tokens)


class HanConversionTransliterator(Transliterator):
    """Simplified <-> traditional character conversion."""

    def __init__(self, key: TransformKey, convert: Callable[[str], str]) -> None:
        super().__init__(key)
        self._convert = convert

    def transliterate(self, text: str) -> str:
        return self._convert(text)


def simplified(key: TransformKey) -> HanConversionTransliterator:
    return HanConversionTransliterator(key, to_simplified)


def traditional(key: TransformKey) -> HanConversionTransliterator:
    return HanConversionTransliterator(key, to_traditional)


def romanize(
    text: str,
    style: Style,
    *,
    convert: Callable[[str], str] | None = None,
) -> list[str]:
    """Split text into syllables (Han runs) and whitespace-separated words (everything else)."""
    tokens: list[str] = []
    for is_han, run in _runs(text):
        if is_han:
            syllables = lazy_pinyin(run, style=style, neutral_tone_with_five=True)
            tokens.extend(convert(syllable) if convert else syllable for syllable in syllables)
        else:
            tokens.extend(run.translate(PUNCTUATION_CHARMAP).split())
    return tokens


def join_syllables(tokens: list[str]) -> str:
    """Join with spaces; closing punctuation sticks to the previous token, opening to the next."""
    words: list[str] = []
    prefix = ""
    for token in tokens:
        if _is_punctuation(token):
            if unicodedata.category(token[0]) in _OPENING:
                prefix += token
            elif words:
                words[-1] += token
            else:
                prefix += token
            continue
        words.append(prefix + token)
        prefix = ""
    if prefix:
        words.append(prefix)
    return " ".join(words)


def _runs(text: str) -> Iterator[tuple[bool, str]]:
    for is_han, chars in groupby(text, key=lambda char: classify_char(char) == HAN):
        yield is_han, "".join(chars)


def _is_punctuation(token: str) -> bool:
    return bool(token) and all(unicodedata.category(char).startswith("P") for char in token)
