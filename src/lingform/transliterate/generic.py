"""Language-independent Any -> Latin transliteration."""

from __future__ import annotations

import re

from unidecode import unidecode

from lingform.transliterate.base import Transliterator

_SPACES_RE = re.compile(r"\s+")


class AnyLatinTransliterator(Transliterator):
    """Romanize any script with unidecode's per-character tables."""

    def transliterate(self, text: str) -> str:
        romanized = unidecode(text)
        return _SPACES_RE.sub(" ", romanized).strip()
