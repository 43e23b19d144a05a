"""Undetermined-language fallback pack."""

from __future__ import annotations

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.transliterate.registry import UND_BGN


def undetermined_normalizer() -> UnicodeNormalizer:
    return UnicodeNormalizer(normalizer_id="und-unicode-v1", remove_spaces_for_index=True)


GENERIC_PACK = LanguagePack(
    code="und",
    name="Undetermined",
    normalizer=undetermined_normalizer,
    transliterators=(UND_BGN,),
)
