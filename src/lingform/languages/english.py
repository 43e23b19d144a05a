"""English language pack."""

from __future__ import annotations

from functools import partial

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SnowballStemmer


def english_normalizer() -> UnicodeNormalizer:
    return UnicodeNormalizer(normalizer_id="english-basic-v1", remove_spaces_for_index=True)


ENGLISH_PACK = LanguagePack(
    code="eng",
    name="English",
    normalizer=english_normalizer,
    stemmer=partial(SnowballStemmer, "english"),
)
