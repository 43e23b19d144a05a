"""Arabic language pack."""

from __future__ import annotations

from functools import partial

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SnowballStemmer
from lingform.transliterate.registry import ARA_BGN

# Tatweel is decorative elongation.
_INDEX_CHARMAP = str.maketrans({"ـ": None})

ARABIC_PACK = LanguagePack(
    code="ara",
    name="Arabic",
    normalizer=partial(UnicodeNormalizer, normalizer_id="arabic-basic-v1", index_charmap=_INDEX_CHARMAP),
    stemmer=partial(SnowballStemmer, "arabic"),
    transliterators=(ARA_BGN,),
)
