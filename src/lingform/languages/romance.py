"""French and Spanish language packs."""

from __future__ import annotations

from functools import partial

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SnowballStemmer

FRENCH_PACK = LanguagePack(
    code="fra",
    name="French",
    normalizer=partial(UnicodeNormalizer, normalizer_id="french-basic-v1"),
    stemmer=partial(SnowballStemmer, "french"),
)

SPANISH_PACK = LanguagePack(
    code="spa",
    name="Spanish",
    normalizer=partial(UnicodeNormalizer, normalizer_id="spanish-basic-v1"),
    stemmer=partial(SnowballStemmer, "spanish"),
)
