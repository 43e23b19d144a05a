"""Russian language pack."""

from __future__ import annotations

from functools import partial

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SnowballStemmer
from lingform.transliterate.registry import RUS_BGN, RUS_GOST

# ё is folded into е for matching; й is a distinct letter, not е/и with a mark.
_INDEX_CHARMAP = str.maketrans({"ё": "е", "Ё": "Е"})


def russian_normalizer() -> UnicodeNormalizer:
    return UnicodeNormalizer(
        normalizer_id="russian-basic-v1",
        keep_marks_on=frozenset("йЙ"),
        index_charmap=_INDEX_CHARMAP,
    )


RUSSIAN_PACK = LanguagePack(
    code="rus",
    name="Russian",
    normalizer=russian_normalizer,
    stemmer=partial(SnowballStemmer, "russian"),
    transliterators=(RUS_BGN, RUS_GOST),
)
