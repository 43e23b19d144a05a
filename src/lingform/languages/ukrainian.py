"""Ukrainian language pack."""

from __future__ import annotations

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SuffixStemmer
from lingform.transliterate.registry import UKR_BGN

UKRAINIAN_SUFFIXES = ("ість", "і", "ь", "и")
UKRAINIAN_EXCEPTIONS = {"істьість": "іс"}

# Apostrophe variants used between consonant and iotated vowel.
_INDEX_CHARMAP = str.maketrans({"’": "ʼ", "'": "ʼ", "`": "ʼ"})


def ukrainian_normalizer() -> UnicodeNormalizer:
    return UnicodeNormalizer(
        normalizer_id="ukrainian-basic-v1",
        remove_spaces_for_index=True,
        keep_marks_on=frozenset("йЙїЇ"),
        index_charmap=_INDEX_CHARMAP,
    )


def ukrainian_stemmer() -> SuffixStemmer:
    return SuffixStemmer(UKRAINIAN_SUFFIXES, UKRAINIAN_EXCEPTIONS)


UKRAINIAN_PACK = LanguagePack(
    code="ukr",
    name="Ukrainian",
    normalizer=ukrainian_normalizer,
    stemmer=ukrainian_stemmer,
    transliterators=(UKR_BGN,),
)
