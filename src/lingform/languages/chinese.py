"""Chinese language pack."""

from __future__ import annotations

from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.text.chinese import to_simplified
from lingform.transliterate.registry import (
    ZHO_PINYIN,
    ZHO_PINYIN_NO_TONE,
    ZHO_PINYIN_NUMERIC,
    ZHO_SIMPLIFIED,
    ZHO_TRADITIONAL,
    ZHO_WADE_GILES,
    ZHO_WADE_GILES_NO_TONE,
)


def chinese_normalizer() -> UnicodeNormalizer:
    # Index forms compare simplified characters so both variants collide.
    return UnicodeNormalizer(normalizer_id="chinese-basic-v1", index_prepare=to_simplified)


CHINESE_PACK = LanguagePack(
    code="zho",
    name="Chinese",
    normalizer=chinese_normalizer,
    transliterators=(
        ZHO_PINYIN,
        ZHO_PINYIN_NUMERIC,
        ZHO_PINYIN_NO_TONE,
        ZHO_WADE_GILES,
        ZHO_WADE_GILES_NO_TONE,
        ZHO_SIMPLIFIED,
        ZHO_TRADITIONAL,
    ),
)
