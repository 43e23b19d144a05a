import pytest

from lingform.transliterate import get_transliterator
from lingform.transliterate.chinese import join_syllables
from lingform.transliterate.registry import (
    ZHO_PINYIN,
    ZHO_PINYIN_NO_TONE,
    ZHO_PINYIN_NUMERIC,
    ZHO_SIMPLIFIED,
    ZHO_TRADITIONAL,
    ZHO_WADE_GILES,
    ZHO_WADE_GILES_NO_TONE,
)
from lingform.transliterate.wadegiles import pinyin_to_wade_giles


def test_pinyin_styles() -> None:
    assert get_transliterator(ZHO_PINYIN)("中国") == "zhōng guó"
    assert get_transliterator(ZHO_PINYIN_NUMERIC)("中国") == "zhong1 guo2"
    assert get_transliterator(ZHO_PINYIN_NO_TONE)("中国") == "zhong guo"


def test_wade_giles() -> None:
    assert get_transliterator(ZHO_WADE_GILES)("中国") == "chung1 kuo2"
    assert get_transliterator(ZHO_WADE_GILES_NO_TONE)("中国") == "chung kuo"


def test_romanization_attaches_punctuation() -> None:
    assert get_transliterator(ZHO_PINYIN_NO_TONE)("中国。") == "zhong guo."


def test_romanization_keeps_latin_words() -> None:
    assert get_transliterator(ZHO_PINYIN_NUMERIC)("中国 ABC") == "zhong1 guo2 ABC"


def test_han_conversion() -> None:
    assert get_transliterator(ZHO_SIMPLIFIED)("漢語") == "汉语"
    assert get_transliterator(ZHO_TRADITIONAL)("汉语") == "漢語"


@pytest.mark.parametrize(
    ("syllable", "expected"),
    [
        ("zhong1", "chung1"),
        ("guo2", "kuo2"),
        ("zhi1", "chih1"),
        ("zi3", "tzu3"),
        ("si4", "ssu4"),
        ("qu4", "ch'ü4"),
        ("xue2", "hsüeh2"),
        ("ge1", "ko1"),
        ("xie4", "hsieh4"),
        ("tian1", "t'ien1"),
        ("ren2", "jen2"),
        ("gui4", "kuei4"),
        ("duo1", "to1"),
        ("lv4", "lü4"),
        ("er2", "erh2"),
        ("xiong2", "hsiung2"),
    ],
)
def test_pinyin_to_wade_giles(syllable: str, expected: str) -> None:
    assert pinyin_to_wade_giles(syllable) == expected


def test_pinyin_to_wade_giles_without_tone() -> None:
    assert pinyin_to_wade_giles("cao3", tone=False) == "ts'ao"


def test_pinyin_to_wade_giles_passes_unknown_tokens() -> None:
    assert pinyin_to_wade_giles("ABC!") == "ABC!"


def test_join_syllables() -> None:
    assert join_syllables(["(", "ni", "hao", ")", ",", "shi", "jie"]) == "(ni hao), shi jie"
    assert join_syllables([]) == ""
