import unicodedata
from collections.abc import Iterator
from functools import partial

import pytest

from lingform.errors import InitializationError, MalformedInputError, UnsupportedOperationError
from lingform.iso.languages import LANGUAGES
from lingform.languages import LANGUAGE_PACKS
from lingform.languages.base import LanguagePack, UnicodeNormalizer
from lingform.languages.stemmers import SnowballStemmer
from lingform.transform import TextTransformer, TransformerState
from lingform.transliterate import TextType, registry, tables


@pytest.fixture
def fresh_caches() -> Iterator[None]:
    registry.clear_cache()
    tables.clear_cache()
    yield
    registry.clear_cache()
    tables.clear_cache()


def _transformer(code: str) -> TextTransformer:
    return TextTransformer(LANGUAGE_PACKS[code])


def test_english_display_is_unchanged() -> None:
    transformer = _transformer("eng")

    assert transformer.normalize_for_display("I have no special chars") == "I have no special chars"
    assert transformer.transform("I have no special chars", TextType.ORIGINAL) == "I have no special chars"


def test_staged_initialization() -> None:
    transformer = _transformer("rus")
    assert transformer.state is TransformerState.UNINITIALIZED

    transformer.normalize_for_display("Москва")
    assert transformer.state is TransformerState.NORMALIZER_READY

    assert transformer.transform("Москва", "bgn") == "Moskva"
    assert transformer.state is TransformerState.FULLY_READY


def test_text_types_follow_registration_order() -> None:
    transformer = _transformer("rus")

    assert transformer.text_types == (
        TextType.ORIGINAL,
        TextType.NORMALIZED_DISPLAY,
        TextType.NORMALIZED_INDEX,
        TextType.NORMALIZED_SCORING,
        TextType.BGN,
        TextType.GOST,
    )
    assert transformer.supports(TextType.GOST)
    assert not transformer.supports(TextType.PINYIN)


def test_transform_index_form() -> None:
    transformer = _transformer("rus")

    assert transformer.transform("Привет, Мир!", TextType.BGN) == "Privet, Mir!"
    assert transformer.transform("Привет, Мир!", TextType.BGN, form="index") == "privet mir"


def test_transform_normalized_variants() -> None:
    transformer = _transformer("eng")

    assert transformer.transform("Hello, World", "index") == "helloworld"
    assert transformer.transform("Hello,  World", TextType.NORMALIZED_SCORING) == "Hello, World"


def test_transform_unsupported_variant() -> None:
    transformer = _transformer("eng")

    with pytest.raises(UnsupportedOperationError) as excinfo:
        transformer.transform("hello", TextType.GOST)
    assert excinfo.value.language == "eng"


def test_transform_requires_text() -> None:
    transformer = _transformer("eng")

    with pytest.raises(MalformedInputError):
        transformer.transform(None, TextType.ORIGINAL)  # type: ignore[arg-type]
    with pytest.raises(MalformedInputError):
        transformer.available_transforms(None)  # type: ignore[arg-type]


def test_empty_text_passes_through() -> None:
    transformer = _transformer("rus")

    assert transformer.transform("", TextType.BGN) == ""
    assert transformer.normalize_for_index("") == ""
    assert [item.text_type for item in transformer.available_transforms("")] == ["original"]


def test_stem() -> None:
    assert _transformer("eng").stem("running") == "run"
    assert _transformer("ukr").stem("собаки") == "собак"


def test_stem_without_stemmer_is_unsupported() -> None:
    transformer = _transformer("zho")

    assert not transformer.has_stemmer
    with pytest.raises(UnsupportedOperationError):
        transformer.stem("中国")


def test_prepare_index_form_stems_then_applies_space_policy() -> None:
    assert _transformer("eng").prepare_index_form("Running dogs!") == "rundog"
    assert _transformer("fra").prepare_index_form("") == ""


def test_available_transforms_for_cyrillic() -> None:
    transforms = _transformer("rus").available_transforms("Привет, мир")

    assert [item.text_type for item in transforms] == ["original", "bgn", "gost"]
    original = transforms[0]
    assert original.is_source_script
    assert original.order == 0
    assert original.script == "Cyrl"
    assert original.text == "Привет, мир"
    assert transforms[1].text == "Privet, mir"
    assert transforms[1].text_index == "privet mir"
    assert [item.order for item in transforms] == [0, 1, 2]


def test_available_transforms_skip_latin_targets_for_latin_text() -> None:
    transforms = _transformer("rus").available_transforms("hello world")

    assert len(transforms) == 1
    assert transforms[0].script == "Latn"


@pytest.mark.parametrize(
    ("code", "text", "expected"),
    [
        ("und", "¿Dónde está la biblioteca?", 1),
        ("und", "Где находится библиотека?", 2),
        ("ukr", "Де знаходиться бібліотека?", 2),
    ],
)
def test_available_transforms_sizes(code: str, text: str, expected: int) -> None:
    assert len(_transformer(code).available_transforms(text)) == expected


def test_chinese_transforms_include_script_conversion() -> None:
    transforms = _transformer("zho").available_transforms("漢語")
    by_type = {item.text_type: item for item in transforms}

    assert by_type["original"].script == "Hant"
    assert by_type["pinyin"].text == "hàn yǔ"
    assert by_type["simplified"].text == "汉语"
    assert by_type["simplified"].script == "Hans"
    assert by_type["simplified"].text_index == "汉语"


def test_failed_chain_stays_retryable(monkeypatch, fresh_caches) -> None:
    original = tables._read_table_source

    def broken(name: str) -> str:
        raise OSError("disk unavailable")

    monkeypatch.setattr(tables, "_read_table_source", broken)
    transformer = _transformer("rus")

    with pytest.raises(InitializationError) as excinfo:
        transformer.transform("Москва", TextType.BGN)
    assert excinfo.value.language == "rus"
    assert transformer.state is TransformerState.NORMALIZER_READY
    assert transformer.normalize_for_display("Москва") == "Москва"

    monkeypatch.setattr(tables, "_read_table_source", original)
    assert transformer.transform("Москва", TextType.BGN) == "Moskva"
    assert transformer.state is TransformerState.FULLY_READY


def test_broken_stemmer_raises_initialization_error() -> None:
    pack = LanguagePack(
        code="xxx",
        name="Broken",
        normalizer=UnicodeNormalizer,
        stemmer=partial(SnowballStemmer, "klingon"),
    )
    transformer = TextTransformer(pack)

    with pytest.raises(InitializationError, match="stemmer"):
        transformer.normalize_for_display("text")
    assert transformer.state is TransformerState.UNINITIALIZED


def test_warm_up_builds_everything() -> None:
    transformer = _transformer("ukr")
    transformer.warm_up()

    assert transformer.state is TransformerState.FULLY_READY
    assert unicodedata.normalize("NFC", transformer.normalize_for_index("Їжак їсть")) == "їжакїсть"


def test_target_language_limits_transliterators() -> None:
    russian_reader = TextTransformer(LANGUAGE_PACKS["rus"], target=LANGUAGES["rus"])

    assert not russian_reader.supports(TextType.BGN)
    assert [item.text_type for item in russian_reader.available_transforms("Москва")] == ["original"]
    with pytest.raises(UnsupportedOperationError):
        russian_reader.transform("Москва", TextType.GOST)


def test_target_language_keeps_source_script_conversions() -> None:
    transformer = TextTransformer(LANGUAGE_PACKS["zho"], target=LANGUAGES["rus"])

    assert transformer.text_types[4:] == (TextType.SIMPLIFIED, TextType.TRADITIONAL)
    assert transformer.transform("漢語", TextType.SIMPLIFIED) == "汉语"
