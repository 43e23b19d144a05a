import pytest

from lingform.errors import UnknownLanguageError, UnknownScriptError
from lingform.iso import LANGUAGES, SCRIPTS, UNDETERMINED


def test_language_by_code() -> None:
    russian = LANGUAGES.by_code("rus")

    assert russian.name == "Russian"
    assert russian.alpha2 == "ru"
    assert russian.preferred_script == "Cyrl"
    assert str(russian) == "rus"


def test_language_by_code_unknown_raises() -> None:
    with pytest.raises(UnknownLanguageError, match="xxx"):
        LANGUAGES.by_code("xxx")


def test_undetermined_is_always_available() -> None:
    assert LANGUAGES.by_code("und") is UNDETERMINED
    assert UNDETERMINED.is_undetermined
    assert "und" not in LANGUAGES


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("eng", "eng"),
        ("en", "eng"),
        ("English", "eng"),
        ("en-US", "eng"),
        ("pt_BR", "por"),
        ("zh-Hant", "zho"),
        ("ger", "deu"),
        ("iw", "heb"),
    ],
)
def test_language_lookup_forms(text: str, expected: str) -> None:
    language = LANGUAGES.lookup(text)

    assert language is not None
    assert language.code == expected


def test_language_resolve_rejects_unknown_names() -> None:
    assert LANGUAGES.lookup("klingon") is None
    assert LANGUAGES.lookup("   ") is None
    assert LANGUAGES.resolve("und") is UNDETERMINED
    with pytest.raises(UnknownLanguageError, match="klingon"):
        LANGUAGES.resolve("klingon")


def test_script_by_code_is_case_insensitive() -> None:
    assert SCRIPTS.by_code("cyrl").code == "Cyrl"
    assert SCRIPTS.by_code("LATN").name == "Latin"


def test_script_by_code_rejects_names() -> None:
    with pytest.raises(UnknownScriptError):
        SCRIPTS.by_code("Cyrillic")


def test_script_lookup_by_name() -> None:
    script = SCRIPTS.lookup("Han")

    assert script is not None
    assert script.code == "Hani"


def test_detectable_scripts_exclude_composites() -> None:
    codes = {script.code for script in SCRIPTS.detectable()}

    assert "Latn" in codes
    assert "Hans" not in codes
    assert "Jpan" not in codes
    assert "Zzzz" not in codes
