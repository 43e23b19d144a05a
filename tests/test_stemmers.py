import threading

import pytest

from lingform.languages.stemmers import SnowballStemmer, SuffixStemmer, stem_text
from lingform.languages.ukrainian import ukrainian_stemmer


def test_snowball_english() -> None:
    stemmer = SnowballStemmer("english")

    assert stemmer.stem("running") == "run"
    assert stemmer.stem("") == ""


def test_snowball_rejects_unknown_algorithm() -> None:
    with pytest.raises(ValueError, match="klingon"):
        SnowballStemmer("klingon")


def test_snowball_is_usable_from_many_threads() -> None:
    stemmer = SnowballStemmer("english")
    results: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            value = stemmer.stem("connections")
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert set(results) == {"connect"}
    assert len(results) == 200


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("собаки", "собак"),
        ("день", "ден"),
        ("радість", "рад"),
        ("Кішки", "кішк"),
        ("істьість", "іс"),
        ("і", "і"),
        ("ліс", "ліс"),
    ],
)
def test_ukrainian_suffix_stemmer(word: str, expected: str) -> None:
    assert ukrainian_stemmer().stem(word) == expected


def test_suffix_stemmer_prefers_longest_suffix() -> None:
    stemmer = SuffixStemmer(("s", "es", "ies"))

    assert stemmer.stem("ponies") == "pon"
    assert stemmer.stem("boxes") == "box"
    assert stemmer.stem("es") == "e"


def test_stem_text_joins_tokens() -> None:
    assert stem_text(SnowballStemmer("english"), "  running   dogs ") == "run dog"
