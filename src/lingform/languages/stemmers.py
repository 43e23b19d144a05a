"""Stemmer implementations."""

from __future__ import annotations

import threading
import unicodedata
from collections.abc import Mapping

import snowballstemmer

from lingform.languages.base import Stemmer


class SnowballStemmer:
    """Snowball stemmer with one underlying instance per thread.

    Snowball stemmer objects keep per-call state and cannot be shared
    between threads.
    """

    def __init__(self, algorithm: str) -> None:
        if algorithm not in snowballstemmer.algorithms():
            raise ValueError(f"Unknown snowball algorithm: {algorithm!r}")
        self.algorithm = algorithm
        self._local = threading.local()

    def stem(self, word: str) -> str:
        if not word:
            return word
        stemmer = getattr(self._local, "stemmer", None)
        if stemmer is None:
            stemmer = snowballstemmer.stemmer(self.algorithm)
            self._local.stemmer = stemmer
        return stemmer.stemWord(word)

    def __repr__(self) -> str:
        return f"SnowballStemmer({self.algorithm!r})"


class SuffixStemmer:
    """Strips the longest matching suffix, never the whole word.

    Words are NFKC-normalized and lowercased before matching.
    """

    def __init__(self, suffixes: tuple[str, ...], exceptions: Mapping[str, str] | None = None) -> None:
        self.suffixes = tuple(sorted(suffixes, key=len, reverse=True))
        self.exceptions = dict(exceptions or {})

    def stem(self, word: str) -> str:
        if not word:
            return word
        word = unicodedata.normalize("NFKC", word).lower()
        exception = self.exceptions.get(word)
        if exception is not None:
            return exception
        for suffix in self.suffixes:
            if word.endswith(suffix) and len(word) > len(suffix):
                return word[: -len(suffix)]
        return word


def stem_text(stemmer: Stemmer, text: str) -> str:
    """Stem each whitespace-separated token and rejoin with single spaces."""
    return " ".join(stemmer.stem(token) for token in text.split())
