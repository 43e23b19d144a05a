"""Language packs: normalizers, stemmers and transliterator chains."""

from lingform.languages.base import LanguagePack, Normalizer, Stemmer, UnicodeNormalizer
from lingform.languages.registry import LANGUAGE_PACKS, resolve_language_pack

__all__ = [
    "LANGUAGE_PACKS",
    "LanguagePack",
    "Normalizer",
    "Stemmer",
    "UnicodeNormalizer",
    "resolve_language_pack",
]
