"""Language-aware text analysis, normalization and transliteration."""

__version__ = "0.1.0"
