"""Transliteration standards and their registry."""

from lingform.transliterate.base import TextType, TransformKey, Transliterator
from lingform.transliterate.registry import available_keys, get_transliterator

__all__ = [
    "TextType",
    "TransformKey",
    "Transliterator",
    "available_keys",
    "get_transliterator",
]
