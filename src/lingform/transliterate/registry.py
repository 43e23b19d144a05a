"""Transliterator registry and singleton cache."""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import partial

from pypinyin import Style

from lingform.errors import InitializationError, UnsupportedOperationError
from lingform.transliterate.base import TextType, TransformKey, Transliterator
from lingform.transliterate.chinese import (
    PinyinTransliterator,
    WadeGilesTransliterator,
    simplified,
    traditional,
)
from lingform.transliterate.generic import AnyLatinTransliterator
from lingform.transliterate.mapping import MappingTransliterator
from lingform.transliterate.tables import load_table

Builder = Callable[[TransformKey], Transliterator]

UND_BGN = TransformKey("und", "Any", "Latn", TextType.BGN)
RUS_BGN = TransformKey("rus", "Cyrl", "Latn", TextType.BGN)
RUS_GOST = TransformKey("rus", "Cyrl", "Latn", TextType.GOST)
UKR_BGN = TransformKey("ukr", "Cyrl", "Latn", TextType.BGN)
ARA_BGN = TransformKey("ara", "Arab", "Latn", TextType.BGN)
ZHO_PINYIN = TransformKey("zho", "Hani", "Latn", TextType.PINYIN)
ZHO_PINYIN_NUMERIC = TransformKey("zho", "Hani", "Latn", TextType.PINYIN_NUMERIC)
ZHO_PINYIN_NO_TONE = TransformKey("zho", "Hani", "Latn", TextType.PINYIN_NO_TONE)
ZHO_WADE_GILES = TransformKey("zho", "Hani", "Latn", TextType.WADE_GILES)
ZHO_WADE_GILES_NO_TONE = TransformKey("zho", "Hani", "Latn", TextType.WADE_GILES_NO_TONE)
ZHO_SIMPLIFIED = TransformKey("zho", "Hani", "Hans", TextType.SIMPLIFIED)
ZHO_TRADITIONAL = TransformKey("zho", "Hani", "Hant", TextType.TRADITIONAL)


def _from_table(name: str, key: TransformKey) -> Transliterator:
    return MappingTransliterator(key, load_table(name))


_BUILDERS: dict[TransformKey, Builder] = {
    UND_BGN: AnyLatinTransliterator,
    RUS_BGN: partial(_from_table, "rus_latn_bgn"),
    RUS_GOST: partial(_from_table, "rus_latn_gost"),
    UKR_BGN: partial(_from_table, "ukr_latn_bgn"),
    ARA_BGN: partial(_from_table, "ara_latn_bgn"),
    ZHO_PINYIN: partial(PinyinTransliterator, style=Style.TONE),
    ZHO_PINYIN_NUMERIC: partial(PinyinTransliterator, style=Style.TONE3),
    ZHO_PINYIN_NO_TONE: partial(PinyinTransliterator, style=Style.NORMAL),
    ZHO_WADE_GILES: partial(WadeGilesTransliterator, tones=True),
    ZHO_WADE_GILES_NO_TONE: partial(WadeGilesTransliterator, tones=False),
    ZHO_SIMPLIFIED: simplified,
    ZHO_TRADITIONAL: traditional,
}

_instances: dict[TransformKey, Transliterator] = {}
_lock = threading.Lock()


def available_keys() -> tuple[TransformKey, ...]:
    """All registered transliterator identities."""
    return tuple(_BUILDERS)


def get_transliterator(key: TransformKey) -> Transliterator:
    """Return the shared transliterator for `key`, building it on first use."""
    instance = _instances.get(key)
    if instance is not None:
        return instance

    builder = _BUILDERS.get(key)
    if builder is None:
        raise UnsupportedOperationError(f"No transliterator registered for {key}", language=key.language)

    with _lock:
        instance = _instances.get(key)
        if instance is None:
            try:
                instance = builder(key)
            except InitializationError as exc:
                exc.language = key.language
                raise
            _instances[key] = instance
    return instance


def clear_cache() -> None:
    with _lock:
        _instances.clear()
