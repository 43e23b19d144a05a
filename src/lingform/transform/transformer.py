"""Per-language text transformer: normalizer + stemmer + transliterator chain."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Literal

from lingform.errors import InitializationError, MalformedInputError, UnsupportedOperationError
from lingform.iso.languages import ENGLISH, LANGUAGES, Language
from lingform.iso.scripts import LATIN
from lingform.languages.base import LanguagePack, Normalizer, Stemmer
from lingform.languages.stemmers import stem_text
from lingform.models import Transliteration
from lingform.text.scripts import dominant_script, has_non_latin_letters
from lingform.transliterate.base import TextType, TransformKey, Transliterator
from lingform.transliterate.registry import get_transliterator

logger = logging.getLogger(__name__)

TextForm = Literal["display", "index"]

_NORMALIZED_TYPES = (
    TextType.NORMALIZED_DISPLAY,
    TextType.NORMALIZED_INDEX,
    TextType.NORMALIZED_SCORING,
)


class TransformerState(Enum):
    UNINITIALIZED = "uninitialized"
    NORMALIZER_READY = "normalizer_ready"
    FULLY_READY = "fully_ready"


class TextTransformer:
    """Normalization, stemming and transliteration for one source language.

    Transliterators are offered when the target language reads their output
    script or the output stays in a script of the source language.

    Components are built on first use: normalization moves the transformer
    to NORMALIZER_READY, the first transliteration to FULLY_READY. A failed
    transliterator build leaves the state unchanged so the next call retries.
    """

    def __init__(self, pack: LanguagePack, *, target: Language = ENGLISH) -> None:
        self.pack = pack
        self.target = target
        self._state = TransformerState.UNINITIALIZED
        self._lock = threading.Lock()
        self._normalizer: Normalizer | None = None
        self._stemmer: Stemmer | None = None
        self._chain: dict[TextType, Transliterator] = {}

    @property
    def language_code(self) -> str:
        return self.pack.code

    @property
    def state(self) -> TransformerState:
        return self._state

    @property
    def normalizer(self) -> Normalizer:
        return self._ready_normalizer()

    @property
    def has_stemmer(self) -> bool:
        return self.pack.has_stemmer

    @property
    def remove_spaces_for_index(self) -> bool:
        return self._ready_normalizer().remove_spaces_for_index

    @property
    def text_types(self) -> tuple[TextType, ...]:
        """Every variant `transform` accepts, in registration order."""
        return (TextType.ORIGINAL, *_NORMALIZED_TYPES, *self._ready_chain())

    def supports(self, text_type: TextType) -> bool:
        return text_type in self.text_types

    def normalize_for_index(self, text: str, remove_spaces: bool | None = None) -> str:
        return self._ready_normalizer().normalize_for_index(text, remove_spaces)

    def normalize_for_scoring(self, text: str) -> str:
        return self._ready_normalizer().normalize_for_scoring(text)

    def normalize_for_display(self, text: str) -> str:
        return self._ready_normalizer().normalize_for_display(text)

    def stem(self, word: str) -> str:
        """Stem one word; raises UnsupportedOperationError when the language has no stemmer."""
        self._ready_normalizer()
        if self._stemmer is None:
            raise UnsupportedOperationError(
                f"No stemmer registered for language {self.language_code!r}",
                language=self.language_code,
            )
        return self._stemmer.stem(word)

    def prepare_index_form(self, text: str) -> str:
        """Index-normalize, stem each token when possible, then apply the space policy."""
        if not text:
            return text
        normalized = self.normalize_for_index(text, remove_spaces=False)
        if self._stemmer is not None:
            normalized = stem_text(self._stemmer, normalized)
        return self.normalize_for_index(normalized)

    def transform(self, text: str, text_type: TextType | str, *, form: TextForm = "display") -> str:
        """Render `text` as one variant; transliterations read the normalized text."""
        if text is None:
            raise MalformedInputError("text is required")
        if isinstance(text_type, str):
            text_type = TextType.from_key(text_type)

        if text_type is TextType.ORIGINAL:
            return text
        if text_type is TextType.NORMALIZED_DISPLAY:
            return self.normalize_for_display(text)
        if text_type is TextType.NORMALIZED_INDEX:
            return self.normalize_for_index(text)
        if text_type is TextType.NORMALIZED_SCORING:
            return self.normalize_for_scoring(text)

        transliterator = self._ready_chain().get(text_type)
        if transliterator is None:
            raise UnsupportedOperationError(
                f"{text_type.label} is not available for language {self.language_code!r}",
                language=self.language_code,
            )
        source = self.normalize_for_index(text) if form == "index" else self.normalize_for_display(text)
        return transliterator(source)

    def available_transforms(self, text: str) -> list[Transliteration]:
        """Original text followed by every applicable transliteration."""
        if text is None:
            raise MalformedInputError("text is required")
        display = self.normalize_for_display(text)
        index = self.normalize_for_index(text)
        results = [
            Transliteration(
                is_source_script=True,
                order=0,
                script=dominant_script(display).code,
                text_type=TextType.ORIGINAL.key,
                label=TextType.ORIGINAL.label,
                text=text,
                text_index=index,
            )
        ]

        needs_latin = has_non_latin_letters(display)
        for text_type, transliterator in self._ready_chain().items():
            if transliterator.target == LATIN.code and not needs_latin:
                continue
            results.append(
                Transliteration(
                    is_source_script=False,
                    order=len(results),
                    script=transliterator.target,
                    text_type=text_type.key,
                    label=text_type.label,
                    text=transliterator(display),
                    text_index=transliterator(index),
                )
            )
        return results

    def warm_up(self) -> None:
        """Build every component now instead of on first use."""
        self._ready_chain()

    def _ready_normalizer(self) -> Normalizer:
        normalizer = self._normalizer
        if normalizer is not None:
            return normalizer
        with self._lock:
            if self._normalizer is None:
                self._stemmer = self._build_stemmer()
                # Assigned last: a non-None normalizer marks the stage complete.
                self._normalizer = self.pack.normalizer()
                self._state = TransformerState.NORMALIZER_READY
                logger.debug("Transformer %s: normalizer ready", self.language_code)
            return self._normalizer

    def _ready_chain(self) -> dict[TextType, Transliterator]:
        if self._state is TransformerState.FULLY_READY:
            return self._chain
        self._ready_normalizer()
        with self._lock:
            if self._state is not TransformerState.FULLY_READY:
                chain: dict[TextType, Transliterator] = {}
                try:
                    for key in self.pack.transliterators:
                        if self._readable(key):
                            chain[key.text_type] = get_transliterator(key)
                except InitializationError:
                    logger.warning(
                        "Transformer %s: transliterators failed to load; will retry on next use",
                        self.language_code,
                    )
                    raise
                self._chain = chain
                self._state = TransformerState.FULLY_READY
                logger.debug("Transformer %s: %d transliterators ready", self.language_code, len(chain))
        return self._chain

    def _readable(self, key: TransformKey) -> bool:
        if not self.target.scripts:
            return True
        source = LANGUAGES[self.pack.code].scripts if self.pack.code in LANGUAGES else ()
        return key.target in self.target.scripts or key.target in source

    def _build_stemmer(self) -> Stemmer | None:
        if self.pack.stemmer is None:
            return None
        try:
            return self.pack.stemmer()
        except ValueError as exc:
            raise InitializationError(component="stemmer", detail=str(exc), language=self.language_code) from exc

    def __repr__(self) -> str:
        return f"TextTransformer({self.language_code!r}, state={self._state.value})"
