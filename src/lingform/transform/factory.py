"""Language -> TextTransformer resolution with a per-language lazy cache."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from lingform.errors import InitializationError, MalformedInputError
from lingform.iso.languages import ENGLISH, LANGUAGES, UNDETERMINED, Language, LanguageTable
from lingform.languages.base import LanguagePack
from lingform.languages.registry import LANGUAGE_PACKS, resolve_language_pack
from lingform.transform.transformer import TextTransformer

logger = logging.getLogger(__name__)


class TextTransformerFactory:
    """Builds at most one TextTransformer per resolved language code.

    Languages without a registered pack share the undetermined-language
    transformer. Construction failures are not cached.
    """

    def __init__(
        self,
        *,
        packs: Mapping[str, LanguagePack] = LANGUAGE_PACKS,
        languages: LanguageTable = LANGUAGES,
        target: Language | str = ENGLISH,
        eager: bool = False,
    ) -> None:
        if UNDETERMINED.code not in packs:
            raise ValueError(f"packs must include the {UNDETERMINED.code!r} fallback")
        self._packs = packs
        self._languages = languages
        self.target = target if isinstance(target, Language) else languages.resolve(target)
        self.eager = eager
        self._transformers: dict[str, TextTransformer] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def supported_codes(self) -> tuple[str, ...]:
        return tuple(self._packs)

    @property
    def cached_codes(self) -> tuple[str, ...]:
        return tuple(self._transformers)

    def resolve_code(self, language: Language | str) -> str:
        """Registered pack code for `language`, or `und` for a known language without one.

        Unrecognized language strings raise UnknownLanguageError.
        """
        if language is None:
            raise MalformedInputError("language is required")
        return resolve_language_pack(language, packs=self._packs, languages=self._languages).code

    def get_transformer(self, language: Language | str) -> TextTransformer:
        """Return the cached transformer for `language`, building it on first request."""
        code = self.resolve_code(language)
        transformer = self._transformers.get(code)
        if transformer is not None:
            return transformer

        with self._lock_for(code):
            transformer = self._transformers.get(code)
            if transformer is None:
                transformer = self._build(code)
                self._transformers[code] = transformer
        return transformer

    def _lock_for(self, code: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(code)
            if lock is None:
                lock = threading.Lock()
                self._locks[code] = lock
            return lock

    def _build(self, code: str) -> TextTransformer:
        transformer = TextTransformer(self._packs[code], target=self.target)
        if self.eager:
            try:
                transformer.warm_up()
            except InitializationError:
                logger.warning("Transformer %s failed to initialize; not cached", code)
                raise
        logger.debug("Built transformer for %s", code)
        return transformer


_default_factory: TextTransformerFactory | None = None
_default_lock = threading.Lock()


def default_factory() -> TextTransformerFactory:
    """Process-wide factory over the registered language packs."""
    global _default_factory
    if _default_factory is None:
        with _default_lock:
            if _default_factory is None:
                _default_factory = TextTransformerFactory()
    return _default_factory


def get_transformer(language: Language | str) -> TextTransformer:
    """Resolve a transformer through the default factory."""
    return default_factory().get_transformer(language)
