"""Exception hierarchy shared by analyzers, transformers and lookups."""

from __future__ import annotations


class LingformError(Exception):
    """Base class for all lingform errors."""


class UnsupportedOperationError(LingformError):
    """Raised when a variant or capability is not registered for a language."""

    def __init__(self, detail: str, *, language: str | None = None) -> None:
        super().__init__(detail)
        self.language = language


class MalformedInputError(LingformError, ValueError):
    """Raised when required text is missing."""


class InitializationError(LingformError, RuntimeError):
    """Raised when a language component fails to build."""

    def __init__(
        self,
        *,
        component: str,
        detail: str,
        language: str | None = None,
    ) -> None:
        super().__init__(f"{component}: {detail}")
        self.component = component
        self.detail = detail
        self.language = language


class AnalyzerError(LingformError, RuntimeError):
    """Raised when an analyzer fails on an input."""

    def __init__(self, *, analyzer: str, detail: str) -> None:
        super().__init__(f"{analyzer}: {detail}")
        self.analyzer = analyzer
        self.detail = detail


class UnknownCodeError(LingformError, LookupError):
    """Raised when a reference-table key does not exist."""

    kind = "code"

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown {self.kind}: {code!r}")
        self.code = code


class UnknownLanguageError(UnknownCodeError):
    kind = "language"


class UnknownScriptError(UnknownCodeError):
    kind = "script"


class UnknownTextTypeError(UnknownCodeError):
    kind = "text type"
