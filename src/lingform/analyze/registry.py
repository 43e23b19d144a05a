"""Analyzer registry and pipeline construction."""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence

from lingform.analyze.base import Analyzer
from lingform.analyze.encoding import EncodingAnalyzer
from lingform.analyze.language import LangdetectAnalyzer, StopwordLanguageAnalyzer
from lingform.analyze.pipeline import AnalyzerPipeline
from lingform.analyze.script import ScriptLanguageAnalyzer, ScriptProfileAnalyzer
from lingform.analyze.voting import VotingAnalyzer
from lingform.config import DEFAULT_ANALYZERS


def _voting(seed: int) -> Analyzer:
    return VotingAnalyzer(
        [
            ScriptProfileAnalyzer(),
            StopwordLanguageAnalyzer(),
            LangdetectAnalyzer(seed=seed),
        ]
    )


_ANALYZER_FACTORIES: dict[str, Callable[[int], Analyzer]] = {
    "charset": lambda seed: EncodingAnalyzer(),
    "script_profile": lambda seed: ScriptProfileAnalyzer(),
    "stopwords": lambda seed: StopwordLanguageAnalyzer(),
    "langdetect": lambda seed: LangdetectAnalyzer(seed=seed),
    "script_language": lambda seed: ScriptLanguageAnalyzer(),
    "voting": _voting,
}


def analyzer_names() -> tuple[str, ...]:
    return tuple(_ANALYZER_FACTORIES)


def create_analyzer(name: str, *, langdetect_seed: int = 0) -> Analyzer:
    """Build a fresh analyzer instance by registry name."""
    factory = _ANALYZER_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown analyzer: {name!r} (expected one of {', '.join(_ANALYZER_FACTORIES)})")
    return factory(langdetect_seed)


def build_pipeline(names: Sequence[str] | None = None, *, langdetect_seed: int = 0) -> AnalyzerPipeline:
    """Create a pipeline from analyzer names, defaulting to the standard set."""
    selected = tuple(names) if names is not None else DEFAULT_ANALYZERS
    return AnalyzerPipeline([create_analyzer(name, langdetect_seed=langdetect_seed) for name in selected])


_default_pipeline: AnalyzerPipeline | None = None
_default_lock = threading.Lock()


def default_pipeline() -> AnalyzerPipeline:
    """Process-wide pipeline over the default analyzers; it is never closed."""
    global _default_pipeline
    if _default_pipeline is None:
        with _default_lock:
            if _default_pipeline is None:
                _default_pipeline = build_pipeline()
    return _default_pipeline
