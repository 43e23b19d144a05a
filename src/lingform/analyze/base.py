"""Analyzer contract, analysis results and the aggregated TextInfo."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from lingform.errors import AnalyzerError
from lingform.iso.languages import Language
from lingform.iso.scripts import Script

Feature = Literal["language", "script", "encoding", "size", "length"]
FEATURES: tuple[Feature, ...] = ("language", "script", "encoding", "size", "length")


@dataclass(frozen=True)
class Analysis:
    """One ranked detection result from a single analyzer."""

    analyzer: str
    values: Mapping[str, object] = field(default_factory=dict)
    score: float | None = None

    def get(self, feature: str) -> object | None:
        return self.values.get(feature)

    @property
    def language(self) -> Language | None:
        value = self.values.get("language")
        return value if isinstance(value, Language) else None

    @property
    def script(self) -> Script | None:
        value = self.values.get("script")
        return value if isinstance(value, Script) else None


class TextInfo:
    """Best-guess properties of one input, merged from several analyzers.

    The first analyzer to set a feature wins unless a later one claims it
    with priority. The pipeline freezes the record when it completes.
    """

    def __init__(self) -> None:
        self._values: dict[str, object] = {}
        self._sources: dict[str, str] = {}
        self._priority: set[str] = set()
        self._rankings: dict[str, tuple[Analysis, ...]] = {}
        self._errors: dict[str, str] = {}
        self._frozen = False

    def offer(self, feature: str, value: object, *, source: str, priority: bool = False) -> bool:
        """Propose a value; returns whether it was accepted."""
        self._check_mutable()
        if value is None:
            return False
        if feature in self._values and (not priority or feature in self._priority):
            return False
        self._values[feature] = value
        self._sources[feature] = source
        if priority:
            self._priority.add(feature)
        return True

    def record_ranking(self, analyzer: str, analyses: list[Analysis]) -> None:
        self._check_mutable()
        self._rankings[analyzer] = tuple(analyses)

    def record_error(self, analyzer: str, message: str) -> None:
        self._check_mutable()
        self._errors[analyzer] = message

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, feature: str) -> object | None:
        return self._values.get(feature)

    def has(self, feature: str) -> bool:
        return feature in self._values

    @property
    def features(self) -> Mapping[str, object]:
        return MappingProxyType(self._values)

    @property
    def sources(self) -> Mapping[str, str]:
        return MappingProxyType(self._sources)

    @property
    def rankings(self) -> Mapping[str, tuple[Analysis, ...]]:
        return MappingProxyType(self._rankings)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def is_empty(self) -> bool:
        return not self._values

    @property
    def language(self) -> Language | None:
        value = self._values.get("language")
        return value if isinstance(value, Language) else None

    @property
    def script(self) -> Script | None:
        value = self._values.get("script")
        return value if isinstance(value, Script) else None

    @property
    def encoding(self) -> str | None:
        value = self._values.get("encoding")
        return value if isinstance(value, str) else None

    @property
    def size(self) -> int | None:
        value = self._values.get("size")
        return value if isinstance(value, int) else None

    @property
    def length(self) -> int | None:
        value = self._values.get("length")
        return value if isinstance(value, int) else None

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("TextInfo is frozen")

    def __repr__(self) -> str:
        populated = ", ".join(f"{key}={value}" for key, value in self._values.items())
        return f"TextInfo({populated})"


class Analyzer(ABC):
    """Inspects raw input and yields ranked Analysis results."""

    name: str = "analyzer"
    input_types: tuple[type, ...] = (str,)
    features: frozenset[str] = frozenset()
    requires: frozenset[str] = frozenset()
    priority_features: frozenset[str] = frozenset()
    exclusive: bool = False
    produces_scores: bool = True

    def __init__(self) -> None:
        self._disposed = False
        self._dispose_lock = threading.Lock()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def accepts(self, data: object) -> bool:
        return isinstance(data, self.input_types)

    def produces(self, feature: str) -> bool:
        return feature in self.features

    def analyze(self, data: object, context: TextInfo | None = None) -> list[Analysis]:
        """Return results best first; empty when nothing can be determined."""
        if self._disposed:
            raise AnalyzerError(analyzer=self.name, detail="analyzer has been disposed")
        if data is None or not self.accepts(data) or len(data) == 0:  # type: ignore[arg-type]
            return []
        try:
            results = [analysis for analysis in self._analyze(data, context) if analysis.values]
        except AnalyzerError:
            raise
        except Exception as exc:
            raise AnalyzerError(analyzer=self.name, detail=str(exc) or type(exc).__name__) from exc
        if self.produces_scores:
            results.sort(key=_score_key, reverse=True)
        return results

    @abstractmethod
    def _analyze(self, data, context: TextInfo | None) -> Iterator[Analysis]:
        """Yield analyses for accepted, non-empty input."""

    def dispose(self) -> None:
        """Release held resources; later calls are no-ops."""
        with self._dispose_lock:
            if self._disposed:
                return
            self._disposed = True
        self._release()

    def _release(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def _score_key(analysis: Analysis) -> float:
    return analysis.score if analysis.score is not None else float("-inf")
