"""Runs analyzers over an input and merges their results into TextInfo."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from lingform.analyze.base import Analyzer, TextInfo
from lingform.errors import AnalyzerError, MalformedInputError

logger = logging.getLogger(__name__)


class AnalyzerPipeline:
    """Ordered, failure-isolating analyzer runner.

    Analyzers run in registration order, except that an analyzer runs after
    those producing the features it requires. Byte input is decoded with the
    detected encoding before text analyzers run.
    """

    def __init__(self, analyzers: Sequence[Analyzer]) -> None:
        names = [analyzer.name for analyzer in analyzers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate analyzer names: {', '.join(duplicates)}")
        self._analyzers = order_analyzers(analyzers)
        self._exclusive_lock = threading.Lock()
        self._close_lock = threading.Lock()
        self._closed = False

    @property
    def analyzers(self) -> tuple[Analyzer, ...]:
        return self._analyzers

    @property
    def closed(self) -> bool:
        return self._closed

    def run(self, data: str | bytes) -> TextInfo:
        """Analyze one input; analyzer failures are logged and recorded, never raised."""
        if data is None:
            raise MalformedInputError("input is required")
        if self._closed:
            raise RuntimeError("pipeline is closed")

        info = TextInfo()
        self._run_stage(data, info)
        if isinstance(data, (bytes, bytearray)) and data:
            text = self._decode(data, info)
            if text is not None:
                self._run_stage(text, info)
        info.freeze()
        return info

    def run_many(self, inputs: Iterable[str | bytes], *, max_workers: int = 1) -> list[TextInfo]:
        """Analyze independent inputs, in parallel across inputs when `max_workers` > 1."""
        items = list(inputs)
        if max_workers <= 1 or len(items) <= 1:
            return [self.run(item) for item in items]
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.run, items))

    def close(self) -> None:
        """Dispose every analyzer exactly once; a failed release is logged and skipped."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
        for analyzer in self._analyzers:
            try:
                analyzer.dispose()
            except Exception:
                logger.exception("Failed to dispose analyzer %s", analyzer.name)

    def __enter__(self) -> AnalyzerPipeline:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run_stage(self, data: str | bytes, info: TextInfo) -> None:
        for analyzer in self._analyzers:
            if analyzer.accepts(data):
                self._apply(analyzer, data, info)

    def _apply(self, analyzer: Analyzer, data: str | bytes, info: TextInfo) -> None:
        missing = [feature for feature in analyzer.requires if not info.has(feature)]
        if missing:
            logger.debug("Skipping %s: missing %s", analyzer.name, ", ".join(sorted(missing)))
            return
        try:
            if analyzer.exclusive:
                with self._exclusive_lock:
                    analyses = analyzer.analyze(data, info)
            else:
                analyses = analyzer.analyze(data, info)
        except AnalyzerError as exc:
            logger.exception("Analyzer %s failed", analyzer.name)
            info.record_error(analyzer.name, exc.detail)
            return

        info.record_ranking(analyzer.name, analyses)
        if not analyses:
            return
        best = analyses[0]
        for feature, value in best.values.items():
            if analyzer.produces(feature):
                info.offer(feature, value, source=analyzer.name, priority=feature in analyzer.priority_features)

    def _decode(self, data: bytes | bytearray, info: TextInfo) -> str | None:
        encoding = info.encoding
        if encoding is None:
            logger.debug("No encoding detected; skipping text analyzers")
            return None
        try:
            return bytes(data).decode(encoding, errors="replace")
        except LookupError as exc:
            logger.warning("Cannot decode with %s: %s", encoding, exc)
            info.record_error("decode", str(exc))
            return None


def order_analyzers(analyzers: Sequence[Analyzer]) -> tuple[Analyzer, ...]:
    """Stable dependency order: each analyzer follows the producers of what it requires."""
    producible: set[str] = set()
    for analyzer in analyzers:
        producible |= analyzer.features

    pending = list(analyzers)
    ordered: list[Analyzer] = []
    available: set[str] = set()
    while pending:
        for candidate in pending:
            if (candidate.requires & producible) <= available:
                break
        else:
            # Dependency cycle; fall back to registration order.
            candidate = pending[0]
        pending.remove(candidate)
        ordered.append(candidate)
        available |= candidate.features
    return tuple(ordered)
