"""Classification metrics for language-identification runs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class LabelStats:
    """Confusion counts for one label, one-vs-rest."""

    label: str
    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    @property
    def support(self) -> int:
        return self.tp + self.fn

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def f1(self) -> float:
        return _ratio(2 * self.tp, 2 * self.tp + self.fp + self.fn)

    @property
    def accuracy(self) -> float:
        return _ratio(self.tp + self.tn, self.tp + self.tn + self.fp + self.fn)

    @property
    def specificity(self) -> float:
        return _ratio(self.tn, self.tn + self.fp)


def score_predictions(pairs: Iterable[tuple[str, str | None]]) -> dict[str, LabelStats]:
    """Build per-label stats from (expected, predicted) pairs.

    A missing prediction counts as a miss for the expected label only.
    """
    collected = list(pairs)
    labels = sorted({expected for expected, _ in collected} | {p for _, p in collected if p is not None})
    stats: dict[str, LabelStats] = {}
    for label in labels:
        tp = tn = fp = fn = 0
        for expected, predicted in collected:
            if expected == label and predicted == label:
                tp += 1
            elif expected == label:
                fn += 1
            elif predicted == label:
                fp += 1
            else:
                tn += 1
        stats[label] = LabelStats(label=label, tp=tp, tn=tn, fp=fp, fn=fn)
    return stats


def summarize(stats: Mapping[str, LabelStats]) -> dict[str, float]:
    """Micro and macro averages for release-gate reporting."""
    tp = sum(item.tp for item in stats.values())
    fp = sum(item.fp for item in stats.values())
    fn = sum(item.fn for item in stats.values())
    supported = [item for item in stats.values() if item.support > 0]
    total = sum(item.support for item in supported)

    macro_precision = _mean([item.precision for item in supported])
    macro_recall = _mean([item.recall for item in supported])
    macro_f1 = _mean([item.f1 for item in supported])

    return {
        "accuracy": round(_ratio(tp, total), 4),
        "micro_precision": round(_ratio(tp, tp + fp), 4),
        "micro_recall": round(_ratio(tp, tp + fn), 4),
        "micro_f1": round(_ratio(2 * tp, 2 * tp + fp + fn), 4),
        "macro_precision": round(macro_precision, 4),
        "macro_recall": round(macro_recall, 4),
        "macro_f1": round(macro_f1, 4),
        "labels": float(len(supported)),
        "cases": float(total),
    }


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0
