"""Evaluation utilities."""

from lingform.eval.metrics import LabelStats, score_predictions, summarize

__all__ = ["LabelStats", "score_predictions", "summarize"]
