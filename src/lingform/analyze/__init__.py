"""Analyzer framework: detectors, election and pipeline."""

from lingform.analyze.base import FEATURES, Analysis, Analyzer, TextInfo
from lingform.analyze.pipeline import AnalyzerPipeline
from lingform.analyze.registry import analyzer_names, build_pipeline, create_analyzer, default_pipeline

__all__ = [
    "FEATURES",
    "Analysis",
    "Analyzer",
    "AnalyzerPipeline",
    "TextInfo",
    "analyzer_names",
    "build_pipeline",
    "create_analyzer",
    "default_pipeline",
]
