"""End-to-end analysis entry points."""

from lingform.core.pipeline import run_analysis

__all__ = ["run_analysis"]
