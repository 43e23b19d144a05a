"""Shared data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Transliteration(BaseModel):
    """One rendition of a text under a named variant."""

    is_source_script: bool
    order: int = Field(ge=0)
    script: str = Field(min_length=4, max_length=4)
    text_type: str = Field(min_length=1)
    label: str
    text: str
    text_index: str


class AnalyzeRequest(BaseModel):
    """Analysis request payload used by the CLI and batch evaluation."""

    text: str
    language: str = Field(default="auto", min_length=2)
    text_types: list[str] | None = None


class TextMetadata(BaseModel):
    """Detected properties of the analyzed text."""

    language: str
    language_name: str
    script: str | None
    detected_language: str | None
    sources: dict[str, str]
    errors: dict[str, str]
    normalizer_id: str
    generated_at: datetime


class TextReport(BaseModel):
    """Canonical analysis output schema."""

    metadata: TextMetadata
    display: str
    index: str
    scoring: str
    stem_available: bool
    transforms: list[Transliteration]
