"""Pydantic models for persisted artifacts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from qa_engine.config.constants import ARTIFACT_FORMAT_VERSION


class ClassifierArtifact(BaseModel):
    format: Literal["qa-engine-classifier"] = "qa-engine-classifier"
    format_version: int = ARTIFACT_FORMAT_VERSION
    categories: list[str]
    vocabulary: list[str]
    class_counts: dict[str, int]
    feature_counts: dict[str, dict[str, int]] = Field(default_factory=dict)
    example_count: int
