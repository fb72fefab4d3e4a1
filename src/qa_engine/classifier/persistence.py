"""Versioned encode/decode of classifier models and their file lifecycle."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from qa_engine.config.constants import ARTIFACT_FORMAT_VERSION
from qa_engine.exceptions import ModelFormatError, ModelNotFoundError
from qa_engine.models.domain import Category, ClassifierTrainingInfo
from qa_engine.models.schemas import ClassifierArtifact
from qa_engine.observability.logger import get_logger

logger = get_logger("model_persistence")


def encode_model(model: ClassifierTrainingInfo) -> bytes:
    artifact = ClassifierArtifact(
        categories=[c.value for c in model.categories],
        vocabulary=list(model.vocabulary),
        class_counts={c.value: n for c, n in model.class_counts.items()},
        feature_counts={c.value: dict(f) for c, f in model.feature_counts.items()},
        example_count=model.example_count,
    )
    return artifact.model_dump_json().encode("utf-8")


def decode_model(data: bytes) -> ClassifierTrainingInfo:
    try:
        raw = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ModelFormatError(f"Classifier artifact is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ModelFormatError("Classifier artifact must be a JSON object")

    version = raw.get("format_version")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ModelFormatError(
            f"Unsupported classifier artifact version {version!r} "
            f"(expected {ARTIFACT_FORMAT_VERSION})"
        )

    try:
        artifact = ClassifierArtifact.model_validate(raw)
        categories = tuple(Category.parse(c) for c in artifact.categories)
        class_counts = {Category.parse(c): n for c, n in artifact.class_counts.items()}
        feature_counts = {Category.parse(c): f for c, f in artifact.feature_counts.items()}
    except (ValidationError, ValueError) as exc:
        raise ModelFormatError(f"Corrupt classifier artifact: {exc}") from exc

    return ClassifierTrainingInfo(
        categories=categories,
        vocabulary=tuple(artifact.vocabulary),
        class_counts={c: class_counts.get(c, 0) for c in categories},
        feature_counts={c: feature_counts.get(c, {}) for c in categories},
        example_count=artifact.example_count,
    )


def save_model(model: ClassifierTrainingInfo, path: str | Path) -> None:
    """Write the model artifact, creating parent directories and overwriting."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_model(model))
    logger.info("model_saved", path=str(path), features=len(model.vocabulary))


def load_model(path: str | Path) -> ClassifierTrainingInfo:
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise ModelNotFoundError(f"No classifier model at {path}") from exc
    except IsADirectoryError as exc:
        raise ModelNotFoundError(f"Classifier path {path} is a directory") from exc
    except OSError as exc:
        raise ModelFormatError(f"Cannot read classifier model {path}: {exc}") from exc
    model = decode_model(data)
    logger.info("model_loaded", path=str(path), examples=model.example_count)
    return model


def load_model_or_none(path: str | Path | None) -> ClassifierTrainingInfo | None:
    """Load the model, logging and returning None when it is absent or unusable."""
    if not path:
        logger.warning("model_missing", reason="no classifier path configured")
        return None
    try:
        return load_model(path)
    except ModelNotFoundError as exc:
        logger.warning("model_missing", path=str(path), error=str(exc))
    except ModelFormatError as exc:
        logger.error("model_corrupt", path=str(path), error=str(exc))
    return None
