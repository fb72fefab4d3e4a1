"""Tests for classifier model persistence."""

import json
from pathlib import Path

import pytest

from qa_engine.classifier.persistence import (
    decode_model,
    encode_model,
    load_model,
    load_model_or_none,
    save_model,
)
from qa_engine.exceptions import ModelFormatError, ModelNotFoundError
from qa_engine.models.domain import ALL_CATEGORIES


def test_round_trip_preserves_model_and_predictions(classifier, trained_model, tmp_dir):
    path = Path(tmp_dir) / "nested" / "classifier.json"
    save_model(trained_model, path)
    loaded = load_model(path)

    assert loaded == trained_model
    for question in ["Where is Milan?", "Who wrote Hamlet?", "What is a computer?", "zzz"]:
        assert classifier.classify_with_confidence(
            ALL_CATEGORIES, loaded, question
        ) == classifier.classify_with_confidence(ALL_CATEGORIES, trained_model, question)


def test_save_overwrites_existing_file(trained_model, tmp_dir):
    path = Path(tmp_dir) / "classifier.json"
    path.write_text("stale", encoding="utf-8")
    save_model(trained_model, path)
    assert load_model(path) == trained_model


def test_missing_file_raises_not_found(tmp_dir):
    with pytest.raises(ModelNotFoundError):
        load_model(Path(tmp_dir) / "absent.json")


def test_corrupt_file_raises_format_error(tmp_dir):
    path = Path(tmp_dir) / "corrupt.json"
    path.write_bytes(b"\x00\x01not json")
    with pytest.raises(ModelFormatError):
        load_model(path)


def test_incompatible_version_raises_format_error(trained_model):
    raw = json.loads(encode_model(trained_model))
    raw["format_version"] = 999
    with pytest.raises(ModelFormatError, match="version"):
        decode_model(json.dumps(raw).encode("utf-8"))


def test_unknown_category_raises_format_error(trained_model):
    raw = json.loads(encode_model(trained_model))
    raw["categories"].append("ANIMAL")
    with pytest.raises(ModelFormatError):
        decode_model(json.dumps(raw).encode("utf-8"))


def test_load_model_or_none_degrades(tmp_dir):
    assert load_model_or_none(Path(tmp_dir) / "absent.json") is None
    assert load_model_or_none("") is None

    corrupt = Path(tmp_dir) / "corrupt.json"
    corrupt.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_model_or_none(corrupt) is None
