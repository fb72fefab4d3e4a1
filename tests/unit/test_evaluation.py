"""Tests for classifier evaluation metrics."""

import pytest

from qa_engine.classifier.evaluation import (
    ClassificationCase,
    build_confusion_matrix,
    compute_metrics,
    evaluate_classifier,
)
from qa_engine.models.domain import Category

CATS = (Category.PERSON, Category.LOCATION, Category.OTHER)

CASES = [
    ClassificationCase("Who wrote Hamlet?", Category.PERSON, Category.PERSON, 0.9),
    ClassificationCase("Who is she?", Category.PERSON, Category.OTHER, 0.5),
    ClassificationCase("Where is Rome?", Category.LOCATION, Category.LOCATION, 0.8),
    ClassificationCase("Where is Paris?", Category.LOCATION, Category.PERSON, 0.4),
]


def test_compute_metrics():
    metrics = compute_metrics(CASES, CATS)
    assert metrics["total_cases"] == 4
    assert metrics["accuracy"] == pytest.approx(0.5)
    assert metrics["avg_confidence"] == pytest.approx(0.65)
    person = metrics["by_category"]["PERSON"]
    assert person["support"] == 2
    assert person["precision"] == pytest.approx(0.5)
    assert person["recall"] == pytest.approx(0.5)
    assert metrics["by_category"]["OTHER"] == {"support": 0, "precision": 0.0, "recall": 0.0}


def test_compute_metrics_empty():
    assert compute_metrics([], CATS)["accuracy"] == 0.0


def test_confusion_matrix():
    matrix = build_confusion_matrix(CASES, CATS)
    assert matrix[Category.PERSON][Category.OTHER] == 1
    assert matrix[Category.LOCATION][Category.PERSON] == 1
    assert sum(sum(row.values()) for row in matrix.values()) == 4


def test_evaluate_trained_classifier(classifier, trained_model, training_examples):
    metrics = evaluate_classifier(classifier, trained_model, training_examples)
    assert metrics["total_cases"] == len(training_examples)
    assert 0.0 <= metrics["accuracy"] <= 1.0
    matrix = metrics["confusion_matrix"]
    assert set(matrix) == {c.value for c in trained_model.categories}
    assert sum(sum(row.values()) for row in matrix.values()) == len(training_examples)
