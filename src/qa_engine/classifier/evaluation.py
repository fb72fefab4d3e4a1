"""Evaluation metrics for a trained question classifier."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from qa_engine.classifier.naive_bayes import NaiveBayesQuestionClassifier
from qa_engine.models.domain import Category, ClassifierTrainingInfo, LabeledQuestion


@dataclass
class ClassificationCase:
    text: str
    expected: Category
    actual: Category
    confidence: float

    @property
    def correct(self) -> bool:
        return self.expected == self.actual


def run_classifier(
    classifier: NaiveBayesQuestionClassifier,
    model: ClassifierTrainingInfo,
    examples: Sequence[LabeledQuestion],
) -> list[ClassificationCase]:
    cases = []
    for example in examples:
        actual, confidence = classifier.classify_with_confidence(
            model.categories, model, example.text
        )
        cases.append(ClassificationCase(example.text, example.category, actual, confidence))
    return cases


def build_confusion_matrix(
    cases: Sequence[ClassificationCase],
    categories: Sequence[Category],
) -> dict[Category, dict[Category, int]]:
    """Rows are expected categories, columns are predicted categories."""
    matrix = {exp: {act: 0 for act in categories} for exp in categories}
    for case in cases:
        if case.expected in matrix and case.actual in matrix[case.expected]:
            matrix[case.expected][case.actual] += 1
    return matrix


def compute_metrics(
    cases: Sequence[ClassificationCase],
    categories: Sequence[Category],
) -> dict:
    """Overall accuracy plus per-category precision, recall and support."""
    total = len(cases)
    if total == 0:
        return {"total_cases": 0, "accuracy": 0.0, "avg_confidence": 0.0, "by_category": {}}

    by_category: dict[str, dict] = {}
    for category in categories:
        predicted = [c for c in cases if c.actual == category]
        expected = [c for c in cases if c.expected == category]
        hits = sum(1 for c in expected if c.correct)
        by_category[category.value] = {
            "support": len(expected),
            "precision": hits / len(predicted) if predicted else 0.0,
            "recall": hits / len(expected) if expected else 0.0,
        }

    return {
        "total_cases": total,
        "accuracy": sum(c.correct for c in cases) / total,
        "avg_confidence": sum(c.confidence for c in cases) / total,
        "by_category": by_category,
    }


def evaluate_classifier(
    classifier: NaiveBayesQuestionClassifier,
    model: ClassifierTrainingInfo,
    examples: Sequence[LabeledQuestion],
) -> dict:
    cases = run_classifier(classifier, model, examples)
    metrics = compute_metrics(cases, model.categories)
    metrics["confusion_matrix"] = {
        exp.value: {act.value: n for act, n in row.items()}
        for exp, row in build_confusion_matrix(cases, model.categories).items()
    }
    return metrics
