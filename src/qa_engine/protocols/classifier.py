"""Protocol for question classifiers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from qa_engine.models.domain import Category, ClassifierTrainingInfo, LabeledQuestion


class QuestionClassifier(Protocol):
    def train(
        self, categories: Iterable[Category], examples: Sequence[LabeledQuestion]
    ) -> ClassifierTrainingInfo: ...

    def classify(
        self,
        categories: Iterable[Category],
        model: ClassifierTrainingInfo | None,
        text: str,
    ) -> Category: ...
