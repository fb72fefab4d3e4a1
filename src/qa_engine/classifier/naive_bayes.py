"""Multinomial Naive Bayes question classifier over sparse string features."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np

from qa_engine.classifier.features import question_features
from qa_engine.exceptions import CategoryMismatchError, ClassifierError
from qa_engine.models.domain import Category, ClassifierTrainingInfo, LabeledQuestion
from qa_engine.observability.logger import get_logger

logger = get_logger("question_classifier")


class NaiveBayesQuestionClassifier:
    """Stateless between calls: all statistics live in the model passed in."""

    def __init__(
        self,
        min_confidence: float = 0.0,
        default: Category = Category.OTHER,
        smoothing: float = 1.0,
    ) -> None:
        self._min_confidence = min_confidence
        self._default = default
        self._alpha = smoothing

    def train(
        self,
        categories: Iterable[Category],
        examples: Sequence[LabeledQuestion],
    ) -> ClassifierTrainingInfo:
        ordered = Category.ordered(categories)
        allowed = set(ordered)
        class_counts: Counter[Category] = Counter()
        feature_counts: dict[Category, Counter[str]] = {c: Counter() for c in ordered}
        skipped = 0

        for example in examples:
            if example.category not in allowed:
                skipped += 1
                continue
            class_counts[example.category] += 1
            feature_counts[example.category].update(question_features(example.text))

        if skipped:
            logger.warning("training_examples_skipped", skipped=skipped)
        used = sum(class_counts.values())
        if used == 0:
            raise ClassifierError("No training examples match the requested categories")

        vocabulary = sorted({f for counts in feature_counts.values() for f in counts})
        info = ClassifierTrainingInfo(
            categories=ordered,
            vocabulary=tuple(vocabulary),
            class_counts={c: class_counts.get(c, 0) for c in ordered},
            feature_counts={c: dict(sorted(feature_counts[c].items())) for c in ordered},
            example_count=used,
        )
        untrained = [c.value for c in ordered if class_counts.get(c, 0) == 0]
        logger.info(
            "classifier_trained",
            examples=used,
            features=len(vocabulary),
            untrained_categories=untrained,
        )
        return info

    def classify(
        self,
        categories: Iterable[Category],
        model: ClassifierTrainingInfo | None,
        text: str,
    ) -> Category:
        category, _ = self.classify_with_confidence(categories, model, text)
        return category

    def classify_with_confidence(
        self,
        categories: Iterable[Category],
        model: ClassifierTrainingInfo | None,
        text: str,
    ) -> tuple[Category, float]:
        ordered = Category.ordered(categories)
        if not ordered:
            raise ClassifierError("Cannot classify against an empty category set")
        fallback = self._default if self._default in ordered else ordered[0]

        if model is None:
            return fallback, 0.0
        if set(model.categories) != set(ordered):
            raise CategoryMismatchError(
                f"Model trained for {[c.value for c in model.categories]}, "
                f"applied with {[c.value for c in ordered]}"
            )

        trained = [c for c in ordered if model.class_counts.get(c, 0) > 0]
        if not trained:
            return fallback, 0.0

        scores = self._log_scores(model, trained, question_features(text))
        posterior = np.exp(scores - np.logaddexp.reduce(scores))
        best = int(np.argmax(posterior))
        confidence = float(posterior[best])

        if confidence < self._min_confidence:
            logger.debug(
                "classification_below_threshold",
                best=trained[best].value,
                confidence=round(confidence, 4),
            )
            return fallback, confidence
        return trained[best], confidence

    def _log_scores(
        self,
        model: ClassifierTrainingInfo,
        trained: list[Category],
        features: list[str],
    ) -> np.ndarray:
        vocabulary = set(model.vocabulary)
        known = [f for f in features if f in vocabulary]
        vocab_size = len(vocabulary)
        total = sum(model.class_counts[c] for c in trained)

        scores = np.empty(len(trained), dtype=np.float64)
        for i, category in enumerate(trained):
            counts = model.feature_counts.get(category, {})
            denominator = model.total_features(category) + self._alpha * vocab_size
            likelihood = sum(
                np.log((counts.get(f, 0) + self._alpha) / denominator) for f in known
            )
            scores[i] = np.log(model.class_counts[category] / total) + likelihood
        return scores
