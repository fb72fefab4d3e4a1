"""Question parsing: normalization, answer-type classification and term expansion."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from qa_engine.exceptions import ClassifierError
from qa_engine.models.domain import Category, ClassifierTrainingInfo, QuestionInfo
from qa_engine.observability.logger import get_logger
from qa_engine.parser.synonyms import SynonymExpander
from qa_engine.protocols.classifier import QuestionClassifier
from qa_engine.text.tokenizer import tokenize

logger = get_logger("question_parser")


class DefaultQuestionParser:
    def __init__(
        self,
        classifier: QuestionClassifier,
        model: ClassifierTrainingInfo | None,
        categories: Iterable[Category],
        synonyms: SynonymExpander | None = None,
    ) -> None:
        self._classifier = classifier
        self._model = model
        self._categories = Category.ordered(categories)
        self._synonyms = synonyms or SynonymExpander()
        if model is None:
            logger.warning("classifier_model_missing", fallback=Category.OTHER.value)

    def parse(self, question_text: str) -> QuestionInfo:
        normalized = self._normalize(question_text or "")
        if not normalized:
            return QuestionInfo.degenerate(question_text or "")

        try:
            category = self._classifier.classify(self._categories, self._model, normalized)
        except ClassifierError as exc:
            logger.error("classification_failed", error=str(exc))
            category = Category.OTHER
        content_terms = tuple(dict.fromkeys(tokenize(normalized)))
        expanded = self._synonyms.expand(content_terms)

        logger.info(
            "question_parsed",
            category=category.value,
            terms=list(content_terms),
            expansions=len(expanded) - len(content_terms),
        )
        return QuestionInfo(
            raw_text=question_text,
            expected_answer_type=category,
            expanded_query_terms=expanded,
            content_terms=content_terms,
        )

    @staticmethod
    def _normalize(text: str) -> str:
        text = unicodedata.normalize("NFKC", text)
        text = re.sub(r"\s+", " ", text).strip()
        return text
