"""Candidate answer hypotheses built from question terms."""

from __future__ import annotations

import math
from collections.abc import Callable

from qa_engine.models.domain import AnswerInfo, QuestionInfo
from qa_engine.observability.logger import get_logger
from qa_engine.parser.synonyms import SynonymExpander

logger = get_logger("search_engine")

TermWeight = Callable[[str], float]


def length_weight(term: str) -> float:
    """Corpus-free informativeness proxy: longer terms tend to be rarer."""
    return math.log1p(len(term))


class CandidateSearchEngine:
    """Ranks term subsets of a question by expected specificity.

    Hypotheses, in generation order: every expanded term, the unexpanded content
    terms, each content-term set with one term dropped, and each single synonym
    substitution. More terms rank first, then a higher summed term weight; the
    sort is stable so equal hypotheses keep generation (original term) order.
    """

    def __init__(
        self,
        term_weight: TermWeight | None = None,
        max_candidates: int = 5,
        synonyms: SynonymExpander | None = None,
    ) -> None:
        self._weight = term_weight or length_weight
        self._max_candidates = max(1, max_candidates)
        self._synonyms = synonyms or SynonymExpander()

    def search(self, question: QuestionInfo) -> list[AnswerInfo]:
        expanded = question.expanded_query_terms
        if not expanded:
            return []
        content = question.content_terms or expanded

        hypotheses = self._generate(expanded, content)
        scored = [(terms, self._specificity(terms)) for terms in hypotheses]
        scored.sort(key=lambda item: (len(item[0]), item[1]), reverse=True)
        scored = scored[: self._max_candidates]

        top = max(scored[0][1], 1e-9)
        candidates = [
            AnswerInfo(
                answer_terms=terms,
                implied_answer_type=question.expected_answer_type,
                confidence=min(1.0, weight / top),
            )
            for terms, weight in scored
        ]
        logger.info(
            "candidates_generated",
            generated=len(hypotheses),
            kept=len(candidates),
            category=question.expected_answer_type.value,
        )
        return candidates

    def _generate(
        self, expanded: tuple[str, ...], content: tuple[str, ...]
    ) -> list[tuple[str, ...]]:
        hypotheses: list[tuple[str, ...]] = [expanded, content]
        if len(content) > 1:
            for i in range(len(content)):
                hypotheses.append(content[:i] + content[i + 1 :])
        for i, term in enumerate(content):
            for synonym in self._synonyms.synonyms(term):
                hypotheses.append(content[:i] + (synonym,) + content[i + 1 :])

        unique: list[tuple[str, ...]] = []
        seen: set[frozenset[str]] = set()
        for terms in hypotheses:
            key = frozenset(terms)
            if terms and key not in seen:
                seen.add(key)
                unique.append(terms)
        return unique

    def _specificity(self, terms: tuple[str, ...]) -> float:
        return sum(self._weight(t) for t in terms)
