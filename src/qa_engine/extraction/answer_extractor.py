"""Extraction and scoring of literal answer spans from ranked passages."""

from __future__ import annotations

from collections.abc import Sequence

from qa_engine.extraction.answer_types import AnswerSpan, find_spans
from qa_engine.models.domain import AnswerInfo, Passage, QuestionInfo, ResultInfo
from qa_engine.observability.logger import get_logger
from qa_engine.text.tokenizer import iter_tokens

logger = get_logger("answer_extractor")


class PatternAnswerExtractor:
    """SCORE = candidate_conf * (w_rank/(1+rank) + w_prox/(1+distance) + w_type*type_conf)."""

    def __init__(
        self,
        w_passage_rank: float = 0.3,
        w_proximity: float = 0.3,
        w_type_confidence: float = 0.4,
    ) -> None:
        self.w_rank = w_passage_rank
        self.w_prox = w_proximity
        self.w_type = w_type_confidence

    def extract_answer(
        self,
        passages: Sequence[Passage],
        question: QuestionInfo,
        answer_info: AnswerInfo,
    ) -> list[ResultInfo]:
        question_terms = set(question.expanded_query_terms) | set(answer_info.answer_terms)
        results: list[ResultInfo] = []

        for rank, passage in enumerate(passages):
            spans = find_spans(passage.text, question.expected_answer_type, question_terms)
            if not spans:
                continue
            tokens = list(iter_tokens(passage.text))
            term_positions = [
                i for i, (tok, _, _) in enumerate(tokens) if tok.lower() in question_terms
            ]

            for span in spans:
                proximity = self._proximity(span, tokens, term_positions)
                score = answer_info.confidence * (
                    self.w_rank / (1 + rank)
                    + self.w_prox * proximity
                    + self.w_type * span.confidence
                )
                results.append(
                    ResultInfo(
                        answer=span.text,
                        supporting_document=passage.document,
                        score=score,
                        passage=passage,
                    )
                )

        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug("answers_extracted", passages=len(passages), answers=len(results))
        return results

    @staticmethod
    def _proximity(
        span: AnswerSpan,
        tokens: list[tuple[str, int, int]],
        term_positions: list[int],
    ) -> float:
        """1 / (1 + token distance to the nearest question term), 0 if none occur."""
        if not term_positions:
            return 0.0
        inside = [
            i for i, (_, start, end) in enumerate(tokens)
            if start >= span.start and end <= span.end
        ]
        if not inside:
            return 0.0
        first, last = inside[0], inside[-1]
        distance = min(
            first - pos if pos < first else pos - last if pos > last else 0
            for pos in term_positions
        )
        return 1.0 / (1.0 + distance)
