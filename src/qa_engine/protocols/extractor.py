"""Protocol for answer extractors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from qa_engine.models.domain import AnswerInfo, Passage, QuestionInfo, ResultInfo


class AnswerExtractor(Protocol):
    def extract_answer(
        self,
        passages: Sequence[Passage],
        question: QuestionInfo,
        answer_info: AnswerInfo,
    ) -> list[ResultInfo]: ...
