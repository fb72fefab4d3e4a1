"""Protocol for candidate search engines."""

from __future__ import annotations

from typing import Protocol

from qa_engine.models.domain import AnswerInfo, QuestionInfo


class SearchEngine(Protocol):
    def search(self, question: QuestionInfo) -> list[AnswerInfo]: ...
