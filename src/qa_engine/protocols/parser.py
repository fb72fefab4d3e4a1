"""Protocol for question parsers."""

from __future__ import annotations

from typing import Protocol

from qa_engine.models.domain import QuestionInfo


class QuestionParser(Protocol):
    def parse(self, question_text: str) -> QuestionInfo: ...
