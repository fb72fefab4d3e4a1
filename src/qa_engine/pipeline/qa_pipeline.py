"""Per-question orchestration: parse -> search -> retrieve -> extract -> merge."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Sequence
from pathlib import Path

from qa_engine.config.settings import Settings
from qa_engine.models.domain import QuestionInfo, QuestionResult, ResultInfo
from qa_engine.observability.logger import get_logger
from qa_engine.observability.metrics import log_question_metrics
from qa_engine.observability.tracing import QuestionTrace
from qa_engine.protocols.extractor import AnswerExtractor
from qa_engine.protocols.parser import QuestionParser
from qa_engine.protocols.retriever import DocumentRetriever, PassageRetriever
from qa_engine.protocols.search import SearchEngine

logger = get_logger("qa_pipeline")


class QAPipeline:
    def __init__(
        self,
        question_parser: QuestionParser,
        search_engine: SearchEngine,
        document_retriever: DocumentRetriever,
        passage_retriever: PassageRetriever,
        answer_extractor: AnswerExtractor,
        settings: Settings,
    ) -> None:
        self._parser = question_parser
        self._search = search_engine
        self._documents = document_retriever
        self._passages = passage_retriever
        self._extractor = answer_extractor
        self._settings = settings

    def import_corpus(self, path: str | Path | None = None) -> int:
        """Import the configured corpus. Failures propagate: answering must not start."""
        return self._documents.import_documents(path or self._settings.document_path)

    def answer(self, question: str) -> QuestionResult:
        trace = QuestionTrace()

        with trace.stage("parse"):
            info = self._parser.parse(question)

        with trace.stage("search"):
            candidates = self._search.search(info)

        results: list[ResultInfo] = []
        num_documents = num_passages = 0
        for answer_info in candidates:
            with trace.stage("documents"):
                documents = self._documents.get_documents(answer_info.answer_terms)
            with trace.stage("passages"):
                passages = []
                for document in documents:
                    passages.extend(self._passages.get_passages(document, answer_info))
            with trace.stage("extraction"):
                results.extend(self._extractor.extract_answer(passages, info, answer_info))
            num_documents += len(documents)
            num_passages += len(passages)

        merged = self._merge(results, self._settings.max_results)

        log_question_metrics(
            trace.trace_id,
            info.expected_answer_type.value,
            len(candidates),
            num_documents,
            num_passages,
            len(merged),
            trace.stage_ms(),
            trace.elapsed_ms,
        )
        return QuestionResult(question=info, results=merged)

    async def answer_batch(self, questions: Sequence[str]) -> list[QuestionResult]:
        """Answer questions concurrently; a failing question yields no results."""
        semaphore = asyncio.Semaphore(max(1, self._settings.batch_concurrency))

        async def run(question: str) -> QuestionResult:
            async with semaphore:
                return await asyncio.to_thread(self.answer, question)

        outcomes = await asyncio.gather(*(run(q) for q in questions), return_exceptions=True)

        answered: list[QuestionResult] = []
        for question, outcome in zip(questions, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "question_failed",
                    question=question,
                    error_type=type(outcome).__name__,
                    error=str(outcome),
                )
                answered.append(QuestionResult(question=QuestionInfo.degenerate(question)))
            else:
                answered.append(outcome)
        return answered

    @staticmethod
    def _merge(results: list[ResultInfo], limit: int = 0) -> list[ResultInfo]:
        """Deduplicate by (document, answer text) keeping the best score, then rank."""
        best: dict[tuple[str, str], ResultInfo] = {}
        for result in results:
            key = (result.supporting_document.id, _normalize_answer(result.answer))
            existing = best.get(key)
            if existing is None or result.score > existing.score:
                best[key] = result
        merged = sorted(best.values(), key=lambda r: r.score, reverse=True)
        return merged[:limit] if limit > 0 else merged


def _normalize_answer(answer: str) -> str:
    return re.sub(r"\s+", " ", answer).strip().lower()
