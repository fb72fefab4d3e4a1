"""Protocols for the corpus index and the document/passage retrievers."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from qa_engine.models.domain import AnswerInfo, Document, Passage


class CorpusIndexer(Protocol):
    def add_documents(self, documents: Iterable[Document]) -> int: ...

    def search(self, terms: Iterable[str], top_k: int = 10) -> list[tuple[Document, float]]: ...

    @property
    def size(self) -> int: ...


class DocumentRetriever(Protocol):
    def set_indexer(self, indexer: CorpusIndexer) -> None: ...

    def import_documents(self, path: str | Path) -> int: ...

    def get_documents(self, terms: Iterable[str]) -> list[Document]: ...


class PassageRetriever(Protocol):
    def get_passages(self, document: Document, answer_info: AnswerInfo) -> list[Passage]: ...
