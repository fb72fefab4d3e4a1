"""Document retrieval over a bound corpus index."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from qa_engine.exceptions import ConfigurationError, CorpusImportError, IndexNotReadyError
from qa_engine.ingestion.loader import load_corpus
from qa_engine.ingestion.parser_registry import ParserRegistry
from qa_engine.models.domain import Document
from qa_engine.observability.logger import get_logger
from qa_engine.protocols.retriever import CorpusIndexer

logger = get_logger("document_retriever")


class IndexedDocumentRetriever:
    def __init__(self, max_documents: int = 10, registry: ParserRegistry | None = None) -> None:
        self._indexer: CorpusIndexer | None = None
        self._imported = False
        self._max_documents = max_documents
        self._registry = registry

    def set_indexer(self, indexer: CorpusIndexer) -> None:
        self._indexer = indexer
        # An index that already holds documents (e.g. loaded from disk) is queryable
        self._imported = indexer.size > 0

    def import_documents(self, path: str | Path) -> int:
        """Load the corpus at ``path`` into the index. Returns the number of new ids."""
        if self._indexer is None:
            raise IndexNotReadyError("set_indexer() must be called before import_documents()")
        if not path:
            raise ConfigurationError("No document corpus path configured (DOCUMENT_PATH)")

        documents = load_corpus(path, self._registry)
        if not documents:
            raise CorpusImportError(f"No documents found under {path}")
        added = self._indexer.add_documents(documents)
        self._imported = True
        logger.info(
            "documents_imported",
            path=str(path),
            parsed=len(documents),
            added=added,
            index_size=self._indexer.size,
        )
        return added

    def get_documents(self, terms: Iterable[str]) -> list[Document]:
        if self._indexer is None or not self._imported:
            raise IndexNotReadyError(
                "No corpus imported; call set_indexer() and import_documents()"
            )
        terms = [t for t in terms if t]
        if not terms:
            return []
        hits = self._indexer.search(terms, top_k=self._max_documents)
        return [replace(doc, score=score) for doc, score in hits]
