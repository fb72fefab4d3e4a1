"""In-memory corpus index: documents keyed by id, ranked with rank_bm25."""

from __future__ import annotations

import math
import os
import pickle
import threading
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from rank_bm25 import BM25Okapi

from qa_engine.models.domain import Document
from qa_engine.observability.logger import get_logger
from qa_engine.text.tokenizer import tokenize

logger = get_logger("corpus_index")


class CorpusIndex:
    """Single-writer, many-reader document index.

    ``add_documents`` serializes writers and rebuilds the BM25 model from scratch.
    Searches must not overlap an import; once imports have finished, concurrent
    ``search`` calls need no locking.
    """

    def __init__(self, index_path: str | None = None) -> None:
        self._documents: dict[str, Document] = {}
        self._tokenized: dict[str, list[str]] = {}
        self._doc_ids: list[str] = []
        self._doc_freq: Counter[str] = Counter()
        self._bm25: BM25Okapi | None = None
        self._index_path = index_path
        self._write_lock = threading.Lock()

        if index_path:
            self._try_load(index_path)

    def _try_load(self, path: str) -> None:
        index_file = os.path.join(path, "corpus.pkl")
        if not os.path.exists(index_file):
            return
        try:
            with open(index_file, "rb") as f:
                data = pickle.load(f)
            self._install(data["documents"], data["tokenized"])
        except (OSError, EOFError, KeyError, TypeError, pickle.UnpicklingError) as exc:
            logger.warning("corpus_index_snapshot_unreadable", path=path, error=str(exc))
            return
        logger.info("corpus_index_loaded", size=self.size, path=path)

    def add_documents(self, documents: Iterable[Document]) -> int:
        """Insert or replace documents by id. Returns how many ids were new."""
        with self._write_lock:
            docs = dict(self._documents)
            tokenized = dict(self._tokenized)
            added = 0
            for doc in documents:
                if doc.id not in docs:
                    added += 1
                docs[doc.id] = Document(id=doc.id, content=doc.content, source=doc.source)
                tokenized[doc.id] = tokenize(doc.content)
            self._install(docs, tokenized)
        logger.info("corpus_index_built", size=self.size, added=added)
        return added

    def _install(self, documents: dict[str, Document], tokenized: dict[str, list[str]]) -> None:
        doc_ids = list(documents)
        doc_freq: Counter[str] = Counter()
        for doc_id in doc_ids:
            doc_freq.update(set(tokenized[doc_id]))
        corpus = [tokenized[d] for d in doc_ids]
        # rank_bm25 divides by the average document length
        bm25 = BM25Okapi(corpus) if any(corpus) else None

        self._documents = documents
        self._tokenized = tokenized
        self._doc_ids = doc_ids
        self._doc_freq = doc_freq
        self._bm25 = bm25

    def search(self, terms: Iterable[str], top_k: int = 10) -> list[tuple[Document, float]]:
        """Documents sharing at least one term, best BM25 score first.

        Membership is decided by term overlap, ranking by BM25; Okapi IDF goes
        negative for terms in most of the corpus, so the score alone is not a
        usable filter on small collections. Ties keep insertion order.
        """
        bm25, doc_ids = self._bm25, self._doc_ids
        documents, tokenized = self._documents, self._tokenized
        query = list(dict.fromkeys(tokenize(" ".join(terms))))
        if bm25 is None or not query:
            return []

        scores = bm25.get_scores(query)
        query_set = set(query)
        matches = [
            (i, float(scores[i]))
            for i, doc_id in enumerate(doc_ids)
            if query_set.intersection(tokenized[doc_id])
        ]
        matches.sort(key=lambda m: m[1], reverse=True)
        if top_k > 0:
            matches = matches[:top_k]
        return [(documents[doc_ids[i]], score) for i, score in matches]

    def idf(self, term: str) -> float:
        """Smoothed, always-positive inverse document frequency."""
        n = len(self._doc_ids)
        df = self._doc_freq.get(term, 0)
        return math.log(1.0 + (n - df + 0.5) / (df + 0.5))

    def documents(self) -> list[Document]:
        return [self._documents[d] for d in self._doc_ids]

    def save(self, path: str | None = None) -> None:
        path = path or self._index_path
        if not path:
            return
        Path(path).mkdir(parents=True, exist_ok=True)
        with open(os.path.join(path, "corpus.pkl"), "wb") as f:
            pickle.dump({"documents": self._documents, "tokenized": self._tokenized}, f)
        logger.info("corpus_index_saved", path=path, size=self.size)

    @property
    def size(self) -> int:
        return len(self._doc_ids)
