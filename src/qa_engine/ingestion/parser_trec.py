"""TREC-style SGML collections (``<DOC><DOCNO>..</DOCNO><TEXT>..</TEXT></DOC>``)."""

from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup

from qa_engine.models.domain import Document
from qa_engine.observability.logger import get_logger

logger = get_logger("trec_parser")


class TrecParser:
    @property
    def supported_extensions(self) -> list[str]:
        return [".trec", ".sgml", ".xml"]

    def parse(self, file_path: str | Path) -> list[Document]:
        file_path = Path(file_path)
        markup = file_path.read_text(encoding="utf-8", errors="replace")
        soup = BeautifulSoup(markup, "html.parser")

        documents = []
        for doc in soup.find_all("doc"):
            docno = doc.find("docno")
            if docno is None or not docno.get_text(strip=True):
                logger.warning("trec_doc_without_docno", source=str(file_path))
                continue
            doc_id = docno.get_text(strip=True)
            bodies = doc.find_all(["headline", "text"])
            if bodies:
                text = "\n\n".join(b.get_text(" ", strip=True) for b in bodies)
            else:
                docno.extract()
                text = doc.get_text(" ", strip=True)
            text = re.sub(r"[ \t]+", " ", text).strip()
            documents.append(Document(id=doc_id, content=text, source=str(file_path)))
        return documents
