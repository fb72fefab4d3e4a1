"""JSON Lines corpus files: one ``{"id": ..., "text": ...}`` object per line."""

from __future__ import annotations

import json
from pathlib import Path

from qa_engine.exceptions import ParsingError
from qa_engine.models.domain import Document


class JsonLinesParser:
    @property
    def supported_extensions(self) -> list[str]:
        return [".jsonl"]

    def parse(self, file_path: str | Path) -> list[Document]:
        file_path = Path(file_path)
        documents = []
        with open(file_path, encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    record = json.loads(line)
                    doc_id = str(record["id"])
                    text = record.get("text") or record.get("content") or ""
                except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as exc:
                    raise ParsingError(f"{file_path}:{line_no}: invalid record ({exc})") from exc
                documents.append(Document(id=doc_id, content=str(text), source=str(file_path)))
        return documents
