"""Plain text and markdown corpus files: one document per file, id from the file stem."""

from __future__ import annotations

from pathlib import Path

from charset_normalizer import from_path

from qa_engine.models.domain import Document
from qa_engine.observability.logger import get_logger

logger = get_logger("text_parser")


class TextParser:
    @property
    def supported_extensions(self) -> list[str]:
        return [".txt", ".md"]

    def parse(self, file_path: str | Path) -> list[Document]:
        path = Path(file_path)
        content = self._decode(path).replace("\r\n", "\n").lstrip("\ufeff")
        if not content.strip():
            logger.debug("empty_corpus_file", source=str(path))
            return []
        return [Document(id=path.stem, content=content, source=str(path))]

    @staticmethod
    def _decode(path: Path) -> str:
        # Corpora mix encodings; fall back to utf-8 when detection has no verdict
        match = from_path(path).best()
        if match is None:
            return path.read_text(encoding="utf-8")
        return str(match)
