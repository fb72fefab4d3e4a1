"""Protocol for corpus file parsers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from qa_engine.models.domain import Document


class CorpusFileParser(Protocol):
    def parse(self, file_path: str | Path) -> list[Document]:
        """Returns every document contained in the file."""
        ...

    @property
    def supported_extensions(self) -> list[str]: ...
