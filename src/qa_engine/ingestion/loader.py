"""Corpus loading: a single file or a directory tree of supported files."""

from __future__ import annotations

from pathlib import Path

from qa_engine.exceptions import CorpusImportError, ParsingError
from qa_engine.ingestion.parser_registry import ParserRegistry, create_default_registry
from qa_engine.models.domain import Document
from qa_engine.observability.logger import get_logger

logger = get_logger("corpus_loader")


def load_corpus(path: str | Path, registry: ParserRegistry | None = None) -> list[Document]:
    """Parse every supported file under ``path`` in sorted order.

    Files with unsupported extensions are skipped. A missing path, a file that
    fails to parse, or two documents sharing an id abort the import.
    """
    registry = registry or create_default_registry()
    path = Path(path)
    if not path.exists():
        raise CorpusImportError(f"Corpus path does not exist: {path}")

    if path.is_file():
        files = [path]
    else:
        files = sorted(p for p in path.rglob("*") if p.is_file())

    documents: list[Document] = []
    sources: dict[str, Path] = {}
    skipped = 0
    for file_path in files:
        if not registry.supports(file_path):
            if path.is_file():
                raise CorpusImportError(f"Unsupported corpus file type: {file_path}")
            skipped += 1
            continue
        parser = registry.get_parser(file_path)
        try:
            parsed = parser.parse(file_path)
        except (OSError, UnicodeDecodeError, ParsingError) as exc:
            raise CorpusImportError(f"Failed to parse {file_path}: {exc}") from exc
        logger.debug("corpus_file_parsed", source=str(file_path), documents=len(parsed))
        for doc in parsed:
            if doc.id in sources:
                raise CorpusImportError(
                    f"Duplicate document id '{doc.id}' in {file_path} "
                    f"(already read from {sources[doc.id]})"
                )
            sources[doc.id] = file_path
        documents.extend(parsed)

    logger.info(
        "corpus_loaded",
        path=str(path),
        files=len(files) - skipped,
        skipped=skipped,
        documents=len(documents),
    )
    return documents
