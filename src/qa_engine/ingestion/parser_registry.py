"""Maps corpus file extensions to the parser that reads them."""

from __future__ import annotations

from pathlib import Path

from qa_engine.exceptions import ParsingError
from qa_engine.ingestion.parser_jsonl import JsonLinesParser
from qa_engine.ingestion.parser_text import TextParser
from qa_engine.ingestion.parser_trec import TrecParser
from qa_engine.protocols.ingestion import CorpusFileParser


class ParserRegistry:
    def __init__(self, parsers: list[CorpusFileParser] | None = None) -> None:
        self._by_extension: dict[str, CorpusFileParser] = {}
        for parser in parsers or []:
            self.add(parser)

    def add(self, parser: CorpusFileParser) -> None:
        """Register ``parser`` for every extension it declares; later parsers win."""
        for extension in parser.supported_extensions:
            self.register(extension, parser)

    def register(self, extension: str, parser: CorpusFileParser) -> None:
        if not extension.startswith("."):
            extension = "." + extension
        self._by_extension[extension.lower()] = parser

    def find(self, filename: str | Path) -> CorpusFileParser | None:
        return self._by_extension.get(Path(filename).suffix.lower())

    def get_parser(self, filename: str | Path) -> CorpusFileParser:
        parser = self.find(filename)
        if parser is None:
            raise ParsingError(
                f"Cannot read corpus file '{filename}': "
                f"supported extensions are {self.supported_types()}"
            )
        return parser

    def supports(self, filename: str | Path) -> bool:
        return self.find(filename) is not None

    def supported_types(self) -> list[str]:
        return sorted(self._by_extension)


def create_default_registry() -> ParserRegistry:
    return ParserRegistry([TextParser(), JsonLinesParser(), TrecParser()])
