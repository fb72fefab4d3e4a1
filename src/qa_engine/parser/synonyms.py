"""Optional synonym table used to expand question terms."""

from __future__ import annotations

import json
from pathlib import Path

from qa_engine.observability.logger import get_logger

logger = get_logger("synonyms")


class SynonymExpander:
    def __init__(self, table: dict[str, list[str]] | None = None) -> None:
        self._table: dict[str, tuple[str, ...]] = {}
        for term, synonyms in (table or {}).items():
            key = term.lower()
            cleaned = tuple(dict.fromkeys(s.lower() for s in synonyms if s and s.lower() != key))
            if cleaned:
                self._table[key] = cleaned

    @classmethod
    def from_file(cls, path: str | Path | None) -> SynonymExpander:
        """Load a JSON ``{term: [synonym, ...]}`` table; problems yield an empty expander."""
        if not path:
            return cls()
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("synonyms_unreadable", path=str(path), error=str(exc))
            return cls()
        if not isinstance(data, dict):
            logger.warning("synonyms_invalid", path=str(path))
            return cls()
        table = {
            str(k): [str(s) for s in v] for k, v in data.items() if isinstance(v, list)
        }
        logger.info("synonyms_loaded", path=str(path), terms=len(table))
        return cls(table)

    def synonyms(self, term: str) -> tuple[str, ...]:
        return self._table.get(term, ())

    def expand(self, terms: tuple[str, ...]) -> tuple[str, ...]:
        """Append synonyms after the original terms, keeping first occurrences."""
        expanded = list(terms)
        for term in terms:
            expanded.extend(self.synonyms(term))
        return tuple(dict.fromkeys(expanded))

    def __len__(self) -> int:
        return len(self._table)
