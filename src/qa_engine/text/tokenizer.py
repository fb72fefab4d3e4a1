"""Text preprocessing shared by indexing, question parsing and extraction."""

from __future__ import annotations

import re
from collections.abc import Iterator

from qa_engine.config.constants import STOPWORDS

_TOKEN_RE = re.compile(r"\w+(?:[-']\w+)*")
_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+")


def tokenize(text: str) -> list[str]:
    """Tokenize text for BM25: lowercase, strip punctuation, remove stopwords."""
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    tokens = text.split()
    return [t for t in tokens if t not in STOPWORDS and len(t) > 1]


def iter_tokens(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield (token, start, end) over the original text, case preserved."""
    for match in _TOKEN_RE.finditer(text):
        yield match.group(0), match.start(), match.end()


def split_sentences(text: str) -> list[tuple[int, int]]:
    """Return (start, end) offsets of sentences, whitespace trimmed."""
    bounds: list[tuple[int, int]] = []
    last = 0
    for match in _SENTENCE_END_RE.finditer(text):
        _append_trimmed(text, last, match.start(), bounds)
        last = match.end()
    _append_trimmed(text, last, len(text), bounds)
    return bounds


def _append_trimmed(text: str, start: int, end: int, bounds: list[tuple[int, int]]) -> None:
    segment = text[start:end]
    stripped = segment.strip()
    if not stripped:
        return
    offset = start + (len(segment) - len(segment.lstrip()))
    bounds.append((offset, offset + len(stripped)))
