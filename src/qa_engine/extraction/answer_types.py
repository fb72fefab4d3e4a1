"""Surface patterns that locate answer spans of a given category in text."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from qa_engine.config.constants import (
    DEFINITION_CUES,
    LOCATION_CUES,
    MONTHS,
    NUMBER_WORDS,
    PERSON_CUES,
    STOPWORDS,
)
from qa_engine.models.domain import Category
from qa_engine.text.tokenizer import iter_tokens

_MONTH = (
    "(?:" + "|".join(m.capitalize() for m in MONTHS)
    + r"|(?:Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)\.?)"
)

_DATE_PATTERNS: list[tuple[re.Pattern, float]] = [
    (re.compile(rf"\b{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}\b"), 1.0),
    (re.compile(rf"\b\d{{1,2}}(?:st|nd|rd|th)?\s+(?:of\s+)?{_MONTH}\s+\d{{4}}\b"), 1.0),
    (re.compile(r"\b\d{4}-\d{2}-\d{2}\b"), 0.95),
    (re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"), 0.9),
    (re.compile(rf"\b{_MONTH}\s+\d{{4}}\b"), 0.9),
    (re.compile(r"\b(?:1[0-9]|20)\d{2}s?\b"), 0.7),
]

_NUMBER_UNITS = (
    r"%|percent|per cent|million|billion|thousand|hundred|km|kilometers|kilometres|miles|"
    r"meters|metres|feet|kg|kilograms|pounds|tons|dollars|euros|years|days|hours|people"
)
_NUMBER_PATTERNS: list[tuple[re.Pattern, float]] = [
    (re.compile(rf"[$€£]\s?\d[\d,]*(?:\.\d+)?(?:\s+(?:million|billion))?"), 0.9),
    (re.compile(rf"\b\d[\d,]*(?:\.\d+)?\s*(?:{_NUMBER_UNITS})\b"), 0.9),
    (re.compile(r"\b\d[\d,]*(?:\.\d+)?\b"), 0.7),
    (re.compile(r"\b(?:" + "|".join(sorted(NUMBER_WORDS)) + r")\b", re.IGNORECASE), 0.5),
]

_DEFINITION_RE = re.compile(
    r"\b(?:" + "|".join(sorted(DEFINITION_CUES)) + r")\s+(?:a|an|the)\s+([^.;!?]+)",
    re.IGNORECASE,
)

_NAME_CONNECTORS = frozenset({"of", "de", "da", "van", "von", "del", "la"})


@dataclass(frozen=True)
class AnswerSpan:
    text: str
    start: int
    end: int
    confidence: float


def find_spans(
    text: str,
    category: Category,
    exclude_terms: Iterable[str] = (),
) -> list[AnswerSpan]:
    """Candidate answer spans for ``category``, in text order.

    Spans whose words all appear in ``exclude_terms`` (the question's own terms)
    are dropped.
    """
    excluded = {t.lower() for t in exclude_terms}
    finder = _FINDERS.get(category, _find_other)
    spans = [s for s in finder(text) if not _only_excluded(s.text, excluded)]
    return sorted(spans, key=lambda s: s.start)


def is_compatible(text: str, category: Category, exclude_terms: Iterable[str] = ()) -> bool:
    return bool(find_spans(text, category, exclude_terms))


def _only_excluded(span_text: str, excluded: set[str]) -> bool:
    words = [w.lower() for w, _, _ in iter_tokens(span_text)]
    return not words or all(w in excluded or w in STOPWORDS for w in words)


def _capitalized_spans(
    text: str, cues: frozenset[str], base: float, cue_bonus: float
) -> list[AnswerSpan]:
    tokens = list(iter_tokens(text))
    spans: list[AnswerSpan] = []
    i = 0
    while i < len(tokens):
        word, start, end = tokens[i]
        if not word[0].isupper() or word.lower() in STOPWORDS or word.lower() in MONTHS:
            i += 1
            continue

        j = i
        while j + 1 < len(tokens):
            nxt, n_start, _ = tokens[j + 1]
            gap = text[tokens[j][2]:n_start]
            if gap.strip():
                break
            if nxt[0].isupper():
                j += 1
                continue
            # "University of Chicago": connector followed by another capitalized word
            if (
                nxt.lower() in _NAME_CONNECTORS
                and j + 2 < len(tokens)
                and tokens[j + 2][0][0].isupper()
                and not text[tokens[j + 1][2]:tokens[j + 2][1]].strip()
            ):
                j += 2
                continue
            break

        span_start, span_end = start, tokens[j][2]
        confidence = base
        previous = tokens[i - 1][0].lower() if i > 0 else None
        if previous in cues:
            confidence += cue_bonus
        if j > i:
            confidence += 0.1
        if _starts_sentence(text, span_start) and j == i:
            confidence -= 0.2
        spans.append(
            AnswerSpan(text[span_start:span_end], span_start, span_end, min(confidence, 1.0))
        )
        i = j + 1
    return spans


def _starts_sentence(text: str, offset: int) -> bool:
    before = text[:offset].rstrip()
    return not before or before[-1] in ".!?"


def _pattern_spans(text: str, patterns: list[tuple[re.Pattern, float]]) -> list[AnswerSpan]:
    found = [
        AnswerSpan(m.group(0), m.start(), m.end(), confidence)
        for pattern, confidence in patterns
        for m in pattern.finditer(text)
    ]
    # Prefer the most confident, then the earliest, among overlapping matches
    found.sort(key=lambda s: (-s.confidence, s.start, -(s.end - s.start)))
    kept: list[AnswerSpan] = []
    for span in found:
        if all(span.end <= k.start or span.start >= k.end for k in kept):
            kept.append(span)
    return kept


def _find_person(text: str) -> list[AnswerSpan]:
    return _capitalized_spans(text, PERSON_CUES, base=0.6, cue_bonus=0.2)


def _find_location(text: str) -> list[AnswerSpan]:
    return _capitalized_spans(text, LOCATION_CUES, base=0.6, cue_bonus=0.25)


def _find_date(text: str) -> list[AnswerSpan]:
    return _pattern_spans(text, _DATE_PATTERNS)


def _find_number(text: str) -> list[AnswerSpan]:
    return _pattern_spans(text, _NUMBER_PATTERNS)


def _find_definition(text: str) -> list[AnswerSpan]:
    spans = []
    for m in _DEFINITION_RE.finditer(text):
        phrase = m.group(1).rstrip(" ,")
        if phrase:
            spans.append(AnswerSpan(phrase, m.start(1), m.start(1) + len(phrase), 0.8))
    return spans


def _find_other(text: str) -> list[AnswerSpan]:
    named = _capitalized_spans(text, frozenset(), base=0.5, cue_bonus=0.0)
    numbers = [
        AnswerSpan(s.text, s.start, s.end, s.confidence * 0.6)
        for s in _pattern_spans(text, _NUMBER_PATTERNS)
    ]
    return named + [n for n in numbers if all(n.end <= o.start or n.start >= o.end for o in named)]


_FINDERS: dict[Category, Callable[[str], list[AnswerSpan]]] = {
    Category.PERSON: _find_person,
    Category.LOCATION: _find_location,
    Category.DATE: _find_date,
    Category.NUMBER: _find_number,
    Category.DEFINITION: _find_definition,
    Category.OTHER: _find_other,
}
