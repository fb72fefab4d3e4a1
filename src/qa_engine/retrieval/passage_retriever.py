"""Passage segmentation, answer-type filtering and term-overlap ranking."""

from __future__ import annotations

from qa_engine.extraction.answer_types import is_compatible
from qa_engine.models.domain import AnswerInfo, Document, Passage
from qa_engine.text.tokenizer import iter_tokens, split_sentences, tokenize


class SentencePassageRetriever:
    """Passages are sliding windows of ``window`` consecutive sentences."""

    def __init__(self, window: int = 1) -> None:
        self._window = max(1, window)

    def segment(self, document: Document) -> list[tuple[int, int]]:
        sentences = split_sentences(document.content)
        if not sentences:
            return []
        count = max(1, len(sentences) - self._window + 1)
        return [
            (sentences[i][0], sentences[min(i + self._window, len(sentences)) - 1][1])
            for i in range(count)
        ]

    def get_passages(self, document: Document, answer_info: AnswerInfo) -> list[Passage]:
        return rank_passages(document, self.segment(document), answer_info)


class WindowPassageRetriever:
    """Passages are fixed-size token windows advanced by ``stride`` tokens."""

    def __init__(self, size: int = 40, stride: int = 20) -> None:
        self._size = max(1, size)
        self._stride = max(1, min(stride, self._size))

    def segment(self, document: Document) -> list[tuple[int, int]]:
        tokens = list(iter_tokens(document.content))
        bounds: list[tuple[int, int]] = []
        start = 0
        while start < len(tokens):
            last = min(start + self._size, len(tokens)) - 1
            bounds.append((tokens[start][1], tokens[last][2]))
            if last == len(tokens) - 1:
                break
            start += self._stride
        return bounds

    def get_passages(self, document: Document, answer_info: AnswerInfo) -> list[Passage]:
        return rank_passages(document, self.segment(document), answer_info)


def rank_passages(
    document: Document,
    bounds: list[tuple[int, int]],
    answer_info: AnswerInfo,
) -> list[Passage]:
    """Keep type-compatible spans and order them by overlap with the answer terms.

    The score is the fraction of answer terms present plus a small bonus for
    term density; the sort is stable so ties stay in document order.
    """
    terms = set(answer_info.answer_terms)
    passages: list[Passage] = []
    for index, (start, end) in enumerate(bounds):
        text = document.content[start:end]
        if not is_compatible(text, answer_info.implied_answer_type, terms):
            continue
        passages.append(
            Passage(
                document=document,
                text=text,
                start=start,
                end=end,
                index=index,
                score=_overlap_score(text, terms),
            )
        )
    passages.sort(key=lambda p: p.score, reverse=True)
    return passages


def _overlap_score(text: str, terms: set[str]) -> float:
    if not terms:
        return 0.0
    tokens = tokenize(text)
    if not tokens:
        return 0.0
    matched = [t for t in tokens if t in terms]
    coverage = len(set(matched)) / len(terms)
    density = len(matched) / len(tokens)
    return coverage + 0.1 * density
