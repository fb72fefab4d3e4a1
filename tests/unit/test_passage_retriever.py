"""Tests for passage segmentation and filtering."""

from qa_engine.models.domain import AnswerInfo, Category, Document
from qa_engine.retrieval.passage_retriever import SentencePassageRetriever, WindowPassageRetriever

DOC = Document(
    id="D9",
    content=(
        "The Macintosh was developed by Apple in 1984. "
        "it sold well at first. "
        "Steve Jobs presented the Macintosh computer on January 24, 1984."
    ),
)


def test_sentence_segmentation_is_deterministic():
    retriever = SentencePassageRetriever()
    bounds = retriever.segment(DOC)
    assert bounds == retriever.segment(DOC)
    assert [DOC.content[s:e] for s, e in bounds] == [
        "The Macintosh was developed by Apple in 1984.",
        "it sold well at first.",
        "Steve Jobs presented the Macintosh computer on January 24, 1984.",
    ]


def test_sentence_windows_overlap():
    bounds = SentencePassageRetriever(window=2).segment(DOC)
    assert len(bounds) == 2
    assert DOC.content[bounds[0][0]:bounds[0][1]].endswith("at first.")


def test_window_segmentation_covers_all_tokens():
    retriever = WindowPassageRetriever(size=5, stride=3)
    bounds = retriever.segment(DOC)
    assert bounds[0][0] == 0
    assert bounds[-1][1] == len(DOC.content) - 1
    assert all(a[0] < b[0] for a, b in zip(bounds, bounds[1:]))


def test_passages_filtered_by_answer_type():
    retriever = SentencePassageRetriever()
    info = AnswerInfo(answer_terms=("macintosh", "developed"), implied_answer_type=Category.DATE)
    passages = retriever.get_passages(DOC, info)
    assert all(p.document is DOC for p in passages)
    assert "it sold well at first." not in [p.text for p in passages]
    assert len(passages) == 2


def test_passages_ranked_by_term_overlap(macintosh_answer_info):
    passages = SentencePassageRetriever().get_passages(DOC, macintosh_answer_info)
    assert passages[0].text == "The Macintosh was developed by Apple in 1984."
    assert passages[0].score >= passages[-1].score
    for p in passages:
        assert DOC.content[p.start:p.end] == p.text


def test_no_compatible_passage_returns_empty():
    doc = Document(id="x", content="nothing capitalized here. still nothing.")
    info = AnswerInfo(answer_terms=("nothing",), implied_answer_type=Category.PERSON)
    assert SentencePassageRetriever().get_passages(doc, info) == []
    assert WindowPassageRetriever().get_passages(doc, info) == []


def test_empty_document():
    info = AnswerInfo(answer_terms=("x1",), implied_answer_type=Category.OTHER)
    assert SentencePassageRetriever().get_passages(Document(id="e", content=""), info) == []
    assert WindowPassageRetriever().get_passages(Document(id="e", content=""), info) == []
