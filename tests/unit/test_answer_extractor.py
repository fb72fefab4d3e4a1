"""Tests for answer extraction and scoring."""

import pytest

from qa_engine.extraction.answer_extractor import PatternAnswerExtractor
from qa_engine.models.domain import AnswerInfo, Category, Document, Passage, QuestionInfo

DOC = Document(id="D7", content="Invented by Alice Smith. Invented by Bob Jones.")
FIRST = Passage(document=DOC, text="Invented by Alice Smith.", start=0, end=24, index=0, score=1.0)
SECOND = Passage(document=DOC, text="Invented by Bob Jones.", start=25, end=47, index=1, score=0.5)

QUESTION = QuestionInfo(
    raw_text="Who invented it?",
    expected_answer_type=Category.PERSON,
    expanded_query_terms=("invented",),
    content_terms=("invented",),
)
ANSWER_INFO = AnswerInfo(answer_terms=("invented",), implied_answer_type=Category.PERSON)


def test_no_passages_no_answers():
    assert PatternAnswerExtractor().extract_answer([], QUESTION, ANSWER_INFO) == []


def test_macintosh_passage(sample_documents, macintosh_question, macintosh_answer_info):
    doc = sample_documents[0]
    passage = Passage(document=doc, text=doc.content, start=0, end=len(doc.content), index=0)
    results = PatternAnswerExtractor().extract_answer(
        [passage], macintosh_question, macintosh_answer_info
    )
    assert [r.answer for r in results] == ["Apple"]
    assert results[0].supporting_document is doc
    # rank 0.3 + proximity 0.3 * 1/3 + type 0.4 * 0.8
    assert results[0].score == pytest.approx(0.72)


def test_earlier_passage_ranks_higher():
    results = PatternAnswerExtractor().extract_answer([FIRST, SECOND], QUESTION, ANSWER_INFO)
    assert [r.answer for r in results] == ["Alice Smith", "Bob Jones"]
    assert results[0].score > results[1].score
    assert results[0].passage is FIRST
    assert results[1].passage is SECOND
    assert all(r.supporting_document is DOC for r in results)


def test_candidate_confidence_scales_score():
    extractor = PatternAnswerExtractor()
    full = extractor.extract_answer([FIRST], QUESTION, ANSWER_INFO)
    half = extractor.extract_answer(
        [FIRST], QUESTION, AnswerInfo(("invented",), Category.PERSON, confidence=0.5)
    )
    assert half[0].score == pytest.approx(full[0].score / 2)


def test_passage_without_spans_is_skipped():
    doc = Document(id="x", content="no names here at all.")
    passage = Passage(document=doc, text=doc.content, start=0, end=len(doc.content), index=0)
    assert PatternAnswerExtractor().extract_answer([passage], QUESTION, ANSWER_INFO) == []


def test_extraction_is_deterministic():
    extractor = PatternAnswerExtractor()
    assert extractor.extract_answer([FIRST, SECOND], QUESTION, ANSWER_INFO) == (
        extractor.extract_answer([FIRST, SECOND], QUESTION, ANSWER_INFO)
    )
