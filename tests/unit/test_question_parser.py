"""Tests for question parsing."""

import json
from pathlib import Path

from qa_engine.models.domain import ALL_CATEGORIES, Category
from qa_engine.parser.question_parser import DefaultQuestionParser
from qa_engine.parser.synonyms import SynonymExpander


def test_parse_classifies_and_normalizes(classifier, trained_model):
    parser = DefaultQuestionParser(classifier, trained_model, ALL_CATEGORIES)
    info = parser.parse("  Who developed   the Macintosh computer? ")
    assert info.expected_answer_type == Category.PERSON
    assert info.expanded_query_terms == ("developed", "macintosh", "computer")
    assert info.content_terms == info.expanded_query_terms
    assert info.raw_text == "  Who developed   the Macintosh computer? "


def test_parse_empty_question_is_degenerate(classifier, trained_model):
    parser = DefaultQuestionParser(classifier, trained_model, ALL_CATEGORIES)
    for text in ["", "   ", "\n\t"]:
        info = parser.parse(text)
        assert info.expected_answer_type == Category.OTHER
        assert info.expanded_query_terms == ()


def test_parse_without_model_defaults_to_other(classifier):
    parser = DefaultQuestionParser(classifier, None, ALL_CATEGORIES)
    info = parser.parse("Where is Milan?")
    assert info.expected_answer_type == Category.OTHER
    assert info.expanded_query_terms == ("milan",)


def test_parse_with_mismatched_model_does_not_raise(classifier, trained_model):
    parser = DefaultQuestionParser(classifier, trained_model, (Category.PERSON, Category.OTHER))
    info = parser.parse("Where is Milan?")
    assert info.expected_answer_type == Category.OTHER


def test_parse_only_stopwords(classifier, trained_model):
    parser = DefaultQuestionParser(classifier, trained_model, ALL_CATEGORIES)
    info = parser.parse("Who is it?")
    assert info.expanded_query_terms == ()


def test_parse_expands_synonyms_after_content_terms(classifier, trained_model):
    synonyms = SynonymExpander({"developed": ["created", "built"], "computer": ["pc"]})
    parser = DefaultQuestionParser(classifier, trained_model, ALL_CATEGORIES, synonyms)
    info = parser.parse("Who developed the Macintosh computer?")
    assert info.content_terms == ("developed", "macintosh", "computer")
    assert info.expanded_query_terms == (
        "developed",
        "macintosh",
        "computer",
        "created",
        "built",
        "pc",
    )


def test_synonyms_from_file(tmp_dir):
    path = Path(tmp_dir) / "synonyms.json"
    path.write_text(json.dumps({"Car": ["automobile", "car"], "bad": "not-a-list"}), encoding="utf-8")
    expander = SynonymExpander.from_file(path)
    assert expander.synonyms("car") == ("automobile",)
    assert expander.synonyms("bad") == ()
    assert len(expander) == 1


def test_synonyms_from_missing_or_invalid_file(tmp_dir):
    assert len(SynonymExpander.from_file(Path(tmp_dir) / "absent.json")) == 0
    assert len(SynonymExpander.from_file("")) == 0
    broken = Path(tmp_dir) / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert len(SynonymExpander.from_file(broken)) == 0
