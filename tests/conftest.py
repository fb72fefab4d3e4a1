"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from qa_engine.classifier.naive_bayes import NaiveBayesQuestionClassifier
from qa_engine.config.settings import Settings
from qa_engine.indexing.bm25_index import CorpusIndex
from qa_engine.models.domain import (
    ALL_CATEGORIES,
    AnswerInfo,
    Category,
    Document,
    LabeledQuestion,
    QuestionInfo,
)

MACINTOSH_TEXT = "The Macintosh was developed by Apple in 1984."

TRAINING_QUESTIONS = [
    ("Who wrote Hamlet?", Category.PERSON),
    ("Who developed the first computer?", Category.PERSON),
    ("Who invented the telephone?", Category.PERSON),
    ("Who painted the Mona Lisa?", Category.PERSON),
    ("Where is Milan?", Category.LOCATION),
    ("Where is the Eiffel Tower located?", Category.LOCATION),
    ("In which country is Rome?", Category.LOCATION),
    ("When was the Macintosh released?", Category.DATE),
    ("When did World War II end?", Category.DATE),
    ("What year did Apple go public?", Category.DATE),
    ("How many people live in Milan?", Category.NUMBER),
    ("How tall is the Eiffel Tower?", Category.NUMBER),
    ("How much does a computer cost?", Category.NUMBER),
    ("What is a computer?", Category.DEFINITION),
    ("What is photosynthesis?", Category.DEFINITION),
    ("What does NASA stand for?", Category.DEFINITION),
    ("Which company makes the iPhone?", Category.OTHER),
    ("What color is the sky?", Category.OTHER),
]


@pytest.fixture
def tmp_dir():
    """Create a temporary directory."""
    return tempfile.mkdtemp()


@pytest.fixture
def settings(tmp_dir):
    """Test settings with temp paths."""
    return Settings(
        classifier_path=str(Path(tmp_dir) / "model" / "classifier.json"),
        corpus_path=str(Path(tmp_dir) / "train.txt"),
        document_path=str(Path(tmp_dir) / "docs"),
    )


@pytest.fixture
def training_examples():
    return [LabeledQuestion(text=text, category=cat) for text, cat in TRAINING_QUESTIONS]


@pytest.fixture
def classifier():
    return NaiveBayesQuestionClassifier(min_confidence=0.3)


@pytest.fixture
def trained_model(classifier, training_examples):
    return classifier.train(ALL_CATEGORIES, training_examples)


@pytest.fixture
def sample_documents():
    return [
        Document(id="D1", content=MACINTOSH_TEXT),
        Document(
            id="D2",
            content="Milan is a city in northern Italy. About 1.4 million people live in Milan.",
        ),
        Document(
            id="D3",
            content="The telephone was invented by Alexander Graham Bell. He was born on March 3, 1847.",
        ),
    ]


@pytest.fixture
def corpus_index(sample_documents):
    index = CorpusIndex()
    index.add_documents(sample_documents)
    return index


@pytest.fixture
def corpus_dir(tmp_dir, sample_documents):
    """Write the sample documents as one .txt file per document."""
    docs_dir = Path(tmp_dir) / "docs"
    docs_dir.mkdir(parents=True, exist_ok=True)
    for doc in sample_documents:
        (docs_dir / f"{doc.id}.txt").write_text(doc.content, encoding="utf-8")
    return docs_dir


@pytest.fixture
def macintosh_question():
    return QuestionInfo(
        raw_text="Who developed the Macintosh computer?",
        expected_answer_type=Category.PERSON,
        expanded_query_terms=("developed", "macintosh", "computer"),
        content_terms=("developed", "macintosh", "computer"),
    )


@pytest.fixture
def macintosh_answer_info(macintosh_question):
    return AnswerInfo(
        answer_terms=macintosh_question.expanded_query_terms,
        implied_answer_type=Category.PERSON,
    )
