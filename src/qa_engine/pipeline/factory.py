"""Registered implementations for each pipeline stage and pipeline assembly.

Each stage family is a name -> constructor table; settings pick the variant.
"""

from __future__ import annotations

from collections.abc import Callable

from qa_engine.classifier.naive_bayes import NaiveBayesQuestionClassifier
from qa_engine.config.settings import Settings
from qa_engine.exceptions import ConfigurationError
from qa_engine.extraction.answer_extractor import PatternAnswerExtractor
from qa_engine.indexing.bm25_index import CorpusIndex
from qa_engine.models.domain import ALL_CATEGORIES, Category, ClassifierTrainingInfo
from qa_engine.observability.logger import get_logger
from qa_engine.parser.question_parser import DefaultQuestionParser
from qa_engine.parser.synonyms import SynonymExpander
from qa_engine.pipeline.qa_pipeline import QAPipeline
from qa_engine.protocols.classifier import QuestionClassifier
from qa_engine.protocols.extractor import AnswerExtractor
from qa_engine.protocols.retriever import PassageRetriever
from qa_engine.retrieval.document_retriever import IndexedDocumentRetriever
from qa_engine.retrieval.passage_retriever import SentencePassageRetriever, WindowPassageRetriever
from qa_engine.search.search_engine import CandidateSearchEngine

logger = get_logger("pipeline_factory")

CLASSIFIERS: dict[str, Callable[[Settings], QuestionClassifier]] = {
    "naive_bayes": lambda s: NaiveBayesQuestionClassifier(min_confidence=s.min_confidence),
}

PASSAGE_RETRIEVERS: dict[str, Callable[[Settings], PassageRetriever]] = {
    "sentence": lambda s: SentencePassageRetriever(window=s.passage_window_sentences),
    "window": lambda s: WindowPassageRetriever(
        size=s.passage_window_tokens, stride=s.passage_window_stride
    ),
}

ANSWER_EXTRACTORS: dict[str, Callable[[Settings], AnswerExtractor]] = {
    "pattern": lambda s: PatternAnswerExtractor(
        w_passage_rank=s.w_passage_rank,
        w_proximity=s.w_proximity,
        w_type_confidence=s.w_type_confidence,
    ),
}


def _lookup(table: dict[str, Callable], name: str, kind: str) -> Callable:
    factory = table.get(name)
    if factory is None:
        raise ConfigurationError(f"Unknown {kind} '{name}'. Available: {sorted(table)}")
    return factory


def create_classifier(settings: Settings) -> QuestionClassifier:
    return _lookup(CLASSIFIERS, settings.question_classifier, "question classifier")(settings)


def build_pipeline(
    settings: Settings,
    model: ClassifierTrainingInfo | None,
    index: CorpusIndex | None = None,
    categories: tuple[Category, ...] = ALL_CATEGORIES,
) -> QAPipeline:
    """Assemble every stage from settings. The corpus is not imported here."""
    make_passage_retriever = _lookup(
        PASSAGE_RETRIEVERS, settings.passage_retriever, "passage retriever"
    )
    make_answer_extractor = _lookup(
        ANSWER_EXTRACTORS, settings.answer_extractor, "answer extractor"
    )
    passage_retriever = make_passage_retriever(settings)
    answer_extractor = make_answer_extractor(settings)
    classifier = create_classifier(settings)

    if index is None:
        index = CorpusIndex(index_path=settings.index_path or None)
    synonyms = SynonymExpander.from_file(settings.synonyms_path)

    document_retriever = IndexedDocumentRetriever(max_documents=settings.max_documents)
    document_retriever.set_indexer(index)

    logger.info(
        "pipeline_built",
        classifier=settings.question_classifier,
        passage_retriever=settings.passage_retriever,
        answer_extractor=settings.answer_extractor,
        model_loaded=model is not None,
        synonyms=len(synonyms),
    )
    return QAPipeline(
        question_parser=DefaultQuestionParser(classifier, model, categories, synonyms),
        search_engine=CandidateSearchEngine(
            term_weight=index.idf,
            max_candidates=settings.max_candidates,
            synonyms=synonyms,
        ),
        document_retriever=document_retriever,
        passage_retriever=passage_retriever,
        answer_extractor=answer_extractor,
        settings=settings,
    )
