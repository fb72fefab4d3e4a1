"""Entrypoint: train the question classifier, classify questions, or answer them."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from qa_engine.classifier.naive_bayes import NaiveBayesQuestionClassifier
from qa_engine.classifier.persistence import load_model_or_none, save_model
from qa_engine.classifier.training_data import load_training_examples
from qa_engine.config.settings import Settings, load_settings
from qa_engine.exceptions import ClassifierError, QAEngineError
from qa_engine.indexing.bm25_index import CorpusIndex
from qa_engine.models.domain import ALL_CATEGORIES, Category, QuestionResult
from qa_engine.observability.logger import configure_logging, get_logger
from qa_engine.pipeline.factory import build_pipeline, create_classifier

logger = get_logger("main")

EXAMPLE = 'qa-engine "Where is Milan ?" "Who developed the Macintosh computer ?"'


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qa-engine",
        description="Answer natural-language questions against a document corpus.",
        epilog=f"Example: {EXAMPLE}",
    )
    parser.add_argument("--config", "-c", help="key/value properties file with run settings")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--train",
        "-train",
        action="store_true",
        help="only train the question classifier, no input questions required",
    )
    mode.add_argument(
        "--classify",
        "-qc",
        action="store_true",
        help="only classify the given questions",
    )
    parser.add_argument("questions", nargs="*", help="questions to classify or answer")
    return parser


def train(settings: Settings) -> int:
    try:
        examples = load_training_examples(settings.corpus_path)
        classifier = NaiveBayesQuestionClassifier(min_confidence=settings.min_confidence)
        model = classifier.train(ALL_CATEGORIES, examples)
        save_model(model, settings.classifier_path)
    except QAEngineError as exc:
        logger.error("training_failed", error=str(exc))
        print(f"Training failed: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.error("model_write_failed", path=settings.classifier_path, error=str(exc))
        print(f"Could not write model to {settings.classifier_path}: {exc}", file=sys.stderr)
        return 1

    print(model.summary())
    print("Training all done!")
    return 0


def classify(settings: Settings, questions: Sequence[str]) -> int:
    model = load_model_or_none(settings.classifier_path)
    classifier = create_classifier(settings)
    for question in questions:
        try:
            category = classifier.classify(ALL_CATEGORIES, model, question)
        except ClassifierError as exc:
            logger.error("classification_failed", question=question, error=str(exc))
            category = Category.OTHER
        print(f'\nQ: "{question}"')
        print(f"Classified as: {category.value}")
    return 0


def answer(settings: Settings, questions: Sequence[str]) -> int:
    model = load_model_or_none(settings.classifier_path)
    try:
        index = CorpusIndex(index_path=settings.index_path or None)
        pipeline = build_pipeline(settings, model, index)
        # A loaded snapshot answers on its own when no corpus path is configured
        if settings.document_path or index.size == 0:
            pipeline.import_corpus()
            index.save()
    except (QAEngineError, OSError) as exc:
        logger.error("startup_failed", error_type=type(exc).__name__, error=str(exc))
        print(f"Cannot answer questions: {exc}", file=sys.stderr)
        return 1

    for result in asyncio.run(pipeline.answer_batch(questions)):
        print_results(result)
    return 0


def print_results(result: QuestionResult) -> None:
    print(f'\nQ: "{result.question.raw_text}"')
    print("A(s):")
    for info in result.results:
        print(f"[{info.supporting_document.id:<5}] {info.answer}")


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    settings = load_settings(args.config)
    configure_logging(settings.log_level, settings.log_json)

    if args.train:
        return train(settings)
    if not args.questions:
        arg_parser.print_help()
        return 0
    if args.classify:
        return classify(settings, args.questions)
    return answer(settings, args.questions)


if __name__ == "__main__":
    sys.exit(main())
