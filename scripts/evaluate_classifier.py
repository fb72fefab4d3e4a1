"""Evaluate a trained question classifier against a labeled question file.

Usage:
    qa-engine -c data/qa.properties -train
    python scripts/evaluate_classifier.py --config data/qa.properties [--questions PATH]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add src to path (matching seed_data.py pattern)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from qa_engine.classifier.evaluation import evaluate_classifier
from qa_engine.classifier.naive_bayes import NaiveBayesQuestionClassifier
from qa_engine.classifier.persistence import load_model
from qa_engine.classifier.training_data import load_training_examples
from qa_engine.config.settings import load_settings
from qa_engine.observability.logger import configure_logging
from qa_engine.observability.metrics import log_classifier_metrics


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(metrics: dict) -> None:
    print_header("CLASSIFIER EVALUATION")
    print(f"  Total cases:     {metrics['total_cases']}")
    print(f"  Accuracy:        {metrics['accuracy']:.1%}")
    print(f"  Avg confidence:  {metrics['avg_confidence']:.4f}")


def print_category_breakdown(by_category: dict) -> None:
    print_header("PER-CATEGORY BREAKDOWN")
    print(f"  {'Category':<12} {'Support':>8} {'Precision':>10} {'Recall':>8}")
    print(f"  {'-' * 41}")
    for cat, m in by_category.items():
        print(f"  {cat:<12} {m['support']:>8} {m['precision']:>9.1%} {m['recall']:>7.1%}")


def print_confusion_matrix(matrix: dict) -> None:
    print_header("CONFUSION MATRIX (expected \\ actual)")
    labels = list(matrix)
    print(f"  {'':>12}" + "".join(f"{label[:8]:>10}" for label in labels))
    for exp in labels:
        print(f"  {exp:>12}" + "".join(f"{matrix[exp][act]:>10}" for act in labels))


def main(config: str | None, questions: str | None, output: Path | None) -> int:
    configure_logging()
    settings = load_settings(config)
    configure_logging(settings.log_level, settings.log_json)

    model = load_model(settings.classifier_path)
    examples = load_training_examples(questions or settings.corpus_path)
    classifier = NaiveBayesQuestionClassifier(min_confidence=settings.min_confidence)

    metrics = evaluate_classifier(classifier, model, examples)
    log_classifier_metrics(metrics)

    print_summary(metrics)
    print_category_breakdown(metrics["by_category"])
    print_confusion_matrix(metrics["confusion_matrix"])

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(metrics, indent=2), encoding="utf-8")
        print(f"\nRaw metrics saved to {output}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate the question classifier")
    parser.add_argument("--config", "-c", help="properties file with run settings")
    parser.add_argument(
        "--questions",
        help="labeled question file (default: the configured training corpus)",
    )
    parser.add_argument("--output", help="path to save metrics JSON")
    args = parser.parse_args()
    sys.exit(main(args.config, args.questions, Path(args.output) if args.output else None))
