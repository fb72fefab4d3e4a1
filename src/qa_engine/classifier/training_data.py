"""Loading labeled questions for classifier training.

Two line formats are accepted and may be mixed in one file:

* UIUC/TREC question classification: ``LOC:city Where is Milan ?``
* tab separated: ``LOCATION<TAB>Where is Milan?``
"""

from __future__ import annotations

from pathlib import Path

from qa_engine.config.constants import UIUC_COARSE_LABELS, UIUC_FINE_LABELS
from qa_engine.exceptions import ConfigurationError
from qa_engine.models.domain import Category, LabeledQuestion
from qa_engine.observability.logger import get_logger

logger = get_logger("training_data")


def map_uiuc_label(label: str) -> Category | None:
    """Map a ``COARSE:fine`` label to a category, or None if unrecognized."""
    if label in UIUC_FINE_LABELS:
        return Category.parse(UIUC_FINE_LABELS[label])
    coarse = label.split(":", 1)[0]
    mapped = UIUC_COARSE_LABELS.get(coarse)
    return Category.parse(mapped) if mapped else None


def parse_training_line(line: str) -> LabeledQuestion | None:
    if "\t" in line:
        label, text = line.split("\t", 1)
        try:
            return LabeledQuestion(text=text.strip(), category=Category.parse(label))
        except ValueError:
            return None

    label, _, text = line.partition(" ")
    category = map_uiuc_label(label)
    if category is None or not text.strip():
        return None
    return LabeledQuestion(text=text.strip(), category=category)


def load_training_examples(path: str | Path) -> list[LabeledQuestion]:
    if not path:
        raise ConfigurationError("No training corpus path configured (CORPUS_PATH)")
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read training corpus {path}: {exc}") from exc

    examples: list[LabeledQuestion] = []
    malformed = 0
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        example = parse_training_line(line)
        if example is None:
            malformed += 1
            continue
        examples.append(example)

    if malformed:
        logger.warning("training_lines_malformed", path=str(path), count=malformed)
    logger.info("training_examples_loaded", path=str(path), count=len(examples))
    return examples
