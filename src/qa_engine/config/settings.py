"""Central configuration via Pydantic Settings. Values driven by env vars or a properties file."""

from __future__ import annotations

from pathlib import Path

from dotenv import dotenv_values
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from qa_engine.observability.logger import get_logger

logger = get_logger("settings")


class Settings(BaseSettings):
    # Corpus and model locations
    document_path: str = ""
    index_path: str = ""  # directory holding a corpus index snapshot
    corpus_path: str = ""
    classifier_path: str = "data/classifier.json"
    synonyms_path: str = ""

    # Classification
    question_classifier: str = "naive_bayes"
    min_confidence: float = 0.3

    # Candidate search
    max_candidates: int = 5

    # Retrieval
    max_documents: int = 10
    passage_retriever: str = "sentence"
    passage_window_sentences: int = 1
    passage_window_tokens: int = 40
    passage_window_stride: int = 20

    # Answer extraction
    answer_extractor: str = "pattern"
    w_passage_rank: float = 0.3
    w_proximity: float = 0.3
    w_type_confidence: float = 0.4
    max_results: int = 0  # 0 keeps every extracted answer

    # Batch answering
    batch_concurrency: int = 4

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_prefix": "QA_", "extra": "ignore"}


def read_properties(path: str | Path) -> dict[str, str]:
    """Read a ``KEY=value`` settings file (quotes, ``export`` and ``#`` comments allowed)."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No settings file at {path}")
    return {key: value for key, value in dotenv_values(path).items() if value is not None}


def load_settings(properties_path: str | Path | None = None) -> Settings:
    """Build settings, overlaying a properties file when one is given.

    An unreadable or invalid file never aborts startup: the problem is logged and
    the defaults (plus environment) are used instead.
    """
    if properties_path is None:
        return Settings()

    try:
        properties = read_properties(properties_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("settings_unreadable", path=str(properties_path), error=str(exc))
        return Settings()

    known = Settings.model_fields
    overrides = {
        key.lower(): value for key, value in properties.items() if key.lower() in known
    }
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        logger.warning("settings_invalid", path=str(properties_path), errors=exc.error_count())
        return Settings()

    logger.info("settings_loaded", path=str(properties_path), keys=sorted(overrides))
    return settings
