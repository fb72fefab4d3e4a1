"""Metric recording helpers for traces."""

from __future__ import annotations

from qa_engine.observability.logger import get_logger

logger = get_logger("metrics")


def log_question_metrics(
    trace_id: str,
    category: str,
    num_candidates: int,
    num_documents: int,
    num_passages: int,
    num_results: int,
    stage_ms: dict[str, float],
    latency_ms: float,
) -> None:
    logger.info(
        "question_metrics",
        trace_id=trace_id,
        category=category,
        candidates=num_candidates,
        documents=num_documents,
        passages=num_passages,
        results=num_results,
        stage_ms=stage_ms,
        latency_ms=round(latency_ms, 2),
    )


def log_classifier_metrics(metrics: dict) -> None:
    logger.info(
        "classifier_metrics",
        total_cases=metrics.get("total_cases", 0),
        accuracy=round(metrics.get("accuracy", 0.0), 4),
        avg_confidence=round(metrics.get("avg_confidence", 0.0), 4),
    )
