"""Core domain objects passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Expected answer types. Declaration order is the tie-break precedence."""

    PERSON = "PERSON"
    LOCATION = "LOCATION"
    DATE = "DATE"
    NUMBER = "NUMBER"
    DEFINITION = "DEFINITION"
    OTHER = "OTHER"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Category:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown category '{name}'") from None

    @classmethod
    def ordered(cls, categories) -> tuple[Category, ...]:
        """Return the given categories in declaration order."""
        wanted = set(categories)
        return tuple(c for c in cls if c in wanted)


ALL_CATEGORIES: tuple[Category, ...] = tuple(Category)


@dataclass(frozen=True)
class QuestionInfo:
    raw_text: str
    expected_answer_type: Category
    expanded_query_terms: tuple[str, ...]
    content_terms: tuple[str, ...] = ()

    @classmethod
    def degenerate(cls, raw_text: str) -> QuestionInfo:
        return cls(raw_text=raw_text, expected_answer_type=Category.OTHER, expanded_query_terms=())


@dataclass(frozen=True)
class LabeledQuestion:
    text: str
    category: Category


@dataclass(frozen=True)
class ClassifierTrainingInfo:
    """Naive Bayes sufficient statistics, kept as integer counts."""

    categories: tuple[Category, ...]
    vocabulary: tuple[str, ...]
    class_counts: dict[Category, int]
    feature_counts: dict[Category, dict[str, int]]
    example_count: int

    def total_features(self, category: Category) -> int:
        return sum(self.feature_counts.get(category, {}).values())

    def summary(self) -> str:
        lines = [
            f"ClassifierTrainingInfo: {self.example_count} examples, "
            f"{len(self.vocabulary)} features, {len(self.categories)} categories"
        ]
        for category in self.categories:
            lines.append(
                f"  {category.value:<12} examples={self.class_counts.get(category, 0):<6} "
                f"features={self.total_features(category)}"
            )
        return "\n".join(lines)


@dataclass(frozen=True)
class AnswerInfo:
    answer_terms: tuple[str, ...]
    implied_answer_type: Category
    confidence: float = 1.0


@dataclass(frozen=True)
class Document:
    id: str
    content: str
    source: str = ""
    score: float = 0.0


@dataclass(frozen=True)
class Passage:
    document: Document = field(repr=False)
    text: str
    start: int
    end: int
    index: int
    score: float = 0.0


@dataclass(frozen=True)
class ResultInfo:
    answer: str
    supporting_document: Document = field(repr=False)
    score: float
    passage: Passage | None = field(default=None, repr=False, compare=False)


@dataclass
class QuestionResult:
    question: QuestionInfo
    results: list[ResultInfo] = field(default_factory=list)
