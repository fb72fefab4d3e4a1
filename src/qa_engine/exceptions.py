"""Custom exception hierarchy for the QA engine."""


class QAEngineError(Exception):
    """Base exception for all QA engine errors."""


class ConfigurationError(QAEngineError):
    """Error in system configuration."""


class IngestionError(QAEngineError):
    """Error during corpus ingestion."""


class ParsingError(IngestionError):
    """Error parsing a corpus file."""


class CorpusImportError(IngestionError):
    """The document corpus could not be imported."""


class RetrievalError(QAEngineError):
    """Error during document or passage retrieval."""


class IndexNotReadyError(RetrievalError):
    """Retrieval was attempted before an index was bound and populated."""


class ClassifierError(QAEngineError):
    """Error training or applying the question classifier."""


class ModelNotFoundError(ClassifierError):
    """No persisted classifier model exists at the given path."""


class ModelFormatError(ClassifierError):
    """A persisted classifier model is corrupt or of an incompatible version."""


class CategoryMismatchError(ClassifierError):
    """A model was applied with a category set it was not trained on."""
