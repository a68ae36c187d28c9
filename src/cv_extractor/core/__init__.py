"""Core extraction pipeline components."""

from cv_extractor.core.config import ExtractionConfig, Settings, get_settings, load_settings
from cv_extractor.core.exceptions import (
    BadEventError,
    ConfigurationError,
    CvExtractorError,
    ExtractionError,
    ExtractionValidationError,
    LLMError,
    PersistenceError,
    PipelineTimeoutError,
    RetrievalError,
)
from cv_extractor.core.extractor import CandidateExtractor
from cv_extractor.core.fetcher import DocumentFetcher
from cv_extractor.core.store import ResultStore

__all__ = [
    "CandidateExtractor",
    "DocumentFetcher",
    "ResultStore",
    "ExtractionConfig",
    "Settings",
    "get_settings",
    "load_settings",
    "CvExtractorError",
    "BadEventError",
    "RetrievalError",
    "ExtractionError",
    "ExtractionValidationError",
    "LLMError",
    "PersistenceError",
    "ConfigurationError",
    "PipelineTimeoutError",
]
