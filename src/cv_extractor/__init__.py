"""
cv-extractor: structured candidate data extraction from uploaded CV documents.
"""

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
from cv_extractor.core.responses import (
    ErrorResponse,
    ModelResponse,
    TextResponse,
    ToolUseResponse,
    parse_converse_response,
)
from cv_extractor.core.store import ResultStore
from cv_extractor.events import ObjectReference, decode_object_key, parse_trigger_event
from cv_extractor.handler import (
    CvProcessor,
    PipelineState,
    ProcessingOutcome,
    handler,
)
from cv_extractor.prompts.builder import CV_EXTRACTION_TEMPLATE, PromptBuilder, PromptTemplate
from cv_extractor.results.types import ExtractionResult, StoredAnalysis
from cv_extractor.schemas import (
    CANDIDATE_RECORD_SCHEMA,
    NOT_FOUND,
    CandidateRecord,
    EducationEntry,
    WorkExperienceEntry,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "CvProcessor",
    "PipelineState",
    "ProcessingOutcome",
    "handler",
    "CandidateExtractor",
    "DocumentFetcher",
    "ResultStore",
    # Events
    "ObjectReference",
    "decode_object_key",
    "parse_trigger_event",
    # Model responses
    "ModelResponse",
    "TextResponse",
    "ToolUseResponse",
    "ErrorResponse",
    "parse_converse_response",
    # Errors
    "CvExtractorError",
    "BadEventError",
    "RetrievalError",
    "ExtractionError",
    "ExtractionValidationError",
    "LLMError",
    "PersistenceError",
    "ConfigurationError",
    "PipelineTimeoutError",
    # Schemas
    "CANDIDATE_RECORD_SCHEMA",
    "NOT_FOUND",
    "CandidateRecord",
    "WorkExperienceEntry",
    "EducationEntry",
    # Config
    "ExtractionConfig",
    "Settings",
    "get_settings",
    "load_settings",
    # Prompts
    "PromptBuilder",
    "PromptTemplate",
    "CV_EXTRACTION_TEMPLATE",
    # Results
    "ExtractionResult",
    "StoredAnalysis",
]
