"""Custom exceptions for cv-extractor."""

from typing import Any


class CvExtractorError(Exception):
    """Base exception for all cv-extractor errors."""

    pass


class BadEventError(CvExtractorError):
    """Raised when the triggering event is empty or malformed."""

    pass


class RetrievalError(CvExtractorError):
    """Raised when the source document cannot be read from object storage."""

    def __init__(
        self,
        message: str,
        bucket: str | None = None,
        key: str | None = None,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.bucket = bucket
        self.key = key
        self.last_error = last_error


class ExtractionError(CvExtractorError):
    """Raised when extraction fails."""

    def __init__(
        self,
        message: str,
        raw_response: str | None = None,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.raw_response = raw_response
        self.last_error = last_error


class ExtractionValidationError(ExtractionError):
    """Raised when the model's tool input fails Pydantic validation."""

    def __init__(
        self,
        message: str,
        validation_errors: Any = None,
        raw_response: str | None = None,
    ) -> None:
        super().__init__(message, raw_response=raw_response)
        self.validation_errors = validation_errors


class LLMError(ExtractionError):
    """Raised when the model call itself fails."""

    pass


class PersistenceError(CvExtractorError):
    """Raised when the extraction result cannot be written to the table."""

    def __init__(self, message: str, last_error: Exception | None = None) -> None:
        super().__init__(message)
        self.last_error = last_error


class ConfigurationError(CvExtractorError):
    """Raised when required configuration is missing or invalid."""

    pass


class PipelineTimeoutError(CvExtractorError):
    """Raised when an invocation runs out of its time budget."""

    pass
