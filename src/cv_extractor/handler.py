"""Lambda entry point: process one uploaded CV per S3 notification.

Each invocation walks ``RECEIVED -> FETCHED -> EXTRACTED -> STORED`` and
stops at the first failure. Nothing written before a failure is rolled
back, and nothing is retried; redelivery is left to the event source.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum
from functools import lru_cache
from typing import Any

import boto3
from pydantic import BaseModel, Field

from cv_extractor.core.config import get_settings
from cv_extractor.core.exceptions import (
    BadEventError,
    ConfigurationError,
    CvExtractorError,
    PipelineTimeoutError,
)
from cv_extractor.core.extractor import CandidateExtractor
from cv_extractor.core.fetcher import DocumentFetcher
from cv_extractor.core.store import ResultStore
from cv_extractor.events import ObjectReference, parse_trigger_event
from cv_extractor.results.types import StoredAnalysis
from cv_extractor.schemas.candidate import CandidateRecord

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "CV processed successfully"
FAILURE_MESSAGE = "Error processing CV"


class PipelineState(str, Enum):
    """Stages of a single invocation."""

    RECEIVED = "received"
    FETCHED = "fetched"
    EXTRACTED = "extracted"
    STORED = "stored"
    FAILED = "failed"


def success_response(result: dict[str, Any]) -> dict[str, Any]:
    return {"statusCode": 200, "body": {"message": SUCCESS_MESSAGE, "result": result}}


def failure_response(error: BaseException | str) -> dict[str, Any]:
    return {"statusCode": 500, "body": {"message": FAILURE_MESSAGE, "error": str(error)}}


class ProcessingOutcome(BaseModel):
    """What happened to one triggering event."""

    state: PipelineState
    failed_at: PipelineState | None = Field(
        default=None, description="Last state reached before the failure"
    )
    reference: ObjectReference | None = None
    record: CandidateRecord | None = None
    analysis: StoredAnalysis | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.STORED

    def to_response(self) -> dict[str, Any]:
        """Render the response envelope returned to the invoker."""
        if self.succeeded and self.record is not None:
            return success_response(self.record.to_payload())
        return failure_response(self.error or "Unknown error")


class CvProcessor:
    """Runs the fetch, extract and store steps for one event at a time.

    Holds no per-event state, so one instance serves every invocation in
    the process.

    Args:
        fetcher: Reads the uploaded document.
        extractor: Turns the document into a CandidateRecord.
        store: Persists the record.
        bucket_name: When set, events for any other bucket are rejected.
        timeout_seconds: Time budget for one invocation.
        clock: Monotonic clock in seconds.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        extractor: CandidateExtractor,
        store: ResultStore,
        bucket_name: str | None = None,
        timeout_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.store = store
        self.bucket_name = bucket_name
        self.timeout_seconds = timeout_seconds
        self._clock = clock

    def process(self, event: dict[str, Any], context: Any = None) -> dict[str, Any]:
        """Process ``event`` and return the response envelope."""
        return self.run(event, context).to_response()

    def run(self, event: dict[str, Any], context: Any = None) -> ProcessingOutcome:
        """Process ``event`` and return the detailed outcome.

        Never raises: every failure is logged and reported in the outcome.
        """
        deadline = self._deadline(context)
        state = PipelineState.RECEIVED
        reference: ObjectReference | None = None
        record: CandidateRecord | None = None

        try:
            reference = parse_trigger_event(event)
            self._check_bucket(reference)
            logger.info("Processing s3://%s/%s", reference.bucket, reference.key)

            self._check_deadline(deadline, "fetch")
            document = self.fetcher.fetch(reference.bucket, reference.key)
            state = PipelineState.FETCHED

            self._check_deadline(deadline, "extract")
            record = self.extractor.extract(document).data
            state = PipelineState.EXTRACTED

            self._check_deadline(deadline, "store")
            analysis = self.store.save(reference.key, record)
            state = PipelineState.STORED
        except CvExtractorError as e:
            logger.error("Error processing CV (state=%s): %s", state.value, e)
            return self._failed(state, reference, record, e)
        except Exception as e:
            logger.exception("Unexpected error processing CV (state=%s)", state.value)
            return self._failed(state, reference, record, e)

        logger.info("Processed %s as analysis %s", reference.key, analysis.id)
        return ProcessingOutcome(
            state=state, reference=reference, record=record, analysis=analysis
        )

    def _failed(
        self,
        state: PipelineState,
        reference: ObjectReference | None,
        record: CandidateRecord | None,
        error: Exception,
    ) -> ProcessingOutcome:
        return ProcessingOutcome(
            state=PipelineState.FAILED,
            failed_at=state,
            reference=reference,
            record=record,
            error=str(error),
        )

    def _check_bucket(self, reference: ObjectReference) -> None:
        if self.bucket_name and reference.bucket != self.bucket_name:
            raise BadEventError(
                f"Event references bucket {reference.bucket!r}, expected {self.bucket_name!r}"
            )

    def _deadline(self, context: Any) -> float:
        budget = self.timeout_seconds
        remaining = getattr(context, "get_remaining_time_in_millis", None)
        if callable(remaining):
            budget = min(budget, remaining() / 1000.0)
        return self._clock() + budget

    def _check_deadline(self, deadline: float, step: str) -> None:
        if self._clock() >= deadline:
            raise PipelineTimeoutError(f"Time budget exhausted before {step} step")


@lru_cache(maxsize=1)
def get_processor() -> CvProcessor:
    """Build the process-wide CvProcessor and its clients.

    Raises:
        ConfigurationError: If required settings are missing.
    """
    settings = get_settings()
    logging.getLogger("cv_extractor").setLevel(settings.log_level)

    boto_config = settings.boto_config()
    return CvProcessor(
        fetcher=DocumentFetcher(boto3.client("s3", config=boto_config)),
        extractor=CandidateExtractor(
            boto3.client("bedrock-runtime", config=boto_config),
            config=settings.extraction_config(),
        ),
        store=ResultStore(boto3.client("dynamodb", config=boto_config), settings.table_name),
        bucket_name=settings.bucket_name,
        timeout_seconds=settings.invocation_timeout_seconds,
    )


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """AWS Lambda handler for S3 object-created events."""
    try:
        processor = get_processor()
    except ConfigurationError as e:
        logger.error("Configuration error, event not processed: %s", e)
        return failure_response(e)
    return processor.process(event, context)
