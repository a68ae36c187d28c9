"""Persistence of extraction results to DynamoDB."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from cv_extractor.core.exceptions import ConfigurationError, PersistenceError
from cv_extractor.results.types import StoredAnalysis
from cv_extractor.schemas.candidate import CandidateRecord

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ResultStore:
    """Append-only writer of StoredAnalysis items.

    Args:
        client: A boto3 DynamoDB client.
        table_name: Destination table.
        id_factory: Produces the identifier of each new item.
        clock: Produces the ISO-8601 timestamp of each new item.
    """

    def __init__(
        self,
        client: Any,
        table_name: str | None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], str] = _utc_now,
    ) -> None:
        self._client = client
        self.table_name = table_name
        self._id_factory = id_factory
        self._clock = clock

    def save(self, file_name: str, record: CandidateRecord) -> StoredAnalysis:
        """Write a new StoredAnalysis for ``record``.

        Raises:
            PersistenceError: If no table is configured or the write fails.
        """
        try:
            if not self.table_name:
                raise ConfigurationError("TABLE_NAME environment variable is not defined")

            analysis = StoredAnalysis(
                id=self._id_factory(),
                file_name=file_name,
                analysis_result=record.to_json(),
                timestamp=self._clock(),
            )
            self._client.put_item(TableName=self.table_name, Item=analysis.to_item())
        except (ConfigurationError, ClientError, BotoCoreError) as e:
            logger.error("Error storing CV data in DynamoDB: %s", e)
            raise PersistenceError(f"Failed to store CV data: {e}", last_error=e) from e

        logger.info("Stored analysis %s for %s in %s", analysis.id, file_name, self.table_name)
        return analysis
