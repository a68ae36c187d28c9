"""Parsing of S3 object-created notifications."""

import logging
from typing import Any
from urllib.parse import unquote_plus

from pydantic import BaseModel, Field

from cv_extractor.core.exceptions import BadEventError

logger = logging.getLogger(__name__)


class ObjectReference(BaseModel):
    """Location of the document an event refers to."""

    bucket: str = Field(description="Bucket name")
    key: str = Field(description="Decoded object key")


def decode_object_key(key: str) -> str:
    """Decode an object key as it appears in S3 event notifications.

    ``+`` stands for a space and other characters are percent-encoded, so
    ``"jane%2Bsmith+resume.pdf"`` decodes to ``"jane+smith resume.pdf"``.

    Raises:
        BadEventError: If a percent escape does not decode as UTF-8.
    """
    try:
        return unquote_plus(key, errors="strict")
    except UnicodeDecodeError as e:
        raise BadEventError(f"Malformed S3 event record: undecodable object key {key!r}") from e


def parse_trigger_event(event: dict[str, Any]) -> ObjectReference:
    """Return the object referenced by the first record of ``event``.

    Only the first record is used; further records are ignored.

    Raises:
        BadEventError: If the event has no records or the first one is malformed.
    """
    records = event.get("Records") if isinstance(event, dict) else None
    if not records:
        raise BadEventError("No records found in S3 event")

    if len(records) > 1:
        logger.warning("S3 event has %d records; only the first is processed", len(records))

    try:
        s3 = records[0]["s3"]
        bucket = s3["bucket"]["name"]
        key = s3["object"]["key"]
    except (KeyError, TypeError) as e:
        raise BadEventError(f"Malformed S3 event record: missing {e}") from e

    if not bucket or not key:
        raise BadEventError("Malformed S3 event record: empty bucket name or object key")

    return ObjectReference(bucket=bucket, key=decode_object_key(key))
