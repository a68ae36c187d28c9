"""Retrieval of source documents from object storage."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from cv_extractor.core.exceptions import RetrievalError

logger = logging.getLogger(__name__)


class DocumentFetcher:
    """Reads raw document bytes from an S3 bucket.

    Args:
        client: A boto3 S3 client.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def fetch(self, bucket: str, key: str) -> bytes:
        """Return the bytes of ``bucket/key``.

        The key must already be decoded.

        Raises:
            RetrievalError: If the object is missing, unreadable, or empty.
        """
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            body = response.get("Body")
            content = body.read() if body is not None else b""
            if not content:
                raise ValueError("No content found in CV file")
        except (ClientError, BotoCoreError, ValueError) as e:
            logger.error("Error retrieving s3://%s/%s: %s", bucket, key, e)
            raise RetrievalError(
                f"Failed to retrieve document from S3: {e}",
                bucket=bucket,
                key=key,
                last_error=e,
            ) from e

        logger.debug("Fetched s3://%s/%s (%d bytes)", bucket, key, len(content))
        return content
