"""Shared fixtures for cv-extractor tests."""

import copy
from typing import Any
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

SAMPLE_PAYLOAD: dict[str, Any] = {
    "fullName": "Jane Smith",
    "email": "jane.smith@email.com",
    "phoneNumber": "555-123-4567",
    "location": "Seattle, WA",
    "workExperience": [
        {
            "companyName": "Tech Solutions Inc.",
            "position": "Senior Software Engineer",
            "startDate": "2020-06",
            "isCurrentPosition": True,
            "responsibilities": [
                "Led development of cloud-native microservices",
                "Implemented CI/CD pipelines using GitHub Actions",
            ],
        },
        {
            "companyName": "Data Corp",
            "position": "Software Engineer",
            "startDate": "2016-07",
            "endDate": "2020-05",
            "responsibilities": [],
        },
    ],
    "education": [
        {
            "institution": "University of Washington",
            "degree": "Bachelor of Science",
            "fieldOfStudy": "Computer Science",
            "graduationDate": "2016-06",
        }
    ],
}

PDF_BYTES = b"%PDF-1.4 sample resume"


def converse_tool_use(payload: dict[str, Any], name: str = "CVDetailsSchema") -> dict[str, Any]:
    """Build a converse response carrying a tool-use block."""
    return {
        "output": {
            "message": {
                "role": "assistant",
                "content": [
                    {"text": "Here is the extracted data."},
                    {
                        "toolUse": {
                            "toolUseId": "tooluse_123",
                            "name": name,
                            "input": copy.deepcopy(payload),
                        }
                    },
                ],
            }
        },
        "stopReason": "tool_use",
        "usage": {"inputTokens": 1200, "outputTokens": 300, "totalTokens": 1500},
    }


def converse_text(text: str) -> dict[str, Any]:
    """Build a converse response with prose only."""
    return {
        "output": {"message": {"role": "assistant", "content": [{"text": text}]}},
        "stopReason": "end_turn",
        "usage": {"inputTokens": 1200, "outputTokens": 20, "totalTokens": 1220},
    }


def client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def s3_event(key: str, bucket: str = "cv-uploads", records: int = 1) -> dict[str, Any]:
    record = {
        "eventSource": "aws:s3",
        "eventName": "ObjectCreated:Put",
        "s3": {"bucket": {"name": bucket}, "object": {"key": key, "size": 1024}},
    }
    return {"Records": [copy.deepcopy(record) for _ in range(records)]}


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def s3_client() -> MagicMock:
    """Create a mock S3 client returning a PDF body."""
    client = MagicMock()
    body = MagicMock()
    body.read.return_value = PDF_BYTES
    client.get_object.return_value = {"Body": body, "ContentLength": len(PDF_BYTES)}
    return client


@pytest.fixture
def bedrock_client() -> MagicMock:
    """Create a mock bedrock-runtime client answering with the sample record."""
    client = MagicMock()
    client.converse.return_value = converse_tool_use(SAMPLE_PAYLOAD)
    return client


@pytest.fixture
def dynamodb_client() -> MagicMock:
    client = MagicMock()
    client.put_item.return_value = {}
    return client
