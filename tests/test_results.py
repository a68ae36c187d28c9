"""Tests for result types."""

import pytest
from conftest import SAMPLE_PAYLOAD
from pydantic import ValidationError

from cv_extractor.results.types import ExtractionResult, StoredAnalysis
from cv_extractor.schemas import CandidateRecord


class TestExtractionResult:
    """Tests for ExtractionResult class."""

    def test_metadata_defaults(self) -> None:
        result = ExtractionResult(data=CandidateRecord.model_validate(SAMPLE_PAYLOAD))

        assert result.data.full_name == "Jane Smith"
        assert result.model_used is None
        assert result.tokens_used is None
        assert result.raw_response is None

    def test_data_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ExtractionResult()


class TestStoredAnalysis:
    """Tests for StoredAnalysis class."""

    def test_to_item(self) -> None:
        analysis = StoredAnalysis(
            id="abc",
            file_name="cv.pdf",
            analysis_result='{"fullName": "Jane"}',
            timestamp="2024-05-01T12:00:00+00:00",
        )

        assert analysis.to_item() == {
            "id": {"S": "abc"},
            "fileName": {"S": "cv.pdf"},
            "analysisResult": {"S": '{"fullName": "Jane"}'},
            "timestamp": {"S": "2024-05-01T12:00:00+00:00"},
        }

    def test_is_immutable(self) -> None:
        analysis = StoredAnalysis(
            id="abc", file_name="cv.pdf", analysis_result="{}", timestamp="2024-05-01"
        )

        with pytest.raises(ValidationError):
            analysis.id = "other"
