"""Tests for S3 event parsing and key decoding."""

import pytest
from conftest import s3_event

from cv_extractor.core.exceptions import BadEventError
from cv_extractor.events import ObjectReference, decode_object_key, parse_trigger_event


class TestDecodeObjectKey:
    """Tests for decode_object_key."""

    def test_plus_and_percent_escapes(self) -> None:
        assert decode_object_key("jane%2Bsmith+resume.pdf") == "jane+smith resume.pdf"

    def test_plain_key_unchanged(self) -> None:
        assert decode_object_key("uploads/cv.pdf") == "uploads/cv.pdf"

    def test_unicode_escapes(self) -> None:
        assert decode_object_key("Jos%C3%A9+CV.pdf") == "José CV.pdf"

    def test_malformed_escape(self) -> None:
        with pytest.raises(BadEventError, match="undecodable object key"):
            decode_object_key("cv%E0.pdf")


class TestParseTriggerEvent:
    """Tests for parse_trigger_event."""

    def test_first_record(self) -> None:
        reference = parse_trigger_event(s3_event("jane%2Bsmith+resume.pdf"))

        assert reference == ObjectReference(bucket="cv-uploads", key="jane+smith resume.pdf")

    def test_extra_records_ignored(self) -> None:
        event = s3_event("first.pdf", records=2)
        event["Records"][1]["s3"]["object"]["key"] = "second.pdf"

        assert parse_trigger_event(event).key == "first.pdf"

    @pytest.mark.parametrize("event", [{}, {"Records": []}, {"Records": None}])
    def test_no_records(self, event: dict) -> None:
        with pytest.raises(BadEventError, match="No records found in S3 event"):
            parse_trigger_event(event)

    def test_missing_object_key(self) -> None:
        event = s3_event("cv.pdf")
        del event["Records"][0]["s3"]["object"]["key"]

        with pytest.raises(BadEventError, match="Malformed S3 event record"):
            parse_trigger_event(event)

    def test_empty_bucket_name(self) -> None:
        with pytest.raises(BadEventError, match="Malformed S3 event record"):
            parse_trigger_event(s3_event("cv.pdf", bucket=""))

    def test_malformed_key_in_event(self) -> None:
        with pytest.raises(BadEventError, match="undecodable object key"):
            parse_trigger_event(s3_event("r%C3sum%E9.pdf"))
