"""Example: extract a local CV and run the pipeline on a synthetic S3 event."""

import json
import sys
from pathlib import Path

import boto3
from dotenv import load_dotenv

from cv_extractor import (
    CandidateExtractor,
    ExtractionConfig,
    ExtractionError,
    get_settings,
    handler,
)

# Load environment variables (AWS_REGION, TABLE_NAME, BUCKET_NAME, ...)
load_dotenv()


def example_local_extraction(pdf_path: Path) -> None:
    """Extract a CV from a local file without touching S3 or DynamoDB."""
    print("=" * 60)
    print("Example 1: Local CV Extraction")
    print("=" * 60)

    extractor = CandidateExtractor(
        client=boto3.client("bedrock-runtime"),
        config=ExtractionConfig(max_tokens=4096),
    )

    try:
        result = extractor.extract(pdf_path.read_bytes())
    except ExtractionError as e:
        print(f"Extraction failed: {e}")
        return

    record = result.data
    print(f"Name: {record.full_name}")
    print(f"Email: {record.email}")
    for job in record.work_experience:
        end = job.end_date or ("Present" if job.is_current_position else "?")
        period = f"{job.start_date} - {end}"
        print(f"  {job.position} at {job.company_name} ({period})")
    for school in record.education:
        print(f"  {school.degree} in {school.field_of_study}, {school.institution}")
    print(f"Tokens used: {result.tokens_used}")


def example_pipeline(key: str) -> None:
    """Run the full handler against an object already uploaded to BUCKET_NAME."""
    print("=" * 60)
    print("Example 2: Full Pipeline")
    print("=" * 60)

    settings = get_settings()
    event = {
        "Records": [{"s3": {"bucket": {"name": settings.bucket_name}, "object": {"key": key}}}]
    }
    response = handler(event)
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python examples/basic_usage.py <resume.pdf> [s3-object-key]")
        sys.exit(1)

    example_local_extraction(Path(sys.argv[1]))
    if len(sys.argv) > 2:
        example_pipeline(sys.argv[2])
