"""Extraction schema for CV/resume documents.

Provides the JSON Schema sent to the model and the Pydantic models used
to validate the structured data it returns.
"""

from cv_extractor.schemas.candidate import (
    CANDIDATE_RECORD_SCHEMA,
    NOT_FOUND,
    CandidateRecord,
    EducationEntry,
    WorkExperienceEntry,
)

__all__ = [
    "CANDIDATE_RECORD_SCHEMA",
    "NOT_FOUND",
    "CandidateRecord",
    "EducationEntry",
    "WorkExperienceEntry",
]
