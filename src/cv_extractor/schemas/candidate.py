"""Candidate record extraction schema.

The schema exists in two forms: ``CANDIDATE_RECORD_SCHEMA`` is the JSON
Schema handed to the model as the tool input contract, and the Pydantic
models below are used to validate whatever the model sends back. Both use
the camelCase wire names.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

NOT_FOUND = "Not found in document"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


RequiredText = Annotated[StrictStr, AfterValidator(_require_text)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class WorkExperienceEntry(_WireModel):
    """Work experience entry in a CV."""

    company_name: RequiredText = Field(
        description="Name of the company where the candidate worked"
    )
    position: RequiredText = Field(description="Job title or position held by the candidate")
    start_date: RequiredText = Field(description="Start date of employment")
    end_date: StrictStr | None = Field(default=None, description="End date of employment")
    is_current_position: StrictBool | None = Field(
        default=None, description="Indicates if this is the candidate's current position"
    )
    responsibilities: list[StrictStr] = Field(description="List of job responsibilities")


class EducationEntry(_WireModel):
    """Education entry in a CV."""

    institution: RequiredText = Field(description="Name of the educational institution attended")
    degree: RequiredText = Field(description="Type of degree obtained")
    field_of_study: RequiredText = Field(description="Major or field of study")
    graduation_date: StrictStr | None = Field(default=None, description="Date of graduation")


class CandidateRecord(_WireModel):
    """Structured data extracted from one CV/resume document.

    Required fields are never empty: when the document lacks the
    information the model fills in ``NOT_FOUND``. Optional fields are
    omitted when unavailable.

    Example:
        ```python
        record = CandidateRecord.model_validate(tool_input)
        print(record.full_name)
        for job in record.work_experience:
            print(f"{job.position} at {job.company_name}")
        ```
    """

    full_name: RequiredText = Field(description="The full name of the candidate")
    email: RequiredText = Field(description="The email address of the candidate")
    phone_number: StrictStr | None = Field(
        default=None, description="The contact phone number of the candidate"
    )
    location: StrictStr | None = Field(
        default=None, description="The geographic location of the candidate"
    )
    professional_summary: StrictStr | None = Field(
        default=None,
        description="A summary of the candidate's professional background and expertise",
    )
    # Empty only when the document has no work history at all.
    work_experience: list[WorkExperienceEntry] = Field(description="The candidate's work history")
    education: list[EducationEntry] = Field(
        min_length=1, description="The candidate's educational background"
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the record with wire names, emitting only the fields that were provided."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        """Serialize the record to JSON text with wire names."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


CANDIDATE_RECORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "fullName": {
            "type": "string",
            "description": "The full name of the candidate",
        },
        "email": {
            "type": "string",
            "format": "email",
            "description": "The email address of the candidate",
        },
        "phoneNumber": {
            "type": "string",
            "description": "The contact phone number of the candidate",
        },
        "location": {
            "type": "string",
            "description": "The geographic location of the candidate",
        },
        "professionalSummary": {
            "type": "string",
            "description": "A summary of the candidate's professional background and expertise",
        },
        "workExperience": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "companyName": {
                        "type": "string",
                        "description": "Name of the company where the candidate worked",
                    },
                    "position": {
                        "type": "string",
                        "description": "Job title or position held by the candidate",
                    },
                    "startDate": {
                        "type": "string",
                        "description": "Start date of employment",
                    },
                    "endDate": {
                        "type": "string",
                        "description": "End date of employment",
                    },
                    "isCurrentPosition": {
                        "type": "boolean",
                        "description": "Indicates if this is the candidate's current position",
                    },
                    "responsibilities": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "List of job responsibilities",
                    },
                },
                "required": ["companyName", "position", "startDate", "responsibilities"],
            },
            "description": "The candidate's work history",
        },
        "education": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "institution": {
                        "type": "string",
                        "description": "Name of the educational institution attended",
                    },
                    "degree": {
                        "type": "string",
                        "description": "Type of degree obtained",
                    },
                    "fieldOfStudy": {
                        "type": "string",
                        "description": "Major or field of study",
                    },
                    "graduationDate": {
                        "type": "string",
                        "description": "Date of graduation",
                    },
                },
                "required": ["institution", "degree", "fieldOfStudy"],
            },
            "description": "The candidate's educational background",
        },
    },
    "required": ["fullName", "email", "workExperience", "education"],
    "additionalProperties": False,
}
