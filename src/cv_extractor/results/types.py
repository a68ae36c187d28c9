"""Result types for extraction and storage outputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cv_extractor.schemas.candidate import CandidateRecord


class ExtractionResult(BaseModel):
    """Result of a document extraction operation."""

    data: CandidateRecord = Field(description="The extracted candidate record")

    # Metadata
    model_used: str | None = Field(
        default=None,
        description="Model used for extraction",
    )
    tool_use_id: str | None = Field(
        default=None,
        description="Identifier of the tool-use block the record came from",
    )
    stop_reason: str | None = Field(
        default=None,
        description="Why the model stopped generating",
    )
    input_tokens: int | None = Field(default=None, description="Prompt tokens")
    output_tokens: int | None = Field(default=None, description="Completion tokens")
    tokens_used: int | None = Field(
        default=None,
        description="Total tokens used for extraction",
    )

    raw_response: str | None = Field(
        default=None,
        description="Raw tool input as JSON, for debugging",
    )


class StoredAnalysis(BaseModel):
    """A persisted extraction with its provenance."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(description="Generated unique identifier")
    file_name: str = Field(description="Decoded object key of the source document")
    analysis_result: str = Field(description="The candidate record serialized as JSON")
    timestamp: str = Field(description="ISO-8601 time the analysis was stored")

    def to_item(self) -> dict[str, dict[str, Any]]:
        """Render the DynamoDB attribute map for ``put_item``."""
        return {name: {"S": value} for name, value in self.model_dump(by_alias=True).items()}
