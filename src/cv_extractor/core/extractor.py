"""Candidate extraction through Bedrock tool use."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from cv_extractor.core.config import ExtractionConfig
from cv_extractor.core.exceptions import (
    ExtractionError,
    ExtractionValidationError,
    LLMError,
)
from cv_extractor.core.responses import (
    ErrorResponse,
    TextResponse,
    ToolUseResponse,
    parse_converse_response,
)
from cv_extractor.prompts.builder import PromptBuilder
from cv_extractor.results.types import ExtractionResult
from cv_extractor.schemas.candidate import CANDIDATE_RECORD_SCHEMA, CandidateRecord

logger = logging.getLogger(__name__)


class CandidateExtractor:
    """Extracts a CandidateRecord from a PDF document with a hosted model.

    The document, the instruction prompt and the record schema go out in a
    single Converse request. The schema is bound to a named tool so the
    model answers with a structured tool-use block instead of prose.

    Example:
        ```python
        from pathlib import Path

        import boto3
        from cv_extractor import CandidateExtractor

        extractor = CandidateExtractor(client=boto3.client("bedrock-runtime"))
        result = extractor.extract(Path("resume.pdf").read_bytes())
        print(result.data.full_name)
        for job in result.data.work_experience:
            print(f"{job.position} at {job.company_name}")
        ```
    """

    def __init__(
        self,
        client: Any,
        config: ExtractionConfig | None = None,
        prompt_builder: PromptBuilder | None = None,
        schema: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            client: A boto3 ``bedrock-runtime`` client.
            config: Extraction configuration.
            prompt_builder: Builder for the instruction prompt.
            schema: JSON Schema bound to the extraction tool.
        """
        self._client = client
        self.config = config or ExtractionConfig()
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._schema = schema or CANDIDATE_RECORD_SCHEMA

    @property
    def model(self) -> str:
        return self.config.model_id

    def extract(self, document: bytes) -> ExtractionResult:
        """Extract structured candidate data from a PDF document.

        Args:
            document: The raw PDF bytes.

        Returns:
            ExtractionResult containing the validated record and model metadata.

        Raises:
            LLMError: If the model call fails.
            ExtractionValidationError: If the tool input does not match the schema.
            ExtractionError: If the response carries no tool-use block.
        """
        request = self.build_request(document)
        logger.debug(
            "Requesting extraction (model=%s, document=%d bytes)", self.model, len(document)
        )

        try:
            raw = self._client.converse(**request)
        except (ClientError, BotoCoreError) as e:
            logger.error("Error during Bedrock extraction: %s", e)
            raise LLMError(f"Failed to extract CV data: {e}", last_error=e) from e

        response = parse_converse_response(raw, tool_name=self.config.tool_name)
        tool_use = self._require_tool_use(response)

        try:
            record = CandidateRecord.model_validate(tool_use.input)
        except ValidationError as e:
            logger.error("Tool input failed validation: %s", e)
            raise ExtractionValidationError(
                f"Failed to extract CV data: tool input does not match the schema: {e}",
                validation_errors=e.errors(),
                raw_response=tool_use.raw_input,
            ) from e

        return ExtractionResult(
            data=record,
            model_used=self.model,
            tool_use_id=tool_use.tool_use_id,
            stop_reason=tool_use.stop_reason,
            input_tokens=tool_use.input_tokens,
            output_tokens=tool_use.output_tokens,
            tokens_used=tool_use.total_tokens,
            raw_response=tool_use.raw_input,
        )

    def extract_record(self, document: bytes) -> CandidateRecord:
        """Extract and return only the CandidateRecord."""
        return self.extract(document).data

    def build_request(self, document: bytes) -> dict[str, Any]:
        """Build the keyword arguments for ``converse``."""
        config = self.config
        tool_config: dict[str, Any] = {
            "tools": [
                {
                    "toolSpec": {
                        "name": config.tool_name,
                        "description": config.tool_description,
                        "inputSchema": {"json": self._schema},
                    }
                }
            ]
        }
        if config.force_tool_choice:
            tool_config["toolChoice"] = {"tool": {"name": config.tool_name}}

        inference_config: dict[str, Any] = {"temperature": config.temperature}
        if config.max_tokens:
            inference_config["maxTokens"] = config.max_tokens

        return {
            "modelId": config.model_id,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {
                            "document": {
                                "name": config.document_name,
                                "format": "pdf",
                                "source": {"bytes": document},
                            }
                        },
                        {"text": self._prompt_builder.build_extraction_prompt(config.tool_name)},
                    ],
                }
            ],
            "toolConfig": tool_config,
            "inferenceConfig": inference_config,
        }

    def _require_tool_use(
        self, response: TextResponse | ToolUseResponse | ErrorResponse
    ) -> ToolUseResponse:
        if isinstance(response, ToolUseResponse):
            return response

        if isinstance(response, ErrorResponse):
            message = response.message
            raw_response = None
        else:
            message = "Could not find tool use content in Bedrock response"
            raw_response = response.text or None

        logger.error("%s (stop_reason=%s)", message, response.stop_reason)
        raise ExtractionError(f"Failed to extract CV data: {message}", raw_response=raw_response)
