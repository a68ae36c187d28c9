"""Typed view of a Bedrock Converse response.

The model answers either with plain text, with a tool-use block carrying
the structured record, or not at all. ``parse_converse_response`` maps the
raw response onto one of those variants.
"""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class TextResponse(BaseModel):
    """The model replied with prose instead of calling the tool."""

    kind: Literal["text"] = "text"
    text: str = ""
    stop_reason: str | None = None


class ToolUseResponse(BaseModel):
    """The model called a tool with a structured input."""

    kind: Literal["tool_use"] = "tool_use"
    tool_use_id: str | None = None
    name: str
    input: dict[str, Any]
    stop_reason: str | None = None
    input_tokens: int | None = None
    output_tokens: int | None = None
    total_tokens: int | None = None

    @property
    def raw_input(self) -> str:
        return json.dumps(self.input)


class ErrorResponse(BaseModel):
    """The response had no usable content."""

    kind: Literal["error"] = "error"
    message: str
    stop_reason: str | None = None


ModelResponse = Annotated[
    Union[TextResponse, ToolUseResponse, ErrorResponse],
    Field(discriminator="kind"),
]


def parse_converse_response(
    response: dict[str, Any], tool_name: str | None = None
) -> ModelResponse:
    """Classify a raw ``converse`` response.

    Args:
        response: The dict returned by ``bedrock-runtime.converse``.
        tool_name: When given, only a tool-use block for this tool counts.

    Returns:
        The matching response variant.
    """
    stop_reason = response.get("stopReason")
    content = ((response.get("output") or {}).get("message") or {}).get("content")
    if not content or not isinstance(content, list):
        return ErrorResponse(
            message="Bedrock response did not contain expected content blocks",
            stop_reason=stop_reason,
        )

    blocks = [block for block in content if isinstance(block, dict)]
    for block in blocks:
        tool_use = block.get("toolUse")
        if not isinstance(tool_use, dict) or not isinstance(tool_use.get("input"), dict):
            continue
        if tool_name is not None and tool_use.get("name") != tool_name:
            continue
        usage = response.get("usage") or {}
        return ToolUseResponse(
            tool_use_id=tool_use.get("toolUseId"),
            name=tool_use.get("name", ""),
            input=tool_use["input"],
            stop_reason=stop_reason,
            input_tokens=usage.get("inputTokens"),
            output_tokens=usage.get("outputTokens"),
            total_tokens=usage.get("totalTokens"),
        )

    text = "\n".join(
        block["text"] for block in blocks if isinstance(block.get("text"), str)
    )
    return TextResponse(text=text, stop_reason=stop_reason)
