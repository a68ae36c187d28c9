"""Instruction prompt for CV extraction."""

import json
from typing import Any

from pydantic import BaseModel, Field

from cv_extractor.schemas.candidate import NOT_FOUND


class PromptTemplate(BaseModel):
    """Natural-language instruction set guiding an extraction."""

    title: str = Field(description="Heading of the prompt")
    introduction: str = Field(description="What the model is given and what is asked of it")
    instructions: list[str] = Field(description="Numbered steps; may reference {tool_name}")
    field_guidelines: list[str] = Field(
        default_factory=list, description="Per-field formatting guidance"
    )
    edge_cases: list[str] = Field(
        default_factory=list, description="Policy for ambiguous or missing information"
    )
    example_output: dict[str, Any] | None = Field(
        default=None, description="Abbreviated example of a well-formed extraction"
    )
    closing: str | None = Field(default=None, description="Final reminder to the model")


CV_EXTRACTION_TEMPLATE = PromptTemplate(
    title="CV Data Extraction Task",
    introduction=(
        "I'm providing a CV/resume document, and I need you to carefully extract "
        "structured information according to our schema."
    ),
    instructions=[
        "Thoroughly analyze the entire CV/resume document",
        "Extract ALL relevant information that fits our schema",
        "Structure the data exactly according to our provided schema",
        "Use the {tool_name} tool to submit your extracted data",
    ],
    field_guidelines=[
        "Professional Summary: Create a concise 2-3 sentence summary if not explicitly provided",
        "Work Experience:\n"
        "  * Extract detailed responsibilities and achievements from bullet points\n"
        "  * Format dates consistently (YYYY-MM format if possible)\n"
        "  * Mark current position appropriately\n"
        '  * If resume uses phrases like "Present" or "Current", set isCurrentPosition to true',
        "Education: Format degree information consistently "
        '(e.g., "Bachelor of Science", "Master of Arts")\n'
        '  * Convert degree abbreviations to full names (e.g., "BS" to "Bachelor of Science")',
    ],
    edge_cases=[
        "If information is ambiguous, use your best judgment and prioritize accuracy",
        "If required fields are missing (fullName, email, workExperience, education), "
        f'provide placeholder text indicating "{NOT_FOUND}"',
        "For missing optional fields, simply omit them",
        "If dates are unclear, use approximate dates and note uncertainty",
    ],
    example_output={
        "fullName": "Jane Smith",
        "email": "jane.smith@email.com",
        "phoneNumber": "555-123-4567",
        "location": "Seattle, WA",
        "professionalSummary": (
            "Senior software engineer with 8 years of experience in cloud architecture "
            "and distributed systems. Specialized in AWS infrastructure and microservices design."
        ),
        "workExperience": [
            {
                "companyName": "Tech Solutions Inc.",
                "position": "Senior Software Engineer",
                "startDate": "2020-06",
                "isCurrentPosition": True,
                "responsibilities": [
                    "Led development of cloud-native microservices using AWS Lambda "
                    "and API Gateway",
                    "Implemented CI/CD pipelines using GitHub Actions",
                ],
            }
        ],
        "education": [
            {
                "institution": "University of Washington",
                "degree": "Bachelor of Science",
                "fieldOfStudy": "Computer Science",
                "graduationDate": "2016-06",
            }
        ],
    },
    closing=(
        "Please focus on extracting ALL relevant information while maintaining high accuracy. "
        "The extracted data will be used for candidate evaluation, so completeness and "
        "correctness are essential."
    ),
)


class PromptBuilder:
    """Renders a PromptTemplate into the text block sent alongside the document."""

    def __init__(self, template: PromptTemplate | None = None) -> None:
        """Initialize the prompt builder.

        Args:
            template: Template to render. Defaults to CV_EXTRACTION_TEMPLATE.
        """
        self.template = template or CV_EXTRACTION_TEMPLATE

    def build_extraction_prompt(self, tool_name: str) -> str:
        """Build the instruction prompt.

        Args:
            tool_name: Name of the tool the model must call with its answer

        Returns:
            The formatted extraction prompt
        """
        template = self.template
        parts: list[str] = [f"# {template.title}", template.introduction]

        steps = "\n".join(
            f"{i}. {step.format(tool_name=tool_name)}"
            for i, step in enumerate(template.instructions, 1)
        )
        parts.append(f"## Instructions:\n{steps}")

        if template.field_guidelines:
            parts.append(
                "## Guidelines for Specific Fields:\n" + self._bullets(template.field_guidelines)
            )

        if template.edge_cases:
            parts.append("## Handling Edge Cases:\n" + self._bullets(template.edge_cases))

        if template.example_output is not None:
            parts.append(
                "## Example Output Structure:\n"
                "Here's how a properly extracted CV might look (abbreviated example):\n\n"
                f"```json\n{json.dumps(template.example_output, indent=2)}\n```"
            )

        if template.closing:
            parts.append(template.closing)

        return "\n\n".join(parts)

    @staticmethod
    def _bullets(items: list[str]) -> str:
        return "\n".join(f"- {item}" for item in items)
