"""Configuration classes for extraction and the processing pipeline."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cv_extractor.core.exceptions import ConfigurationError

DEFAULT_MODEL_ID = "anthropic.claude-3-sonnet-20240229-v1:0"
DEFAULT_TOOL_NAME = "CVDetailsSchema"


class ExtractionConfig(BaseModel):
    """Configuration for a single model extraction request."""

    model_config = ConfigDict(protected_namespaces=())

    model_id: str = Field(
        default=DEFAULT_MODEL_ID,
        description="Bedrock foundation model identifier",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Sampling temperature (lower = more deterministic)",
    )
    max_tokens: int | None = Field(
        default=4096,
        ge=1,
        description="Maximum tokens for the model response",
    )

    # Tool settings
    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        min_length=1,
        description="Name of the tool the model fills with the extracted record",
    )
    tool_description: str = Field(
        default="Contains a schema for the details to be extracted from the cv",
        description="Description of the extraction tool shown to the model",
    )
    force_tool_choice: bool = Field(
        default=True,
        description="Require the model to answer through the extraction tool",
    )

    # Document settings
    document_name: str = Field(
        default="cv",
        description="Name attached to the document block in the request",
    )


class Settings(BaseSettings):
    """Process-wide configuration read from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
    )

    table_name: str | None = None
    bucket_name: str | None = None
    aws_region: str | None = None

    model_id: str = DEFAULT_MODEL_ID
    max_tokens: int | None = Field(default=4096, ge=1)
    temperature: float = Field(default=0.0, ge=0.0, le=1.0)

    # Upper bound for one invocation, matching the function timeout.
    invocation_timeout_seconds: float = Field(default=300.0, gt=0)
    connect_timeout_seconds: float = Field(default=10.0, gt=0)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def extraction_config(self) -> ExtractionConfig:
        """Build the ExtractionConfig for the configured model."""
        return ExtractionConfig(
            model_id=self.model_id,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

    def boto_config(self) -> Config:
        """Build the botocore client config bounded by the invocation budget."""
        return Config(
            region_name=self.aws_region,
            connect_timeout=self.connect_timeout_seconds,
            read_timeout=self.invocation_timeout_seconds,
            retries={"total_max_attempts": 1, "mode": "standard"},
        )


REQUIRED_SETTINGS = ("table_name", "bucket_name")


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment and check required values.

    Raises:
        ConfigurationError: If settings are invalid or a required value is missing.
    """
    try:
        settings = Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    missing = [name.upper() for name in REQUIRED_SETTINGS if not getattr(settings, name)]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
