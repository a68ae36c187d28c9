"""Tests for configuration classes."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cv_extractor.core.config import (
    DEFAULT_MODEL_ID,
    ExtractionConfig,
    Settings,
    load_settings,
)
from cv_extractor.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the caller's environment and any .env file."""
    for name in (
        "TABLE_NAME",
        "BUCKET_NAME",
        "AWS_REGION",
        "MODEL_ID",
        "MAX_TOKENS",
        "TEMPERATURE",
        "INVOCATION_TIMEOUT_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestExtractionConfig:
    """Tests for ExtractionConfig class."""

    def test_default_values(self) -> None:
        config = ExtractionConfig()

        assert config.model_id == DEFAULT_MODEL_ID
        assert config.temperature == 0.0
        assert config.max_tokens == 4096
        assert config.tool_name == "CVDetailsSchema"
        assert config.force_tool_choice is True
        assert config.document_name == "cv"

    def test_temperature_validation(self) -> None:
        ExtractionConfig(temperature=0.0)
        ExtractionConfig(temperature=1.0)

        with pytest.raises(ValidationError):
            ExtractionConfig(temperature=1.5)

        with pytest.raises(ValidationError):
            ExtractionConfig(temperature=-0.1)

    def test_max_tokens_validation(self) -> None:
        ExtractionConfig(max_tokens=None)

        with pytest.raises(ValidationError):
            ExtractionConfig(max_tokens=0)

    def test_tool_name_required(self) -> None:
        with pytest.raises(ValidationError):
            ExtractionConfig(tool_name="")


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "cv-analyses")
        monkeypatch.setenv("BUCKET_NAME", "cv-uploads")
        monkeypatch.setenv("MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.table_name == "cv-analyses"
        assert settings.bucket_name == "cv-uploads"
        assert settings.log_level == "DEBUG"
        assert settings.extraction_config().model_id == "anthropic.claude-3-haiku-20240307-v1:0"

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("TABLE_NAME=from-file\nBUCKET_NAME=bucket-file\n")

        settings = load_settings()

        assert settings.table_name == "from-file"
        assert settings.bucket_name == "bucket-file"

    def test_missing_required_values(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings()

        assert "TABLE_NAME" in str(excinfo.value)
        assert "BUCKET_NAME" in str(excinfo.value)

    def test_missing_table_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUCKET_NAME", "cv-uploads")

        with pytest.raises(ConfigurationError, match="TABLE_NAME") as excinfo:
            load_settings()

        assert "BUCKET_NAME" not in str(excinfo.value)

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "cv-analyses")
        monkeypatch.setenv("BUCKET_NAME", "cv-uploads")
        monkeypatch.setenv("INVOCATION_TIMEOUT_SECONDS", "-5")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_settings()

    def test_boto_config_uses_timeout_budget(self) -> None:
        settings = Settings(
            table_name="t", bucket_name="b", aws_region="eu-west-1", invocation_timeout_seconds=120
        )
        config = settings.boto_config()

        assert config.read_timeout == 120
        assert config.region_name == "eu-west-1"
        assert config.retries == {"total_max_attempts": 1, "mode": "standard"}
