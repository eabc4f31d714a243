"""Configuration management for tagcheck using Pydantic models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DESCRIPTION_TAG,
    DEFAULT_LOCALE,
    DEFAULT_OMIT_TAG,
    DEFAULT_RULE_TAG,
    RESERVED_TAG_CHARACTERS,
)


class Locale(str, Enum):
    """Built-in message table languages."""
    ZH = "zh"
    EN = "en"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidatorConfig(BaseModel):
    """Tag keys and message settings of a validator.

    Read-only once built; derive a changed copy with ``model_copy(update=...)``.
    """
    rule_tag: str = Field(alias="ruleTag", default=DEFAULT_RULE_TAG)
    description_tag: str = Field(alias="descriptionTag", default=DEFAULT_DESCRIPTION_TAG)
    omit_tag: str = Field(alias="omitTag", default=DEFAULT_OMIT_TAG)
    locale: Locale = Locale(DEFAULT_LOCALE)
    log_level: LogLevel = Field(alias="logLevel", default=LogLevel.WARN)

    @field_validator("rule_tag", "description_tag", "omit_tag")
    @classmethod
    def validate_tag_key(cls, v):
        """Tag keys must be non-empty and free of grammar characters."""
        if not v or not v.strip():
            raise ValueError("tag keys must be non-empty")
        for character in RESERVED_TAG_CHARACTERS:
            if character in v:
                raise ValueError(f"tag key {v!r} must not contain {character!r}")
        return v

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest ``.tagcheck.json`` in ``start_dir`` (default: cwd) or one of its parents."""
    directory = Path(start_dir or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def create_default_config() -> ValidatorConfig:
    """Settings used when no ``.tagcheck.json`` is found."""
    return ValidatorConfig()


def load_config(config_path: str | Path | None = None) -> ValidatorConfig:
    """Read validator settings for the CLI.

    An explicit ``config_path`` that does not exist, like a search that
    finds nothing, yields the defaults.

    Raises:
        ValueError: If the file is not JSON or holds invalid settings
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None or not path.is_file():
        return create_default_config()

    try:
        return ValidatorConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError(f"Invalid tagcheck settings in {path}: {e}") from e
