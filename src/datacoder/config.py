"""Configuration model for datacoder.

This module provides a Pydantic model holding the options shared by the
datafile facades and the built-in codecs.
"""

from __future__ import annotations

import codecs
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class DataCoderConfig(BaseModel):
    """Options for reading, writing and serialising data files.

    Attributes:
        encoding: Text encoding used to read and write files.
        json_indent: Indentation for JSON output, None for one line.
        json_ensure_ascii: Escape non-ASCII characters in JSON output.
        json_sort_keys: Sort mapping keys in JSON output.
        yaml_indent: Indentation for YAML output.
        yaml_explicit_start: Start YAML output with a '---' marker.
        case_insensitive_extensions: Match extensions ignoring case.

    Example:
        >>> config = DataCoderConfig(json_indent=4)
        >>> config.encoding
        'utf-8'
    """

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read and write files",
    )
    json_indent: Optional[int] = Field(
        default=2,
        ge=0,
        description="Indentation for JSON output, None for one line",
    )
    json_ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON output",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort mapping keys in JSON output",
    )
    yaml_indent: int = Field(
        default=2,
        ge=2,
        le=9,
        description="Indentation for YAML output (2-9)",
    )
    yaml_explicit_start: bool = Field(
        default=False,
        description="Start YAML output with a document marker",
    )
    case_insensitive_extensions: bool = Field(
        default=False,
        description="Match file extensions to formats ignoring case",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DataCoderConfig":
        """Create a config from a dictionary.

        Unset keys keep their defaults; unknown keys are rejected.

        Args:
            data: Dictionary of option values.

        Returns:
            Validated DataCoderConfig instance.

        Raises:
            pydantic.ValidationError: If validation fails.
        """
        return cls(**dict(data))
