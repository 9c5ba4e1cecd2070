"""Configuration module for attachkit.

This module defines the codec configuration model and its YAML loading logic.
"""

import sys
import typing as t

import yaml
from pydantic import BaseModel, ConfigDict, Field


class StrictBaseModel(BaseModel):
    """Base model with immutable (frozen) configuration."""

    model_config = ConfigDict(frozen=True)


class CodecConfig(StrictBaseModel):
    """Attachment codec configuration.

    Attributes:
        require_absolute_thumbnail_url: Reject decoded thumbnail URLs that lack
            a scheme or host
        json_indent: Indentation used when encoding attachments to JSON text
    """

    require_absolute_thumbnail_url: bool = Field(
        default=False, alias="REQUIRE_ABSOLUTE_THUMBNAIL_URL"
    )
    json_indent: t.Optional[int] = Field(default=None, alias="JSON_INDENT", ge=0)

    @classmethod
    def parse_yaml(cls, path: str) -> "CodecConfig":
        """Parse configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Validated CodecConfig instance

        Raises:
            SystemExit: If config file is not found
        """
        try:
            with open(path, "r") as f:
                return cls.model_validate(yaml.safe_load(f) or {})
        except FileNotFoundError:
            print(f"Config file not found: {path}", file=sys.stderr)
            raise SystemExit(1)
