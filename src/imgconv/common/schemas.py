"""Pydantic schemas for converter configuration."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.extensions import canonical_ext


class ImageFormat(StrEnum):
    JPG = "jpg"
    PNG = "png"
    GIF = "gif"

    @classmethod
    def from_ext(cls, ext: str) -> "ImageFormat":
        """Map any spelling (``JPEG``, ``.jpg``, ``photo.Jpg``) to a member."""
        return cls(canonical_ext(ext))


class ConverterConfig(BaseModel):
    """Validated, immutable converter configuration.

    Build through ``imgconv.converter.validate`` so filesystem and format
    checks raise the imgconv error types.
    """

    root_directory: Path = Field(..., description="Directory to walk recursively")
    source_format: str = Field(..., description="Format of the files to convert (jpg, png, gif)")
    target_format: str = Field(..., description="Format to write, used literally as the new extension")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("source_format", "target_format")
    @classmethod
    def lower_format(cls, v: str) -> str:
        return v.lower().lstrip(".")

    @property
    def source_ext(self) -> str:
        """Canonical extension matched against input files."""
        return canonical_ext(self.source_format)
