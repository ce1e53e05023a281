"""Common module - errors and configuration schemas."""

from .errors import ConfigurationError, ImgConvError
from .schemas import ConverterConfig, ImageFormat

__all__ = [
    "ImgConvError",
    "ConfigurationError",
    "ConverterConfig",
    "ImageFormat",
]
