"""imgconv - Recursively convert images in a directory tree between JPEG, PNG and GIF."""

from loguru import logger

from .algo.image_convert import decode, encode, transcode
from .common.errors import (
    ConfigurationError,
    DecodeError,
    DirectoryNotFoundError,
    EncodeError,
    FileAccessError,
    ImgConvError,
    NotADirectoryConfigError,
    SameFormatError,
    UnsupportedFormatError,
)
from .common.schemas import ConverterConfig, ImageFormat
from .converter import Converter, iter_entries, validate
from .utils.extensions import SUPPORTED_FORMATS, canonical_ext, output_path_for

# Library stays silent unless the application opts in with logger.enable("imgconv")
logger.disable("imgconv")

__version__ = "0.1.0"

__all__ = [
    "Converter",
    "ConverterConfig",
    "ImageFormat",
    "SUPPORTED_FORMATS",
    "canonical_ext",
    "output_path_for",
    "iter_entries",
    "validate",
    "decode",
    "encode",
    "transcode",
    "ImgConvError",
    "ConfigurationError",
    "DirectoryNotFoundError",
    "NotADirectoryConfigError",
    "UnsupportedFormatError",
    "SameFormatError",
    "FileAccessError",
    "DecodeError",
    "EncodeError",
    "__version__",
]
