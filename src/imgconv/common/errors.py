"""Error taxonomy for directory image conversion.

Every failure in the pipeline is fatal to the run. Errors carry the path and
operation that failed plus the underlying exception, so callers can inspect
the root cause without parsing messages.
"""

from pathlib import Path
from typing_extensions import override


class ImgConvError(Exception):
    """Base class for all imgconv errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        operation: str | None = None,
        cause: BaseException | None = None,
    ):
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None
        self.operation: str | None = operation
        self.cause: BaseException | None = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @override
    def __str__(self):
        text = self.message
        if self.path is not None:
            where = f"{self.operation} {self.path}" if self.operation else str(self.path)
            text += f" ({where})"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


# ─────────────────────────────────────────────────────────────
# Configuration errors (raised at construction)
# ─────────────────────────────────────────────────────────────


class ConfigurationError(ImgConvError):
    """Converter configuration is invalid; no processing happened."""


class DirectoryNotFoundError(ConfigurationError):
    pass


class NotADirectoryConfigError(ConfigurationError):
    pass


class UnsupportedFormatError(ConfigurationError):
    """Format is not supported.

    Raised for the source format at construction and for the target format
    when the first image is encoded.
    """

    def __init__(
        self,
        format: str,
        *,
        path: str | Path | None = None,
        operation: str | None = None,
    ):
        self.format: str = format
        super().__init__(f"unsupported format {format!r}", path=path, operation=operation)


class SameFormatError(ConfigurationError):
    def __init__(self, source_format: str, target_format: str):
        self.source_format: str = source_format
        self.target_format: str = target_format
        super().__init__(f"{source_format!r} should be different from {target_format!r}")


# ─────────────────────────────────────────────────────────────
# Processing errors (raised while walking)
# ─────────────────────────────────────────────────────────────


class FileAccessError(ImgConvError):
    """Failed to stat, open, create or list a file."""


class DecodeError(ImgConvError):
    """Input bytes are not a recognized image."""


class EncodeError(ImgConvError):
    """Pillow failed to encode or write the output image."""
