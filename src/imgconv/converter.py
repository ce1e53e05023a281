"""Recursive directory image converter.

Validates configuration up front, then walks the tree and transcodes every
file whose extension matches the source format into a sibling file carrying
the target extension. The first error aborts the whole walk.
"""

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from .algo.image_convert import decode, encode, get_pil_format
from .common.errors import (
    DirectoryNotFoundError,
    FileAccessError,
    NotADirectoryConfigError,
    SameFormatError,
    UnsupportedFormatError,
)
from .common.schemas import ConverterConfig, ImageFormat
from .utils.extensions import canonical_ext, file_ext, is_supported, output_path_for


def validate(
    directory: str | os.PathLike[str],
    source_format: str,
    target_format: str,
) -> ConverterConfig:
    """
    Check converter arguments and build the configuration.

    Only the source format is checked against the supported set; the target
    is checked when the first image is encoded.

    Raises:
        DirectoryNotFoundError: If directory does not exist
        NotADirectoryConfigError: If directory is not a directory
        FileAccessError: If directory cannot be stat'ed for another reason
        UnsupportedFormatError: If source_format is not jpg, jpeg, png or gif
        SameFormatError: If both formats share a canonical extension
    """
    root = Path(os.path.normpath(os.fspath(directory)))
    try:
        info = root.stat()
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise DirectoryNotFoundError(
            "directory does not exist", path=root, operation="stat", cause=exc
        ) from exc
    except OSError as exc:
        raise FileAccessError(
            "failed to get information", path=root, operation="stat", cause=exc
        ) from exc

    if not stat.S_ISDIR(info.st_mode):
        raise NotADirectoryConfigError("must be a directory", path=root, operation="stat")

    if not is_supported(source_format):
        raise UnsupportedFormatError(source_format, operation="validate")

    if canonical_ext(source_format) == canonical_ext(target_format):
        raise SameFormatError(source_format, target_format)

    return ConverterConfig(
        root_directory=root,
        source_format=source_format,
        target_format=target_format,
    )


def iter_entries(root: Path) -> Iterator[tuple[Path, bool]]:
    """Yield ``(path, is_dir)`` depth-first, pre-order, starting at root.

    Entries within a directory come in name order. Symlinked directories are
    reported as files and not followed.
    """
    yield root, True

    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise FileAccessError(
            "failed to list directory", path=root, operation="list", cause=exc
        ) from exc

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from iter_entries(path)
        else:
            yield path, False


class Converter:
    """Converts every ``source_format`` image under a directory tree."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        source_format: str,
        target_format: str,
    ):
        self.config: ConverterConfig = validate(directory, source_format, target_format)

    @property
    def directory(self) -> Path:
        return self.config.root_directory

    @property
    def source_format(self) -> ImageFormat:
        return ImageFormat.from_ext(self.config.source_format)

    @property
    def target_format(self) -> str:
        return self.config.target_format

    def matches(self, path: Path) -> bool:
        """Whether a file's extension selects it for conversion."""
        return canonical_ext(file_ext(path)) == self.config.source_ext

    def walk(self) -> list[Path]:
        """
        Convert all matching files under the root directory.

        Returns:
            Output paths written, in processing order

        Raises:
            ImgConvError: The first failure; files after it are not processed
        """
        logger.info(
            f"converting {self.config.source_format} -> {self.config.target_format} "
            + f"under {self.directory}"
        )
        written: list[Path] = []

        for path, is_dir in iter_entries(self.directory):
            if is_dir:
                continue
            if not self.matches(path):
                logger.debug(f"skip {path}")
                continue
            written.append(self.convert_file(path))

        logger.info(f"converted {len(written)} file(s) under {self.directory}")
        return written

    def convert_file(self, path: Path) -> Path:
        """Transcode one file into its sibling with the target extension.

        The output is created only once the input has decoded and the target
        encoder is known.
        """
        try:
            reader = open(path, "rb")
        except OSError as exc:
            raise FileAccessError("failed to open", path=path, operation="open", cause=exc) from exc

        with reader:
            img, detected = decode(reader)
            with img:
                _ = get_pil_format(self.config.target_format, path=path)
                dest = output_path_for(path, self.config.target_format)

                try:
                    writer = open(dest, "wb")
                except OSError as exc:
                    raise FileAccessError(
                        "failed to write", path=dest, operation="create", cause=exc
                    ) from exc

                with writer:
                    encode(img, self.config.target_format, writer)

        logger.debug(f"{path} ({detected}) -> {dest}")
        return dest
