"""Pure image transcoding logic over binary streams."""

from pathlib import Path
from typing import BinaryIO

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import DecodeError, EncodeError, UnsupportedFormatError

_ENCODERS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
}


def get_pil_format(format_str: str, path: str | Path | None = None) -> str:
    """Convert a target format string to a PIL format name.

    ``path`` names the file being converted, for error reporting.

    Raises:
        UnsupportedFormatError: If no encoder is known for the format
    """
    try:
        return _ENCODERS[format_str.lower().lstrip(".")]
    except KeyError:
        raise UnsupportedFormatError(format_str, path=path, operation="encode") from None


def decode(reader: BinaryIO) -> tuple[Image.Image, str]:
    """
    Decode an image from a stream.

    The format is sniffed from the content, not taken from any filename, and
    pixel data is loaded eagerly so truncated files fail here rather than
    during encoding.

    Returns:
        (image, detected PIL format name)

    Raises:
        DecodeError: If the data is not a recognized or readable image
    """
    name = getattr(reader, "name", None)
    try:
        img = Image.open(reader)
        img.load()
    except UnidentifiedImageError as exc:
        raise DecodeError("not a recognized image", path=name, operation="decode", cause=exc) from exc
    except (OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError("failed to decode image", path=name, operation="decode", cause=exc) from exc

    detected = img.format or ""
    logger.debug(f"decoded {name or '<stream>'} as {detected} {img.mode} {img.size}")
    return img, detected


def encode(img: Image.Image, target_format: str, writer: BinaryIO) -> None:
    """
    Encode ``img`` into ``writer`` using Pillow defaults for the format.

    Raises:
        UnsupportedFormatError: If target_format has no encoder
        EncodeError: If Pillow fails to write the image
    """
    pil_format = get_pil_format(target_format)

    # JPEG does not support alpha channel or palettes
    if pil_format == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")

    try:
        img.save(writer, format=pil_format)
    except (OSError, ValueError, KeyError) as exc:
        name = getattr(writer, "name", None)
        raise EncodeError(
            f"failed to encode {pil_format}", path=name, operation="encode", cause=exc
        ) from exc


def transcode(reader: BinaryIO, writer: BinaryIO, target_format: str) -> str:
    """Decode ``reader`` and re-encode it into ``writer``.

    Returns the detected source format.
    """
    img, detected = decode(reader)
    with img:
        encode(img, target_format, writer)
    return detected
