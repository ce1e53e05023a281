"""File extension helpers: canonical form, supported set, output naming."""

import os
from pathlib import Path

SUPPORTED_FORMATS: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif"})

_ALIASES = {"jpeg": "jpg"}


def file_ext(path: str | os.PathLike[str]) -> str:
    """Text after the last dot of the base name, or ``""``.

    Unlike ``Path.suffix``, a dotfile such as ``.png`` has extension ``png``.
    """
    _, dot, ext = Path(path).name.rpartition(".")
    return ext if dot else ""


def canonical_ext(path_or_ext: str | os.PathLike[str]) -> str:
    """Return the lower-cased, jpg/jpeg-unified extension.

    Accepts a path (``photos/a.JPEG``) or a bare format string (``JPEG``,
    ``.png``). A name without a dot is treated as the format itself.
    """
    text = os.fspath(path_or_ext)
    ext = file_ext(text) or text
    ext = ext.lower()
    return _ALIASES.get(ext, ext)


def is_supported(format: str) -> bool:
    return format.lower() in SUPPORTED_FORMATS


def output_path_for(path: str | os.PathLike[str], target_format: str) -> Path:
    """Sibling of ``path`` with the extension swapped for ``target_format``.

    The target string is used as given (lower-cased), not canonicalized, so a
    ``jpeg`` target produces ``.jpeg`` files.
    """
    source = Path(path)
    ext = file_ext(source)
    stem = source.name[: -len(ext) - 1] if ext else source.name
    return source.with_name(stem + "." + target_format.lower())
