"""Test configuration and fixtures for imgconv.

All test images are synthesized with Pillow into pytest's tmp_path, so the
suite needs no media files on disk.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

PIL_FORMATS = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG", "gif": "GIF"}

ImageFactory = Callable[..., Path]


def _write_image(
    path: Path,
    size: tuple[int, int] = (64, 48),
    mode: str = "RGB",
    fmt: str | None = None,
) -> Path:
    """Write a small patterned image, format taken from fmt or the path suffix."""
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    # Lines make JPEG re-encoding visibly lossy
    for i in range(0, size[0], 8):
        draw.line([(i, 0), (i, size[1])], fill=(255, 255, 255), width=1)
    draw.ellipse([size[0] // 4, size[1] // 4, size[0] // 2, size[1] // 2], fill=(200, 100, 100))

    if mode == "RGBA":
        img.putalpha(128)
    elif mode != "RGB":
        img = img.convert(mode)

    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, PIL_FORMATS[(fmt or path.suffix.lstrip(".")).lower()])
    return path


def snapshot(root: Path) -> dict[Path, bytes]:
    """Map every file under root to its content."""
    return {p: p.read_bytes() for p in root.rglob("*") if p.is_file()}


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def make_image() -> ImageFactory:
    """Factory writing synthetic images: make_image(path, size=..., mode=...)."""
    return _write_image


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[Path, bytes]]:
    return snapshot


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for images."""
    images = tmp_path / "imgs"
    images.mkdir()
    return images


@pytest.fixture
def png_tree(image_dir: Path) -> Path:
    """Directory with a.png, b.png and c.txt."""
    _ = _write_image(image_dir / "a.png", size=(64, 48))
    _ = _write_image(image_dir / "b.png", size=(30, 20))
    _ = (image_dir / "c.txt").write_text("not an image")
    return image_dir


@pytest.fixture
def jpg_bytes(tmp_path: Path) -> bytes:
    return _write_image(tmp_path / "source.jpg").read_bytes()
