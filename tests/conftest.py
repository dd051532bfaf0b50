import base64
import io
import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import comic_studio
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from comic_studio.core.models import Asset  # noqa: E402


def make_png_base64(color="red", size=(40, 30), mode="RGB") -> str:
    """Encode a solid-colour image as base64 PNG."""
    img = Image.new(mode, size, color=color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


# Common test fixtures
@pytest.fixture
def png_base64():
    """Factory for solid-colour base64 PNG payloads."""
    return make_png_base64


@pytest.fixture
def red_asset():
    return Asset(id="scene-red", prompt="A red sky", base64=make_png_base64("red"))


@pytest.fixture
def blue_asset():
    return Asset(id="scene-blue", prompt="A blue sea", base64=make_png_base64("blue"))


@pytest.fixture
def character_asset():
    return Asset(
        id="char-hero",
        prompt="Caped hero, three-quarter view",
        base64=make_png_base64("green"),
        name="Hero",
    )


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple PNG file on disk."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
