import io
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def png_raw():
    """A real 5x5 red image as written by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_raw):
    path = tmp_path / 'red.png'
    path.write_bytes(png_raw)
    return path
