import io
import os
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def message():
    return b'This is where your secret message will be!'


@pytest.fixture
def message_crc():
    return 2882656334


@pytest.fixture
def build_chunk_bytes():
    def _build(type, payload, crc, length=None):
        length = len(payload) if length is None else length
        return length.to_bytes(4, 'big') + type + payload + crc.to_bytes(4, 'big')

    return _build


@pytest.fixture
def rust_chunk_bytes(build_chunk_bytes, message, message_crc):
    return build_chunk_bytes(b'RuSt', message, message_crc)


@pytest.fixture
def png_bytes():
    """A real image, two colors so that it has a palette."""
    image = Image.new('P', (5, 10))
    image.putpalette([0xff, 0x00, 0x00, 0x00, 0x80, 0x00])
    image.paste(1, (0, 5, 5, 10))

    buffer = io.BytesIO()
    image.save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / 'image.png'
    path.write_bytes(png_bytes)

    return path


@pytest.fixture
def run_script(test_root_dir):
    """Run scripts/pngsecret.py with the package importable from the checkout."""

    script = test_root_dir.parent / 'scripts' / 'pngsecret.py'
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join(filter(None, [str(test_root_dir.parent), env.get('PYTHONPATH')]))
    env.pop('DEBUG', None)

    def _run(*args):
        return subprocess.run(
            [sys.executable, str(script), *args],
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )

    return _run
