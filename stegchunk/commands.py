'''
Operations working on files: this is the only place where the filesystem is touched,
everything else works on bytes already in memory.
'''
import logging
from pathlib import Path
from typing import List

from .core import Chunk
from .typecode import TypeCode
from .images.png import PNGFile
from .images.png.utils import (
    get_chunk_types,
    hide_message,
    reveal_message,
    strip_message,
)


logger = logging.getLogger(__name__)


def read_png(path) -> PNGFile:
    logger.debug('reading \'%s\'' % path)
    return PNGFile.from_bytes(Path(path).read_bytes())


def write_png(path, png: PNGFile) -> None:
    logger.debug('writing \'%s\'' % path)
    Path(path).write_bytes(png.pack())


def encode(path, type_text: str, message: str, output=None) -> Chunk:
    '''Hide the message into a new chunk; if output is not indicated the file is overwritten.'''
    type = TypeCode.from_text(type_text)

    png = read_png(path)
    chunk = hide_message(png, type, message)
    write_png(output or path, png)

    return chunk


def decode(path, type_text: str) -> str:
    type = TypeCode.from_text(type_text)

    return reveal_message(read_png(path), type)


def remove(path, type_text: str, output=None) -> Chunk:
    type = TypeCode.from_text(type_text)

    png = read_png(path)
    chunk = strip_message(png, type)
    write_png(output or path, png)

    return chunk


def print_chunks(path) -> List[str]:
    return get_chunk_types(read_png(path))
