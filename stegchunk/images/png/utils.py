import logging
from typing import List, Union

from stegchunk.core import Chunk
from stegchunk.typecode import TypeCode
from stegchunk.exceptions import EncodingException, NotFoundException

from . import PNGFile


logger = logging.getLogger(__name__)

END_TYPE = 'IEND'


def get_chunk_types(png: PNGFile) -> List[str]:
    return [str(_.type) for _ in png.chunks]


def hide_message(png: PNGFile, type: Union[str, TypeCode], message: str) -> Chunk:
    '''The IEND chunk is the terminator so it's removed and appended again
    after the one containing the message.'''
    if not isinstance(type, TypeCode):
        type = TypeCode.from_text(type)

    try:
        payload = message.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingException(f'message for \'{type}\' is not valid text', chain=['payload']) from e

    chunk = Chunk(type, payload)
    logger.debug(f'hiding {chunk!r}')

    end = png.remove_chunk(END_TYPE)

    png.append_chunk(chunk)
    png.append_chunk(end)

    return chunk


def reveal_message(png: PNGFile, type: Union[str, TypeCode]) -> str:
    chunk = png.chunk_by_type(type)

    if chunk is None:
        raise NotFoundException(f'no chunk with type \'{type}\'')

    return chunk.payload_as_text()


def strip_message(png: PNGFile, type: Union[str, TypeCode]) -> Chunk:
    return png.remove_chunk(type)
