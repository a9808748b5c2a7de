'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

Here the file is seen only as a signature followed by a list of chunks, the
content of the chunks is not interpreted at all.
'''
import logging
from typing import Iterable, List, Optional, Tuple, Union

from stegchunk.core import Chunk
from stegchunk.enum import Compliant
from stegchunk.streams import Stream
from stegchunk.typecode import TypeCode
from stegchunk.exceptions import (
    ChunkException,
    ChunkUnpackException,
    MagicException,
    NotFoundException,
    TrailingException,
)


logger = logging.getLogger(__name__)

SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


def _type_raw(type: Union[str, bytes, TypeCode]) -> bytes:
    if isinstance(type, TypeCode):
        return type.raw
    if isinstance(type, str):
        return type.encode('utf-8')
    if isinstance(type, (bytes, bytearray)):
        return bytes(type)

    raise TypeError(f'a chunk type must be str, bytes or TypeCode, not {type.__class__.__name__}')


class PNGFile(object):
    '''The container: the signature followed by the chunks.

    The order of the chunks matters (IHDR first and IEND last) but it's not
    enforced here, it's up to the user of this class to keep it sane.

    The signature is always checked: a file with a wrong one is not a PNG
    and it's never rewritten with the right one.
    '''

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None, signature: bytes = SIGNATURE):
        if signature != SIGNATURE:
            raise MagicException(f'signature {signature!r} doesn\'t correspond', chain=['signature'])

        self._chunks: List[Chunk] = list(chunks) if chunks is not None else []

    @classmethod
    def from_bytes(cls, data: bytes, compliant=Compliant.NONE) -> 'PNGFile':
        stream = Stream(data)

        signature = stream.read(len(SIGNATURE))
        if signature != SIGNATURE:
            raise MagicException(f'signature {signature!r} doesn\'t correspond', chain=['signature'])

        png = cls()

        while stream.remaining():
            if stream.remaining() < Chunk.MIN_SIZE:
                raise TrailingException(
                    f'{stream.remaining()} trailing bytes at offset {stream.tell()} can\'t form a chunk',
                    chain=['chunks'])

            try:
                chunk = Chunk.unpack(stream, compliant=compliant)
            except ChunkException as e:
                chain = e.chain + [str(len(png)), 'chunks']
                raise ChunkUnpackException(e, chain=chain) from e

            png.append_chunk(chunk)

        logger.debug('unpacked %d chunks' % len(png))

        return png

    @property
    def signature(self) -> bytes:
        return SIGNATURE

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self._chunks == other._chunks

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(str(_.type) for _ in self._chunks))

    def _index_of(self, type: Union[str, bytes, TypeCode]) -> Optional[int]:
        raw = _type_raw(type)
        for idx, chunk in enumerate(self._chunks):
            if chunk.type.raw == raw:
                return idx

        return None

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def chunk_by_type(self, type: Union[str, bytes, TypeCode]) -> Optional[Chunk]:
        idx = self._index_of(type)

        return self._chunks[idx] if idx is not None else None

    def remove_chunk(self, type: Union[str, bytes, TypeCode]) -> Chunk:
        '''Remove the first chunk with the given type and give it back.'''
        idx = self._index_of(type)

        if idx is None:
            raise NotFoundException(f'no chunk with type \'{type}\'')

        logger.debug('removing chunk \'%s\' at index %d' % (type, idx))

        return self._chunks.pop(idx)

    def pack(self) -> bytes:
        return SIGNATURE + b''.join(_.pack() for _ in self._chunks)

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def size(self) -> int:
        return len(SIGNATURE) + sum(_.size for _ in self._chunks)
