"""
Core module for the abstraction of a chunk.
"""
import logging
import struct

from .enum import Compliant
from .streams import Stream
from .typecode import TypeCode, TYPE_CODE_SIZE
from .common import crc
from .exceptions import (
    EncodingException,
    InvalidTypeException,
    TypeCodeException,
    CRCException,
)


logger = logging.getLogger(__name__)

# network byte order
LENGTH_FORMAT = '>I'
CRC_FORMAT = '>I'

LENGTH_SIZE = struct.calcsize(LENGTH_FORMAT)
CRC_SIZE = struct.calcsize(CRC_FORMAT)
MAX_LENGTH = 0xffffffff


class Chunk(object):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

        +--------+------+-----------------+-----+
        | length | type | payload         | crc |
        +--------+------+-----------------+-----+
            4       4       length bytes     4

    The crc field is network-byte-order CRC-32 computed over the chunk type and
    payload, but not the length.

    An instance is never in a state with a wrong crc: it's calculated when the chunk
    is created and verified when it is unpacked.
    '''
    MIN_SIZE = LENGTH_SIZE + TYPE_CODE_SIZE + CRC_SIZE

    def __init__(self, type: TypeCode, payload: bytes):
        payload = bytes(payload)

        if len(payload) > MAX_LENGTH:
            raise ValueError(f'payload of {len(payload)} bytes doesn\'t fit the length field')

        self._type = type
        self._payload = payload
        self._crc = crc.calculate(type.raw, payload)

    @classmethod
    def from_bytes(cls, data: bytes, compliant=Compliant.NONE) -> 'Chunk':
        '''Unpack the first chunk found in data, what follows it is ignored.'''
        return cls.unpack(Stream(data), compliant=compliant)

    @classmethod
    def unpack(cls, stream: Stream, compliant=Compliant.NONE) -> 'Chunk':
        '''Read a chunk starting from the actual position of the stream.

        The order of the checks follows the layout: first the length, then
        the type and at the end the payload with its crc.'''
        offset = stream.tell()
        logger.debug('unpacking chunk at offset %d' % offset)

        length, = struct.unpack(LENGTH_FORMAT, stream.read_exactly(LENGTH_SIZE, what='length'))
        raw_type = stream.read_exactly(TYPE_CODE_SIZE, what='type')

        try:
            type = TypeCode.from_bytes(raw_type)
        except TypeCodeException as e:
            raise InvalidTypeException(f'invalid type {raw_type!r} at offset {offset}', chain=['type']) from e

        if not type.is_reserved_bit_valid():
            logger.warning(f'type \'{type}\' at offset {offset} has the reserved bit set')
            if compliant & Compliant.TYPE:
                raise InvalidTypeException(f'type \'{type}\' has the reserved bit set', chain=['type'])

        payload = stream.read_exactly(length, what=f'payload of \'{type}\'')
        found, = struct.unpack(CRC_FORMAT, stream.read_exactly(CRC_SIZE, what='crc'))

        chunk = cls(type, payload)

        if chunk.crc != found:
            raise CRCException(chunk.crc, found, chain=['crc'])

        logger.debug('unpacked %r' % chunk)

        return chunk

    @property
    def type(self) -> TypeCode:
        return self._type

    @property
    def payload(self) -> bytes:
        return self._payload

    @property
    def length(self) -> int:
        return len(self._payload)

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        return self.MIN_SIZE + self.length

    def payload_as_text(self) -> str:
        try:
            return self._payload.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingException(f'payload of \'{self._type}\' is not valid text', chain=['payload']) from e

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(LENGTH_FORMAT, self.length),
            self._type.raw,
            self._payload,
            struct.pack(CRC_FORMAT, self._crc),
        ])

    @property
    def raw(self) -> bytes:
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return (self.length, self._type, self._payload, self._crc) == \
            (other.length, other._type, other._payload, other._crc)

    def __hash__(self):
        return hash((self._type, self._payload))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._type,
            self.length,
            self._crc,
        )

    def __str__(self):
        msg = ''
        msg += 'length: %d\n' % self.length
        msg += 'type: %s\n' % self._type
        msg += 'payload: %r\n' % self._payload
        msg += 'crc: 0x%08x\n' % self._crc
        return msg
