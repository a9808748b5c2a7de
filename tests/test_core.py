import pytest

from stegchunk.common import crc
from stegchunk.core import Chunk
from stegchunk.enum import Compliant
from stegchunk.streams import Stream
from stegchunk.typecode import TypeCode
from stegchunk.exceptions import (
    ChunkException,
    CRCException,
    EncodingException,
    InvalidTypeException,
    NonAlphabeticException,
    TruncatedException,
)


def test_chunk(message, message_crc):
    """Check that building a Chunk computes length and crc."""
    chunk = Chunk(TypeCode.from_text('RuSt'), message)

    assert chunk.length == 42
    assert chunk.crc == message_crc
    assert chunk.type == TypeCode.from_text('RuSt')
    assert chunk.payload == message
    assert chunk.size == 42 + 12


def test_chunk_empty_payload():
    chunk = Chunk(TypeCode.from_text('IEND'), b'')

    assert chunk.length == 0
    assert chunk.crc == 0xae426082
    assert chunk.pack() == b'\x00\x00\x00\x00IEND\xaeB`\x82'


def test_chunk_from_bytes(rust_chunk_bytes, message_crc):
    chunk = Chunk.from_bytes(rust_chunk_bytes)

    assert chunk.length == 42
    assert str(chunk.type) == 'RuSt'
    assert chunk.payload_as_text() == 'This is where your secret message will be!'
    assert chunk.crc == message_crc


def test_chunk_pack(rust_chunk_bytes, message):
    chunk = Chunk(TypeCode.from_text('RuSt'), message)

    assert chunk.pack() == rust_chunk_bytes
    assert chunk.raw == rust_chunk_bytes


def test_chunk_pack_unpack():
    chunk = Chunk(TypeCode.from_text('ruSt'), b'\x00\xff' * 100)

    unpacked = Chunk.from_bytes(chunk.pack())

    assert unpacked == chunk
    assert unpacked.length == chunk.length
    assert unpacked.type == chunk.type
    assert unpacked.payload == chunk.payload
    assert unpacked.crc == chunk.crc


def test_chunk_wrong_crc(build_chunk_bytes, message, message_crc):
    data = build_chunk_bytes(b'RuSt', message, message_crc - 1)

    with pytest.raises(CRCException) as e:
        Chunk.from_bytes(data)

    assert e.value.expected == message_crc
    assert e.value.found == message_crc - 1
    assert e.value.chain == ['crc']


def test_chunk_payload_corrupted(build_chunk_bytes, message_crc):
    data = build_chunk_bytes(b'RuSt', b'this is where your secret message will be!', message_crc)

    with pytest.raises(CRCException):
        Chunk.from_bytes(data)


def test_chunk_invalid_type(build_chunk_bytes, message, message_crc):
    data = build_chunk_bytes(b'Ru1t', message, message_crc)

    with pytest.raises(InvalidTypeException) as e:
        Chunk.from_bytes(data)

    assert isinstance(e.value.__cause__, NonAlphabeticException)


def test_chunk_reserved_bit(message):
    """The reserved bit is rejected only when asked to."""
    chunk = Chunk(TypeCode.from_text('Rust'), message)

    assert Chunk.from_bytes(chunk.pack()) == chunk

    with pytest.raises(InvalidTypeException):
        Chunk.from_bytes(chunk.pack(), compliant=Compliant.TYPE)


@pytest.mark.parametrize('size', [0, 3, 4, 7, 8, 30, 49, 53])
def test_chunk_truncated(rust_chunk_bytes, size):
    with pytest.raises(TruncatedException):
        Chunk.from_bytes(rust_chunk_bytes[:size])


def test_chunk_length_too_big(build_chunk_bytes, message, message_crc):
    data = build_chunk_bytes(b'RuSt', message, message_crc, length=43)

    with pytest.raises(ChunkException):
        Chunk.from_bytes(data)


def test_chunk_ignore_trailing_data(rust_chunk_bytes, message_crc):
    chunk = Chunk.from_bytes(rust_chunk_bytes + b'\x00\x00')

    assert chunk.crc == message_crc


def test_chunk_unpack_stream(rust_chunk_bytes):
    """Chunks can be read one after the other from a stream."""
    end = Chunk(TypeCode.from_text('IEND'), b'')
    stream = Stream(rust_chunk_bytes + end.pack())

    assert str(Chunk.unpack(stream).type) == 'RuSt'
    assert stream.tell() == len(rust_chunk_bytes)
    assert Chunk.unpack(stream) == end
    assert stream.remaining() == 0


def test_chunk_payload_as_text_failure():
    chunk = Chunk(TypeCode.from_text('ruSt'), b'\xff\xfe\xfd')

    with pytest.raises(EncodingException):
        chunk.payload_as_text()


def test_chunk_equality():
    a = Chunk(TypeCode.from_text('ruSt'), b'kebab')
    b = Chunk(TypeCode.from_text('ruSt'), b'kebab')
    c = Chunk(TypeCode.from_text('ruSt'), b'kebap')

    assert a == b
    assert a != c
    assert repr(a) == '<Chunk(type=ruSt,length=5,crc=0x%08x)>' % a.crc


def test_crc_calculate(message, message_crc):
    assert crc.calculate(b'IEND') == 0xae426082
    assert crc.calculate(b'IE', b'ND') == 0xae426082
    assert crc.calculate(b'RuSt', message) == message_crc
