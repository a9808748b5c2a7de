'''
# Chunk type codes

Each chunk is identified by four bytes, all of them ASCII letters. The case
of each letter (i.e. bit 5 of each byte) encodes a property of the chunk

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase for conforming codes
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

A code with the reserved bit set can be built anyway, it's simply not valid:
this is useful to represent what is found into an existing file.

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html#Chunk-naming-conventions>.
'''
import functools
import logging

from bitstring import Bits

from .exceptions import NonAlphabeticException, WrongLengthException


logger = logging.getLogger(__name__)

TYPE_CODE_SIZE = 4

# bitstring indexes from the most significant bit so 0x20 is at position 2
PROPERTY_BIT = 2


def is_alphabetic(value: int) -> bool:
    return 0x41 <= value <= 0x5a or 0x61 <= value <= 0x7a


@functools.total_ordering
class TypeCode(object):

    def __init__(self, raw: bytes):
        raw = bytes(raw)

        if len(raw) != TYPE_CODE_SIZE:
            raise WrongLengthException(f'type code must be {TYPE_CODE_SIZE} bytes long, not {len(raw)}')

        if not all(is_alphabetic(_) for _ in raw):
            raise NonAlphabeticException(f'type code {raw!r} contains non alphabetic bytes')

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'TypeCode':
        return cls(raw)

    @classmethod
    def from_text(cls, text: str) -> 'TypeCode':
        raw = text.encode('utf-8')

        if len(raw) != TYPE_CODE_SIZE:
            raise WrongLengthException(f'type code \'{text}\' must be {TYPE_CODE_SIZE} characters long')

        return cls.from_bytes(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, TypeCode):
            return NotImplemented

        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, TypeCode):
            return NotImplemented

        return self._raw < other._raw

    def __hash__(self):
        return hash(self._raw)

    def _is_lowercase(self, index: int) -> bool:
        return self._bits[index * 8 + PROPERTY_BIT]

    def is_critical(self) -> bool:
        return not self._is_lowercase(0)

    def is_ancillary(self) -> bool:
        return self._is_lowercase(0)

    def is_public(self) -> bool:
        return not self._is_lowercase(1)

    def is_private(self) -> bool:
        return self._is_lowercase(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._is_lowercase(2)

    def is_safe_to_copy(self) -> bool:
        return self._is_lowercase(3)

    def is_unsafe_to_copy(self) -> bool:
        return not self._is_lowercase(3)

    def is_valid(self) -> bool:
        return all(is_alphabetic(_) for _ in self._raw) and self.is_reserved_bit_valid()
