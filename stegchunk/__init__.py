"""
# Stegchunk: PNG chunks for humans.

A PNG file is a fixed signature followed by a list of chunks, each one made of

 1. a length
 2. a type code, four letters whose case encodes some properties
 3. the payload
 4. a CRC over type and payload

Chunks with a type unknown to a decoder are skipped if they are ancillary, so
it's possible to add private chunks carrying arbitrary data (a hidden message, for
example) without corrupting the image.

Two basic operations are defined for the chunks and the container:

 1. unpack(): read the binary data and build a high-level representation of it,
    verifying its integrity (signature, length, type, CRC).

 2. pack(): encode the high-level representation into binary data.

Whatever goes wrong during the unpacking is signaled with an exception subclassing
StegChunkException: nothing is silently repaired.
"""
from .core import Chunk
from .typecode import TypeCode
from .images.png import PNGFile, SIGNATURE
