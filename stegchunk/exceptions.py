class StegChunkException(Exception):
    '''Base class to extend in order to throw exception in stegchunk.

    It takes an optional argument that represents the chain of the layer that
    caused the exception.
    '''

    def __init__(self, message='', chain=None):
        self.message = message
        self.chain = chain if chain is not None else []
        super().__init__(message)


class TypeCodeException(StegChunkException):
    pass


class NonAlphabeticException(TypeCodeException):
    pass


class WrongLengthException(TypeCodeException):
    pass


class ChunkException(StegChunkException):
    pass


class TruncatedException(ChunkException):
    pass


class InvalidTypeException(ChunkException):
    pass


class CRCException(ChunkException):
    '''The stored checksum doesn't match the one calculated from the data.'''

    def __init__(self, expected, found, chain=None):
        self.expected = expected
        self.found = found
        super().__init__(f'crc mismatch: calculated 0x{expected:08x}, found 0x{found:08x}', chain=chain)


class ContainerException(StegChunkException):
    pass


class MagicException(ContainerException):
    pass


class TrailingException(ContainerException):
    pass


class NotFoundException(ContainerException):
    '''This is an expected outcome when looking for a chunk, not a sign of malformed data.'''
    pass


class ChunkUnpackException(ContainerException):
    '''Wraps the ChunkException raised while unpacking one of the chunks.'''

    def __init__(self, exception, chain=None):
        self.exception = exception
        super().__init__(str(exception), chain=chain)


class EncodingException(StegChunkException):
    pass
