import io
import logging

from .exceptions import TruncatedException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around in-memory binary data to
    uniform its properties: mainly we need a read() that fails
    loudly when the data is not enough.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of data to use as stream' % self._type.__name__)

        init_method()

        self.size = len(self.obj.getbuffer())

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%d/%d)>' % (self.__class__.__name__, self.tell(), self.size)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def remaining(self):
        return self.size - self.tell()

    def read_exactly(self, n, what='data'):
        '''Read n bytes or raise TruncatedException if the stream ends before.'''
        offset = self.tell()
        data = self.obj.read(n)

        if len(data) != n:
            logger.debug('wanted %d bytes of %s at offset %d, only %d available' % (n, what, offset, len(data)))
            raise TruncatedException(
                f'{what} needs {n} bytes at offset {offset} but only {len(data)} are available')

        return data
