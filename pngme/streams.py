import io
import logging
import os

from .exceptions import TruncatedInputException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/File object to
    uniform its properties: mainly we need reads that fail loudly when
    the data is not enough.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % obj.__class__.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.obj.close()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def read_exactly(self, n, what='data'):
        '''Read n bytes or raise TruncatedInputException.'''
        offset = self.obj.tell()
        data = self.obj.read(n)

        if len(data) != n:
            raise TruncatedInputException(
                reason='%s at offset %d needs %d bytes but only %d are available' % (
                    what, offset, n, len(data)))

        return data

    def is_exhausted(self):
        '''Check if there is no more data to read without consuming it.'''
        offset = self.obj.tell()
        is_there_more = len(self.obj.read(1)) != 0
        self.obj.seek(offset)

        return not is_there_more
