'''
This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer is intended big-endian.

    .--------.------.-----------------.-----.
    | length | type | data            | crc |
    '--------'------'-----------------'-----'
        4       4       length bytes     4

The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.
'''
import logging
import struct

from .chunk_type import ChunkType
from .common import crc
from .exceptions import (
    ChecksumMismatchException,
    InvalidUtf8Exception,
    PayloadTooLargeException,
    PNGMeException,
)
from .streams import Stream


logger = logging.getLogger(__name__)

LENGTH_FORMAT = '>I'
CRC_FORMAT = '>I'


class Chunk(object):
    """A chunk is immutable: length and crc are derived from the type and the data
    so it's not possible to have one with a crc not corresponding to its content."""

    # length + type + crc
    OVERHEAD = 12
    # the length field is an unsigned 32 bit integer
    MAX_LENGTH = 0xffffffff

    def __init__(self, chunk_type: ChunkType, data: bytes):
        data = bytes(data)

        if len(data) > self.MAX_LENGTH:
            raise PayloadTooLargeException(
                reason='chunk data of %d bytes doesn\'t fit into the length field' % len(data))

        self._chunk_type = chunk_type
        self._data = data
        self._crc = crc.calculate(chunk_type.raw, data)

    @classmethod
    def unpack(cls, stream: Stream) -> "Chunk":
        '''Read a chunk starting from the actual offset of the stream, at the end
        the stream is positioned just after the crc field.'''
        offset = stream.tell()
        field_name = 'length'
        try:
            length, = struct.unpack(LENGTH_FORMAT, stream.read_exactly(4, what='length'))

            field_name = 'type'
            chunk_type = ChunkType(stream.read_exactly(ChunkType.SIZE, what='chunk type'))

            field_name = 'data'
            data = stream.read_exactly(length, what='data of \'%s\'' % chunk_type)

            field_name = 'crc'
            crc_value, = struct.unpack(CRC_FORMAT, stream.read_exactly(4, what='crc'))
        except PNGMeException as e:
            e.chain.append(field_name)
            raise

        logger.debug('unpacked chunk \'%s\' at offset %d with length %d' % (chunk_type, offset, length))

        chunk = cls(chunk_type, data)

        if chunk.crc != crc_value:
            raise ChecksumMismatchException(
                chain=['crc'],
                reason='chunk \'%s\' at offset %d has crc 0x%08x but 0x%08x was expected' % (
                    chunk_type, offset, crc_value, chunk.crc))

        if not chunk_type.is_valid():
            logger.warning('chunk \'%s\' has the reserved bit set' % chunk_type)

        return chunk

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Chunk":
        '''The chunk must start at the beginning of raw, trailing data is ignored.'''
        with Stream(raw) as stream:
            return cls.unpack(stream)

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''the size of the encoded chunk'''
        return self.OVERHEAD + self.length

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8Exception(
                reason='data of chunk \'%s\' is not valid UTF-8: %s' % (self._chunk_type, e)) from e

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(LENGTH_FORMAT, self.length),
            self._chunk_type.raw,
            self._data,
            struct.pack(CRC_FORMAT, self._crc),
        ])

    @property
    def raw(self):
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._chunk_type == other._chunk_type and self._data == other._data

    def __hash__(self):
        return hash((self._chunk_type, self._data))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self.length,
            self._crc,
        )

    def __str__(self):
        return (
            'Chunk {\n'
            '  length: %d\n'
            '  chunk_type: %s\n'
            '  chunk_data: %d bytes\n'
            '  crc: %d\n'
            '}\n'
        ) % (self.length, self._chunk_type, len(self._data), self._crc)
