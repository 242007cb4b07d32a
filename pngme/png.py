'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

A PNG file is composed by a fixed signature followed by a list of chunks
back to back until the end of the file

    .-----------.---------.---------.-----.---------.
    | signature | chunk 0 | chunk 1 | ... | chunk N |
    '-----------'---------'---------'-----'---------'

The order of the chunks is meaningful and the same type can appear more than
once (think IDAT), so the chunks are kept into a list and searched linearly.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.
'''
import logging
from typing import List, Optional, Tuple

from .chunk import Chunk
from .exceptions import (
    ChunkNotFoundException,
    MagicException,
    PNGMeException,
    TruncatedInputException,
)
from .streams import Stream


logger = logging.getLogger(__name__)


class Png(object):
    SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks: Optional[List[Chunk]] = None):
        self._chunks = list(chunks) if chunks is not None else []

    @classmethod
    def unpack(cls, stream: Stream) -> "Png":
        '''Read the signature and then all the chunks until the stream is exhausted.
        Nothing is recovered: the first broken chunk makes the whole unpacking fail.'''
        try:
            magic = stream.read_exactly(len(cls.SIGNATURE), what='signature')
        except TruncatedInputException as e:
            raise MagicException(chain=['signature'], reason=e.reason) from e

        if magic != cls.SIGNATURE:
            raise MagicException(
                chain=['signature'],
                reason='the signature %r is not the PNG one' % magic)

        chunks = []
        while not stream.is_exhausted():
            logger.debug('unpacking chunk #%d at offset %d' % (len(chunks), stream.tell()))
            try:
                chunks.append(Chunk.unpack(stream))
            except PNGMeException as e:
                e.chain.append('chunks[%d]' % len(chunks))
                raise

        png = cls(chunks)

        if not png._chunks or str(png._chunks[-1].chunk_type) != 'IEND':
            logger.warning('the last chunk is not IEND')

        return png

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Png":
        with Stream(raw) as stream:
            return cls.unpack(stream)

    @classmethod
    def from_file(cls, path) -> "Png":
        with Stream(path) as stream:
            return cls.unpack(stream)

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __getitem__(self, item):
        return self._chunks[item]

    def _index_by_type(self, chunk_type: str) -> Optional[int]:
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return idx

        return None

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        '''Return the first chunk with the given type, None if there is not.'''
        idx = self._index_by_type(chunk_type)

        return self._chunks[idx] if idx is not None else None

    def append_chunk(self, chunk: Chunk):
        logger.debug('appending chunk %r' % chunk)
        self._chunks.append(chunk)

    def remove_chunk(self, chunk_type: str) -> Chunk:
        '''Remove the first chunk with the given type and return it.'''
        idx = self._index_by_type(chunk_type)

        if idx is None:
            raise ChunkNotFoundException(reason='no chunk with type \'%s\'' % chunk_type)

        logger.debug('removing chunk #%d of type \'%s\'' % (idx, chunk_type))

        return self._chunks.pop(idx)

    def pack(self) -> bytes:
        return self.SIGNATURE + b''.join(chunk.pack() for chunk in self._chunks)

    def as_bytes(self) -> bytes:
        return self.pack()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        return ''.join(str(_) for _ in self._chunks)
