'''
Operations exposed by the command line: each one reads the whole file,
works on it in memory and, if it needs to, writes it back at once.
'''
import logging
from typing import Optional

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFoundException
from .png import Png


logger = logging.getLogger(__name__)

END_CHUNK_TYPE = 'IEND'


def from_file(path) -> Png:
    logger.debug('reading \'%s\'' % path)
    return Png.from_file(path)


def to_file(path, png: Png):
    logger.debug('writing \'%s\'' % path)
    with open(path, 'wb') as f:
        f.write(png.pack())


def embed_chunk(png: Png, chunk: Chunk):
    '''Append the chunk keeping the IEND chunk, if present, as the last one.'''
    try:
        end = png.remove_chunk(END_CHUNK_TYPE)
    except ChunkNotFoundException:
        end = None

    png.append_chunk(chunk)

    if end is not None:
        png.append_chunk(end)


def encode(path, chunk_type: str, message: str, output: Optional[str] = None) -> Chunk:
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    png = from_file(path)
    embed_chunk(png, chunk)
    to_file(output if output is not None else path, png)

    logger.info('added new chunk %r' % chunk)

    return chunk


def decode(path, chunk_type: str) -> str:
    png = from_file(path)

    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFoundException(reason='no chunk with type \'%s\' in \'%s\'' % (chunk_type, path))

    return chunk.data_as_string()


def remove(path, chunk_type: str) -> Chunk:
    png = from_file(path)

    removed = png.remove_chunk(chunk_type)
    to_file(path, png)

    logger.info('removed chunk %r' % removed)

    return removed


def print_chunks(path) -> str:
    return str(from_file(path))
