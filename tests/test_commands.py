import pytest

from pngme import commands
from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.exceptions import (
    ChunkNotFoundException,
    InvalidTagException,
    InvalidUtf8Exception,
    MagicException,
)
from pngme.png import Png


def chunk_from_strings(chunk_type, data):
    return Chunk(ChunkType.from_str(chunk_type), data)


def test_embed_chunk_keeps_iend_last():
    png = Png([
        chunk_from_strings('IHDR', b'header'),
        chunk_from_strings('IDAT', b'data'),
        chunk_from_strings('IEND', b''),
    ])

    commands.embed_chunk(png, chunk_from_strings('ruSt', b'secret'))

    assert [str(_.chunk_type) for _ in png] == ['IHDR', 'IDAT', 'ruSt', 'IEND']


def test_embed_chunk_without_iend():
    png = Png([chunk_from_strings('IHDR', b'header')])

    commands.embed_chunk(png, chunk_from_strings('ruSt', b'secret'))

    assert [str(_.chunk_type) for _ in png] == ['IHDR', 'ruSt']


def test_encode_decode_in_place(png_path, png_raw):
    chunk = commands.encode(png_path, 'ruSt', 'This is where your secret message will be!')

    assert chunk.length == 42

    png = Png.from_file(png_path)

    assert len(png) == len(Png.from_bytes(png_raw)) + 1
    assert str(png[-1].chunk_type) == 'IEND'
    assert str(png[-2].chunk_type) == 'ruSt'

    assert commands.decode(png_path, 'ruSt') == 'This is where your secret message will be!'


def test_encode_to_output(tmp_path, png_path, png_raw):
    output = tmp_path / 'output.png'

    commands.encode(png_path, 'ruSt', 'hidden', output=str(output))

    assert png_path.read_bytes() == png_raw
    assert commands.decode(output, 'ruSt') == 'hidden'


def test_encode_invalid_chunk_type(png_path, png_raw):
    with pytest.raises(InvalidTagException):
        commands.encode(png_path, 'ru5t', 'hidden')

    assert png_path.read_bytes() == png_raw


def test_decode_missing_chunk(png_path):
    with pytest.raises(ChunkNotFoundException):
        commands.decode(png_path, 'ruSt')


def test_decode_invalid_utf8(png_path):
    png = commands.from_file(png_path)
    commands.embed_chunk(png, chunk_from_strings('ruSt', b'\xff\xfe'))
    commands.to_file(png_path, png)

    with pytest.raises(InvalidUtf8Exception):
        commands.decode(png_path, 'ruSt')


def test_remove(png_path, png_raw):
    commands.encode(png_path, 'ruSt', 'hidden')

    removed = commands.remove(png_path, 'ruSt')

    assert removed.data == b'hidden'
    assert png_path.read_bytes() == png_raw


def test_remove_missing_chunk(png_path, png_raw):
    with pytest.raises(ChunkNotFoundException):
        commands.remove(png_path, 'ruSt')

    assert png_path.read_bytes() == png_raw


def test_print_chunks(png_path):
    dump = commands.print_chunks(png_path)

    assert dump.startswith('Chunk {\n  length: 13\n  chunk_type: IHDR\n')
    assert 'chunk_type: IEND' in dump


def test_not_a_png(tmp_path):
    path = tmp_path / 'not.png'
    path.write_bytes(b'IAMADUCK')

    with pytest.raises(MagicException):
        commands.print_chunks(path)
