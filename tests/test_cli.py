import pytest

from pngme.chunk import Chunk
from pngme.cli import main
from pngme.png import Png


def test_usage(capsys):
    assert main(['pngme']) == 1
    assert main(['pngme', 'explode', 'file.png']) == 1
    assert main(['pngme', 'decode', 'file.png']) == 1
    assert main(['pngme', 'print', 'file.png', 'extra']) == 1

    assert 'usage: pngme encode' in capsys.readouterr().out


def test_encode_decode_remove(png_path, png_raw, capsys):
    assert main(['pngme', 'encode', str(png_path), 'ruSt', 'secret']) == 0
    assert 'added new chunk' in capsys.readouterr().out

    assert main(['pngme', 'decode', str(png_path), 'ruSt']) == 0
    assert capsys.readouterr().out == 'secret\n'

    assert main(['pngme', 'remove', str(png_path), 'ruSt']) == 0
    assert 'removed chunk' in capsys.readouterr().out

    assert png_path.read_bytes() == png_raw


def test_encode_output(tmp_path, png_path):
    output = tmp_path / 'out.png'

    assert main(['pngme', 'encode', str(png_path), 'ruSt', 'secret', str(output)]) == 0
    assert Png.from_file(output).chunk_by_type('ruSt').data == b'secret'


def test_print(png_path, capsys):
    assert main(['pngme', 'print', str(png_path)]) == 0
    assert 'chunk_type: IHDR' in capsys.readouterr().out


@pytest.mark.parametrize('args', [
    ['remove', 'ruSt'],
    ['decode', 'ruSt'],
    ['encode', 'ru1t', 'secret'],
])
def test_errors(png_path, args, caplog):
    command, *rest = args

    assert main(['pngme', command, str(png_path)] + rest) == 1
    assert 'Exception' in caplog.text


def test_missing_file(tmp_path):
    assert main(['pngme', 'print', str(tmp_path / 'missing.png')]) == 1


def test_encode_payload_too_large(png_path, png_raw, monkeypatch, caplog):
    monkeypatch.setattr(Chunk, 'MAX_LENGTH', 4)

    assert main(['pngme', 'encode', str(png_path), 'ruSt', 'too long']) == 1
    assert 'PayloadTooLargeException' in caplog.text
    assert png_path.read_bytes() == png_raw
