from pngme.common import crc


def test_crc_known_values():
    assert crc.calculate(b'IEND') == 0xae426082
    assert crc.calculate(b'RuSt', b'This is where your secret message will be!') == 2882656334


def test_crc_parts_are_concatenated():
    assert crc.calculate(b'Ru', b'St', b'data') == crc.calculate(b'RuStdata')


def test_crc_check_value():
    """The check value of CRC-32/ISO-HDLC"""
    assert crc.calculate(b'123456789') == 0xcbf43926
