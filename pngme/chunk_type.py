'''
The chunk type is a 4-byte code restricted to the ASCII letters; the case
of each letter (i.e. the bit 5 of each byte) encodes a property of the chunk

 1. ancillary bit (first byte): 0 (uppercase) means critical
 2. private bit (second byte): 0 (uppercase) means public
 3. reserved bit (third byte): must be 0 (uppercase) in this version of PNG
 4. safe-to-copy bit (fourth byte): 1 (lowercase) means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import string

from bitstring import Bits

from .exceptions import InvalidTagException


LETTERS = frozenset(string.ascii_letters.encode('ascii'))
# position of the bit 5 inside a byte when indexing from the most significant bit
PROPERTY_BIT = 2


class ChunkType(object):
    SIZE = 4

    def __init__(self, raw):
        if isinstance(raw, str):
            raise InvalidTagException(reason='chunk type %r must be raw bytes, use from_str() for text' % raw)

        try:
            raw = bytes(raw)
        except (TypeError, ValueError) as e:
            raise InvalidTagException(reason='invalid chunk type %r: %s' % (raw, e)) from e

        if len(raw) != self.SIZE:
            raise InvalidTagException(
                reason='chunk type must be %d bytes, got %d' % (self.SIZE, len(raw)))

        if not all(_ in LETTERS for _ in raw):
            raise InvalidTagException(reason='invalid chunk type %r: only ASCII letters are allowed' % raw)

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_str(cls, value):
        try:
            raw = value.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidTagException(reason='invalid chunk type %r: not ASCII' % value)

        return cls(raw)

    @property
    def raw(self):
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _property_bit(self, idx):
        return self._bits[idx * 8 + PROPERTY_BIT]

    def is_critical(self):
        return not self._property_bit(0)

    def is_public(self):
        return not self._property_bit(1)

    def is_reserved_bit_valid(self):
        return not self._property_bit(2)

    def is_safe_to_copy(self):
        return self._property_bit(3)

    def is_valid(self):
        return self.is_reserved_bit_valid()
