"""
# pngme: hide messages into PNG files.

A PNG file is a signature followed by a list of chunks, each one made of
a length, a type, the data and a CRC. This package gives a representation
of the file at the chunk level, that is enough to add a chunk with an
arbitrary payload (a message), look for it and remove it without touching
the image itself.

Two basic main operations are defined for the file format and its sub components:

 1. unpack(): reading the binary data from a stream and build a high-level
    representation of that. The stream is left just after the consumed data.

 2. pack(): encode the high-level representation into binary data.

"""
from .chunk import Chunk
from .chunk_type import ChunkType
from .png import Png
