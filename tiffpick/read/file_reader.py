# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from io             import  BytesIO, BufferedReader, BufferedIOBase, \
                            RawIOBase

from ..exceptions   import  IOFailure, UnexpectedEOF
from ..internal     import  ByteOrder, bytes_to_int

class FileReader:
    """File Reader

    This contains an 'rb'-mode file object. It can also just contain a
    bytes object, if necessary. Regardless, it is the one place where
    seeks and reads against the source happen, so every failure comes
    out as an IOFailure with the position it happened at.

    Args:
        file_object (BufferedReader):   The file we're reading. This can
                                        also be a bytes-like object.

    Examples:
        You're meant to hand it a file stream object (reading bytes; not
        strings).

        >>> stream      = open("path/to/file", "r")
        >>> reader      = FileReader(stream)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
            raise TypeError("Expected a file with mode 'rb'")
        TypeError: Expected a file with mode 'rb'

        >>> from_bytes  = FileReader(b"II*\\0\\x08\\0\\0\\0")
        >>> from_bytes[0:2]
        b'II'
        >>> from_bytes.pos()
        2

    """

    # By default, we're big endian.
    default_byte_order  = ByteOrder.BIG

    def __init__ (self, file_object):
        if isinstance(file_object, (bytes, bytearray, memoryview)):
            # Allow bytestrings as input. Pretend it's a file.
            file_object     = BufferedReader(BytesIO(bytes(file_object)))

        if not isinstance(file_object, (BufferedIOBase, RawIOBase)) \
                or not file_object.readable():
            # Assert that we have a readable binary file.
            raise TypeError("Expected a file with mode 'rb'")

        self.internal_file  = file_object
        self.byte_order     = self.default_byte_order

    def __getitem__ (self, key):
        if isinstance(key, slice):
            if key.step is not None:
                raise KeyError("Didn't expect a step argument.")

            if key.start is not None:
                # If we have two values, we're to seek to the first.
                self.seek(key.start)

            # Either way, we read this many bytes.
            return self.read(key.stop)

        # If we've not been given a slice, we'll not need to seek
        # anywhere.
        return self.read(key)

    def tell (self):
        """Call tell() in the file"""
        try:
            return self.internal_file.tell()

        except (OSError, ValueError) as e:
            raise IOFailure(0, e) from e

    def pos (self):
        """Call tell() in the file"""
        return self.tell()

    def seek (self, pos):
        """Call seek() in the file"""
        try:
            self.internal_file.seek(pos)

        except (OSError, ValueError, OverflowError) as e:
            raise IOFailure(max(pos, 0), e) from e

    def read (self, length = None):
        """Read, asserting we don't pass the EOF"""
        position = self.pos()

        try:
            if length is None:
                # We've not been given a length, so we only need to
                # read to the end of the file.
                return self.internal_file.read()

            result = self.internal_file.read(length)

        except (OSError, ValueError) as e:
            raise IOFailure(position, e) from e

        if result is None or len(result) != length:
            # We've tried to read past the end. Whoops!
            raise UnexpectedEOF(position)

        return result

    def bytes_to_int (self, bytestring):
        """Return an int using our internal byte order flag"""
        return bytes_to_int(bytestring, self.byte_order)

    def read_int (self, length):
        """Read an int from the file"""
        return self.bytes_to_int(self[length])

    def read_int_at (self, pos, length):
        """Seek, then read an int from the file"""
        return self.bytes_to_int(self[pos:length])

