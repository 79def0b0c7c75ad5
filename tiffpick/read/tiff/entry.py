# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
from fractions      import  Fraction

from ...internal    import  bytes_to_int
from .tags          import  TiffTypeDict, always_external_types, tag_name

# These are just named tuples. A payload is exactly one of these two,
# decided once when the entry is read out of its IFD.
Inline      = namedtuple("Inline", ("raw",))
External    = namedtuple("External", ("offset",))

class Entry (namedtuple("Entry", ("tag",
                                  "datatype",
                                  "count",
                                  "payload",
                                  "position"))):
    """One 12-byte IFD record.

    The tag, datatype, and count are as stored. The payload is either
    Inline (holding the four raw payload bytes) or External (holding
    the offset where the value really lives). The position is where the
    record itself starts in the file.
    """

    __slots__ = ()

    @property
    def is_inline (self):
        return isinstance(self.payload, Inline)

    def __str__ (self):
        datatype = TiffTypeDict.get(self.datatype)

        return "ID: 0x{:X} ({})\nDataType: {}\nLength: {:d}\n".format(
                self.tag,
                tag_name(self.tag),
                "UNKNOWN" if datatype is None else datatype.description,
                self.count)

def classify_payload (datatype, count, raw, byte_order):
    """Decide whether four payload bytes are a value or an offset.

    Only a single value of a fixed-width type no wider than four bytes
    is stored inline; everything else (including strings and rationals
    of any length) is read from an offset.

        >>> classify_payload(3, 1, b"\\x40\\x14\\0\\0", "little")
        Inline(raw=b'@\\x14\\x00\\x00')
        >>> classify_payload(3, 3, b"\\xee\\0\\0\\0", "little")
        External(offset=238)
    """
    valtype = TiffTypeDict.get(datatype)

    if valtype is not None                          \
            and count == 1                          \
            and valtype.bytecount <= len(raw)       \
            and datatype not in always_external_types:
        return Inline(raw)

    return External(bytes_to_int(raw, byte_order))

class Rational (namedtuple("Rational", ("numerator", "denominator"))):
    """A numerator/denominator pair, kept exactly as stored.

        >>> Rational(10, 400)
        Rational(numerator=10, denominator=400)
        >>> Rational(10, 400).fraction
        Fraction(1, 40)
        >>> float(Rational(1, 40))
        0.025

    Unlike a Fraction, a zero denominator is allowed to exist; it just
    can't be converted.
    """

    __slots__ = ()

    @property
    def fraction (self):
        return Fraction(self.numerator, self.denominator)

    def __float__ (self):
        return self.numerator / self.denominator

    def __str__ (self):
        if self.denominator == 1:
            return "{:d}".format(self.numerator)

        return "{:d} / {:d}".format(self.numerator, self.denominator)

class Float:
    """Lossless float storage.

    This exists to store floats read in from TIFFs without losing any
    data whatsoever.
    """

    def __init__ (self, numerator, denominator, exponent):
        """Initialize float.

        Takes in a numerator, denominator, and exponent. Stores a
        Fraction and the exponent:

            >>> Float(1, 2, 3)
            <Float 2**(3) * 1/2>
            >>> float(Float(1, 2, 3))
            4.0
            >>> float(Float(-3, 2, -1))
            -0.75
        """

        self.fraction   = Fraction(numerator, denominator)
        self.exponent   = exponent

    def __float__ (self):
        """Convert to usable float."""
        if self.exponent < 0:
            # Negative exponents invoke division.
            return float(self.fraction) / (float(2)**(-self.exponent))

        # Positive exponents are for multiplying.
        return float(self.fraction) * (float(2)**self.exponent)

    def __eq__ (self, other):
        if isinstance(other, Float):
            return float(self) == float(other)

        return float(self) == other

    def __hash__ (self):
        return hash(float(self))

    def __repr__ (self):
        """Represent an instance."""
        return "<{} 2**({:d}) * {:d}/{:d}>".format(
                self.__class__.__name__,
                self.exponent,
                self.fraction.numerator,
                self.fraction.denominator)
