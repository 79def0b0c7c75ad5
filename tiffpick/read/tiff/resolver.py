# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from numpy          import  nan as NaN, inf as infinity

from ...exceptions  import  TypeMismatch, LengthMismatch, UnknownDataType
from ...internal    import  bytes_to_int, bytes_to_sint, int_to_bytes, \
                            sint_to_bytes, split_units
from ...log         import  get_logger
from .entry         import  Inline, Rational, Float
from .tags          import  TiffType, TiffTypeDict

logger = get_logger(__name__)

# Just in case, I'll want to be able to handle floats in TIFFs. These
# are the bit masks I'll need to apply to such values, in order to
# extract the sign, exponent, and value.
IEEE_754_Parameters = {
    4:  (0x80000000,
         0x7f800000,
         0x007fffff),
    8:  (0x8000000000000000,
         0x7ff0000000000000,
         0x000fffffffffffff),
}

class ValueResolver:
    """Value Resolver

    This turns Entries into python values. Every accessor first checks
    that the entry really has the datatype the caller expects, raising
    TypeMismatch if it doesn't; accessors for single values also insist
    on a count of exactly one, raising LengthMismatch otherwise. Nothing
    is ever coerced from one type into another.

    Inline payloads are decoded straight from the entry. External ones
    cost a seek and a read against the reader.

    Args:
        reader (FileReader):    The source the entries came from, with
                                its byte order already set.
    """

    def __init__ (self, reader):
        self.reader = reader

        # This is the one exhaustive dispatch over data types.
        self.value_readers = {
            TiffType.BYTE:      (self.read_byte,        self.read_bytes),
            TiffType.ASCII:     (self.read_string,      self.read_string),
            TiffType.SHORT:     (self.read_uint16,      self.read_uint16s),
            TiffType.LONG:      (self.read_uint32,      self.read_uint32s),
            TiffType.RATIONAL:  (self.read_urational,
                                 self.read_urationals),
            TiffType.SBYTE:     (self.read_sbyte,       self.read_sbytes),
            TiffType.UNDEFINED: (self.read_undefined,
                                 self.read_undefined),
            TiffType.SSHORT:    (self.read_int16,       self.read_int16s),
            TiffType.SLONG:     (self.read_int32,       self.read_int32s),
            TiffType.SRATIONAL: (self.read_srational,
                                 self.read_srationals),
            TiffType.FLOAT:     (self.read_float,       self.read_floats),
            TiffType.DOUBLE:    (self.read_double,      self.read_doubles),
            TiffType.IFD:       (self.read_offset,      self.read_uint32s),
        }

    ####################################################################
    ########################## Generic access ##########################
    ####################################################################

    def read_value (self, entry):
        """Read whatever value an entry holds.

        Single values come back as scalars; anything with a count other
        than one comes back as a sequence (or as str/bytes, for strings
        and undefined bytes).
        """

        if entry.datatype not in self.value_readers:
            raise UnknownDataType(entry.position, entry.tag,
                                  entry.datatype)

        scalar, sequence = self.value_readers[entry.datatype]

        if entry.count == 1:
            return scalar(entry)

        return sequence(entry)

    def describe (self, entry):
        """Describe an entry and its value, over a few lines."""
        if entry.datatype in self.value_readers:
            value = self.read_value(entry)

        else:
            value = ""

        if isinstance(value, list):
            value = "[{}]".format(" ".join(str(v) for v in value))

        return "{}Value: {}\n".format(entry, value)

    def read_unsigned (self, entry):
        """Read a single SHORT or LONG"""
        self.check_type(entry, "unsigned int",
                        TiffType.SHORT, TiffType.LONG)
        self.check_scalar(entry)

        return self.unpack_ints(entry, bytes_to_int)[0]

    def read_offset (self, entry):
        """Read a pointer to somewhere else in the file"""
        self.check_type(entry, "offset",
                        TiffType.LONG, TiffType.IFD, TiffType.SHORT)
        self.check_scalar(entry)

        return self.unpack_ints(entry, bytes_to_int)[0]

    ####################################################################
    ############################## Strings #############################
    ####################################################################

    def read_string (self, entry):
        """Read an ASCII entry, trimming its NUL terminator.

        Only one trailing NUL byte is removed; any padding before it
        (spaces, usually) stays put.
        """

        self.check_type(entry, "string", TiffType.ASCII)
        value = self.read_raw(entry)

        if value.endswith(b"\0"):
            value = value[:-1]

        return value.decode("ascii", "surrogateescape")

    def read_undefined (self, entry):
        """Read an UNDEFINED entry as raw bytes"""
        self.check_type(entry, "undefined", TiffType.UNDEFINED)
        return self.read_raw(entry)

    ####################################################################
    ############################# Integers #############################
    ####################################################################

    def read_byte (self, entry):
        return self.read_single(entry, TiffType.BYTE, bytes_to_int)

    def read_bytes (self, entry):
        """Read a BYTE entry as a bytes object"""
        self.check_type(entry, "unsigned byte", TiffType.BYTE)
        return self.read_raw(entry)

    def read_sbyte (self, entry):
        return self.read_single(entry, TiffType.SBYTE, bytes_to_sint)

    def read_sbytes (self, entry):
        return self.read_many(entry, TiffType.SBYTE, bytes_to_sint)

    def read_uint16 (self, entry):
        return self.read_single(entry, TiffType.SHORT, bytes_to_int)

    def read_uint16s (self, entry):
        return self.read_many(entry, TiffType.SHORT, bytes_to_int)

    def read_int16 (self, entry):
        return self.read_single(entry, TiffType.SSHORT, bytes_to_sint)

    def read_int16s (self, entry):
        return self.read_many(entry, TiffType.SSHORT, bytes_to_sint)

    def read_uint32 (self, entry):
        return self.read_single(entry, TiffType.LONG, bytes_to_int)

    def read_uint32s (self, entry):
        return self.read_many(entry, TiffType.LONG, bytes_to_int,
                              TiffType.IFD)

    def read_int32 (self, entry):
        return self.read_single(entry, TiffType.SLONG, bytes_to_sint)

    def read_int32s (self, entry):
        return self.read_many(entry, TiffType.SLONG, bytes_to_sint)

    ####################################################################
    ############################# Rationals ############################
    ####################################################################

    def read_urational (self, entry):
        """Read the first unsigned rational an entry points to."""
        self.check_type(entry, "unsigned rational", TiffType.RATIONAL)
        return self.read_rationals_at(entry, 1, bytes_to_int)[0]

    def read_urationals (self, entry):
        self.check_type(entry, "unsigned rational", TiffType.RATIONAL)
        return self.read_rationals_at(entry, entry.count, bytes_to_int)

    def read_srational (self, entry):
        """Read the first signed rational an entry points to."""
        self.check_type(entry, "signed rational", TiffType.SRATIONAL)
        return self.read_rationals_at(entry, 1, bytes_to_sint)[0]

    def read_srationals (self, entry):
        self.check_type(entry, "signed rational", TiffType.SRATIONAL)
        return self.read_rationals_at(entry, entry.count, bytes_to_sint)

    def read_rationals_at (self, entry, count, to_int):
        # Rationals are never inline, so the payload is always an
        # offset.
        data    = self.reader[entry.payload.offset:8 * count]
        order   = self.reader.byte_order

        return [Rational(to_int(unit[:4], order), to_int(unit[4:], order))
                for unit in split_units(data, 8)]

    ####################################################################
    ############################## Floats ##############################
    ####################################################################

    def read_float (self, entry):
        return self.read_single(entry, TiffType.FLOAT,
                                self.general_bytes_to_float)

    def read_floats (self, entry):
        return self.read_many(entry, TiffType.FLOAT,
                              self.general_bytes_to_float)

    def read_double (self, entry):
        return self.read_single(entry, TiffType.DOUBLE,
                                self.general_bytes_to_float)

    def read_doubles (self, entry):
        return self.read_many(entry, TiffType.DOUBLE,
                              self.general_bytes_to_float)

    def general_bytes_to_float (self, bytestring, byte_order):
        """Convert bytes to float using IEEE 754 specs"""
        sign_mask, exp_mask, num_mask = \
                IEEE_754_Parameters[len(bytestring)]

        # Work out the denominator for the number part.
        denominator = num_mask + 1

        # We'll also want the maximum exponent and the exponent offset.
        max_exp = exp_mask // denominator
        offset  = max_exp // 2

        as_int  = bytes_to_int(bytestring, byte_order)

        sign    = -1 if as_int & sign_mask else 1
        exp     = (as_int & exp_mask) // denominator
        num     = (as_int & num_mask)

        if exp == max_exp:
            # A zero numerator means infinity; anything else is NaN.
            if num == 0:
                return sign * infinity

            return NaN

        if exp == 0:
            # Denormal numbers treat the exponent as if it were set to 1
            # except that the denominator is not added to the numerator,
            # so our fraction remains between 0 and 1.
            return Float(sign * num, denominator, 1 - offset)

        # In a normalized value, the numerator and denominator are added
        # together to give a fraction between 1 and 2.
        return Float(sign * (num + denominator), denominator, exp - offset)

    ####################################################################
    ############################## Helpers #############################
    ####################################################################

    def read_single (self, entry, tifftype, converter):
        self.check_type(entry, TiffTypeDict[tifftype].description,
                        tifftype)
        self.check_scalar(entry)

        return self.unpack_ints(entry, converter)[0]

    def read_many (self, entry, tifftype, converter, *also_allowed):
        self.check_type(entry, TiffTypeDict[tifftype].description,
                        tifftype, *also_allowed)

        return self.unpack_ints(entry, converter)

    def unpack_ints (self, entry, converter):
        """Split an entry's raw value into units and convert each"""
        width   = TiffTypeDict[entry.datatype].bytecount
        order   = self.reader.byte_order

        return [converter(unit, order)
                for unit in split_units(self.read_raw(entry), width)]

    def read_raw (self, entry):
        """Get the exact bytes making up an entry's value"""
        length = TiffTypeDict[entry.datatype].bytecount * entry.count

        if isinstance(entry.payload, Inline):
            return entry.payload.raw[:length]

        logger.debug("Reading %d bytes for tag 0x%04x at 0x%08x",
                     length, entry.tag, entry.payload.offset)

        return self.reader[entry.payload.offset:length]

    def encode_inline (self, value, tifftype):
        """Build the four payload bytes for a single inline value.

        This is the inverse of reading an inline scalar: the value is
        left-justified and padded out with zeros.
        """

        valtype = TiffTypeDict[tifftype]

        if valtype.signed:
            packed = sint_to_bytes(value, valtype.bytecount,
                                   self.reader.byte_order)
        else:
            packed = int_to_bytes(value, valtype.bytecount,
                                  self.reader.byte_order)

        return packed + bytes(4 - valtype.bytecount)

    def check_type (self, entry, expected, *tifftypes):
        if entry.datatype not in TiffTypeDict:
            raise UnknownDataType(entry.position, entry.tag,
                                  entry.datatype)

        if entry.datatype not in tifftypes:
            raise TypeMismatch(entry.position, entry.tag,
                               TiffTypeDict[entry.datatype].description,
                               expected)

    def check_scalar (self, entry):
        if entry.count != 1:
            raise LengthMismatch(entry.position, entry.tag, entry.count)
