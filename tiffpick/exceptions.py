# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class TiffpickBaseError (Exception):
    """Root for all Tiffpick errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        For the sake of clarity, all child exceptions default to showing
        the docstring if ever converted to strings.

        >>> class MyTiffpickError (TiffpickBaseError):
        ...     '''Quick description of this subclass.'''
        ...     pass
        ...
        >>> raise MyTiffpickError
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        MyTiffpickError: Quick description of this subclass.

    """

    def __repr__ (self):
        # Assume the child exception class has implemented its own
        # __str__ method. If not, this'll look much the same as any
        # other python exception.
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        # By default, let's just keep our docstrings short.
        return self.__doc__

class FileReadError (TiffpickBaseError):
    """File Read Error

    Something unexpected has happened while reading a file.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Args:
        position (int):     The byte in the file.

    Examples:
        >>> two_fifty_six = UnexpectedEOF(256)
        >>> two_fifty_six
        UnexpectedEOF('Unexpected end of file. (0x00000100)')
        >>> str(two_fifty_six)
        'Unexpected end of file. (0x00000100)'

        The message is already set, and the output contains an
        eight-digit hexadecimal pointing (in theory) to the exact byte
        in the file where the problem occurred.

    """

    def __init__ (self, position, *args):
        # All I want to actually take in is a positional argument; the
        # message should be set by the child class.
        self.position   = position
        self.args       = args

    def __str__ (self):
        # After displaying the message, display the relevant position in
        # the file.
        return "{} (0x{:08x})".format(self.__doc__.format(*(self.args)),
                                      self.position)

class IOFailure (FileReadError):
    """Couldn't read from the source: {}"""
    pass

class UnexpectedEOF (IOFailure):
    """Unexpected end of file."""
    pass

class TiffError (FileReadError):
    """Catch-all for tiff errors."""
    pass

class MalformedHeader (TiffError):
    """Tiff header must be 8 readable bytes long."""
    pass

class UnknownByteOrder (TiffError):
    """Unknown byte order: 0x{:04X}"""
    pass

class UnknownMagicNumber (TiffError):
    """Unknown magic number: 0x{:04X}"""
    pass

class SubDirectoryNotFound (TiffError):
    """Pointer tag 0x{:04x} ({}) is not in the root IFD."""
    pass

class ResourceNotFound (TiffError):
    """Can't locate resource: tag 0x{:04x} ({}) is missing from IFD {:d}."""
    pass

class IFDCycle (TiffError):
    """IFD at 0x{:08x} has already been visited."""
    pass

class MalformedDateTime (TiffError):
    """Tag 0x{:04x} holds an unreadable date or time: {!r}"""
    pass

class EntryError (TiffError):
    """Catch-all for errors reading a single IFD entry."""
    pass

class TypeMismatch (EntryError):
    """Tag 0x{:04x} holds {} values, not {}."""
    pass

class LengthMismatch (EntryError):
    """Tag 0x{:04x} holds {:d} values; expected exactly 1."""
    pass

class UnknownDataType (EntryError):
    """Tag 0x{:04x} has unknown data type {:d}."""
    pass
