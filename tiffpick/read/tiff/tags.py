# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple

from ...internal    import  make_backways_map

class IFDTag:
    """IFD tags by name"""
    # GPSInfo IFD. These codes only mean anything inside that IFD.
    GPSLatitudeRef              = 0x0001
    GPSLatitude                 = 0x0002
    GPSLongitudeRef             = 0x0003
    GPSLongitude                = 0x0004
    GPSAltitudeRef              = 0x0005
    GPSAltitude                 = 0x0006
    GPSTimeStamp                = 0x0007
    GPSDateStamp                = 0x001d

    # IFD0
    ImageWidth                  = 0x0100
    ImageHeight                 = 0x0101
    BitsPerSample               = 0x0102
    Compression                 = 0x0103
    PhotometricInterpretation   = 0x0106
    ImageDescription            = 0x010e
    Make                        = 0x010f

    Model                       = 0x0110
    StripOffsets                = 0x0111
    Orientation                 = 0x0112
    SamplesPerPixel             = 0x0115
    RowsPerStrip                = 0x0116
    StripByteCounts             = 0x0117

    XResolution                 = 0x011a
    YResolution                 = 0x011b
    ResolutionUnit              = 0x0128
    Software                    = 0x0131
    DateTime                    = 0x0132
    Artist                      = 0x013b

    # IFD1 in most raw formats (PreviewImageStart and
    # PreviewImageLength when they turn up in IFD0).
    ThumbnailOffset             = 0x0201
    ThumbnailLength             = 0x0202

    Copyright                   = 0x8298

    # Exif IFD
    ExposureTime                = 0x829a
    FNumber                     = 0x829d
    ExposureProgram             = 0x8822
    ISO                         = 0x8827
    DateTimeOriginal            = 0x9003
    DateTimeDigitized           = 0x9004
    OffsetTime                  = 0x9010
    OffsetTimeOriginal          = 0x9011
    ExposureBiasValue           = 0x9204
    Flash                       = 0x9209
    FocalLength                 = 0x920a
    MakerNote                   = 0x927c
    LensModel                   = 0xa434

    # Pointers to sub-IFDs. They live in IFD0.
    ExifIFD                     = 0x8769
    GPSInfoIFD                  = 0x8825

TiffTagNameDict = make_backways_map(IFDTag)

class TiffType:
    """IFD value types by name"""
    # Everything really should be one of these five types.
    BYTE        = 1
    ASCII       = 2
    SHORT       = 3
    LONG        = 4
    RATIONAL    = 5

    # But each of these is also possible.
    SBYTE       = 6
    UNDEFINED   = 7
    SSHORT      = 8
    SLONG       = 9
    SRATIONAL   = 10
    FLOAT       = 11
    DOUBLE      = 12

    # Some writers mark sub-IFD pointers with this instead of LONG.
    IFD         = 13

# TIFF data types will be stored in a dictionary of named tuples.
TiffTypeDict    = { }
TiffTypeTuple   = namedtuple("TiffTypeTuple", ("tifftype",
                                               "bytecount",
                                               "signed",
                                               "description"))

for tifftype, bytecount, signed, description in (
        (TiffType.BYTE,         1,  False,  "unsigned byte"),
        (TiffType.ASCII,        1,  False,  "string"),
        (TiffType.SHORT,        2,  False,  "unsigned short 16bits"),
        (TiffType.LONG,         4,  False,  "unsigned long 32bits"),
        (TiffType.RATIONAL,     8,  False,  "unsigned rational"),
        (TiffType.SBYTE,        1,  True,   "signed byte"),
        (TiffType.UNDEFINED,    1,  False,  "unsigned byte sequence"),
        (TiffType.SSHORT,       2,  True,   "signed short 16bits"),
        (TiffType.SLONG,        4,  True,   "signed long 32bits"),
        (TiffType.SRATIONAL,    8,  True,   "signed rational"),
        (TiffType.FLOAT,        4,  True,   "single precision IEEE float"),
        (TiffType.DOUBLE,       8,  True,   "double precision IEEE float"),
        (TiffType.IFD,          4,  False,  "IFD offset")):
    TiffTypeDict[tifftype] = TiffTypeTuple(tifftype, bytecount, signed,
                                           description)

# These are never stored inline, however short they are.
always_external_types = frozenset((
    TiffType.ASCII,
    TiffType.RATIONAL,
    TiffType.SRATIONAL,
))

def tag_name (tag):
    """Name a tag, falling back on its hex code."""
    return TiffTagNameDict.get(tag, "0x{:04x}".format(tag))
