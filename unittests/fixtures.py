# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
from io             import  BytesIO

from tiffpick.internal          import  int_to_bytes, sint_to_bytes
from tiffpick.read.tiff.tags    import  IFDTag, TiffType, TiffTypeDict

# Four payload bytes to write exactly as given.
RawPayload = namedtuple("RawPayload", ("raw",))

class IFDBuilder:

    def __init__ (self):
        self.entries = [ ]
        self.next = None
        self.keep_order = False

    def add (self, tag, datatype, count, value):
        """Add an entry.

        An int value is written inline. A bytes value is written in the
        data area, with its offset as the payload. An IFDBuilder value
        becomes that IFD's offset.
        """
        self.entries.append((tag, datatype, count, value))
        return self

    def short (self, tag, *values):
        return self.numbers(tag, TiffType.SHORT, values)

    def long (self, tag, *values):
        return self.numbers(tag, TiffType.LONG, values)

    def numbers (self, tag, datatype, values):
        if len(values) == 1:
            return self.add(tag, datatype, 1, values[0])

        return self.add(tag, datatype, len(values),
                        DeferredNumbers(datatype, values))

    def ascii (self, tag, text):
        data = text.encode("ascii") + b"\0"
        return self.add(tag, TiffType.ASCII, len(data), data)

    def rational (self, tag, *pairs):
        return self.add(tag, TiffType.RATIONAL, len(pairs),
                        DeferredNumbers(TiffType.LONG,
                                        [n for pair in pairs
                                           for n in pair]))

    def srational (self, tag, *pairs):
        return self.add(tag, TiffType.SRATIONAL, len(pairs),
                        DeferredNumbers(TiffType.SLONG,
                                        [n for pair in pairs
                                           for n in pair]))

    def undefined (self, tag, data):
        return self.add(tag, TiffType.UNDEFINED, len(data), data)

    def pointer (self, tag, ifd):
        return self.add(tag, TiffType.LONG, 1, ifd)

    def resource (self, offset_tag, length_tag, data):
        self.add(offset_tag, TiffType.LONG, 1, data)
        return self.add(length_tag, TiffType.LONG, 1, len(data))

    def ordered (self):
        if self.keep_order:
            return list(self.entries)

        return sorted(self.entries, key = lambda entry: entry[0])

    @property
    def size (self):
        return 2 + 12 * len(self.entries) + 4

class DeferredNumbers (namedtuple("DeferredNumbers", ("datatype",
                                                      "values"))):
    """Numbers to be packed once the byte order is known"""

    def pack (self, byte_order):
        return b"".join(pack_number(v, self.datatype, byte_order)
                        for v in self.values)

def pack_number (value, datatype, byte_order):
    valtype = TiffTypeDict[datatype]

    if valtype.signed:
        return sint_to_bytes(value, valtype.bytecount, byte_order)

    return int_to_bytes(value, valtype.bytecount, byte_order)

class TiffBuilder:
    """Lays out a TIFF-structured file in memory.

    The header comes first, then every IFD (the main chain and then any
    sub-IFDs), then a data area holding every external value in the
    order the IFDs refer to them.
    """

    def __init__ (self, byte_order = "little", magic = 42,
                  header_extra = b""):
        self.byte_order = byte_order
        self.magic = magic
        self.header_extra = header_extra
        self.first_offset = None
        self.chain = [ ]
        self.subs = [ ]

    def ifd (self):
        new = IFDBuilder()
        self.chain.append(new)
        return new

    def sub_ifd (self):
        new = IFDBuilder()
        self.subs.append(new)
        return new

    def build (self):
        order = self.byte_order
        ifds = self.chain + self.subs

        pos = 8 + len(self.header_extra)
        offsets = { }

        for ifd in ifds:
            offsets[id(ifd)] = pos
            pos += ifd.size

        body = [ ]
        data = [ ]

        for ifd in ifds:
            body.append(int_to_bytes(len(ifd.entries), 2, order))

            for tag, datatype, count, value in ifd.ordered():
                if isinstance(value, IFDBuilder):
                    payload = int_to_bytes(offsets[id(value)], 4, order)

                elif isinstance(value, RawPayload):
                    payload = value.raw

                elif isinstance(value, (bytes, DeferredNumbers)):
                    if isinstance(value, DeferredNumbers):
                        value = value.pack(order)

                    payload = int_to_bytes(pos, 4, order)
                    data.append(value)
                    pos += len(value)

                else:
                    packed = pack_number(value, datatype, order)
                    payload = packed + bytes(4 - len(packed))

                body.append(int_to_bytes(tag, 2, order)
                            + int_to_bytes(datatype, 2, order)
                            + int_to_bytes(count, 4, order)
                            + payload)

            body.append(int_to_bytes(self.next_offset(ifd, offsets),
                                     4, order))

        if self.first_offset is not None:
            first_offset = self.first_offset
        elif self.chain:
            first_offset = offsets[id(self.chain[0])]
        else:
            first_offset = 0

        header = (b"II" if order == "little" else b"MM") \
                + int_to_bytes(self.magic, 2, order) \
                + int_to_bytes(first_offset, 4, order) \
                + self.header_extra

        return header + b"".join(body) + b"".join(data)

    def next_offset (self, ifd, offsets):
        if isinstance(ifd.next, IFDBuilder):
            return offsets[id(ifd.next)]

        if ifd.next is not None:
            return ifd.next

        if ifd in self.chain:
            index = self.chain.index(ifd)

            if index + 1 < len(self.chain):
                return offsets[id(self.chain[index + 1])]

        return 0

    def stream (self):
        return BytesIO(self.build())

class CountingBytesIO (BytesIO):
    """A BytesIO that remembers the length of every read"""

    def __init__ (self, *args):
        super().__init__(*args)
        self.reads = [ ]

    def read (self, size = -1):
        self.reads.append(size)
        return super().read(size)

JPEG_THUMBNAIL = b"\xff\xd8\xff\xe0\0\x10JFIF\0" + bytes(range(64)) \
               + b"\xff\xd9"

MAKER_NOTE = b"opaque maker note bytes"

def cr2_like ():
    """A little-endian CR2-shaped file with Exif, GPS, and a thumbnail"""
    builder = TiffBuilder("little", 42,
                          header_extra = b"CR\x02\x00\0\0\0\0")
    ifd0 = builder.ifd()
    ifd1 = builder.ifd()
    exif = builder.sub_ifd()
    gps = builder.sub_ifd()

    ifd0.short(IFDTag.ImageWidth, 5184)
    ifd0.short(IFDTag.ImageHeight, 3456)
    ifd0.short(IFDTag.BitsPerSample, 8, 8, 8)
    ifd0.short(IFDTag.Compression, 6)
    ifd0.ascii(IFDTag.Make, "Canon")
    ifd0.ascii(IFDTag.Model, "Canon EOS 80D")
    ifd0.short(IFDTag.Orientation, 1)
    ifd0.rational(IFDTag.XResolution, (72, 1))
    ifd0.ascii(IFDTag.DateTime, "2021:11:19 12:21:10")
    ifd0.pointer(IFDTag.ExifIFD, exif)
    ifd0.pointer(IFDTag.GPSInfoIFD, gps)

    ifd1.short(IFDTag.Compression, 6)
    ifd1.resource(IFDTag.ThumbnailOffset, IFDTag.ThumbnailLength,
                  JPEG_THUMBNAIL)

    exif.rational(IFDTag.ExposureTime, (1, 40))
    exif.rational(IFDTag.FNumber, (56, 10))
    exif.short(IFDTag.ISO, 400)
    exif.ascii(IFDTag.DateTimeOriginal, "2021:11:19 12:21:10")
    exif.ascii(IFDTag.OffsetTimeOriginal, "+01:00")
    exif.srational(IFDTag.ExposureBiasValue, (-1, 3))
    exif.undefined(IFDTag.MakerNote, MAKER_NOTE)

    gps.ascii(IFDTag.GPSLatitudeRef, "N")
    gps.rational(IFDTag.GPSLatitude, (52, 1), (22, 1), (1230, 100))
    gps.ascii(IFDTag.GPSLongitudeRef, "E")
    gps.rational(IFDTag.GPSLongitude, (4, 1), (53, 1), (4000, 100))

    return builder

def orf_like ():
    """A little-endian ORF-shaped file: "IIRO", no thumbnail IFD"""
    builder = TiffBuilder("little", 0x4f52)
    ifd0 = builder.ifd()
    exif = builder.sub_ifd()

    ifd0.long(IFDTag.ImageWidth, 4640)
    ifd0.long(IFDTag.ImageHeight, 3472)
    ifd0.short(IFDTag.BitsPerSample, 16)
    ifd0.ascii(IFDTag.Make, "OLYMPUS CORPORATION    ")
    ifd0.ascii(IFDTag.Model, "E-M10MarkII     ")
    ifd0.pointer(IFDTag.ExifIFD, exif)

    exif.rational(IFDTag.ExposureTime, (1, 200))
    exif.ascii(IFDTag.DateTimeOriginal, "2016:08:12 13:32:54")

    return builder

def big_endian_tiff ():
    """A big-endian TIFF with inline shorts and longs"""
    builder = TiffBuilder("big", 42)
    ifd0 = builder.ifd()

    ifd0.short(IFDTag.ImageWidth, 300)
    ifd0.long(IFDTag.ImageHeight, 70000)
    ifd0.short(IFDTag.BitsPerSample, 8, 16)
    ifd0.ascii(IFDTag.Make, "Motorola")
    ifd0.add(IFDTag.Orientation, TiffType.SSHORT, 1, -2)

    return builder
