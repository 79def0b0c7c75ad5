# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  deque
from datetime       import  datetime, timedelta, timezone
from re             import  compile as re_compile
from zoneinfo       import  ZoneInfo

from ...exceptions  import  SubDirectoryNotFound, ResourceNotFound, \
                            IFDCycle, MalformedDateTime
from ...log         import  get_logger
from ..file_reader  import  FileReader
from .collector     import  IFDCollector
from .groups        import  Group, TagGroupMapping, group_pointers
from .header        import  HeaderDecoder
from .resolver      import  ValueResolver
from .tags          import  IFDTag, tag_name
from .wanted        import  WantedSet

logger = get_logger(__name__)

RE_UTC_OFFSET = re_compile(r"^([+-])(\d\d):(\d\d)$")

class TiffParser (ValueResolver):
    """Tiff Parser

    A parsing session over one TIFF-structured file (plain TIFF, CR2,
    ORF, and the like). The header is read once, when the parser is
    made; after that, each call reads only what it needs from the file.
    Nothing is cached between calls.

        >>> with open("image.cr2", "rb") as f:
        ...     parser = TiffParser(f)
        ...     entries = parser.parse(IFDTag.ImageWidth, IFDTag.Make)
        ...     parser.read_uint16(entries[IFDTag.ImageWidth])
        ...     parser.read_string(entries[IFDTag.Make])
        5184
        'Canon'

    A parser owns its file's read position while it works, so don't
    share one file object between parsers used at the same time.

    Args:
        file_object (BufferedReader):   A file opened with mode 'rb', or
                                        a bytes object.
        mapping (Optional[dict]):       Tag -> Group overrides, merged
                                        over the defaults.
    """

    header_decoder = HeaderDecoder()

    def __init__ (self, file_object, mapping = None, header = None):
        if not isinstance(file_object, FileReader):
            file_object = FileReader(file_object)

        if header is None:
            header = self.header_decoder.decode(file_object)

        else:
            # A header decoded elsewhere still decides how we read.
            file_object.byte_order = header.byte_order

        self.reader     = file_object
        self.header     = header
        self.mapping    = mapping if isinstance(mapping, TagGroupMapping) \
                                  else TagGroupMapping(mapping)
        self.collector  = IFDCollector(self.reader)

        super().__init__(self.reader)

    def __enter__ (self):
        return self

    def __exit__ (self, exc_type, exc_value, traceback):
        # The file belongs to whoever opened it.
        return False

    @property
    def byte_order (self):
        return self.header.byte_order

    @property
    def first_ifd_offset (self):
        return self.header.first_ifd_offset

    def with_mapping (self, overrides):
        """Make a parser over the same file with more tag mappings.

        The new parser shares this one's file and header. This one's
        mapping is left alone.
        """

        return self.__class__(self.reader,
                              self.mapping.extend(overrides),
                              header = self.header)

    def parse (self, *tags):
        """Collect entries for the given tags.

        Returns a dict of tag -> Entry. Tags that aren't in the file,
        or that have no group mapping, are simply not in the result;
        only a broken file or a failed read raises an error.
        """

        wanted = {
            Group.IFD0:     WantedSet(),
            Group.EXIF:     WantedSet(),
            Group.GPS_INFO: WantedSet(),
        }

        for tag in tags:
            group = self.mapping.get(tag)

            if group is None:
                logger.debug("No group for tag 0x%04x; skipping it", tag)
                continue

            wanted[group].add(tag)

            if group in group_pointers:
                # We'll need the pointer to get into the sub-IFD.
                wanted[Group.IFD0].add(group_pointers[group])

        result  = { }
        visited = {self.first_ifd_offset}

        if not wanted[Group.IFD0]:
            return result

        root = self.collector.collect(self.first_ifd_offset,
                                      wanted[Group.IFD0])
        pointer_tags = set(group_pointers.values())

        for tag, entry in root.items():
            if tag not in pointer_tags:
                result[tag] = entry

        for group in (Group.EXIF, Group.GPS_INFO):
            if not wanted[group]:
                continue

            pointer_tag = group_pointers[group]

            if pointer_tag not in root:
                raise SubDirectoryNotFound(self.first_ifd_offset,
                                           pointer_tag,
                                           tag_name(pointer_tag))

            offset = self.read_offset(root[pointer_tag])

            if offset in visited:
                raise IFDCycle(root[pointer_tag].position, offset)

            visited.add(offset)
            logger.debug("Following %s pointer to 0x%08x", group, offset)

            result.update(self.collector.collect(offset, wanted[group]))

        return result

    def ifd_offsets (self):
        """Yield the offset of every IFD in the main chain, in order.

        IFD0 comes first. Each IFD's trailing pointer leads to the next
        one, until a pointer of zero. A pointer back to an IFD we've
        already seen raises IFDCycle rather than looping forever.
        """

        worklist    = deque([self.first_ifd_offset])
        visited     = set()

        while worklist:
            offset = worklist.popleft()

            if offset in visited:
                raise IFDCycle(offset, offset)

            visited.add(offset)
            yield offset

            next_offset = self.collector.next_ifd_offset(offset)

            if next_offset != 0:
                worklist.append(next_offset)

    def ifd_offset (self, index):
        """Find the offset of IFD number index, or None"""
        for i, offset in enumerate(self.ifd_offsets()):
            if i == index:
                return offset

        return None

    def read_resource (self, offset_tag, length_tag, ifd_index = 1):
        """Read a block of bytes located by an offset/length tag pair.

        Both tags are looked for in IFD number ifd_index (IFD1 by
        default, where thumbnails usually are). If the IFD or either tag
        is missing, this raises ResourceNotFound.
        """

        ifd_offset = self.ifd_offset(ifd_index)

        if ifd_offset is None:
            raise ResourceNotFound(self.first_ifd_offset, offset_tag,
                                   tag_name(offset_tag), ifd_index)

        entries = self.collector.collect(ifd_offset,
                                         WantedSet(offset_tag, length_tag))

        for tag in (offset_tag, length_tag):
            if tag not in entries:
                raise ResourceNotFound(ifd_offset, tag, tag_name(tag),
                                       ifd_index)

        offset = self.read_offset(entries[offset_tag])
        length = self.read_unsigned(entries[length_tag])

        logger.debug("Reading %d-byte resource at 0x%08x", length, offset)

        return self.reader[offset:length]

    def read_thumbnail (self):
        """Read the embedded thumbnail (usually a JPEG) from IFD1"""
        return self.read_resource(IFDTag.ThumbnailOffset,
                                  IFDTag.ThumbnailLength)

    def dump (self, offset = None):
        """Describe every entry of an IFD (IFD0 by default)"""
        if offset is None:
            offset = self.first_ifd_offset

        return [self.describe(entry)
                for entry in list(self.collector.entries(offset))]

    def read_original_datetime (self):
        """Read when the photo was taken.

        Returns a datetime from DateTimeOriginal, with its timezone set
        from OffsetTimeOriginal if the file has one. Returns None if the
        file doesn't record DateTimeOriginal at all, or records it as
        blanks. A value that can't be read as a date (or a timezone that
        can't be found) raises MalformedDateTime.
        """

        try:
            entries = self.parse(IFDTag.DateTimeOriginal,
                                 IFDTag.OffsetTimeOriginal)

        except SubDirectoryNotFound:
            # No Exif IFD means no DateTimeOriginal.
            return None

        if IFDTag.DateTimeOriginal not in entries:
            return None

        entry   = entries[IFDTag.DateTimeOriginal]
        text    = self.read_string(entry).strip("\0 ")

        if is_blank_datetime(text):
            # Cameras without a clock fill the field with blanks.
            return None

        try:
            taken = datetime.strptime(text, "%Y:%m:%d %H:%M:%S")

        except ValueError as e:
            raise MalformedDateTime(entry.position, entry.tag, text) from e

        if IFDTag.OffsetTimeOriginal not in entries:
            return taken

        entry   = entries[IFDTag.OffsetTimeOriginal]
        offset  = self.read_string(entry).strip("\0 ")

        if is_blank_datetime(offset):
            return taken

        try:
            tzinfo = self.make_tzinfo(offset)

        except (KeyError, ValueError) as e:
            # ZoneInfoNotFoundError is a KeyError.
            raise MalformedDateTime(entry.position, entry.tag, offset) from e

        return taken.replace(tzinfo = tzinfo)

    def make_tzinfo (self, offset):
        match = RE_UTC_OFFSET.match(offset)

        if match is None:
            # Some cameras write a zone name instead.
            return ZoneInfo(offset)

        sign, hours, minutes = match.groups()
        delta = timedelta(hours = int(hours), minutes = int(minutes))

        return timezone(-delta if sign == "-" else delta)

def is_blank_datetime (text):
    """Check for an empty or "    :  :     :  :  " placeholder"""
    return text.strip(" :") == ""
