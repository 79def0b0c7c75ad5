# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from ...log         import  get_logger
from .entry         import  Entry, classify_payload

logger = get_logger(__name__)

class IFDCollector:
    """IFD Collector

    This reads entries out of IFDs at known offsets. It never reads an
    IFD in full unless asked to: collect() stops as soon as the scan
    passes the largest tag it's looking for, since IFD entries are
    written in ascending tag order. An IFD can hold tens of thousands of
    entries, so this matters.

    Args:
        reader (FileReader):    Where to read from. Its byte order must
                                already be set from the tiff header.
    """

    entry_length    = 12
    count_length    = 2
    pointer_length  = 4

    def __init__ (self, reader):
        self.reader = reader

    def collect (self, offset, wanted):
        """Collect the wanted entries from the IFD at offset.

        Returns a dict of tag -> Entry holding only the wanted tags that
        were found. Tags that aren't there are just left out.

        The scan stops at the first entry whose tag is at least the
        largest wanted tag, whether or not that entry is wanted. An
        empty WantedSet therefore stops after the first entry.
        """

        entries     = { }
        entry_count = self.read_entry_count(offset)

        logger.debug("Scanning %d entries at 0x%08x for %r",
                     entry_count, offset, wanted)

        for i in range(entry_count):
            position    = self.entry_position(offset, i)
            record      = self.reader[position:self.entry_length]
            tag         = self.reader.bytes_to_int(record[0:2])

            if tag in wanted:
                entries[tag] = self.decode_entry(record, position)

            if tag >= wanted.max:
                # Nothing past this point can be something we want.
                logger.debug("Stopped at tag 0x%04x after %d of %d "
                             "entries", tag, i + 1, entry_count)
                break

        return entries

    def entries (self, offset):
        """Yield every entry of the IFD at offset, in file order."""
        for i in range(self.read_entry_count(offset)):
            position    = self.entry_position(offset, i)
            record      = self.reader[position:self.entry_length]

            yield self.decode_entry(record, position)

    def next_ifd_offset (self, offset):
        """Read the pointer that follows the IFD at offset.

        Zero means the IFD at offset is the last one.
        """

        entry_count = self.read_entry_count(offset)
        position    = self.entry_position(offset, entry_count)

        return self.reader.read_int_at(position, self.pointer_length)

    def read_entry_count (self, offset):
        return self.reader.read_int_at(offset, self.count_length)

    def entry_position (self, offset, index):
        return offset + self.count_length + self.entry_length * index

    def decode_entry (self, record, position):
        """Turn a 12-byte record into an Entry."""
        tag         = self.reader.bytes_to_int(record[0:2])
        datatype    = self.reader.bytes_to_int(record[2:4])
        count       = self.reader.bytes_to_int(record[4:8])
        payload     = classify_payload(datatype, count, record[8:12],
                                       self.reader.byte_order)

        return Entry(tag, datatype, count, payload, position)
