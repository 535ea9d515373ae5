import mmap
import os
from typing import Iterator

from bincraft.decoders.decompressor import decompress
from bincraft.decoders.header_decoder import decode_header
from bincraft.decoders.snapshot_decoder import SnapshotDecoder
from bincraft.decoders.stride_splitter import iter_records
from bincraft.models.record import AircraftRecord
from bincraft.models.snapshot import Snapshot


class BinCraftFileReader:
    """Read a binCraft snapshot stored on disk (zstd-compressed unless `compressed` is False)."""

    def __init__(self, file_path: str, compressed: bool = True):
        self.file_path = file_path
        self.compressed = compressed

    def read_buffer(self) -> bytes:
        """Return the decompressed snapshot buffer, reading the file through a memory map."""
        with open(self.file_path, 'rb') as file:
            if os.fstat(file.fileno()).st_size == 0:
                payload = b""
            else:
                with mmap.mmap(file.fileno(), 0, access=mmap.ACCESS_READ) as mmapped_file:
                    payload = mmapped_file[:]

        if self.compressed:
            return decompress(payload)
        return payload

    def read_records(self) -> Iterator[AircraftRecord]:
        """Yield the raw fixed-width aircraft records of the snapshot."""
        buffer = self.read_buffer()
        header = decode_header(buffer)
        yield from iter_records(buffer, header.stride)

    def read_snapshot(self, workers: int = None) -> Snapshot:
        return SnapshotDecoder(workers=workers).decode(self.read_buffer())
