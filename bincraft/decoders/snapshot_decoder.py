import logging

from bincraft.decoders.decompressor import decompress
from bincraft.decoders.header_decoder import decode_header
from bincraft.decoders.stride_splitter import split_records
from bincraft.models.snapshot import Snapshot
from bincraft.utils.handlers import decode_records, decode_records_parallel


class SnapshotDecoder:
    """Assemble a Snapshot from a binCraft buffer.

    Each call is independent: header, records and aircraft are rebuilt from the
    buffer every time. With `workers` > 1 the records are decoded in a process
    pool; the aircraft keep input record order either way.
    """

    def __init__(self, workers: int = None):
        self.workers = workers
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def decode(self, buffer) -> Snapshot:
        header = decode_header(buffer)
        records = split_records(buffer, header.stride)
        self.logger.debug("Snapshot at %.3f: %d records of %d bytes", header.now, len(records), header.stride)

        if self.workers and self.workers > 1 and len(records) > 1:
            aircraft = decode_records_parallel(records, header.use_message_rate, header.stride, self.workers)
        else:
            aircraft = decode_records(records, header.use_message_rate, header.stride)

        return Snapshot.from_header(header, aircraft)

    def decode_compressed(self, payload: bytes) -> Snapshot:
        return self.decode(decompress(payload))


def decode_snapshot(buffer) -> Snapshot:
    return SnapshotDecoder().decode(buffer)


def decode_compressed_snapshot(payload: bytes) -> Snapshot:
    return SnapshotDecoder().decode_compressed(payload)
