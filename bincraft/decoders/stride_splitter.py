import logging
from typing import Iterator, List

from bincraft.models.record import AircraftRecord

logger = logging.getLogger(__name__)


def iter_records(buffer, stride: int) -> Iterator[AircraftRecord]:
    """Yield the fixed-width aircraft records that follow the header region."""
    position = stride
    index = 0
    buffer_size = len(buffer)

    # Ensures a full record is left; a shorter tail is producer padding or truncation
    while position + stride <= buffer_size:
        yield AircraftRecord(
            index=index,
            block_offset=position,
            raw_data=bytes(buffer[position:position + stride]),
        )
        position += stride
        index += 1

    if position < buffer_size:
        logger.debug("Dropping %d trailing bytes after record %d", buffer_size - position, index)


def split_records(buffer, stride: int) -> List[AircraftRecord]:
    return list(iter_records(buffer, stride))
