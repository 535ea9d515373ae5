import logging

from bincraft.decoders.field_table import MIN_RECORD_WIDTH
from bincraft.exceptions import FormatError
from bincraft.models.snapshot import SnapshotHeader

logger = logging.getLogger(__name__)

# Last byte read by the header is format_version at [72, 76)
HEADER_MIN_SIZE = 76
# 2^32 ms expressed in seconds
TIME_HIGH_SCALE = 4294967.296


def _u32(buffer, offset: int) -> int:
    return int.from_bytes(buffer[offset:offset + 4], byteorder='little')


def _s32(buffer, offset: int) -> int:
    return int.from_bytes(buffer[offset:offset + 4], byteorder='little', signed=True)


def _s16(buffer, offset: int) -> int:
    return int.from_bytes(buffer[offset:offset + 2], byteorder='little', signed=True)


def decode_header(buffer) -> SnapshotHeader:
    """Parse the fixed preamble of a decompressed snapshot.

    The header region spans the first `stride` bytes of the buffer; aircraft
    records start right after it.
    """
    if len(buffer) < 12:
        logger.warning("Buffer too short for a snapshot header: %d bytes", len(buffer))
        raise FormatError(f"Buffer too short for a snapshot header: {len(buffer)} bytes")

    stride = _u32(buffer, 8)
    if stride == 0 or stride % 4 != 0:
        logger.warning("Invalid stride %d", stride)
        raise FormatError(f"Invalid stride {stride}: must be a positive multiple of 4")

    if stride < MIN_RECORD_WIDTH:
        logger.warning("Stride %d narrower than the %d-byte record layout", stride, MIN_RECORD_WIDTH)
        raise FormatError(f"Stride {stride} is narrower than the {MIN_RECORD_WIDTH}-byte record layout")

    required = max(HEADER_MIN_SIZE, stride)
    if len(buffer) < required:
        logger.warning("Buffer shorter than header region: %d < %d bytes", len(buffer), required)
        raise FormatError(f"Buffer shorter than header region: {len(buffer)} < {required} bytes")

    time_low = _u32(buffer, 0)
    time_high = _u32(buffer, 4)

    header = SnapshotHeader(
        now=time_low / 1000 + time_high * TIME_HIGH_SCALE,
        stride=stride,
        global_ac_count_withpos=_u32(buffer, 12),
        globe_index=_u32(buffer, 16),
        south=_s16(buffer, 20),
        west=_s16(buffer, 22),
        north=_s16(buffer, 24),
        east=_s16(buffer, 26),
        messages=_u32(buffer, 28),
        receiver_lat=_s32(buffer, 64) / 1e6,
        receiver_lon=_s32(buffer, 68) / 1e6,
        format_version=_u32(buffer, 72),
    )
    logger.debug("Header: stride=%d globe_index=%d version=%d", stride, header.globe_index,
                 header.format_version)
    return header
