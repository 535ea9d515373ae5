import struct

import pytest

STRIDE = 112


class RecordBuilder:
    """Assemble a raw aircraft record lane by lane."""

    def __init__(self, stride: int = STRIDE):
        self.data = bytearray(stride)

    def u32(self, lane: int, value: int) -> "RecordBuilder":
        struct.pack_into('<I', self.data, lane * 4, value)
        return self

    def s32(self, lane: int, value: int) -> "RecordBuilder":
        struct.pack_into('<i', self.data, lane * 4, value)
        return self

    def u16(self, lane: int, value: int) -> "RecordBuilder":
        struct.pack_into('<H', self.data, lane * 2, value)
        return self

    def s16(self, lane: int, value: int) -> "RecordBuilder":
        struct.pack_into('<h', self.data, lane * 2, value)
        return self

    def byte(self, offset: int, value: int) -> "RecordBuilder":
        self.data[offset] = value
        return self

    def text(self, offset: int, value: bytes) -> "RecordBuilder":
        self.data[offset:offset + len(value)] = value
        return self

    def all_valid(self) -> "RecordBuilder":
        for offset in range(73, 78):
            self.data[offset] |= 0xF8 if offset == 73 else 0xFF
        return self

    def clear_bit(self, offset: int, bit: int) -> "RecordBuilder":
        self.data[offset] &= ~(1 << bit) & 0xFF
        return self

    def build(self) -> bytes:
        return bytes(self.data)


def build_header(stride: int = STRIDE, time_low: int = 0, time_high: int = 0, ac_count: int = 0,
                 globe_index: int = 0, bounds=(0, 0, 0, 0), messages: int = 0,
                 receiver_lat: int = 0, receiver_lon: int = 0, version: int = 0) -> bytes:
    header = bytearray(stride)
    struct.pack_into('<5I', header, 0, time_low, time_high, stride, ac_count, globe_index)
    struct.pack_into('<4h', header, 20, *bounds)
    struct.pack_into('<I', header, 28, messages)
    struct.pack_into('<iiI', header, 64, receiver_lat, receiver_lon, version)
    return bytes(header)


def sample_record(hex_value: int = 0x4CA123, stride: int = STRIDE) -> bytes:
    """A fully valid airborne record with typical values."""
    return (
        RecordBuilder(stride)
        .u32(0, hex_value)
        .u16(2, 12)  # seen_pos 1.2
        .u16(3, 5)  # seen 0.5
        .s32(2, 2078123)  # lon 2.078123
        .s32(3, 41297445)  # lat 41.297445
        .s16(8, -64)  # baro_rate -512
        .s16(10, 1400)  # alt_baro 35000
        .s16(11, 1420)  # alt_geom 35500
        .u16(16, 0x7521)
        .s16(17, 4505)  # gs 450.5
        .s16(18, 780)  # mach 0.78
        .s16(20, 16200)  # track 180.0
        .u16(29, 280)
        .u16(31, 321)
        .byte(64, 0xA3)
        .byte(65, 8)
        .byte(67, 0x00)
        .text(78, b"RYR4AB  ")
        .text(88, b"B738")
        .text(92, b"EI-DCL")
        .byte(104, 3)
        .byte(105, 128)
        .all_valid()
        .build()
    )


def build_snapshot(records, stride: int = STRIDE, trailing: bytes = b"", **header_fields) -> bytes:
    return build_header(stride=stride, **header_fields) + b"".join(records) + trailing


@pytest.fixture
def record_builder():
    return RecordBuilder


@pytest.fixture
def make_header():
    return build_header


@pytest.fixture
def make_record():
    return sample_record


@pytest.fixture
def make_snapshot():
    return build_snapshot
