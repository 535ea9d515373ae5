"""Layout of one binCraft aircraft record.

Three tables describe the record: scaled integer lanes, packed byte fields and
the validity bits that null fields out. The generic routines below apply them;
the aircraft decoder only adds the steps whose order matters.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from bincraft.decoders.lanes import RecordLanes

# Every offset read by the decoder lies below this width
MIN_RECORD_WIDTH = 107

VALIDITY_OFFSET = 73  # First of the five validity bytes [73, 78)
VALIDITY_SIZE = 5


@dataclass(frozen=True)
class LaneField:
    """Scaled integer read from a 16- or 32-bit lane."""
    name: str
    lane: str  # 'u16', 's16', 'u32' or 's32'
    index: int
    multiplier: int = 1
    divisor: Optional[float] = None

    def decode(self, lanes: RecordLanes) -> Union[int, float]:
        raw = int(getattr(lanes, self.lane)[self.index])
        if self.divisor is not None:
            return raw / self.divisor
        return self.multiplier * raw


@dataclass(frozen=True)
class ByteField:
    """Bit group packed inside a single record byte."""
    name: str
    offset: int
    mask: int = 0xFF
    shift: int = 0

    def decode(self, lanes: RecordLanes) -> int:
        return (int(lanes.u8[self.offset]) & self.mask) >> self.shift


@dataclass(frozen=True)
class ValidityBit:
    """Producer flag; when clear, every field in `fields` is absent."""
    byte: int
    bit: int
    fields: Tuple[str, ...]

    @property
    def mask(self) -> int:
        return 1 << self.bit


LANE_FIELDS = (
    LaneField('seen_pos', 'u16', 2, divisor=10),
    LaneField('seen', 'u16', 3, divisor=10),
    LaneField('lon', 's32', 2, divisor=1e6),
    LaneField('lat', 's32', 3, divisor=1e6),
    LaneField('baro_rate', 's16', 8, multiplier=8),
    LaneField('geom_rate', 's16', 9, multiplier=8),
    LaneField('alt_baro', 's16', 10, multiplier=25),
    LaneField('alt_geom', 's16', 11, multiplier=25),
    LaneField('nav_altitude_mcp', 'u16', 12, multiplier=4),
    LaneField('nav_altitude_fms', 'u16', 13, multiplier=4),
    LaneField('nav_qnh', 's16', 14, divisor=10),
    LaneField('nav_heading', 's16', 15, divisor=90),
    # u16[16] is the squawk, decoded as text
    LaneField('gs', 's16', 17, divisor=10),
    LaneField('mach', 's16', 18, divisor=1000),
    LaneField('roll', 's16', 19, divisor=100),
    LaneField('track', 's16', 20, divisor=90),
    LaneField('track_rate', 's16', 21, divisor=100),
    LaneField('mag_heading', 's16', 22, divisor=90),
    LaneField('true_heading', 's16', 23, divisor=90),
    LaneField('wd', 's16', 24),
    LaneField('ws', 's16', 25),
    LaneField('oat', 's16', 26),
    LaneField('tat', 's16', 27),
    LaneField('tas', 'u16', 28),
    LaneField('ias', 'u16', 29),
    LaneField('rc', 'u16', 30),
    LaneField('db_flags', 'u16', 43),
)

# Lane 31 depends on the snapshot's encoding mode
MESSAGES_FIELD = LaneField('messages', 'u16', 31)
MESSAGE_RATE_FIELD = LaneField('message_rate', 'u16', 31, divisor=10)

SQUAWK_LANE = 16
LAT_LANE = 3  # s32

BYTE_FIELDS = (
    ByteField('nic', 65),
    ByteField('emergency', 67, 0x0F),
    ByteField('airground', 68, 0x0F),
    ByteField('nav_altitude_src', 68, 0xF0, 4),
    ByteField('sil_type', 69, 0x0F),
    ByteField('adsb_version', 69, 0xF0, 4),
    ByteField('adsr_version', 70, 0x0F),
    ByteField('tisb_version', 70, 0xF0, 4),
    ByteField('nac_p', 71, 0x0F),
    ByteField('nac_v', 71, 0xF0, 4),
    ByteField('sil', 72, 0x03),
    ByteField('gva', 72, 0x0C, 2),
    ByteField('sda', 72, 0x30, 4),
    ByteField('nic_a', 72, 0x40, 6),
    ByteField('nic_c', 72, 0x80, 7),
    # Value bits sharing the first validity byte
    ByteField('nic_baro', 73, 0x01),
    ByteField('alert1', 73, 0x02, 1),
    ByteField('spi', 73, 0x04, 2),
    ByteField('receiver_count', 104),
    ByteField('extra_flags', 106),
)

CATEGORY_OFFSET = 64
NAV_MODES_OFFSET = 66
SIGNAL_TYPE_FIELD = ByteField('signal_type', 67, 0xF0, 4)
RSSI_OFFSET = 105

TEXT_FIELDS = (
    ('flight', 78, 86),
    ('tail', 88, 92),
    ('registration', 92, 104),
)

VALIDITY_BITS = (
    # byte 73 (bits 0-2 hold nic_baro / alert1 / spi values)
    ValidityBit(73, 3, ('flight',)),
    ValidityBit(73, 4, ('alt_baro',)),
    ValidityBit(73, 5, ('alt_geom',)),
    ValidityBit(73, 6, ('lat', 'lon', 'seen_pos')),
    ValidityBit(73, 7, ('gs',)),
    # byte 74
    ValidityBit(74, 0, ('ias',)),
    ValidityBit(74, 1, ('tas',)),
    ValidityBit(74, 2, ('mach',)),
    ValidityBit(74, 3, ('track',)),
    ValidityBit(74, 4, ('track_rate',)),
    ValidityBit(74, 5, ('roll',)),
    ValidityBit(74, 6, ('mag_heading',)),
    ValidityBit(74, 7, ('true_heading',)),
    # byte 75
    ValidityBit(75, 0, ('baro_rate',)),
    ValidityBit(75, 1, ('geom_rate',)),
    ValidityBit(75, 2, ('nic_a',)),
    ValidityBit(75, 3, ('nic_c',)),
    ValidityBit(75, 4, ('nic_baro',)),
    ValidityBit(75, 5, ('nac_p',)),
    ValidityBit(75, 6, ('nac_v',)),
    ValidityBit(75, 7, ('sil',)),
    # byte 76
    ValidityBit(76, 0, ('gva',)),
    ValidityBit(76, 1, ('sda',)),
    ValidityBit(76, 2, ('squawk',)),
    ValidityBit(76, 3, ('emergency',)),
    ValidityBit(76, 4, ('spi',)),
    ValidityBit(76, 5, ('nav_qnh',)),
    ValidityBit(76, 6, ('nav_altitude_mcp',)),
    ValidityBit(76, 7, ('nav_altitude_fms',)),
    # byte 77
    ValidityBit(77, 0, ('nav_altitude_src',)),
    ValidityBit(77, 1, ('nav_heading',)),
    ValidityBit(77, 2, ('nav_modes',)),
    ValidityBit(77, 3, ('alert1',)),
    ValidityBit(77, 4, ('wd', 'ws')),
    ValidityBit(77, 5, ('oat', 'tat')),
)

NAV_MODES_VALID = ValidityBit(77, 2, ('nav_modes',))

# Value an absent field takes instead of None
ABSENT_VALUES = {'nav_modes': ()}

# NoGPS sentinel: latitude lane pinned to INT32_MAX
NOGPS_LAT_SENTINEL = 2147483647
NOGPS_FORCED_BITS = (ValidityBit(73, 4, ('alt_baro',)), ValidityBit(73, 6, ('lat', 'lon', 'seen_pos')))


def decode_fields(lanes: RecordLanes, fields) -> dict:
    return {field.name: field.decode(lanes) for field in fields}


def apply_validity(values: dict, validity: bytes) -> dict:
    """Return a copy of `values` with every field whose validity bit is clear set absent."""
    masked = dict(values)
    for flag in VALIDITY_BITS:
        if not validity[flag.byte - VALIDITY_OFFSET] & flag.mask:
            for name in flag.fields:
                masked[name] = ABSENT_VALUES.get(name)
    return masked


def is_set(validity: bytes, flag: ValidityBit) -> bool:
    return bool(validity[flag.byte - VALIDITY_OFFSET] & flag.mask)
