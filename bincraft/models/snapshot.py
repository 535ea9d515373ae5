from dataclasses import dataclass, field
from typing import Tuple

from .aircraft import Aircraft

MESSAGE_RATE_MIN_VERSION = 20220916


@dataclass(frozen=True)
class SnapshotHeader:
    """Fixed preamble of a decompressed binCraft snapshot."""
    now: float  # s, reconstructed from the 64-bit millisecond clock
    stride: int  # bytes per aircraft record
    global_ac_count_withpos: int
    globe_index: int
    south: int
    west: int
    north: int
    east: int
    messages: int
    receiver_lat: float
    receiver_lon: float
    format_version: int

    @property
    def use_message_rate(self) -> bool:
        """Lane 31 carries message_rate (tenths of msg/s) instead of a message count."""
        return self.globe_index != 0 and self.format_version >= MESSAGE_RATE_MIN_VERSION


@dataclass(frozen=True)
class Snapshot:
    """Header metadata plus the decoded aircraft, in record order."""
    now: float
    stride: int
    global_ac_count_withpos: int
    globe_index: int
    south: int
    west: int
    north: int
    east: int
    messages: int
    receiver_lat: float
    receiver_lon: float
    format_version: int
    aircraft: Tuple[Aircraft, ...] = field(default_factory=tuple)

    @classmethod
    def from_header(cls, header: SnapshotHeader, aircraft) -> "Snapshot":
        return cls(
            now=header.now,
            stride=header.stride,
            global_ac_count_withpos=header.global_ac_count_withpos,
            globe_index=header.globe_index,
            south=header.south,
            west=header.west,
            north=header.north,
            east=header.east,
            messages=header.messages,
            receiver_lat=header.receiver_lat,
            receiver_lon=header.receiver_lon,
            format_version=header.format_version,
            aircraft=tuple(aircraft),
        )

    @property
    def header(self) -> SnapshotHeader:
        return SnapshotHeader(
            now=self.now,
            stride=self.stride,
            global_ac_count_withpos=self.global_ac_count_withpos,
            globe_index=self.globe_index,
            south=self.south,
            west=self.west,
            north=self.north,
            east=self.east,
            messages=self.messages,
            receiver_lat=self.receiver_lat,
            receiver_lon=self.receiver_lon,
            format_version=self.format_version,
        )

    @property
    def bounding_box(self) -> Tuple[int, int, int, int]:
        return self.south, self.west, self.north, self.east
