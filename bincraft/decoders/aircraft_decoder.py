import math

from bincraft.decoders.bincraft_decoder_base import BinCraftDecoderBase
from bincraft.decoders import field_table as layout
from bincraft.decoders.lanes import RecordLanes, lane_views
from bincraft.exceptions import FormatError
from bincraft.models.aircraft import Aircraft
from bincraft.models.record import AircraftRecord
from bincraft.types.enums import NavMode, SignalType


class AircraftDecoder(BinCraftDecoderBase):
    """Decode fixed-width binCraft records into Aircraft values.

    The sequence is fixed: raw decode, NoGPS sentinel correction, validity
    masking, derived labels. Labels and the squawk are computed from raw bytes
    even when the field they belong to ends up absent.
    """

    def __init__(self, use_message_rate: bool = False, stride: int = None):
        super().__init__()
        self.use_message_rate = use_message_rate
        self.stride = stride

    def decode_record(self, record: AircraftRecord) -> Aircraft:
        raw = record.raw_data
        self.logger.debug("Starting decode_record: index=%s, offset=%s, raw_len=%s",
                          record.index, record.block_offset, len(raw))
        self._check_width(record)

        lanes = lane_views(raw)
        values = self._decode_raw(lanes)

        validity = self._corrected_validity(lanes, values['nogps'])
        values = layout.apply_validity(values, validity)

        nav_modes_byte = values.pop('_nav_modes_raw')
        if values['airground'] == 1:
            values['alt_baro_label'] = "ground"
        if layout.is_set(validity, layout.NAV_MODES_VALID):
            values['nav_modes'] = NavMode.from_byte(nav_modes_byte)
        values['signal_type'] = SignalType.from_code(values['signal_type'])

        return Aircraft(**values)

    # ========== RAW DECODE ==========

    def _decode_raw(self, lanes: RecordLanes) -> dict:
        values = {'hex': self._decode_hex(lanes)}
        values.update(layout.decode_fields(lanes, layout.LANE_FIELDS))

        if self.use_message_rate:
            values.update(layout.decode_fields(lanes, (layout.MESSAGE_RATE_FIELD,)))
        else:
            values.update(layout.decode_fields(lanes, (layout.MESSAGES_FIELD,)))

        values['squawk'] = self._decode_squawk(int(lanes.u16[layout.SQUAWK_LANE]))
        values.update(layout.decode_fields(lanes, layout.BYTE_FIELDS))
        values['signal_type'] = layout.SIGNAL_TYPE_FIELD.decode(lanes)

        category = int(lanes.u8[layout.CATEGORY_OFFSET])
        values['category'] = f"{category:02X}" if category else None

        values['_nav_modes_raw'] = int(lanes.u8[layout.NAV_MODES_OFFSET])
        values['nav_modes'] = ()

        for name, start, end in layout.TEXT_FIELDS:
            values[name] = self._decode_text(lanes.u8[start:end].tobytes())

        values['rssi'] = self._decode_rssi(int(lanes.u8[layout.RSSI_OFFSET]))
        values['nogps'] = values['extra_flags'] & 0x01
        return values

    @staticmethod
    def _decode_hex(lanes: RecordLanes) -> str:
        """ICAO address in the low 24 bits of lane 0; bit 24 flags a non-ICAO address."""
        lane0 = int(lanes.u32[0])
        address = f"{lane0 & 0xFFFFFF:06x}"
        if lane0 & (1 << 24):
            return "~" + address
        return address

    @staticmethod
    def _decode_squawk(raw: int) -> str:
        """Four hex nibbles; a leading nibble above 9 stays a hex letter."""
        return f"{raw:04x}"

    @staticmethod
    def _decode_text(raw: bytes) -> str:
        return raw.decode('utf-8', errors='replace').rstrip('\x00')

    @staticmethod
    def _decode_rssi(raw: int) -> float:
        return 10 * math.log10(raw * raw / 65025 + 1.125e-5)

    # ========== VALIDITY ==========

    def _corrected_validity(self, lanes: RecordLanes, nogps: int) -> bytes:
        """Copy of the validity bytes with the NoGPS sentinel override applied."""
        start = layout.VALIDITY_OFFSET
        validity = bytearray(lanes.u8[start:start + layout.VALIDITY_SIZE].tobytes())

        if nogps and int(lanes.s32[layout.LAT_LANE]) == layout.NOGPS_LAT_SENTINEL:
            for flag in layout.NOGPS_FORCED_BITS:
                validity[flag.byte - start] |= flag.mask
            self.logger.debug("NoGPS sentinel latitude, forcing position validity")

        return bytes(validity)

    # ========== HELPER METHODS ==========

    def _check_width(self, record: AircraftRecord) -> None:
        length = len(record.raw_data)
        if self.stride is not None and length != self.stride:
            self.logger.warning("Record %d is %d bytes, expected stride %d", record.index, length, self.stride)
            raise FormatError(f"Record {record.index} is {length} bytes, expected stride {self.stride}")
        if length < layout.MIN_RECORD_WIDTH:
            self.logger.warning("Record %d is %d bytes, narrower than the %d-byte layout",
                                record.index, length, layout.MIN_RECORD_WIDTH)
            raise FormatError(
                f"Record {record.index} is {length} bytes, layout needs at least {layout.MIN_RECORD_WIDTH}"
            )


def decode_aircraft(raw: bytes, use_message_rate: bool = False) -> Aircraft:
    """Decode a single raw record outside of a snapshot."""
    record = AircraftRecord(index=0, block_offset=0, raw_data=bytes(raw))
    return AircraftDecoder(use_message_rate=use_message_rate).decode_record(record)
