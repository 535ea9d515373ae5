from enum import Enum, IntEnum


class SignalType(IntEnum):
    """Source of the aircraft state (high nibble of record byte 67)"""

    ADSB_ICAO = 0  # ADS-B, transponder ICAO address
    ADSB_ICAO_NT = 1  # ADS-B, non-transponder emitter
    ADSR_ICAO = 2  # ADS-R rebroadcast
    TISB_ICAO = 3  # TIS-B, ICAO address
    ADSC = 4  # ADS-C (satellite / datalink)
    MLAT = 5  # Multilateration
    OTHER = 6
    MODE_S = 7  # Mode S, no position
    ADSB_OTHER = 8  # ADS-B, anonymous / non-ICAO address
    ADSR_OTHER = 9
    TISB_TRACKFILE = 10  # TIS-B, ground track file number
    TISB_OTHER = 11
    MODE_AC = 12  # Mode A/C only
    UNKNOWN = -1  # Codes 13-15

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @classmethod
    def from_code(cls, code: int) -> "SignalType":
        return cls(code)

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def is_adsb(self) -> bool:
        return self in (SignalType.ADSB_ICAO, SignalType.ADSB_ICAO_NT, SignalType.ADSB_OTHER)

    @property
    def is_adsr(self) -> bool:
        return self in (SignalType.ADSR_ICAO, SignalType.ADSR_OTHER)

    @property
    def is_tisb(self) -> bool:
        return self in (SignalType.TISB_ICAO, SignalType.TISB_TRACKFILE, SignalType.TISB_OTHER)


class NavMode(str, Enum):
    """Autopilot / navigation modes engaged (record byte 66)"""

    AUTOPILOT = "autopilot"  # bit 0
    VNAV = "vnav"  # bit 1
    ALT_HOLD = "alt_hold"  # bit 2
    APPROACH = "approach"  # bit 3
    LNAV = "lnav"  # bit 4
    TCAS = "tcas"  # bit 5

    @property
    def bit(self) -> int:
        return 1 << list(NavMode).index(self)

    @classmethod
    def from_byte(cls, raw: int) -> tuple:
        """Expand the raw nav-mode byte into its engaged modes, in bit order."""
        return tuple(mode for mode in cls if raw & mode.bit)
