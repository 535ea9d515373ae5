from dataclasses import dataclass
from typing import Optional, Tuple

from bincraft.types.enums import NavMode, SignalType


@dataclass(frozen=True)
class Aircraft:
    """Decoded state of one tracked aircraft.

    Optional fields are None when the producer marked them absent in the
    record's validity bytes, never when their numeric value happens to be zero.
    """
    hex: str

    # Position / timing
    seen_pos: Optional[float] = None  # s since last position
    seen: float = 0.0  # s since last message
    lon: Optional[float] = None
    lat: Optional[float] = None

    # Altitude and vertical rates
    baro_rate: Optional[int] = None  # ft/min
    geom_rate: Optional[int] = None  # ft/min
    alt_baro: Optional[int] = None  # ft
    alt_baro_label: Optional[str] = None  # "ground" when airground == 1
    alt_geom: Optional[int] = None  # ft

    # Navigation targets
    nav_altitude_mcp: Optional[int] = None  # ft
    nav_altitude_fms: Optional[int] = None  # ft
    nav_qnh: Optional[float] = None  # hPa
    nav_heading: Optional[float] = None  # deg
    nav_altitude_src: Optional[int] = None
    nav_modes: Tuple[NavMode, ...] = ()

    squawk: Optional[str] = None

    # Speeds and angles
    gs: Optional[float] = None  # kt
    mach: Optional[float] = None
    roll: Optional[float] = None  # deg
    track: Optional[float] = None  # deg
    track_rate: Optional[float] = None  # deg/s
    mag_heading: Optional[float] = None  # deg
    true_heading: Optional[float] = None  # deg
    tas: Optional[int] = None  # kt
    ias: Optional[int] = None  # kt

    # Weather
    wd: Optional[int] = None  # wind direction, deg
    ws: Optional[int] = None  # wind speed, kt
    oat: Optional[int] = None  # outside air temperature, C
    tat: Optional[int] = None  # total air temperature, C

    # Receiver metadata
    rc: int = 0  # radius of containment, m
    messages: Optional[int] = None
    message_rate: Optional[float] = None  # msg/s
    receiver_count: int = 0
    rssi: float = 0.0  # dBFS
    extra_flags: int = 0
    nogps: int = 0

    # Identity / status
    category: Optional[str] = None
    emergency: Optional[int] = None
    signal_type: SignalType = SignalType.UNKNOWN
    airground: int = 0
    flight: Optional[str] = None
    tail: str = ""
    registration: str = ""
    db_flags: int = 0

    # Integrity / accuracy
    nic: int = 0
    nic_baro: Optional[int] = None
    alert1: Optional[int] = None
    spi: Optional[int] = None
    sil_type: int = 0
    adsb_version: int = 0
    adsr_version: int = 0
    tisb_version: int = 0
    nac_p: Optional[int] = None
    nac_v: Optional[int] = None
    sil: Optional[int] = None
    gva: Optional[int] = None
    sda: Optional[int] = None
    nic_a: Optional[int] = None
    nic_c: Optional[int] = None

    @property
    def is_non_icao(self) -> bool:
        return self.hex.startswith("~")

    @property
    def has_position(self) -> bool:
        return self.lat is not None and self.lon is not None

    @property
    def on_ground(self) -> bool:
        return self.alt_baro_label == "ground"
