from dataclasses import dataclass


@dataclass(frozen=True)
class AircraftRecord:
    """One fixed-width aircraft record cut out of a decompressed snapshot."""
    index: int
    block_offset: int  # Inici del record respecte el buffer descomprimit
    raw_data: bytes
