from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class RecordLanes:
    """Parallel little-endian views of one record, indexed by lane number."""
    u32: np.ndarray
    s32: np.ndarray
    u16: np.ndarray
    s16: np.ndarray
    u8: np.ndarray


def lane_views(raw) -> RecordLanes:
    """Reinterpret a record as 4-, 2- and 1-byte lanes.

    The arrays are read-only views over an immutable copy of `raw`.
    """
    data = bytes(raw)
    return RecordLanes(
        u32=np.frombuffer(data, dtype='<u4', count=len(data) // 4),
        s32=np.frombuffer(data, dtype='<i4', count=len(data) // 4),
        u16=np.frombuffer(data, dtype='<u2', count=len(data) // 2),
        s16=np.frombuffer(data, dtype='<i2', count=len(data) // 2),
        u8=np.frombuffer(data, dtype=np.uint8),
    )
