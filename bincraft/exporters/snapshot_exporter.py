import pandas as pd
from typing import Iterable
from bincraft.models.aircraft import Aircraft
from bincraft.models.snapshot import Snapshot


class SnapshotExporter:
    """
    Flatten decoded snapshots into a pandas DataFrame, one row per aircraft.

    Absent fields become NA; integer columns use the nullable Int64 dtype so a
    masked value never turns into a zero.
    """

    ALL_COLUMNS = [
        # Identification
        'now',  # Snapshot timestamp (s)
        'hex',  # ICAO address, '~' prefix for non-ICAO
        'flight',  # Callsign
        'tail',
        'registration',
        'category',  # Emitter category (hex)
        'signal_type',  # Source label (adsb_icao, mlat, ...)
        'squawk',
        'emergency',

        # Position
        'lat',
        'lon',
        'seen_pos',  # s
        'seen',  # s
        'alt_baro',  # ft
        'alt_baro_label',  # 'ground' when on ground
        'alt_geom',  # ft
        'baro_rate',  # ft/min
        'geom_rate',  # ft/min

        # Velocity
        'gs',  # kt
        'ias',  # kt
        'tas',  # kt
        'mach',
        'track',  # deg
        'track_rate',  # deg/s
        'roll',  # deg
        'mag_heading',  # deg
        'true_heading',  # deg

        # Autopilot targets
        'nav_qnh',  # hPa
        'nav_altitude_mcp',  # ft
        'nav_altitude_fms',  # ft
        'nav_altitude_src',
        'nav_heading',  # deg
        'nav_modes',  # comma separated

        # Weather
        'wd', 'ws', 'oat', 'tat',

        # Integrity / accuracy
        'nic', 'nic_baro', 'nic_a', 'nic_c', 'nac_p', 'nac_v',
        'sil', 'sil_type', 'gva', 'sda', 'rc',
        'adsb_version', 'adsr_version', 'tisb_version',
        'alert1', 'spi', 'airground',

        # Receiver metadata
        'messages', 'message_rate', 'receiver_count', 'rssi',
        'nogps', 'extra_flags', 'db_flags',
    ]

    INT_COLUMNS = [
        'emergency', 'alt_baro', 'alt_geom', 'baro_rate', 'geom_rate', 'ias', 'tas',
        'nav_altitude_mcp', 'nav_altitude_fms', 'nav_altitude_src', 'wd', 'ws', 'oat', 'tat',
        'nic', 'nic_baro', 'nic_a', 'nic_c', 'nac_p', 'nac_v', 'sil', 'sil_type', 'gva', 'sda', 'rc',
        'adsb_version', 'adsr_version', 'tisb_version', 'alert1', 'spi', 'airground',
        'messages', 'receiver_count', 'nogps', 'extra_flags', 'db_flags',
    ]

    FLOAT_COLUMNS = [
        'now', 'lat', 'lon', 'seen_pos', 'seen', 'gs', 'mach', 'track', 'track_rate', 'roll',
        'mag_heading', 'true_heading', 'nav_qnh', 'nav_heading', 'message_rate', 'rssi',
    ]

    @staticmethod
    def snapshot_to_dataframe(snapshot: Snapshot) -> pd.DataFrame:
        return SnapshotExporter.aircraft_to_dataframe(snapshot.aircraft, now=snapshot.now)

    @staticmethod
    def aircraft_to_dataframe(aircraft: Iterable[Aircraft], now: float = None) -> pd.DataFrame:
        # Build by columns to avoid expensive list-of-dicts
        columns = SnapshotExporter.ALL_COLUMNS
        data_cols = {col: [] for col in columns}

        for ac in aircraft:
            row = SnapshotExporter._aircraft_row(ac)
            row['now'] = now
            for col in columns:
                data_cols[col].append(row[col])

        df = pd.DataFrame(data_cols, columns=columns)
        return SnapshotExporter._cast_dtypes(df)

    @staticmethod
    def _aircraft_row(ac: Aircraft) -> dict:
        row = {col: getattr(ac, col, None) for col in SnapshotExporter.ALL_COLUMNS}
        row['signal_type'] = ac.signal_type.label
        row['nav_modes'] = ",".join(mode.value for mode in ac.nav_modes) if ac.nav_modes else None
        return row

    @staticmethod
    def _cast_dtypes(df: pd.DataFrame) -> pd.DataFrame:
        for col in SnapshotExporter.INT_COLUMNS:
            df[col] = pd.to_numeric(df[col], errors='coerce').astype('Int64')

        for col in SnapshotExporter.FLOAT_COLUMNS:
            df[col] = pd.to_numeric(df[col], errors='coerce').astype('float64')

        if df['signal_type'].notna().any():
            df['signal_type'] = df['signal_type'].astype('category')

        return df
