import pandas as pd
from typing import Optional


class AircraftFilter:
    """
    Filters over DataFrames produced by SnapshotExporter.
    Filters gracefully handle missing columns by returning the input unchanged.
    """

    SIGNAL_FAMILIES = {
        'adsb': ['adsb_icao', 'adsb_icao_nt', 'adsb_other'],
        'adsr': ['adsr_icao', 'adsr_other'],
        'tisb': ['tisb_icao', 'tisb_trackfile', 'tisb_other'],
        'mlat': ['mlat'],
    }

    @staticmethod
    def filter_by_geographic_bounds(df: pd.DataFrame,
                                    min_lat: float = -90.0,
                                    max_lat: float = 90.0,
                                    min_lon: float = -180.0,
                                    max_lon: float = 180.0) -> pd.DataFrame:
        """Filter to geographic bounding box (aircraft without position are dropped)"""
        if 'lat' not in df.columns or 'lon' not in df.columns:
            return df

        mask = (
                (df['lat'] >= min_lat) &
                (df['lat'] <= max_lat) &
                (df['lon'] >= min_lon) &
                (df['lon'] <= max_lon)
        )
        return df[mask].reset_index(drop=True)

    @staticmethod
    def filter_with_position(df: pd.DataFrame) -> pd.DataFrame:
        if 'lat' not in df.columns or 'lon' not in df.columns:
            return df
        return df[df['lat'].notna() & df['lon'].notna()].reset_index(drop=True)

    @staticmethod
    def filter_airborne(df: pd.DataFrame) -> pd.DataFrame:
        """Filter for aircraft not labelled 'ground'"""
        if 'alt_baro_label' not in df.columns:
            return df
        return df[df['alt_baro_label'] != 'ground'].reset_index(drop=True)

    @staticmethod
    def filter_on_ground(df: pd.DataFrame) -> pd.DataFrame:
        if 'alt_baro_label' not in df.columns:
            return df
        return df[df['alt_baro_label'] == 'ground'].reset_index(drop=True)

    @staticmethod
    def filter_by_altitude(df: pd.DataFrame,
                           min_alt: Optional[float] = None,
                           max_alt: Optional[float] = None) -> pd.DataFrame:
        """Filter by barometric altitude range (ft)"""
        if 'alt_baro' not in df.columns:
            return df

        result = df[df['alt_baro'].notna()]
        if min_alt is not None:
            result = result[result['alt_baro'] >= min_alt]
        if max_alt is not None:
            result = result[result['alt_baro'] <= max_alt]

        return result.reset_index(drop=True)

    @staticmethod
    def filter_by_callsign(df: pd.DataFrame, pattern: str) -> pd.DataFrame:
        """Filter by callsign pattern (e.g., 'RYR' for Ryanair)"""
        if 'flight' not in df.columns:
            return df

        return df[df['flight'].str.contains(pattern, na=False, case=False, regex=False)].reset_index(drop=True)

    @staticmethod
    def filter_by_signal_family(df: pd.DataFrame, family: str) -> pd.DataFrame:
        """Keep one source family: 'adsb', 'adsr', 'tisb' or 'mlat'"""
        if 'signal_type' not in df.columns:
            return df

        labels = AircraftFilter.SIGNAL_FAMILIES.get(family)
        if labels is None:
            raise ValueError(f"Unknown signal family: {family}")

        return df[df['signal_type'].astype(str).isin(labels)].reset_index(drop=True)

    @staticmethod
    def get_statistics(df: pd.DataFrame) -> dict:
        """Get basic statistics for the snapshot"""
        stats = {
            'total_aircraft': len(df),
            'unique_aircraft': df['hex'].nunique() if 'hex' in df.columns else 0,
            'unique_callsigns': df['flight'].nunique() if 'flight' in df.columns else 0,
        }

        if 'alt_baro_label' in df.columns:
            stats['ground_count'] = int((df['alt_baro_label'] == 'ground').sum())
            stats['airborne_count'] = len(df) - stats['ground_count']

        if 'lat' in df.columns and 'lon' in df.columns:
            stats['with_position'] = int((df['lat'].notna() & df['lon'].notna()).sum())
            stats['lat_range'] = (df['lat'].min(), df['lat'].max())
            stats['lon_range'] = (df['lon'].min(), df['lon'].max())

        if 'alt_baro' in df.columns:
            stats['altitude_range'] = (df['alt_baro'].min(), df['alt_baro'].max())

        if 'signal_type' in df.columns:
            stats['by_signal_type'] = df['signal_type'].astype(str).value_counts().to_dict()

        return stats
