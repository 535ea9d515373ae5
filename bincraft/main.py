import argparse
import logging
import time
import pandas as pd
from pathlib import Path

from bincraft.decoders.bincraft_file_reader import BinCraftFileReader
from bincraft.exceptions import BinCraftError
from bincraft.exporters.snapshot_exporter import SnapshotExporter
from bincraft.utils.aircraft_filter import AircraftFilter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bincraft",
        description="Decode a binCraft aircraft snapshot and print a summary",
    )
    parser.add_argument("input_file", type=Path, help="Snapshot file (zstd-compressed unless --raw)")
    parser.add_argument("--raw", action="store_true", help="Input is already decompressed")
    parser.add_argument("--workers", type=int, default=None, help="Decode records in N worker processes")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--preview", type=int, default=5, help="Rows to show in the preview")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # ============================================================
    # LOGGING CONFIGURATION
    # ============================================================
    log_level = getattr(logging, args.log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("bincraft").setLevel(log_level)

    print(f"\n{'=' * 60}")
    print("binCraft Snapshot Decoder")
    print(f"{'=' * 60}")
    print(f"Input file: {args.input_file}")
    print(f"{'=' * 60}\n")

    # ============================================================
    # STEP 1: READ & DECODE
    # ============================================================
    reader = BinCraftFileReader(str(args.input_file), compressed=not args.raw)
    start_time = time.perf_counter()
    try:
        snapshot = reader.read_snapshot(workers=args.workers)
    except (OSError, BinCraftError) as exc:
        logging.getLogger("bincraft").error("Failed to decode %s: %s", args.input_file, exc)
        return 1
    elapsed_time = time.perf_counter() - start_time

    print(f"Decoded {len(snapshot.aircraft):,} aircraft in {elapsed_time:.4f}s")
    print(f"  Timestamp:        {snapshot.now:.3f}")
    print(f"  Stride:           {snapshot.stride} bytes")
    print(f"  Format version:   {snapshot.format_version}")
    print(f"  Globe index:      {snapshot.globe_index}")
    print(f"  Bounding box:     {snapshot.bounding_box}")
    print(f"  Receiver:         {snapshot.receiver_lat:.6f}, {snapshot.receiver_lon:.6f}")

    # ============================================================
    # STEP 2: DATAFRAME + STATISTICS
    # ============================================================
    df = SnapshotExporter.snapshot_to_dataframe(snapshot)

    stats = AircraftFilter.get_statistics(df)
    print(f"\n{'=' * 60}")
    print("Snapshot Statistics")
    print(f"{'=' * 60}")
    for key, value in stats.items():
        print(f"  {key:20s}: {value}")

    if not df.empty and args.preview > 0:
        print(f"\nPreview (first {args.preview} rows):")
        pd.set_option('display.max_columns', 12)
        pd.set_option('display.width', 120)
        preview_cols = ['hex', 'flight', 'signal_type', 'alt_baro', 'alt_baro_label', 'gs', 'lat', 'lon']
        print(df[preview_cols].head(args.preview))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
