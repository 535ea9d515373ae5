from multiprocessing import Pool
from typing import Iterable, Iterator, List, Sequence
import logging

from bincraft.decoders.aircraft_decoder import AircraftDecoder
from bincraft.models.aircraft import Aircraft
from bincraft.models.record import AircraftRecord

logger = logging.getLogger(__name__)


def decode_records(records: Iterable[AircraftRecord], use_message_rate: bool = False,
                   stride: int = None) -> List[Aircraft]:
    """
    Decode a sequence of records with a single decoder, preserving record order.
    """
    decoder = AircraftDecoder(use_message_rate=use_message_rate, stride=stride)
    return [decoder.decode_record(record) for record in records]


def decode_records_iter(records: Iterable[AircraftRecord], use_message_rate: bool = False,
                        stride: int = None) -> Iterator[Aircraft]:
    """
    Decode records lazily and yield them one by one.
    This avoids materializing the entire list before exporting.
    """
    decoder = AircraftDecoder(use_message_rate=use_message_rate, stride=stride)
    for record in records:
        yield decoder.decode_record(record)


# ============================================================
# WORKER FUNCTION (must be at module level for pickling)
# ============================================================
def process_records_chunk(task) -> List[Aircraft]:
    """Decode one chunk of records inside a worker process."""
    records_chunk, use_message_rate, stride = task
    return decode_records(records_chunk, use_message_rate, stride)


def decode_records_parallel(records: Sequence[AircraftRecord], use_message_rate: bool = False,
                            stride: int = None, workers: int = 2) -> List[Aircraft]:
    """
    Decode records in a worker Pool. Pool.map keeps chunk order, so the result
    matches the input record order.
    """
    if not records:
        return []

    chunk_size = max(1, len(records) // (workers * 4))
    chunks = [records[i:i + chunk_size] for i in range(0, len(records), chunk_size)]
    tasks = [(chunk, use_message_rate, stride) for chunk in chunks]
    logger.debug("Decoding %d records in %d chunks on %d workers", len(records), len(chunks), workers)

    with Pool(processes=workers) as pool:
        results = pool.map(process_records_chunk, tasks)

    return [aircraft for chunk in results for aircraft in chunk]
