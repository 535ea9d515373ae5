import types

from bincraft.decoders.stride_splitter import split_records
from bincraft.utils.handlers import (
    decode_records,
    decode_records_iter,
    decode_records_parallel,
    process_records_chunk,
)


class TestHandlers:

    def _records(self, make_header, make_record, count=6):
        buffer = make_header() + b"".join(make_record(0x100 + i) for i in range(count))
        return split_records(buffer, 112)

    def test_decode_records_order(self, make_header, make_record):
        aircraft = decode_records(self._records(make_header, make_record), stride=112)

        assert [ac.hex for ac in aircraft] == [f"{0x100 + i:06x}" for i in range(6)]

    def test_decode_records_iter_is_lazy(self, make_header, make_record):
        result = decode_records_iter(self._records(make_header, make_record))

        assert isinstance(result, types.GeneratorType)
        assert len(list(result)) == 6

    def test_process_records_chunk(self, make_header, make_record):
        records = self._records(make_header, make_record, count=2)

        aircraft = process_records_chunk((records, True, 112))

        assert aircraft[0].message_rate == 32.1

    def test_parallel_keeps_order(self, make_header, make_record):
        records = self._records(make_header, make_record, count=17)

        parallel = decode_records_parallel(records, stride=112, workers=3)

        assert parallel == decode_records(records, stride=112)

    def test_parallel_empty(self):
        assert decode_records_parallel([], workers=2) == []
