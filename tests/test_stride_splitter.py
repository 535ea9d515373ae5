from bincraft.decoders.stride_splitter import iter_records, split_records

STRIDE = 112


class TestStrideSplitter:

    def test_trailing_partial_record_dropped(self, make_header, make_record):
        buffer = make_header() + make_record() + b'\x01' * 10

        records = split_records(buffer, STRIDE)

        assert len(records) == 1
        assert records[0].raw_data == make_record()

    def test_offsets_and_order(self, make_header, make_record):
        chunks = [make_record(hex_value=i) for i in (1, 2, 3)]
        buffer = make_header() + b"".join(chunks)

        records = split_records(buffer, STRIDE)

        assert [r.index for r in records] == [0, 1, 2]
        assert [r.block_offset for r in records] == [112, 224, 336]
        assert [r.raw_data for r in records] == chunks
        assert all(len(r.raw_data) == STRIDE for r in records)

    def test_header_only(self, make_header):
        assert split_records(make_header(), STRIDE) == []

    def test_iter_records_is_lazy(self, make_header, make_record):
        buffer = make_header() + make_record() + make_record()

        iterator = iter_records(buffer, STRIDE)
        first = next(iterator)

        assert first.index == 0
        assert len(list(iterator)) == 1

    def test_accepts_memoryview(self, make_header, make_record):
        buffer = memoryview(make_header() + make_record())

        records = split_records(buffer, STRIDE)

        assert isinstance(records[0].raw_data, bytes)
        assert records[0].raw_data == make_record()
