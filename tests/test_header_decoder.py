import struct

import pytest

from bincraft.decoders.header_decoder import decode_header
from bincraft.exceptions import FormatError


class TestHeaderDecoder:

    def test_now_reconstruction(self, make_header):
        """low=500 ms, high=1 rollover -> 0.5 + 2^32/1000 s"""
        header = decode_header(make_header(time_low=500, time_high=1))

        assert header.now == pytest.approx(4294967.796)

    def test_now_without_rollover(self, make_header):
        header = decode_header(make_header(time_low=1700000123456 % 2 ** 32))

        assert header.now == pytest.approx((1700000123456 % 2 ** 32) / 1000)

    def test_decode_all_fields(self, make_header):
        buffer = make_header(
            stride=112,
            ac_count=42,
            globe_index=7,
            bounds=(-10, -20, 30, 40),
            messages=123456,
            receiver_lat=41297445,
            receiver_lon=-2078123,
            version=20240218,
        )

        header = decode_header(buffer)

        assert header.stride == 112
        assert header.global_ac_count_withpos == 42
        assert header.globe_index == 7
        assert (header.south, header.west, header.north, header.east) == (-10, -20, 30, 40)
        assert header.messages == 123456
        assert header.receiver_lat == 41297445 / 1e6
        assert header.receiver_lon == -2078123 / 1e6
        assert header.format_version == 20240218

    @pytest.mark.parametrize(
        "globe_index,version,expected",
        [
            (0, 20220916, False),  # no globe tile
            (3, 20220915, False),  # too old
            (3, 20220916, True),
            (3, 20240218, True),
        ]
    )
    def test_message_rate_mode(self, make_header, globe_index, version, expected):
        header = decode_header(make_header(globe_index=globe_index, version=version))

        assert header.use_message_rate is expected

    def test_buffer_too_short_for_stride(self):
        with pytest.raises(FormatError):
            decode_header(b'\x00' * 8)

    @pytest.mark.parametrize("stride", [0, 6, 110, 40, 80, 104])
    def test_invalid_stride(self, stride):
        buffer = bytearray(200)
        struct.pack_into('<I', buffer, 8, stride)

        with pytest.raises(FormatError):
            decode_header(bytes(buffer))

    def test_narrow_stride_without_records(self, make_header):
        """Aligned stride 104 leaves no room for the 107-byte record layout"""
        buffer = bytearray(make_header(stride=112))
        struct.pack_into('<I', buffer, 8, 104)

        with pytest.raises(FormatError, match="narrower"):
            decode_header(bytes(buffer))

    def test_buffer_shorter_than_header_region(self, make_header):
        buffer = make_header(stride=112)[:100]

        with pytest.raises(FormatError):
            decode_header(buffer)

    def test_buffer_shorter_than_fixed_fields(self):
        buffer = bytearray(60)
        struct.pack_into('<I', buffer, 8, 112)

        with pytest.raises(FormatError):
            decode_header(bytes(buffer))

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_header(b'')
