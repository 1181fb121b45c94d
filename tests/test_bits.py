import unittest

from atmfjstc.lib.header_table.bits import extract_bits, bit_container_size, bytes_touched
from atmfjstc.lib.header_table.errors import BitSpanTooWideError, BitFieldOutOfBoundsError, BitExtractionError


IPV4_SAMPLE = bytes.fromhex('4500003c1c4640004006b1e6c0a80001c0a800c7')


class ExtractBitsTest(unittest.TestCase):
    def test_nibbles(self):
        self.assertEqual(extract_bits(IPV4_SAMPLE, 4, 0), 4)
        self.assertEqual(extract_bits(IPV4_SAMPLE, 4, 4), 5)

    def test_whole_bytes(self):
        self.assertEqual(extract_bits(IPV4_SAMPLE, 16, 16), 60)
        self.assertEqual(extract_bits(IPV4_SAMPLE, 8, 64), 64)
        self.assertEqual(extract_bits(IPV4_SAMPLE, 32, 96), 0xc0a80001)

    def test_fields_crossing_byte_boundary(self):
        data = bytes([0b10110011, 0b01011100])
        self.assertEqual(extract_bits(data, 3, 0), 0b101)
        self.assertEqual(extract_bits(data, 13, 3), 0b1001101011100)
        self.assertEqual(extract_bits(data, 6, 5), 0b011010)

    def test_64_bit(self):
        data = bytes(range(1, 10))
        self.assertEqual(extract_bits(data, 64, 0), 0x0102030405060708)
        self.assertEqual(extract_bits(data, 64, 8), 0x0203040506070809)

    def test_single_bits(self):
        data = bytes([0b10000001])
        self.assertEqual([extract_bits(data, 1, i) for i in range(8)], [1, 0, 0, 0, 0, 0, 0, 1])

    def test_no_bleed_from_neighbors(self):
        data = b'\xff' * 10

        for bit_length in (1, 3, 7, 8, 13, 16, 17, 31, 32, 33, 57):
            for bit_offset in range(8):
                with self.subTest(bit_length=bit_length, bit_offset=bit_offset):
                    self.assertEqual(extract_bits(data, bit_length, bit_offset), (1 << bit_length) - 1)

    def test_result_fits_width(self):
        data = bytes.fromhex('deadbeefcafebabe0badf00d')

        for bit_length in range(1, 33):
            for bit_offset in range(0, 64, 5):
                with self.subTest(bit_length=bit_length, bit_offset=bit_offset):
                    self.assertLess(extract_bits(data, bit_length, bit_offset), 1 << bit_length)

    def test_tiling_fields_recombine(self):
        for original in (0x00, 0x5a, 0xa5, 0xff, 0x81):
            data = bytes([original])

            for width_a in range(1, 8):
                width_b = 8 - width_a
                field_a = extract_bits(data, width_a, width_b)  # Low-order bits come last
                field_b = extract_bits(data, width_b, 0)

                with self.subTest(original=original, width_a=width_a):
                    self.assertEqual(field_a | (field_b << width_a), original)

    def test_accepts_bytearray_and_memoryview(self):
        self.assertEqual(extract_bits(bytearray(IPV4_SAMPLE), 16, 16), 60)
        self.assertEqual(extract_bits(memoryview(IPV4_SAMPLE), 16, 16), 60)

    def test_span_too_wide(self):
        with self.assertRaises(BitSpanTooWideError) as ctx:
            extract_bits(bytes(16), 64, 1)

        self.assertEqual(ctx.exception.span, 65)
        self.assertIsInstance(ctx.exception, BitExtractionError)

    def test_span_too_wide_checked_before_bounds(self):
        with self.assertRaises(BitSpanTooWideError):
            extract_bits(b'', 60, 7)

    def test_out_of_bounds(self):
        with self.assertRaises(BitFieldOutOfBoundsError) as ctx:
            extract_bits(IPV4_SAMPLE[:9], 4, 76)

        self.assertEqual(ctx.exception.bytes_needed, 10)
        self.assertEqual(ctx.exception.bytes_available, 9)

    def test_exactly_in_bounds(self):
        self.assertEqual(extract_bits(IPV4_SAMPLE, 32, 128), 0xc0a800c7)

    def test_invalid_length(self):
        with self.assertRaises(ValueError):
            extract_bits(IPV4_SAMPLE, 0, 0)
        with self.assertRaises(ValueError):
            extract_bits(IPV4_SAMPLE, 65, 0)

    def test_negative_offset(self):
        with self.assertRaises(ValueError):
            extract_bits(IPV4_SAMPLE, 4, -1)


class BitContainerSizeTest(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual(
            [bit_container_size(span) for span in (1, 8, 9, 16, 17, 32, 33, 64)],
            [8, 8, 16, 16, 32, 32, 64, 64]
        )

    def test_too_wide(self):
        self.assertIsNone(bit_container_size(65))


class BytesTouchedTest(unittest.TestCase):
    def test_aligned(self):
        self.assertEqual(bytes_touched(32, 128), 20)

    def test_unaligned(self):
        self.assertEqual(bytes_touched(13, 51), 8)
        self.assertEqual(bytes_touched(4, 76), 10)
        self.assertEqual(bytes_touched(2, 7), 2)


if __name__ == '__main__':
    unittest.main()
