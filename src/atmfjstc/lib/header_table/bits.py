"""
Extraction of bit fields from byte buffers.

Bits are numbered MSB-first within each byte and bytes are taken in buffer order, i.e. the buffer is read as one big
big-endian (network order) number. This matches how header fields are laid out in RFC diagrams.

Fields are read through a fixed-size container (8, 16, 32 or 64 bits) that covers the bits between the start of the
first touched byte and the end of the field. Fields whose span does not fit in 64 bits are not supported.
"""

from typing import Optional

from .errors import BitSpanTooWideError, BitFieldOutOfBoundsError


MAX_BIT_LENGTH = 64

_CONTAINER_SIZES = (8, 16, 32, 64)


def bit_container_size(span: int) -> Optional[int]:
    """
    Returns the smallest container size (8, 16, 32 or 64) that holds `span` bits, or None if there is none.
    """
    for size in _CONTAINER_SIZES:
        if span <= size:
            return size

    return None


def bytes_touched(bit_length: int, bit_offset: int) -> int:
    """
    Returns the number of bytes, counted from the start of the buffer, that must be present for a field to be read.
    """
    return bit_offset // 8 + (bit_offset % 8 + bit_length + 7) // 8


def extract_bits(data: bytes, bit_length: int, bit_offset: int) -> int:
    """
    Reads an unsigned integer stored in an arbitrary run of bits in a buffer.

    Args:
        data: The buffer (any bytes-like object).
        bit_length: The width of the field, in bits. Must be between 1 and 64.
        bit_offset: The offset of the first bit of the field, counted from the MSB of the first byte in the buffer.

    Returns:
        The value of the field. It is always strictly smaller than ``2 ** bit_length``.

    Raises:
        BitSpanTooWideError: If the field, together with the bits preceding it in its first byte, spans more than 64
            bits.
        BitFieldOutOfBoundsError: If the field extends past the end of the buffer.
    """
    if not (1 <= bit_length <= MAX_BIT_LENGTH):
        raise ValueError(f"Bit length must be between 1 and {MAX_BIT_LENGTH} (is: {bit_length})")
    if bit_offset < 0:
        raise ValueError(f"Bit offset must be non-negative (is: {bit_offset})")

    start_byte = bit_offset // 8
    offset_in_byte = bit_offset % 8

    container_size = bit_container_size(offset_in_byte + bit_length)
    if container_size is None:
        raise BitSpanTooWideError(bit_length, bit_offset)

    needed = bytes_touched(bit_length, bit_offset)
    if needed > len(data):
        raise BitFieldOutOfBoundsError(bit_length, bit_offset, needed, len(data))

    # Only the touched bytes are read; the rest of the container is zero and is shifted out below
    window = bytes(data[start_byte:needed])
    container = int.from_bytes(window, byteorder='big') << (container_size - 8 * len(window))

    container = (container << offset_in_byte) & ((1 << container_size) - 1)

    return container >> (container_size - bit_length)
