"""
Conversion of bit fields into human-readable text.
"""

import logging

from enum import Enum
from typing import Optional, Union

from .bits import extract_bits, bytes_touched
from .errors import BitExtractionError


LOG = logging.getLogger(__name__)


class DisplayType(Enum):
    BINARY = 1
    DECIMAL = 2
    HEX = 3
    IPV4 = 4
    ASCII = 5

    @classmethod
    def parse(cls, raw: Union['DisplayType', int, str]) -> 'DisplayType':
        """
        Converts a display type given as a member, an int code or a (case-insensitive) name to a `DisplayType`.
        """
        if isinstance(raw, DisplayType):
            return raw
        if isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return cls(raw)
            except ValueError:
                pass
        if isinstance(raw, str) and (raw.upper() in cls.__members__):
            return cls[raw.upper()]

        raise ValueError(f"Invalid display type: {raw!r}")


RawDisplayType = Union[DisplayType, int, str]


def format_value(value: int, display_type: DisplayType, bit_length: int) -> Optional[str]:
    """
    Formats an already extracted field value. Only the numeric display types are handled here; for others (i.e.
    ASCII), and for IPv4 on fields that are not 32 bits wide, None is returned.
    """
    if display_type == DisplayType.BINARY:
        return '0b' + format(value, f'0{bit_length}b')
    if display_type == DisplayType.DECIMAL:
        return str(value)
    if display_type == DisplayType.HEX:
        return f'0x{value:x}'
    if display_type == DisplayType.IPV4:
        if bit_length != 32:
            return None

        return '.'.join(str((value >> shift) & 0xff) for shift in (24, 16, 8, 0))

    return None


def format_field(data: bytes, display_type: RawDisplayType, bit_length: int, bit_offset: int) -> Optional[str]:
    """
    Extracts a bit field from a buffer and renders it as text.

    Args:
        data: The buffer the field is read from.
        display_type: How to render the field:

            - ``BINARY``: ``0b`` followed by exactly `bit_length` binary digits
            - ``DECIMAL``: the unsigned decimal value
            - ``HEX``: ``0x`` followed by the lowercase hex value, unpadded
            - ``IPV4``: dotted quad, most significant octet first. The field must be 32 bits wide.
            - ``ASCII``: the raw bytes, copied verbatim (one character per byte). The field must be byte aligned and a
              whole number of bytes long.

        bit_length: The width of the field, in bits.
        bit_offset: The offset of the field, in bits, from the start of the buffer.

    Returns:
        The text, or None if the field cannot be displayed in the requested way (shape mismatch, unknown display type,
        or the field cannot be read from the buffer).
    """
    try:
        display_type = DisplayType.parse(display_type)
    except ValueError:
        return None

    if display_type == DisplayType.ASCII:
        return _format_ascii(data, bit_length, bit_offset)
    if (display_type == DisplayType.IPV4) and (bit_length != 32):
        return None

    try:
        value = extract_bits(data, bit_length, bit_offset)
    except BitExtractionError as e:
        LOG.debug("Cannot display field: %s", e)
        return None

    return format_value(value, display_type, bit_length)


def _format_ascii(data: bytes, bit_length: int, bit_offset: int) -> Optional[str]:
    if (bit_offset % 8 != 0) or (bit_length % 8 != 0):
        return None

    start = bit_offset // 8
    end = bytes_touched(bit_length, bit_offset)
    if end > len(data):
        LOG.debug("Cannot display %d bytes of text at offset %d: buffer has %d bytes", end - start, start, len(data))
        return None

    return bytes(data[start:end]).decode('latin-1')
