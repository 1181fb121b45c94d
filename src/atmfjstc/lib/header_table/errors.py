class HeaderTableError(Exception):
    """
    Base class for all exceptions raised by the header table machinery.
    """


class BitExtractionError(HeaderTableError):
    """
    Base class for the situations where a bit field cannot be read out of a buffer.

    These are expected outcomes rather than bugs: the formatter turns them into an empty cell.
    """


class BitSpanTooWideError(BitExtractionError):
    bit_length: int
    bit_offset: int
    span: int

    def __init__(self, bit_length: int, bit_offset: int):
        self.bit_length = bit_length
        self.bit_offset = bit_offset
        self.span = (bit_offset % 8) + bit_length

        super().__init__(
            f"Field of {bit_length} bits at bit offset {bit_offset} spans {self.span} bits, which does not fit in "
            f"a 64-bit container"
        )


class BitFieldOutOfBoundsError(BitExtractionError):
    bit_length: int
    bit_offset: int
    bytes_needed: int
    bytes_available: int

    def __init__(self, bit_length: int, bit_offset: int, bytes_needed: int, bytes_available: int):
        self.bit_length = bit_length
        self.bit_offset = bit_offset
        self.bytes_needed = bytes_needed
        self.bytes_available = bytes_available

        super().__init__(
            f"Field of {bit_length} bits at bit offset {bit_offset} needs {bytes_needed} bytes, but only "
            f"{bytes_available} are available"
        )


class SchemaError(HeaderTableError):
    """
    Raised when a schema (or one of its field specs) is set up incorrectly.
    """
