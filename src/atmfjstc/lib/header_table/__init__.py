"""
Bit-level extraction and tabular display of fixed-layout binary headers (IPv4 and the like).

A header layout is described declaratively as a `Schema`: groups of named fields, each with a bit length, a bit offset
and a display type (binary, decimal, hex, IPv4 dotted quad or raw ASCII). Applying a schema to captured data yields a
bordered table with a row of field names and a row of values for each group::

    >>> from atmfjstc.lib.header_table import render_table, IPV4_HEADER
    >>> print(render_table(IPV4_HEADER, data))

Captures that are shorter than the header are handled gracefully: fields that lie past the available data are simply
left out.

Note that owing to the interpreted nature of Python, these utilities are not particularly efficient. They are meant for
displaying a handful of headers to a human, not for bulk packet processing.
"""


__version__ = '0.1.0'


from .errors import HeaderTableError, BitExtractionError, BitSpanTooWideError, BitFieldOutOfBoundsError, SchemaError
from .bits import extract_bits
from .display import DisplayType, format_field, format_value
from .schema import FieldSpec, Schema, make_schema, get_schema, SCHEMAS, IPV4_HEADER, UDP_HEADER, TCP_HEADER
from .render import RenderedRow, render_rows, render_table, table_print
