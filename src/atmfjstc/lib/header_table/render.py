"""
Rendering of header schemas applied to captured data as bordered tables.

Each group in the schema becomes a pair of rows: one listing the field names and one listing the formatted values.
Captures are often truncated; fields that extend past the captured length are left out of the table.
"""

import logging

from dataclasses import dataclass
from typing import Tuple, Optional, List, Callable

from .console import console
from .display import format_field
from .grid import TextGrid
from .schema import Schema, IPV4_HEADER


LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedRow:
    labels: Tuple[str, ...]
    values: Tuple[Optional[str], ...]


def render_rows(schema: Schema, data: bytes, valid_length: int) -> List[RenderedRow]:
    """
    Formats the fields of a schema applied to a buffer, group by group.

    Within each group, fields are taken in order up to (but not including) the first one that does not fit within
    `valid_length` bytes. Any fields after that one are also left out, even if they would fit. Groups that end up with
    no fields at all are omitted. Nothing past `valid_length` is ever read: a field that passes the cutoff test but
    spills over it gets no value.

    Args:
        schema: The schema describing the fields.
        data: The buffer.
        valid_length: The number of bytes that are actually available in the buffer.

    Returns:
        A list of rows, one for each group that has at least one field to show. Values that could not be formatted are
        None.
    """
    if valid_length < 0:
        raise ValueError(f"Valid length must be non-negative (is: {valid_length})")

    data = data[:valid_length]
    rows = []

    for group in schema.groups:
        labels = []
        values = []

        for field in group:
            if not field.fits(valid_length):
                LOG.debug(
                    "Field '%s' (bits %d-%d) lies past the captured length of %d bytes, stopping group",
                    field.name, field.bit_offset, field.end_bit - 1, valid_length
                )
                break

            labels.append(field.name)
            values.append(format_field(data, field.display_type, field.bit_length, field.bit_offset))

        if len(labels) > 0:
            rows.append(RenderedRow(labels=tuple(labels), values=tuple(values)))

    return rows


def render_table(
    schema: Schema, data: bytes, length: Optional[int] = None, style: str = 'basic', highlight_headers: bool = False
) -> str:
    """
    Renders a schema applied to a buffer as a bordered table.

    Args:
        schema: The schema describing the fields.
        data: The buffer.
        length: The length of the header, as requested by the caller. If the buffer is shorter, the buffer length is
            used instead (this is not an error). None means the whole buffer.
        style: The grid style (see `grid.GRID_STYLES`).
        highlight_headers: Whether to render the field names in bold.

    Returns:
        The table text, without a terminating newline. If no field fits in the available data, this is ``''``.
    """
    if (length is not None) and (length < 0):
        raise ValueError(f"Length must be non-negative (is: {length})")

    valid_length = len(data) if length is None else min(length, len(data))

    grid = TextGrid(style=style, highlight_headers=highlight_headers)

    for row in render_rows(schema, data, valid_length):
        grid.add_separator()
        grid.add_header_row(row.labels)
        grid.add_separator()
        grid.add_row(row.values)

    return grid.to_string()


def table_print(
    data: bytes, length: Optional[int] = None, schema: Schema = IPV4_HEADER,
    sink: Optional[Callable[[str], None]] = None, **render_kwargs
) -> str:
    """
    Renders a header as a table and sends it to an output sink.

    The sink receives a blank line followed by the table (if it is not empty).

    Args:
        data: The captured data, starting at the header.
        length: The requested length, as for `render_table`.
        schema: The header schema. Defaults to IPv4.
        sink: A function that receives one (possibly multiline) string at a time. By default, the text is shown as an
            info message on the console.
        render_kwargs: Other parameters for `render_table` (e.g. `style`).

    Returns:
        The table text.
    """
    if sink is None:
        sink = console.print_info

    text = render_table(schema, data, length, **render_kwargs)

    sink('')
    if text != '':
        sink(text)

    return text
