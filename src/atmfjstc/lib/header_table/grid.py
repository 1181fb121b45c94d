"""
A minimal text grid for drawing bordered tables on a terminal.

The grid accumulates rows and separators and lays them all out at once in `to_string()`, so that each column is as
wide as its widest cell across the entire table. Rows may have different numbers of cells; missing cells are drawn
empty.

Example output (``'basic'`` style)::

    +---------+-----+
    | Version | IHL |
    +---------+-----+
    | 4       | 5   |
    +---------+-----+
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union, Mapping

from termcolor import colored


@dataclass(frozen=True)
class GridStyle:
    horizontal: str
    vertical: str
    # Each is a (left, junction, right) triplet
    top: Tuple[str, str, str]
    middle: Tuple[str, str, str]
    bottom: Tuple[str, str, str]


GRID_STYLES: Mapping[str, GridStyle] = {
    'basic': GridStyle('-', '|', ('+', '+', '+'), ('+', '+', '+'), ('+', '+', '+')),
    'light': GridStyle('─', '│', ('┌', '┬', '┐'), ('├', '┼', '┤'), ('└', '┴', '┘')),
    'double': GridStyle('═', '║', ('╔', '╦', '╗'), ('╠', '╬', '╣'), ('╚', '╩', '╝')),
}


@dataclass(frozen=True)
class _Row:
    cells: Tuple[str, ...]
    is_header: bool


_SEPARATOR = object()


class TextGrid:
    _style: GridStyle
    _highlight_headers: bool
    _items: List[Union[_Row, object]]

    def __init__(self, style: Union[str, GridStyle] = 'basic', highlight_headers: bool = False):
        """
        Args:
            style: The name of one of the `GRID_STYLES`, or a custom `GridStyle`.
            highlight_headers: If True, header cells will be rendered in bold (where the terminal supports it).
        """
        if isinstance(style, str):
            if style not in GRID_STYLES:
                raise ValueError(f"Unknown grid style '{style}' (available: {', '.join(GRID_STYLES)})")
            style = GRID_STYLES[style]

        self._style = style
        self._highlight_headers = highlight_headers
        self._items = []

    def add_separator(self) -> 'TextGrid':
        self._items.append(_SEPARATOR)
        return self

    def add_header_row(self, cells: Sequence[Optional[str]]) -> 'TextGrid':
        return self._add_row(cells, is_header=True)

    def add_row(self, cells: Sequence[Optional[str]]) -> 'TextGrid':
        return self._add_row(cells, is_header=False)

    def _add_row(self, cells: Sequence[Optional[str]], is_header: bool) -> 'TextGrid':
        self._items.append(_Row(tuple('' if cell is None else cell for cell in cells), is_header))
        return self

    def n_columns(self) -> int:
        return max((len(item.cells) for item in self._items if item is not _SEPARATOR), default=0)

    def to_string(self) -> str:
        """
        Lays out the grid as text. There is no newline at the end. An empty grid (one with no rows) yields ``''``.
        """
        widths = self._column_widths()
        if len(widths) == 0:
            return ''

        lines = []
        pending_separator = True  # The top border is always drawn

        for item in self._items:
            if item is _SEPARATOR:
                pending_separator = True
                continue

            if pending_separator:
                lines.append(self._rule(widths, self._style.top if len(lines) == 0 else self._style.middle))
                pending_separator = False

            lines.append(self._row_line(item, widths))

        lines.append(self._rule(widths, self._style.bottom))

        return '\n'.join(lines)

    def _column_widths(self) -> List[int]:
        widths = [0] * self.n_columns()

        for item in self._items:
            if item is _SEPARATOR:
                continue

            for index, cell in enumerate(item.cells):
                widths[index] = max(widths[index], len(cell))

        return widths

    def _rule(self, widths: List[int], glyphs: Tuple[str, str, str]) -> str:
        left, junction, right = glyphs

        return left + junction.join(self._style.horizontal * (width + 2) for width in widths) + right

    def _row_line(self, row: _Row, widths: List[int]) -> str:
        cells = list(row.cells) + [''] * (len(widths) - len(row.cells))

        rendered = []
        for cell, width in zip(cells, widths):
            padded = ' ' + cell.ljust(width) + ' '
            if row.is_header and self._highlight_headers and (cell != ''):
                padded = colored(padded, attrs=['bold'], force_color=True)

            rendered.append(padded)

        return self._style.vertical + self._style.vertical.join(rendered) + self._style.vertical
