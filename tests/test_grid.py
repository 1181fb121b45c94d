import re
import unittest

from textwrap import dedent

from atmfjstc.lib.header_table.grid import TextGrid, GridStyle


def _strip_ansi(text: str) -> str:
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


class TextGridTest(unittest.TestCase):
    def test_basic(self):
        grid = TextGrid()
        grid.add_separator().add_header_row(['Version', 'IHL']).add_separator().add_row(['4', '5'])

        self.assertEqual(grid.to_string(), dedent("""\
            +---------+-----+
            | Version | IHL |
            +---------+-----+
            | 4       | 5   |
            +---------+-----+"""))

    def test_top_border_without_separator(self):
        grid = TextGrid()
        grid.add_row(['a', 'bb'])

        self.assertEqual(grid.to_string(), dedent("""\
            +---+----+
            | a | bb |
            +---+----+"""))

    def test_widths_are_shared_between_rows(self):
        grid = TextGrid()
        grid.add_header_row(['x', 'y']).add_separator().add_row(['long value', None])

        self.assertEqual(grid.to_string(), dedent("""\
            +------------+---+
            | x          | y |
            +------------+---+
            | long value |   |
            +------------+---+"""))

    def test_short_rows_are_padded(self):
        grid = TextGrid()
        grid.add_row(['a', 'b', 'c']).add_separator().add_row(['d'])

        self.assertEqual(grid.to_string(), dedent("""\
            +---+---+---+
            | a | b | c |
            +---+---+---+
            | d |   |   |
            +---+---+---+"""))

    def test_separators_collapse(self):
        grid = TextGrid()
        grid.add_separator().add_separator().add_row(['a']).add_separator().add_separator().add_row(['b'])
        grid.add_separator()

        self.assertEqual(grid.to_string(), dedent("""\
            +---+
            | a |
            +---+
            | b |
            +---+"""))

    def test_empty(self):
        self.assertEqual(TextGrid().to_string(), '')
        self.assertEqual(TextGrid().add_separator().to_string(), '')

    def test_light_style(self):
        grid = TextGrid(style='light')
        grid.add_separator().add_header_row(['ab', 'c']).add_separator().add_row(['1', '2'])

        self.assertEqual(grid.to_string(), dedent("""\
            ┌────┬───┐
            │ ab │ c │
            ├────┼───┤
            │ 1  │ 2 │
            └────┴───┘"""))

    def test_double_style(self):
        grid = TextGrid(style='double')
        grid.add_row(['a'])

        self.assertEqual(grid.to_string(), '╔═══╗\n║ a ║\n╚═══╝')

    def test_custom_style(self):
        style = GridStyle('=', '!', ('<', '^', '>'), ('[', '+', ']'), ('{', 'v', '}'))
        grid = TextGrid(style=style)
        grid.add_row(['a', 'b']).add_separator().add_row(['c', 'd'])

        self.assertEqual(grid.to_string(), dedent("""\
            <===^===>
            ! a ! b !
            [===+===]
            ! c ! d !
            {===v===}"""))

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            TextGrid(style='fancy')

    def test_highlight_headers_keeps_layout(self):
        plain = TextGrid()
        highlighted = TextGrid(highlight_headers=True)

        for grid in (plain, highlighted):
            grid.add_separator().add_header_row(['Version', 'IHL']).add_separator().add_row(['4', '5'])

        self.assertEqual(_strip_ansi(highlighted.to_string()), plain.to_string())

    def test_highlight_headers_emits_bold(self):
        highlighted = TextGrid(highlight_headers=True).add_header_row(['Version', '']).add_row(['4', '']).to_string()
        plain = TextGrid().add_header_row(['Version', '']).add_row(['4', '']).to_string()

        self.assertIn('\x1b[1m Version \x1b[0m', highlighted)
        self.assertEqual(highlighted.count('\x1b[1m'), 1)
        self.assertNotIn('\x1b[', plain)

    def test_n_columns(self):
        grid = TextGrid()
        grid.add_separator().add_header_row(['a', 'b', 'c']).add_separator().add_row(['d'])

        self.assertEqual(grid.n_columns(), 3)


if __name__ == '__main__':
    unittest.main()
