"""
Command-line front end: reads a captured header from a file (or stdin) and prints it as a table.

Usage examples::

    header-table --hex packet.txt
    printf '4500003c1c4640004006b1e6c0a80001c0a800c7' | header-table --hex -
    header-table -s udp --offset 20 --length 8 capture.bin
"""

import sys
import logging
import argparse

from pathlib import Path
from typing import NoReturn, Optional, Sequence, Text

from colorama import just_fix_windows_console

from atmfjstc.lib.header_table import __version__
from atmfjstc.lib.header_table.console import console
from atmfjstc.lib.header_table.grid import GRID_STYLES
from atmfjstc.lib.header_table.render import table_print
from atmfjstc.lib.header_table.schema import SCHEMAS, get_schema
from atmfjstc.lib.header_table.cli.errors import fail, pretty_unhandled


LOG = logging.getLogger(__name__)


@pretty_unhandled()
def main(argv: Optional[Sequence[str]] = None):
    args = _make_argument_parser().parse_args(argv)

    logging.basicConfig(
        level='DEBUG' if args.verbose else 'WARNING', style='{', format='[{asctime}] {levelname}: {message}'
    )
    just_fix_windows_console()

    data = _read_input(args.input, args.hex)
    LOG.debug("Read %d bytes from %s", len(data), args.input)

    if args.offset > len(data):
        fail(f"Offset {args.offset} lies past the end of the data ({len(data)} bytes)")

    data = data[args.offset:]

    highlight = sys.stdout.isatty() if args.color is None else args.color

    text = table_print(
        data, args.length, schema=get_schema(args.schema), style=args.style, highlight_headers=highlight
    )

    if text == '':
        console.print_warning(f"No '{args.schema}' header field fits in the {len(data)} bytes available")


def _make_argument_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='header-table',
        description="Show a captured protocol header as a table of its fields",
    )

    parser.add_argument(
        'input', nargs='?', default='-',
        help="File containing the captured data, or '-' to read from stdin (default)",
    )
    parser.add_argument(
        '--hex', action='store_true',
        help="The input is hexadecimal text instead of raw bytes",
    )
    parser.add_argument(
        '-s', '--schema', choices=sorted(SCHEMAS), default='ipv4',
        help="The header layout (default: %(default)s)",
    )
    parser.add_argument(
        '-l', '--length', type=_non_negative_int, default=None,
        help="Length of the header, in bytes (default: all the data)",
    )
    parser.add_argument(
        '-o', '--offset', type=_non_negative_int, default=0,
        help="Number of bytes to skip before the header (default: %(default)s)",
    )
    parser.add_argument(
        '--style', choices=list(GRID_STYLES), default='basic',
        help="Table drawing style (default: %(default)s)",
    )
    parser.add_argument(
        '--color', dest='color', action='store_const', const=True, default=None,
        help="Highlight the field names (default: only when writing to a terminal)",
    )
    parser.add_argument(
        '--no-color', dest='color', action='store_const', const=False,
        help="Never highlight the field names",
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help="Show debug messages",
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {raw!r}") from None

    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative (is: {value})")

    return value


def _read_input(source: str, is_hex: bool) -> bytes:
    if source == '-':
        raw = sys.stdin.buffer.read()
    else:
        try:
            raw = Path(source).read_bytes()
        except OSError as e:
            fail(f"Could not read '{source}': {e.strerror or e}")

    if not is_hex:
        return raw

    return parse_hex(raw.decode('ascii', errors='replace'))


def parse_hex(text: str) -> bytes:
    """
    Parses captured data given as hexadecimal text, e.g. ``'45 00 00 3c'``, ``'45:00:00:3c'`` or ``'0x45 0x00'``.

    Raises a `DescriptiveError` if the text is not valid hex.
    """
    digits = ''.join(
        token[2:] if token.lower().startswith('0x') else token
        for token in text.replace(':', ' ').split()
    )

    try:
        return bytes.fromhex(digits)
    except ValueError:
        fail("Input is not valid hexadecimal data (expected an even number of hex digits)")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: Text) -> NoReturn:
        fail(message)
