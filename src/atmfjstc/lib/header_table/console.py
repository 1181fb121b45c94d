"""
Console abstraction for showing tables and messages to the user via the terminal.

Messages of various kinds (info, warnings, errors) are shown in appropriate colors (where available) and on the
appropriate stream (stdout vs stderr). The abstraction is provided as a singleton(-ish) `Console` object available
through the `console` property of this module::

    from atmfjstc.lib.header_table.console import console

    console.print_warning("test")

Most methods return the console object itself, enabling fluent calls like::

    console.print_info(table).print_warning("Header truncated")
"""

import sys

from typing import Optional, Tuple, TextIO

from termcolor import cprint


class Console:
    """
    An abstraction for communicating with the user via the terminal.

    Don't create your own instances of this.
    """

    def print_info(self, message: str, **kwargs) -> 'Console':
        """
        Print an informational message. Tables are shown this way.

        See `print_message` for keyword parameters.
        """
        return self.print_message('info', message, **kwargs)

    def print_warning(self, message: str, **kwargs) -> 'Console':
        """
        Print a warning message. It will be highlighted in yellow and sent to stderr.
        """
        return self.print_message('warning', message, **kwargs)

    def print_error(self, message: str, **kwargs) -> 'Console':
        """
        Print an error message. It will be highlighted in red and sent to stderr.
        """
        return self.print_message('error', message, **kwargs)

    def print_message(self, kind: str, message: str, minor: bool = False) -> 'Console':
        """
        Prints a message of a programmatically specified type.

        Args:
            kind: Can be 'info', 'warning', 'error' with the meanings as described by the respective `print_*`
                methods. Unknown kinds are printed plainly to stdout.
            message: The message to print. Can be multiline.
            minor: Signals that this message is somehow less important than others of its kind (never rendered in
                bold).

        Returns:
            The console object (to enable a fluent interface)
        """
        props = _PROPS_BY_MSG_TYPE.get(kind)
        if props is None:
            props = _PROPS_BY_MSG_TYPE['default']

        channel = sys.stderr if props.get('channel', 'stdout') == 'stderr' else sys.stdout

        attrs = props.get('attrs', ())
        if minor and ('bold' in attrs):
            attrs = tuple(attr for attr in attrs if attr != 'bold')

        _print_maybe_with_color(message, props.get('color'), attrs, channel)

        return self


def _print_maybe_with_color(text: str, color: Optional[str], attrs: Optional[Tuple[str, ...]], channel: TextIO):
    if (color is None) and (len(attrs or []) == 0):
        print(text, file=channel)
    else:
        cprint(text, color or 'white', attrs=list(attrs or ()), file=channel)


_PROPS_BY_MSG_TYPE = {
    'default': dict(),
    'info': dict(),
    'warning': dict(color='yellow', attrs=('bold',), channel='stderr'),
    'error': dict(color='red', attrs=('bold',), channel='stderr'),
}


# Singleton
console = Console()
"""The currently active console abstraction."""
