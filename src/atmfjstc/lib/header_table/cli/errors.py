"""
Utilities for nicely handling errors in the command-line program.
"""

import sys
import traceback

from typing import NoReturn, List, Callable
from textwrap import dedent, indent
from functools import wraps

from atmfjstc.lib.header_table.console import console


class DescriptiveError(RuntimeError):
    """
    An exception class for errors where it is clear from the message what happened and where, and the traceback is
    redundant.

    Only the message of such an error is shown to the user, without the trace or exception type. Do NOT use this in
    the library parts of the package; it is meant for the command-line front end only.
    """


def fail(message: str) -> NoReturn:
    """
    Shortcut for throwing a `DescriptiveError`. See its docs for details.
    """
    raise DescriptiveError(dedent(message).strip())


def format_exception_head(exception: BaseException) -> str:
    """
    Formats the class and message of an exception (without the traceback) as Python's exception handler would.
    """
    return ''.join(traceback.format_exception_only(exception.__class__, exception)).rstrip()


def format_exception_trace(exception: BaseException) -> str:
    """
    Formats the traceback of an exception, with a base indent of 0 and no ``'Traceback:'`` header.
    """
    return dedent(''.join(traceback.format_list(traceback.extract_tb(exception.__traceback__))).rstrip())


def pretty_print_exception(exception: BaseException, follow_cause: bool = True):
    """
    Prints an exception on the console in an intelligent and informative way.

    There is special handling for `SystemExit`, `KeyboardInterrupt` and `DescriptiveError`. For all of these, nice,
    user-friendly messages are printed. All other exceptions are assumed to be bugs and will show a full stack trace.
    """

    if isinstance(exception, SystemExit):
        return
    if isinstance(exception, KeyboardInterrupt):
        console.print_warning("Stopped by user")
        return

    if isinstance(exception, DescriptiveError):
        console.print_error(short_format_exception(exception, follow_cause=follow_cause))
        return

    for index, cause in enumerate(_causal_chain(exception, follow_cause=follow_cause)):
        base_indent = '' if index == 0 else '  '

        if index > 0:
            console.print_error("Cause:", minor=True)

        console.print_error(indent(format_exception_head(cause), base_indent))
        console.print_error(base_indent + "Traceback:", minor=True)
        console.print_error(indent(format_exception_trace(cause), base_indent + '  '), minor=True)


def short_format_exception(exception: BaseException, follow_cause: bool = True) -> str:
    """
    Presents an exception in a shorter format, e.g. for inclusion into a message.

    For a `DescriptiveError`, only the messages are shown (for it and all its causes). For other exceptions, the class
    name is shown too, but not the trace.
    """

    if isinstance(exception, SystemExit):
        return "Program is exiting"
    if isinstance(exception, KeyboardInterrupt):
        return "User aborted operation"

    causes = _causal_chain(exception, follow_cause)

    if isinstance(exception, DescriptiveError):
        head = str(exception)
        if head == '':
            head = exception.__class__.__name__

        return '\n'.join([head, *(indent(str(cause) or cause.__class__.__name__, '  ') for cause in causes[1:])])

    return '\n'.join([
        format_exception_head(exception),
        *(indent(format_exception_head(cause), '  ') for cause in causes[1:])
    ])


def _causal_chain(exception: BaseException, follow_cause: bool) -> List[BaseException]:
    result = [exception]

    while follow_cause and exception.__cause__ is not None:
        exception = exception.__cause__
        result.append(exception)

    return result


def pretty_unhandled() -> Callable:
    """
    Decorator for a main method that causes unhandled exceptions to be displayed in a pretty way.

    ``sys.exit(-1)`` will be called if an exception occurs. A `SystemExit` passes through untouched, and a
    `KeyboardInterrupt` exits with status 0.
    """

    def real_decorator(main_method):
        @wraps(main_method)
        def wrapper(*args, **kwargs):
            try:
                return main_method(*args, **kwargs)
            except SystemExit:
                raise
            except KeyboardInterrupt as e:
                pretty_print_exception(e)
                sys.exit(0)
            except BaseException as e:
                pretty_print_exception(e)
                sys.exit(-1)

        return wrapper

    return real_decorator
