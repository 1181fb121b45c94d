import io
import re
import unittest

from contextlib import redirect_stdout, redirect_stderr

from atmfjstc.lib.header_table.console import Console


def _strip_ansi(text: str) -> str:
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


class ConsoleTest(unittest.TestCase):
    def _capture(self, action):
        out = io.StringIO()
        err = io.StringIO()

        with redirect_stdout(out), redirect_stderr(err):
            action()

        return _strip_ansi(out.getvalue()), _strip_ansi(err.getvalue())

    def test_info_goes_to_stdout(self):
        out, err = self._capture(lambda: Console().print_info("table"))

        self.assertEqual(out, "table\n")
        self.assertEqual(err, "")

    def test_warnings_and_errors_go_to_stderr(self):
        out, err = self._capture(lambda: Console().print_warning("careful").print_error("broken"))

        self.assertEqual(out, "")
        self.assertEqual(err, "careful\nbroken\n")

    def test_minor_error_still_goes_to_stderr(self):
        out, err = self._capture(lambda: Console().print_error("Traceback:\n  details", minor=True))

        self.assertEqual(out, "")
        self.assertEqual(err, "Traceback:\n  details\n")

    def test_unknown_kind(self):
        out, _ = self._capture(lambda: Console().print_message('trivia', "hello", minor=True))

        self.assertEqual(out, "hello\n")


if __name__ == '__main__':
    unittest.main()
