import io
import os
import tempfile
import unittest
from unittest import mock

from bfi.main import main


class MainTestCase(unittest.TestCase):

    def run_main(self, argv, stdin=b""):
        """Runs main with patched standard streams. Returns (exit code, stdout bytes, stderr text)."""
        stdout = io.TextIOWrapper(io.BytesIO(), write_through=True)
        stderr = io.StringIO()
        code = 0
        with mock.patch("sys.stdin", io.TextIOWrapper(io.BytesIO(stdin))), \
                mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
            try:
                main(argv)
            except SystemExit as err:
                code = err.code
        return code, stdout.buffer.getvalue(), stderr.getvalue()

    def test_code(self):
        code, output, __ = self.run_main(["-c", "+" * 66 + "."])
        self.assertEqual(0, code)
        self.assertEqual(b"B", output)

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "echo.b")
            with open(path, "w") as file:
                file.write(",.")

            code, output, __ = self.run_main([path], stdin=b"A")
        self.assertEqual(0, code)
        self.assertEqual(b"A", output)

    def test_missing_file(self):
        code, output, errors = self.run_main(["does/not/exist.b"])
        self.assertEqual(1, code)
        self.assertEqual(b"", output)
        self.assertIn("could not be opened", errors)

    def test_fatal_errors(self):
        should_fail = ["]", "[", ","]
        for case in should_fail:
            code, __, errors = self.run_main(["-c", case])
            self.assertEqual(1, code, case)
            self.assertIn("error: ", errors, case)

    def test_input_error_position(self):
        __, __, errors = self.run_main(["-c", "+.  ,"])
        self.assertIn("at pos", errors)
        self.assertIn("5", errors)

    def test_usage_errors(self):
        should_fail = [["a.b", "b.b"], ["a.b", "-c", "+"]]
        for case in should_fail:
            code, __, __ = self.run_main(case)
            self.assertEqual(2, code, case)

    def test_interactive_stub(self):
        code, output, errors = self.run_main([])
        self.assertEqual(0, code)
        self.assertEqual(b"", output)
        self.assertIn("interactive mode is not implemented", errors)


if __name__ == '__main__':
    unittest.main()
