"""
Test cases for the cli.py functions.
"""

import io
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import pandas as pd

from climate.cli import get_args, main
from climate.test.helpers import make_line

# silence logs
logging.disable(logging.CRITICAL)


class TestMain(unittest.TestCase):
    """Test cases for the command line entry point."""

    def setUp(self):
        """Create a scratch directory and stub out logging and .env setup."""
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

        for target in ("climate.cli.config_logger", "climate.cli.load_dotenv"):
            patcher = patch(target)
            patcher.start()
            self.addCleanup(patcher.stop)

    def write_file(self, name, lines):
        """Write lines to a file in the scratch directory and return its path."""
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(lines)
        return path

    def run_main(self, argv):
        """Run main and capture its exit status and standard output."""
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            status = main(argv)
        return status, stdout.getvalue()

    def test_get_args(self):
        """Files are kept in order and options parsed."""
        args = get_args(["a.tdv", "b.tdv", "--debug", "--csv", "out.csv"])

        self.assertEqual(args.files, ["a.tdv", "b.tdv"])
        self.assertTrue(args.debug)
        self.assertEqual(args.csv, "out.csv")

    def test_root_script_uses_package_entry_point(self):
        """The root main.py script delegates to climate.cli.main."""
        import main as root_script

        self.assertIs(root_script.main, main)

    def test_no_files_prints_usage(self):
        """Running without files is an error."""
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as cm:
            main([])

        self.assertNotEqual(cm.exception.code, 0)
        self.assertIn("usage:", stderr.getvalue())

    def test_report_printed(self):
        """A successful run prints the report and exits with 0."""
        path = self.write_file("tn.tdv", [make_line(), make_line(code="WA")])
        status, output = self.run_main([path])

        self.assertEqual(status, 0)
        self.assertTrue(output.startswith("States found: TN WA\n"))
        self.assertIn("-- State: WA --", output)

    def test_no_records_no_report(self):
        """Without any ingested record nothing is printed, and the run succeeds."""
        missing = os.path.join(self.tmp.name, "missing.tdv")
        bad = self.write_file("bad.tdv", ["not a record\n"])
        status, output = self.run_main([missing, bad])

        self.assertEqual(status, 0)
        self.assertEqual(output, "")

    def test_csv_export(self):
        """--csv writes one row per region."""
        path = self.write_file("tn.tdv", [make_line(), make_line(code="WA")])
        csv_path = os.path.join(self.tmp.name, "summary.csv")
        status, _ = self.run_main([path, "--csv", csv_path])

        self.assertEqual(status, 0)
        df = pd.read_csv(csv_path)
        self.assertEqual(df["region"].tolist(), ["TN", "WA"])
        self.assertEqual(df["records"].tolist(), [1, 1])

    def test_memory_error_is_fatal(self):
        """Running out of memory while ingesting exits with a failure status."""
        path = self.write_file("tn.tdv", [make_line()])
        with patch("climate.cli.Processor.run", side_effect=MemoryError):
            status, output = self.run_main([path])

        self.assertEqual(status, 1)
        self.assertEqual(output, "")

    @patch.dict(os.environ, {"CLIMATE_REPORT_MALFORMED": "false"})
    def test_settings_from_environment(self):
        """Malformed line warnings follow CLIMATE_REPORT_MALFORMED."""
        path = self.write_file("tn.tdv", ["bad\n", make_line()])
        with patch("logging.warning") as mock_log_warning:
            status, _ = self.run_main([path])

        self.assertEqual(status, 0)
        mock_log_warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
