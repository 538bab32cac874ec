"""Test code for the command-line entry point (main and cmdline_parser modules).

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import contextlib
import io
import os
import tempfile
import textwrap
import unittest
from os.path import join
from unittest.mock import patch

from ..cmdline_parser import parse_command_line
from ..config.pin_map import NumberingScheme
from ..config.schema import BASE_PATH_ENV_VAR
from ..main import main
from .gpio.test_adapter import make_fake_sysfs, read_attr


class TestParseCommandLine(unittest.TestCase):
    def test_write(self):
        args = parse_command_line(
            ["-c", "cfg.toml", "-n", "chip", "write", "18", "1"]
        )
        self.assertEqual(args.command, "write")
        self.assertEqual(args.config_file, "cfg.toml")
        self.assertEqual(args.numbering_scheme, NumberingScheme.CHIP)
        self.assertEqual((args.pin, args.value), ("18", 1))

    def test_invalid_value(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                parse_command_line(["write", "18", "2"])


class TestMain(unittest.TestCase):
    def setUp(self):
        tmp_dir = tempfile.TemporaryDirectory()  # pylint: disable=consider-using-with
        self.addCleanup(tmp_dir.cleanup)
        self.root = tmp_dir.name
        self.base_path = make_fake_sysfs(self.root)
        env_patcher = patch.dict(os.environ, {BASE_PATH_ENV_VAR: self.base_path})
        env_patcher.start()
        self.addCleanup(env_patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out), self.assertNoLogs(level="ERROR"):
            exit_code = main(list(argv))
        return exit_code, out.getvalue()

    def _write_config(self) -> str:
        path = join(self.root, "pinctl.toml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(
                textwrap.dedent(
                    """\
                    [[pins]]
                    slug = "relay"
                    pin = 12
                    direction = "output"

                    [[pins]]
                    slug = "door"
                    pin = 7
                    direction = "input"
                    """
                )
            )
        return path

    def test_pinout(self):
        exit_code, out = self._run("pinout")
        self.assertEqual(exit_code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 27)
        self.assertEqual(lines[3].split(), ["3", "2", "general_purpose"])
        self.assertEqual(lines[16].split(), ["16", "-", "-"])

    def test_write(self):
        exit_code, _out = self._run("write", "12", "1")
        self.assertEqual(exit_code, 0)
        self.assertEqual(read_attr(self.base_path, 18, "direction"), "out")
        self.assertEqual(read_attr(self.base_path, 18, "value"), "1")

    def test_read_chip_numbering(self):
        with open(f"{self.base_path}4/value", "w", encoding="ascii") as f:
            f.write("1\n")
        exit_code, out = self._run("-n", "chip", "read", "4")
        self.assertEqual(exit_code, 0)
        self.assertEqual(out.strip(), "1")

    def test_slugs(self):
        cfg_path = self._write_config()
        exit_code, _out = self._run("-c", cfg_path, "write", "relay", "1")
        self.assertEqual(exit_code, 0)
        self.assertEqual(read_attr(self.base_path, 18, "value"), "1")
        exit_code, out = self._run("-c", cfg_path, "read", "door")
        self.assertEqual((exit_code, out.strip()), (0, "0"))

    def test_setup(self):
        exit_code, out = self._run("-c", self._write_config(), "setup")
        self.assertEqual(exit_code, 0)
        self.assertEqual(
            out.splitlines(), ["chip pin 4: input", "chip pin 18: output"]
        )
        self.assertEqual(read_attr(self.base_path, 4, "direction"), "in")

    def test_errors(self):
        cfg_path = self._write_config()
        test_inputs = [
            ("write", "16", "1"),  # No chip pin
            ("write", "27", "1"),  # Out of range
            ("read", "-1"),  # Negative pin number
            ("-c", cfg_path, "read", "relay"),  # Configured as output
            ("-c", cfg_path, "read", "fan"),  # Unknown slug
            ("-c", join(self.root, "missing.toml"), "setup"),
        ]
        for argv in test_inputs:
            with self.assertLogs("pinctl.main", level="ERROR"):
                self.assertEqual(main(list(argv)), 1, msg=str(argv))

    def test_negative_pin_is_not_a_slug(self):
        with self.assertLogs("pinctl.main", level="ERROR") as logs:
            self.assertEqual(main(["read", "-1"]), 1)
        self.assertIn("InvalidPinIdError", logs.output[0])

    def test_interface_unavailable(self):
        with patch.dict(os.environ, {BASE_PATH_ENV_VAR: "/nonexistent/gpio/gpio"}):
            with self.assertLogs("pinctl.main", level="ERROR") as logs:
                self.assertEqual(main(["write", "12", "1"]), 1)
        self.assertIn("InterfaceUnavailableError", logs.output[0])


if __name__ == "__main__":
    unittest.main()
