"""Command-line argument parser.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from .config.pin_map import NumberingScheme


@dataclass
class CmdArgs:
    command: Literal["pinout", "read", "write", "setup"]
    config_file: str | None = None
    numbering_scheme: NumberingScheme | None = None
    verbose: bool = False
    pin: str = ""  # Pin number or configured pin slug
    value: int = 0


def get_package_name() -> str:
    from os.path import abspath, basename, dirname

    return basename(dirname(abspath(__file__)))


def parse_command_line(argv: Sequence[str] | None = None) -> CmdArgs:
    parser = argparse.ArgumentParser(prog=get_package_name())
    parser.add_argument(
        "-c",
        "--config-file",
        help="TOML configuration file path",
    )
    parser.add_argument(
        "-n",
        "--numbering-scheme",
        type=NumberingScheme,
        choices=list(NumberingScheme),
        help="Pin numbering scheme, overriding the configuration file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("pinout", help="Print the board header pin table")
    subparsers.add_parser("setup", help="Set up the pins listed in the config file")
    read_parser = subparsers.add_parser("read", help="Read an input pin")
    read_parser.add_argument("pin", help="Pin number or configured pin slug")
    write_parser = subparsers.add_parser("write", help="Write to an output pin")
    write_parser.add_argument("pin", help="Pin number or configured pin slug")
    write_parser.add_argument("value", type=int, choices=(0, 1))

    args = CmdArgs(**vars(parser.parse_args(argv)))

    return args
