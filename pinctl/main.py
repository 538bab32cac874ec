"""Top-level code that runs a command-line command and handles errors.

The main() method is called by the package entrypoint code in __main__.py.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import logging
from collections.abc import Sequence

from .cmdline_parser import CmdArgs, parse_command_line
from .config.capability import capability_of
from .config.pin_map import BOARD_TO_CHIP, board_pins
from .config.schema import (
    ConfigError,
    CoreConfig,
    load_config_file,
    validate_config,
)
from .gpio.controller import PinController, PinDirection
from .gpio.error import GPIOError
from .gpio.setup import make_controller, setup_configured_pins

_LOGGER = logging.getLogger(__name__)


def load_config(args: CmdArgs) -> CoreConfig:
    config_obj = load_config_file(args.config_file) if args.config_file else {}
    if args.numbering_scheme:
        controller_obj = config_obj.setdefault("controller", {})
        if not isinstance(controller_obj, dict):
            raise ConfigError("Invalid configuration file: 'controller' section")
        controller_obj["numbering_scheme"] = args.numbering_scheme
    return validate_config(config_obj)


def resolve_pin(arg: str, cfg: CoreConfig, direction: PinDirection) -> int:
    """Convert a pin number or configured pin slug to a pin number."""
    try:
        return int(arg)
    except ValueError:
        pass
    pin_cfg = cfg.get_pin(arg)
    if pin_cfg is None:
        raise ConfigError(f"Unknown pin slug '{arg}'")
    if PinDirection(pin_cfg.direction) != direction:
        raise ConfigError(
            f"Pin '{arg}' is configured as {pin_cfg.direction}, not {direction.value}"
        )
    return pin_cfg.pin


def print_pinout():
    print("board  chip  capability")
    for board_pin in board_pins():
        chip_pin = BOARD_TO_CHIP[board_pin]
        if chip_pin:
            print(f"{board_pin:>5}  {chip_pin:>4}  {capability_of(chip_pin).value}")
        else:
            print(f"{board_pin:>5}  {'-':>4}  -")


def read_pin(controller: PinController, pin: int) -> bool:
    controller.setup(pin, PinDirection.INPUT)
    try:
        return controller.read(pin)
    finally:
        controller.teardown(pin)


def write_pin(controller: PinController, pin: int, value: bool):
    controller.setup(pin, PinDirection.OUTPUT)
    try:
        controller.write(pin, value)
    finally:
        controller.teardown(pin)


def run_command(args: CmdArgs):
    if args.command == "pinout":
        print_pinout()
        return

    cfg = load_config(args)
    with make_controller(cfg.controller) as controller:
        match args.command:
            case "read":
                pin = resolve_pin(args.pin, cfg, PinDirection.INPUT)
                print(int(read_pin(controller, pin)))
            case "write":
                pin = resolve_pin(args.pin, cfg, PinDirection.OUTPUT)
                write_pin(controller, pin, bool(args.value))
                _LOGGER.info("Pin %s set to %d", args.pin, args.value)
            case "setup":
                if not cfg.pins:
                    _LOGGER.warning("No pins listed in the configuration file")
                setup_configured_pins(controller, cfg)
                for chip_pin, direction in controller.configured_pins().items():
                    print(f"chip pin {chip_pin}: {direction.value}")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_command_line(argv)
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    exit_code = 0
    try:
        run_command(args)

    except KeyboardInterrupt:
        exit_code = 2
        _LOGGER.warning("Process interrupted by the user")

    except (ConfigError, GPIOError) as e:
        exit_code = 1
        _LOGGER.error("%s: %s", type(e).__name__, e)

    except Exception as e:  # pylint: disable=broad-exception-caught
        exit_code = 1
        _LOGGER.error("Exiting with exception: %s: %s", type(e).__name__, e)
        from traceback import format_exc

        _LOGGER.error(format_exc())

    return exit_code
