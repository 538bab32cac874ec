"""I/O adapter protocol and the default sysfs (one file per pin attribute) adapter.

Adapters only ever see chip (BCM) pin numbers. Failures are reported by raising
OSError, which the pin controller wraps in a PinIOError.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import logging
import os
from os.path import dirname, isdir
from typing import Final, Literal, Protocol, override

_LOGGER = logging.getLogger(__name__)

SYSFS_GPIO_PATH: Final = "/sys/class/gpio/gpio"
GPIO_CHIP_PATH: Final = "/dev/gpiochip0"

DirectionStr = Literal["in", "out"]
ValueInt = Literal[0, 1]


class IOAdapter(Protocol):
    def backing_root_exists(self) -> bool: ...

    def is_writable(self, chip_pin: int) -> bool: ...

    def write_direction(self, chip_pin: int, direction: DirectionStr): ...

    def write_value(self, chip_pin: int, value: ValueInt): ...

    def read_value(self, chip_pin: int) -> str: ...

    def close(self): ...


class SysfsAdapter:
    """Read and write GPIO pin attribute files such as
    '/sys/class/gpio/gpio18/direction' and '/sys/class/gpio/gpio18/value'.

    Pins are never exported or unexported (that would require root privileges),
    so the pin directories are expected to exist already.
    """

    def __init__(self, base_path: str = SYSFS_GPIO_PATH):
        self.base_path = base_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_path!r})"

    def _attr_path(self, chip_pin: int, attr: Literal["direction", "value"]) -> str:
        return f"{self.base_path}{chip_pin}/{attr}"

    def backing_root_exists(self) -> bool:
        return isdir(dirname(self.base_path))

    def is_writable(self, chip_pin: int) -> bool:
        return os.access(self._attr_path(chip_pin, "value"), os.W_OK)

    def _write(self, path: str, text: str):
        _LOGGER.debug("Writing '%s' to '%s'", text, path)
        with open(path, "w", encoding="ascii") as f:
            f.write(text)

    def write_direction(self, chip_pin: int, direction: DirectionStr):
        self._write(self._attr_path(chip_pin, "direction"), direction)

    def write_value(self, chip_pin: int, value: ValueInt):
        self._write(self._attr_path(chip_pin, "value"), str(value))

    def read_value(self, chip_pin: int) -> str:
        path = self._attr_path(chip_pin, "value")
        try:
            with open(path, encoding="ascii") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise OSError(f"Unexpected content in '{path}': {e}") from e

    def close(self):
        """Nothing to release: files are opened and closed on every access."""


class LoggingAdapter(SysfsAdapter):
    """A SysfsAdapter that only logs writes instead of performing them.

    Useful to dry-run a configuration file on a machine without GPIO pins.
    Reads always return '0'.
    """

    @override
    def backing_root_exists(self) -> bool:
        return True

    @override
    def is_writable(self, chip_pin: int) -> bool:
        return True

    @override
    def _write(self, path: str, text: str):
        _LOGGER.info("Dry run: would write '%s' to '%s'", text, path)

    @override
    def read_value(self, chip_pin: int) -> str:
        _LOGGER.info("Dry run: would read '%s'", self._attr_path(chip_pin, "value"))
        return "0"
