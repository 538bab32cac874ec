"""Pin controller: numbering translation, pin validation and pin state tracking.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from __future__ import annotations
import logging
from collections.abc import Callable
from enum import Enum, StrEnum
from types import TracebackType
from typing import Final

from ..config.capability import GPIO_PINS, capability_of, is_gpio
from ..config.pin_map import NumberingScheme, chip_to_board, translate
from .adapter import DirectionStr, IOAdapter
from .error import (
    AlreadyConfiguredError,
    InterfacePermissionError,
    InterfaceUnavailableError,
    NoSuchPinError,
    NotAnInputPinError,
    NotAnOutputPinError,
    NotConfiguredError,
    NotGPIOCapableError,
    PinIOError,
)

_LOGGER = logging.getLogger(__name__)


class PinDirection(Enum):
    UNSET = "unset"
    INPUT = "input"
    OUTPUT = "output"


class Edge(StrEnum):
    NONE = "none"
    RISING = "rising"
    FALLING = "falling"
    BOTH = "both"


_DIRECTION_STR: Final[dict[PinDirection, DirectionStr]] = {
    PinDirection.INPUT: "in",
    PinDirection.OUTPUT: "out",
}

EdgeCallback = Callable[[int, Edge], None]


class PinController:
    """Set up, read and write GPIO pins through an I/O adapter.

    Pins are given in the numbering scheme chosen at construction time (board
    header numbering by default) and translated to chip pin numbers before
    anything else happens. A pin must be set up as an input before it can be
    read, and as an output before it can be written. Switching direction
    requires a teardown() in between.

    Not thread safe: concurrent callers must serialise access to an instance.
    """

    def __init__(
        self,
        adapter: IOAdapter,
        numbering_scheme: NumberingScheme = NumberingScheme.BOARD,
    ):
        if not adapter.backing_root_exists():
            raise InterfaceUnavailableError(f"GPIO pins are unavailable ({adapter})")

        unwritable = [pin for pin in GPIO_PINS if not adapter.is_writable(pin)]
        if unwritable:
            raise InterfacePermissionError(
                f"Unable to write to GPIO pins {unwritable} ({adapter})"
            )

        self._adapter = adapter
        self._numbering_scheme = numbering_scheme
        self._pins: dict[int, PinDirection] = {
            pin: PinDirection.UNSET for pin in GPIO_PINS
        }
        _LOGGER.debug(
            "%s: %s numbering, adapter %s",
            type(self).__name__,
            numbering_scheme,
            adapter,
        )

    @property
    def numbering_scheme(self) -> NumberingScheme:
        return self._numbering_scheme

    def __enter__(self) -> PinController:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ):
        self.close()

    def close(self):
        """Release adapter resources. Pins are left in their current state."""
        self._adapter.close()

    def _chip_pin(self, pin: int) -> int:
        chip_pin = translate(pin, self._numbering_scheme)
        if not is_gpio(chip_pin):
            raise NotGPIOCapableError(
                f"Pin {self._describe(pin, chip_pin)} is not a GPIO pin "
                f"({capability_of(chip_pin).value})"
            )
        return chip_pin

    def _describe(self, pin: int, chip_pin: int) -> str:
        if self._numbering_scheme == NumberingScheme.BOARD:
            return f"'{pin}' (chip pin {chip_pin})"
        try:
            return f"'{pin}' (board pin {chip_to_board(chip_pin)})"
        except NoSuchPinError:
            return f"'{pin}'"

    def get_direction(self, pin: int) -> PinDirection:
        return self._pins[self._chip_pin(pin)]

    def configured_pins(self) -> dict[int, PinDirection]:
        """Return the chip pin number and direction of every pin in use."""
        return {
            pin: direction
            for pin, direction in self._pins.items()
            if direction != PinDirection.UNSET
        }

    def setup(self, pin: int, direction: PinDirection = PinDirection.OUTPUT):
        if direction == PinDirection.UNSET:
            raise ValueError("Use teardown() to unset a pin direction")

        chip_pin = self._chip_pin(pin)
        if self._pins[chip_pin] != PinDirection.UNSET:
            raise AlreadyConfiguredError(
                f"Pin {self._describe(pin, chip_pin)} is already set up as "
                f"{self._pins[chip_pin].value}"
            )

        # Pins are not exported (that would require root), only tracked here.
        self._pins[chip_pin] = direction
        try:
            self._adapter.write_direction(chip_pin, _DIRECTION_STR[direction])
        except OSError as e:
            self._pins[chip_pin] = PinDirection.UNSET
            _LOGGER.warning(
                "Setup of pin %s failed, state rolled back: %s",
                self._describe(pin, chip_pin),
                e,
            )
            raise PinIOError(
                f"Unable to set up pin {self._describe(pin, chip_pin)}: {e}"
            ) from e

        _LOGGER.debug(
            "Pin %s set up as %s", self._describe(pin, chip_pin), direction.value
        )

    def teardown(self, pin: int):
        chip_pin = self._chip_pin(pin)
        if self._pins[chip_pin] == PinDirection.UNSET:
            raise NotConfiguredError(
                f"Pin {self._describe(pin, chip_pin)} is not set up"
            )
        self._pins[chip_pin] = PinDirection.UNSET
        _LOGGER.debug("Pin %s torn down", self._describe(pin, chip_pin))

    def read(self, pin: int) -> bool:
        chip_pin = self._chip_pin(pin)
        if self._pins[chip_pin] != PinDirection.INPUT:
            raise NotAnInputPinError(
                f"Attempt to read from non-input pin {self._describe(pin, chip_pin)}"
            )
        try:
            raw = self._adapter.read_value(chip_pin)
        except OSError as e:
            raise PinIOError(
                f"Unable to read from pin {self._describe(pin, chip_pin)}: {e}"
            ) from e
        return raw.strip() == "1"

    def write(self, pin: int, value: bool):
        chip_pin = self._chip_pin(pin)
        if self._pins[chip_pin] != PinDirection.OUTPUT:
            raise NotAnOutputPinError(
                f"Attempt to write to non-output pin {self._describe(pin, chip_pin)}"
            )
        try:
            self._adapter.write_value(chip_pin, 1 if value else 0)
        except OSError as e:
            raise PinIOError(
                f"Unable to write to pin {self._describe(pin, chip_pin)}: {e}"
            ) from e

    def add_event_detect(
        self, pin: int, edge: Edge, callback: EdgeCallback | None = None
    ):
        """Accept an edge detection request without acting on it.

        Edge detection is not implemented: the callback is never called. The
        method exists so that callers written against the same interface keep
        working. The pin is still validated.
        """
        chip_pin = self._chip_pin(pin)
        _LOGGER.debug(
            "Edge detection (%s) requested for pin %s is not supported, ignoring "
            "callback %r",
            Edge(edge).value,
            self._describe(pin, chip_pin),
            callback,
        )
