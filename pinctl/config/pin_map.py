"""Pin number mapping between the 26-pin header (board) pin numbering and the
Broadcom/BCM chip pin numbering used by the sysfs GPIO interface.

Board pins are numbered as printed on the connector: pin 1 is the 3V3 pin at
the bottom left, pin 2 the 5V pin at the top left, and pin 26 the top right.

The table follows the revision 2 header, except for board pin 13 which keeps
the revision 1 chip pin 21. Board pin 16 is the timer pin (chip pin 23) and is
deliberately left unmapped, along with the power and ground pins.

References:
- https://projects.drogon.net/raspberry-pi/wiringpi/pins/
- https://datasheets.raspberrypi.com/bcm2835/bcm2835-peripherals.pdf

---
Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from ..gpio.error import InvalidPinIdError, NoSuchPinError

FIRST_BOARD_PIN: Final = 1
LAST_BOARD_PIN: Final = 26

# Index is the board pin number, 0 means "no chip pin" (index 0 is unused).
# fmt: off
BOARD_TO_CHIP: Final = (0, 0, 0, 2, 0, 3, 0, 4, 14, 0, 15, 0, 18, 21, 0, 22, 0, 0, 24, 10, 0, 9, 25, 11, 8, 0, 7)
# fmt: on

CHIP_TO_BOARD: Final[Mapping[int, int]] = MappingProxyType(
    {chip: board for board, chip in enumerate(BOARD_TO_CHIP) if chip}
)


class NumberingScheme(StrEnum):
    BOARD = "board"  # Physical header layout
    CHIP = "chip"  # Broadcom (BCM) numbering, as seen by the I/O interface


def _check_pin_id(pin: int):
    # bool is a subclass of int, but True is not a pin number.
    if not isinstance(pin, int) or isinstance(pin, bool):
        raise InvalidPinIdError(f"Pin id must be an integer, found '{pin!r}'")


def board_pins() -> range:
    return range(FIRST_BOARD_PIN, LAST_BOARD_PIN + 1)


def board_to_chip(header_pin: int) -> int:
    _check_pin_id(header_pin)
    if header_pin not in board_pins():
        raise InvalidPinIdError(
            f"Board pin '{header_pin}' is outside the range "
            f"{FIRST_BOARD_PIN}-{LAST_BOARD_PIN}"
        )
    chip_pin = BOARD_TO_CHIP[header_pin]
    if not chip_pin:
        raise NoSuchPinError(f"Board pin '{header_pin}' has no chip pin mapping")
    return chip_pin


def chip_to_board(chip_pin: int) -> int:
    _check_pin_id(chip_pin)
    try:
        return CHIP_TO_BOARD[chip_pin]
    except KeyError:
        raise NoSuchPinError(
            f"Chip pin '{chip_pin}' is not wired to the board header"
        ) from None


def translate(pin: int, scheme: NumberingScheme) -> int:
    """Return the chip pin number of `pin`, given in the `scheme` numbering."""
    if scheme == NumberingScheme.CHIP:
        _check_pin_id(pin)
        return pin
    return board_to_chip(pin)
