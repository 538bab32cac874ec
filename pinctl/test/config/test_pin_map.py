"""Test code for the config.pin_map and config.capability modules.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import unittest

from ...config.capability import (
    GPIO_PINS,
    PinCapability,
    capability_of,
    is_gpio,
)
from ...config.pin_map import (
    BOARD_TO_CHIP,
    NumberingScheme,
    board_pins,
    board_to_chip,
    chip_to_board,
    translate,
)
from ...gpio.error import InvalidPinIdError, NoSuchPinError


class TestTranslate(unittest.TestCase):
    def test_board_to_chip(self):
        test_inputs = [(3, 2), (5, 3), (7, 4), (12, 18), (13, 21), (26, 7)]
        for board_pin, chip_pin in test_inputs:
            self.assertEqual(translate(board_pin, NumberingScheme.BOARD), chip_pin)

    def test_chip_numbering_is_identity(self):
        for pin in (2, 23, 0, 40):
            self.assertEqual(translate(pin, NumberingScheme.CHIP), pin)

    def test_unmapped_board_pins(self):
        # Power, ground and the timer pin (16)
        for board_pin in (1, 2, 4, 6, 9, 11, 14, 16, 17, 20, 25):
            with self.assertRaises(NoSuchPinError, msg=f"board pin {board_pin}"):
                translate(board_pin, NumberingScheme.BOARD)

    def test_out_of_range_board_pins(self):
        for board_pin in (0, -1, 27, 40):
            with self.assertRaises(InvalidPinIdError, msg=f"board pin {board_pin}"):
                translate(board_pin, NumberingScheme.BOARD)

    def test_non_integer_pins(self):
        for scheme in NumberingScheme:
            for pin in (True, "3", 3.0, None):
                with self.assertRaises(InvalidPinIdError):
                    translate(pin, scheme)  # type: ignore[arg-type]

    def test_chip_to_board(self):
        self.assertEqual(chip_to_board(2), 3)
        self.assertEqual(chip_to_board(7), 26)
        with self.assertRaises(NoSuchPinError):
            chip_to_board(23)  # Timer pin is not mapped

    def test_every_mapped_pin_is_gpio(self):
        mapped = [board_to_chip(p) for p in board_pins() if BOARD_TO_CHIP[p]]
        self.assertEqual(sorted(mapped), sorted(GPIO_PINS))


class TestCapability(unittest.TestCase):
    def test_gpio_pins(self):
        for pin in GPIO_PINS:
            self.assertIs(capability_of(pin), PinCapability.GENERAL_PURPOSE)
            self.assertTrue(is_gpio(pin))

    def test_timer_pin(self):
        self.assertIs(capability_of(23), PinCapability.TIME_SHARED)
        self.assertFalse(is_gpio(23))

    def test_unusable_pins(self):
        for pin in (0, 1, 5, 6, 12, 17, 27, -3):
            self.assertIs(capability_of(pin), PinCapability.UNUSABLE)


# Tests can be run with the command line:
# python -m unittest pinctl.test.config.test_pin_map
if __name__ == "__main__":
    unittest.main()
