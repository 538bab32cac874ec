"""Classification of chip (BCM) pin numbers by what they can be used for.

If a chip pin is not listed as general purpose, it is not a GPIO pin as far as
the pin controller is concerned, and every operation on it is rejected.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from enum import Enum
from typing import Final


class PinCapability(Enum):
    GENERAL_PURPOSE = "general_purpose"
    TIME_SHARED = "time_shared"  # Timer pin, toggles every half second
    POWER_RAIL = "power_rail"
    GROUND = "ground"
    UNUSABLE = "unusable"


GPIO_PINS: Final = (2, 3, 4, 7, 8, 9, 10, 11, 14, 15, 18, 21, 22, 24, 25)
TIMER_PINS: Final = (23,)
# No chip pin numbers are known for the power and ground pins yet.
POWER_RAIL_PINS: Final[tuple[int, ...]] = ()
GROUND_PINS: Final[tuple[int, ...]] = ()

_CAPABILITY_SETS: Final = (
    (frozenset(GPIO_PINS), PinCapability.GENERAL_PURPOSE),
    (frozenset(TIMER_PINS), PinCapability.TIME_SHARED),
    (frozenset(POWER_RAIL_PINS), PinCapability.POWER_RAIL),
    (frozenset(GROUND_PINS), PinCapability.GROUND),
)


def capability_of(chip_pin: int) -> PinCapability:
    for pins, capability in _CAPABILITY_SETS:
        if chip_pin in pins:
            return capability
    return PinCapability.UNUSABLE


def is_gpio(chip_pin: int) -> bool:
    return capability_of(chip_pin) is PinCapability.GENERAL_PURPOSE
