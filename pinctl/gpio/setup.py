"""Supporting functions to create a pin controller given configuration models.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import logging

from ..config.schema import ControllerConfig, CoreConfig
from .adapter import IOAdapter, LoggingAdapter, SysfsAdapter
from .controller import PinController, PinDirection

_LOGGER = logging.getLogger(__name__)


def make_adapter(cfg: ControllerConfig) -> IOAdapter:
    match cfg.adapter:
        case "sysfs":
            return SysfsAdapter(cfg.base_path)
        case "dry_run":
            return LoggingAdapter(cfg.base_path)
        case "gpiod":
            # Imported on demand: the gpiod package is only usable on Linux.
            from .gpiod_adapter import GpiodAdapter

            return GpiodAdapter(cfg.chip_path, cfg.consumer)


def make_controller(cfg: ControllerConfig) -> PinController:
    return PinController(make_adapter(cfg), cfg.numbering_scheme)


def setup_configured_pins(controller: PinController, cfg: CoreConfig):
    """Set up the direction of every pin listed in the configuration file."""
    for pin_cfg in cfg.pins:
        controller.setup(pin_cfg.pin, PinDirection(pin_cfg.direction))
        _LOGGER.info(
            "Pin '%s' (%s pin %d) set up as %s",
            pin_cfg.slug,
            controller.numbering_scheme,
            pin_cfg.pin,
            pin_cfg.direction,
        )
