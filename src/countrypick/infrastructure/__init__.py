"""Infrastructure layer: data loading, state machine config, schedulers, phone digits."""

from countrypick.infrastructure.country_data import (
    get_countries_path,
    get_default_countries,
    load_countries,
)
from countrypick.infrastructure.phone import dial_digits, normalize_phone
from countrypick.infrastructure.scheduling import AsyncioScheduler, ClockScheduler
from countrypick.infrastructure.xstate_machine import SelectorMachine, get_machine, load_machine

__all__ = [
    "AsyncioScheduler",
    "ClockScheduler",
    "SelectorMachine",
    "dial_digits",
    "get_countries_path",
    "get_default_countries",
    "get_machine",
    "load_countries",
    "load_machine",
    "normalize_phone",
]
