"""Application layer: country lookup, the selector state machine, and ports."""

from countrypick.application.ports import Cancellable, Scheduler, ScrollIntoView
from countrypick.application.resolver import find, guess_country
from countrypick.application.selector import (
    SEARCH_DELAY,
    CountrySelector,
    SelectorItem,
    dial_code_label,
)

__all__ = [
    "SEARCH_DELAY",
    "Cancellable",
    "CountrySelector",
    "Scheduler",
    "ScrollIntoView",
    "SelectorItem",
    "dial_code_label",
    "find",
    "guess_country",
]
