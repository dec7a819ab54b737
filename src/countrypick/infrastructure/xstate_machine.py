"""
XState-compatible machine for the country selector's modes, using xstate-python.

Loads standard XState JSON (id, initial, states with on: { EVENT: target }).
Modes are hidden, browsing and searching; focus and the search buffer live on
the selector itself, the machine only answers "which mode follows this event".
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine

HIDDEN = "hidden"
BROWSING = "browsing"
SEARCHING = "searching"

SHOW = "SHOW"
HIDE = "HIDE"
TYPE = "TYPE"
SEARCH_EXPIRED = "SEARCH_EXPIRED"

# (mode, event) -> mode the selector relies on. Checked when a machine is loaded.
REQUIRED_TRANSITIONS = {
    (HIDDEN, SHOW): BROWSING,
    (BROWSING, HIDE): HIDDEN,
    (BROWSING, TYPE): SEARCHING,
    (SEARCHING, HIDE): HIDDEN,
    (SEARCHING, SEARCH_EXPIRED): BROWSING,
}


class SelectorMachine:
    """A loaded selector machine config and its xstate Machine, built once."""

    def __init__(self, config: dict) -> None:
        if "initial" not in config or "states" not in config:
            raise ValueError("Machine must have 'initial' and 'states'")
        if "id" not in config:
            raise ValueError("Machine must have 'id'")
        if config["initial"] not in config["states"]:
            raise ValueError(f"initial '{config['initial']}' must be a state")
        missing = {HIDDEN, BROWSING, SEARCHING} - set(config["states"])
        if missing:
            raise ValueError(f"Machine is missing states: {', '.join(sorted(missing))}")
        self.config = config
        self.initial: str = config["initial"]
        self._machine = Machine(config)
        for (mode, event), expected in REQUIRED_TRANSITIONS.items():
            actual = self.transition(mode, event)
            if actual != expected:
                raise ValueError(
                    f"Machine '{config['id']}': {event} from '{mode}' must lead to "
                    f"'{expected}', got {actual!r}"
                )

    def transition(self, mode: str, event: str) -> str | None:
        """Return the mode after event, or None when the event leaves mode unchanged."""
        state = self._machine.state_from(mode)
        next_mode = self._machine.transition(state, event).value
        return None if next_mode == mode else next_mode


def get_machine_path() -> Path:
    default = Path(__file__).resolve().parent.parent / "data" / "selector_machine.json"
    path = os.environ.get("COUNTRYPICK_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_machine(path: Path | None = None) -> SelectorMachine:
    """Load and validate the machine JSON. Raises ValueError on a broken config."""
    if path is None:
        path = get_machine_path()
    config = json.loads(path.read_text(encoding="utf-8"))
    try:
        return SelectorMachine(config)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e


# Module-level cache for the default machine
_machine_cache: SelectorMachine | None = None


def get_machine(cache: bool = True) -> SelectorMachine:
    """Load the default machine (cached by default). Pass cache=False to reload."""
    global _machine_cache
    if cache and _machine_cache is not None:
        return _machine_cache
    _machine_cache = load_machine()
    return _machine_cache
