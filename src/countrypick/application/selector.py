"""Country selector dropdown: focus, keyboard navigation, typeahead, scroll side effects.

The host owns the selected country and visibility and passes them in (at
construction and through update()); the selector owns the focused index and
the typeahead buffer. Focus is always re-derived from the selected country
rather than patched, so the two cannot drift apart.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from countrypick.application.ports import Cancellable, Scheduler, ScrollIntoView
from countrypick.domain import CountryDirectory, CountryRecord, parse_country
from countrypick.infrastructure.country_data import get_default_countries
from countrypick.infrastructure.scheduling import ClockScheduler
from countrypick.infrastructure.xstate_machine import (
    HIDDEN,
    HIDE,
    SEARCH_EXPIRED,
    SHOW,
    TYPE,
    SelectorMachine,
    get_machine,
)

logger = logging.getLogger(__name__)

# Typeahead buffer is cleared after this many seconds without a keystroke.
SEARCH_DELAY = 1.5
DEFAULT_DIAL_CODE_PREFIX = "+"

ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
PAGE_UP = "PageUp"
PAGE_DOWN = "PageDown"
ENTER = "Enter"
ESCAPE = "Escape"

_UNSET: Any = object()


@dataclass(frozen=True)
class SelectorItem:
    """One row of the dropdown as a renderer needs it."""

    index: int
    country: CountryRecord
    dial_code_label: str
    focused: bool
    selected: bool


def dial_code_label(country: CountryRecord, prefix: str = DEFAULT_DIAL_CODE_PREFIX) -> str:
    """Return the dial code as displayed, e.g. "+380". An empty prefix shows bare digits."""
    return f"{prefix}{country.dial_code}"


def _as_directory(
    countries: CountryDirectory | Iterable[Sequence] | Iterable[CountryRecord] | None,
) -> CountryDirectory:
    if countries is None:
        return get_default_countries()
    if isinstance(countries, CountryDirectory):
        return countries
    return CountryDirectory(
        c if isinstance(c, CountryRecord) else parse_country(c) for c in countries
    )


def _is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class CountrySelector:
    """Keyboard and search driven country list. Single instance per dropdown.

    Notifications go out through on_select(country), on_close() and
    scroll_into_view(container, item); each is optional.
    """

    def __init__(
        self,
        *,
        selected_country: str,
        show: bool,
        countries: CountryDirectory | Iterable[Sequence] | None = None,
        dial_code_prefix: str = DEFAULT_DIAL_CODE_PREFIX,
        on_select: Callable[[CountryRecord], None] | None = None,
        on_close: Callable[[], None] | None = None,
        scroll_into_view: ScrollIntoView | None = None,
        container: Any = None,
        scheduler: Scheduler | None = None,
        search_delay: float = SEARCH_DELAY,
        machine: SelectorMachine | None = None,
    ) -> None:
        self._countries = _as_directory(countries)
        self._machine = machine if machine is not None else get_machine()
        self._mode: str = self._machine.initial
        self._scheduler: Scheduler = scheduler or ClockScheduler()
        self._search_delay = search_delay
        self._search_task: Cancellable | None = None
        self._last_scrolled_index: int | None = None
        self._synced_selection: Any = _UNSET

        self.selected_country = selected_country
        self.dial_code_prefix = dial_code_prefix
        self.on_select = on_select
        self.on_close = on_close
        self.scroll_into_view = scroll_into_view
        self.container = container
        self.focused_index: int | None = None
        self._search_buffer = ""

        if show:
            self._show()

    # -- state -------------------------------------------------------------

    @property
    def countries(self) -> CountryDirectory:
        return self._countries

    @property
    def mode(self) -> str:
        """Current machine state: hidden, browsing or searching."""
        self._scheduler.run_pending()
        return self._mode

    @property
    def search_buffer(self) -> str:
        """Typeahead text so far, lowercased. Empty once the search delay has passed."""
        self._scheduler.run_pending()
        return self._search_buffer

    @property
    def visible(self) -> bool:
        return self._mode != HIDDEN

    @property
    def focused_country(self) -> CountryRecord | None:
        if self.focused_index is None:
            return None
        return self._countries[self.focused_index]

    def items(self) -> list[SelectorItem]:
        """Rows for rendering, in directory order."""
        return [self._item(i) for i in range(len(self._countries))]

    def _item(self, index: int) -> SelectorItem:
        country = self._countries[index]
        return SelectorItem(
            index=index,
            country=country,
            dial_code_label=dial_code_label(country, self.dial_code_prefix),
            focused=index == self.focused_index,
            selected=country.iso2 == self.selected_country,
        )

    def _send(self, event: str) -> None:
        next_mode = self._machine.transition(self._mode, event)
        if next_mode is not None:
            self._mode = next_mode

    # -- host props --------------------------------------------------------

    def update(
        self,
        *,
        selected_country: str = _UNSET,
        show: bool = _UNSET,
        countries: CountryDirectory | Iterable[Sequence] | None = _UNSET,
        dial_code_prefix: str = _UNSET,
        on_select: Callable[[CountryRecord], None] | None = _UNSET,
        on_close: Callable[[], None] | None = _UNSET,
    ) -> None:
        """Apply new host props. Omitted props keep their current value."""
        self._scheduler.run_pending()
        resync = False
        if countries is not _UNSET:
            directory = _as_directory(countries)
            if directory != self._countries:
                self._countries = directory
                self._last_scrolled_index = None
                resync = True
        if selected_country is not _UNSET and selected_country != self.selected_country:
            self.selected_country = selected_country
            resync = True
        if dial_code_prefix is not _UNSET:
            self.dial_code_prefix = dial_code_prefix
        if on_select is not _UNSET:
            self.on_select = on_select
        if on_close is not _UNSET:
            self.on_close = on_close

        if show is not _UNSET and bool(show) != self.visible:
            if show:
                self._show()
            else:
                self._hide()
        elif resync and self.visible:
            self._sync_focus()

    def _show(self) -> None:
        self._send(SHOW)
        self._search_buffer = ""
        self._sync_focus()

    def _hide(self) -> None:
        self._cancel_search()
        self._send(HIDE)

    def _sync_focus(self) -> None:
        index = self._countries.index_of(self.selected_country)
        if index is None and len(self._countries):
            index = 0
        self.focused_index = index

        selection_changed = self.selected_country != self._synced_selection
        self._synced_selection = self.selected_country
        if index is not None and (selection_changed or index != self._last_scrolled_index):
            self._scroll_to_focus()

    def _scroll_to_focus(self) -> None:
        if not self.visible or self.focused_index is None:
            return
        self._last_scrolled_index = self.focused_index
        if self.scroll_into_view is not None:
            self.scroll_into_view(self.container, self._item(self.focused_index))

    def _move_focus(self, index: int) -> None:
        if self.focused_index is None:
            return
        index = max(0, min(index, len(self._countries) - 1))
        if index == self.focused_index:
            return
        self.focused_index = index
        self._scroll_to_focus()

    # -- input events ------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Handle a key press (DOM key names). Returns True if the key was used."""
        self._scheduler.run_pending()
        if not self.visible:
            return False

        if key == ARROW_UP:
            if self.focused_index is not None:
                self._move_focus(self.focused_index - 1)
        elif key == ARROW_DOWN:
            if self.focused_index is not None:
                self._move_focus(self.focused_index + 1)
        elif key == PAGE_UP:
            self._move_focus(0)
        elif key == PAGE_DOWN:
            self._move_focus(len(self._countries) - 1)
        elif key == ENTER:
            if self.focused_index is not None:
                self._select(self.focused_index)
        elif key == ESCAPE:
            self._close()
        elif _is_printable(key):
            self._search(key)
        else:
            return False
        return True

    def type_text(self, text: str) -> None:
        """Feed each character of text as a key press."""
        for char in text:
            self.handle_key(char)

    def click(self, target: int | str) -> bool:
        """Select the item at index target, or with iso2 target. Returns False if there is none."""
        self._scheduler.run_pending()
        if not self.visible:
            return False
        if isinstance(target, str):
            index = self._countries.index_of(target)
        else:
            index = target if 0 <= target < len(self._countries) else None
        if index is None:
            return False
        self._select(index)
        return True

    def blur(self) -> None:
        """Input focus left the list."""
        self._scheduler.run_pending()
        if self.visible:
            self._close()

    def dispose(self) -> None:
        """Cancel pending work. Call when the dropdown is torn down."""
        self._cancel_search()

    # -- effects -----------------------------------------------------------

    def _select(self, index: int) -> None:
        country = self._countries[index]
        logger.debug("Country selected: %s", country.iso2)
        if self.on_select is not None:
            self.on_select(country)

    def _close(self) -> None:
        logger.debug("Country selector close requested")
        if self.on_close is not None:
            self.on_close()

    def _search(self, char: str) -> None:
        self._cancel_search()
        self._search_task = self._scheduler.call_later(self._search_delay, self._clear_search)
        self._send(TYPE)
        self._search_buffer += char.lower()

        buffer = self._search_buffer
        index = self._countries.index_where(lambda c: c.name.lower().startswith(buffer))
        if index is not None:
            self._move_focus(index)

    def _clear_search(self) -> None:
        self._search_task = None
        logger.debug("Search buffer %r expired", self._search_buffer)
        self._search_buffer = ""
        self._send(SEARCH_EXPIRED)

    def _cancel_search(self) -> None:
        if self._search_task is not None:
            self._search_task.cancel()
            self._search_task = None
