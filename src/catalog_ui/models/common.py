"""
Search state shared by every header search surface.

The header shows the same search twice (desktop bar and mobile bar). Both
run the same state machine, implemented once in SearchTransitions:

    HIDDEN ──type──▶ LOADING ──results──▶ RESULTS
                        │                    │
                        └──no results──▶ EMPTY
    RESULTS / EMPTY ──clear, dismiss, select, submit──▶ HIDDEN
    any ──new query──▶ LOADING

Each keystroke bumps a ticket. The debounced request carries the ticket it
was started with and its result is applied only while that ticket is still
the newest, so the last dispatched query always owns the dropdown.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from catalog_ui.utils import product_url, products_url


class DropdownStatus(str, Enum):
    """Visibility and content mode of the search suggestions panel."""

    HIDDEN = "hidden"
    LOADING = "loading"
    RESULTS = "results"
    EMPTY = "empty"


class SearchTransitions:
    """
    State transitions for one search surface.

    Concrete classes provide ``query``, ``results``, ``loading``,
    ``visible`` and ``_ticket`` attributes. SearchSession is the plain
    in-memory holder; the Reflex SearchBox state mixes this class in.
    """

    def dropdown_status(self) -> DropdownStatus:
        """Derive the dropdown mode from the flags."""
        if self.loading:
            return DropdownStatus.LOADING
        if not self.visible:
            return DropdownStatus.HIDDEN
        return DropdownStatus.RESULTS if self.results else DropdownStatus.EMPTY

    def note_input(self, value: str) -> int:
        """
        Record new input text and return the ticket for its debounced search.

        Earlier results stay on screen until the new search resolves. Blank
        text closes the dropdown at once; its ticket still supersedes any
        request in flight.
        """
        self.query = value
        self._ticket += 1
        if not value.strip():
            self.results = []
            self.loading = False
            self.visible = False
        return self._ticket

    def is_current(self, ticket: int) -> bool:
        return ticket == self._ticket

    def start_request(self, ticket: int) -> str | None:
        """
        Called when the quiet period of ``ticket`` has elapsed.

        Returns:
            The trimmed query to send to the product service, or None when
            the ticket was superseded or the query is blank. A blank query
            hides the dropdown without a remote call.
        """
        if not self.is_current(ticket):
            return None
        term = self.query.strip()
        if not term:
            self.results = []
            self.loading = False
            self.visible = False
            return None
        self.loading = True
        self.visible = True
        return term

    def finish_request(self, ticket: int, items: Sequence[Any]) -> bool:
        """Show the results of ``ticket``; returns False if they are stale."""
        if not self.is_current(ticket):
            return False
        self.results = list(items)
        self.loading = False
        self.visible = True
        return True

    def fail_request(self, ticket: int) -> bool:
        """Degrade a failed request to a hidden, empty dropdown."""
        if not self.is_current(ticket):
            return False
        self.results = []
        self.loading = False
        self.visible = False
        return True

    def dismiss_dropdown(self) -> None:
        """Close the dropdown but keep the typed text."""
        self._ticket += 1
        self.results = []
        self.loading = False
        self.visible = False

    def clear_search(self) -> None:
        """Reset the surface to an empty, hidden search."""
        self.dismiss_dropdown()
        self.query = ""

    def key_action(self, key: str) -> str | None:
        """
        Handle a key pressed in the search input.

        Enter submits and returns the results route, Escape closes the
        dropdown. Other keys do nothing and return None.
        """
        if key == "Enter":
            return self.submit_search()
        if key == "Escape":
            self.dismiss_dropdown()
        return None

    def select_result(self, product_id: int) -> str:
        """Reset the surface and return the route of the chosen product."""
        self.clear_search()
        return product_url(product_id)

    def submit_search(self) -> str:
        """Reset the surface and return the route of the full results page."""
        url = products_url(self.query)
        self.clear_search()
        return url


@dataclass
class SearchSession(SearchTransitions):
    """
    In-memory search surface state.

    Supports ``async with`` like a Reflex background state so the same
    search flow can drive either one.

    Attributes:
        query: Text currently in the input.
        results: Items shown in the dropdown.
        loading: True while the newest request is in flight.
        visible: True while the dropdown is open.
    """

    query: str = ""
    results: list[Any] = field(default_factory=list)
    loading: bool = False
    visible: bool = False
    _ticket: int = 0

    async def __aenter__(self) -> "SearchSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None
