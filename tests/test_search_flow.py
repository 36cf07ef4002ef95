"""Tests for the debounced header search flow."""

import asyncio

from catalog_ui.models.common import DropdownStatus, SearchSession
from catalog_ui.search import debounced_search
from catalog_ui.utils import result_summary

DELAY = 0.05


class RecordingFetch:
    """Fetch stub returning canned results per query, optionally slowly."""

    def __init__(self, results=None, latency=None, error=None):
        self.results = results or {}
        self.latency = latency or {}
        self.error = error
        self.queries = []

    async def __call__(self, query):
        self.queries.append(query)
        await asyncio.sleep(self.latency.get(query, 0))
        if self.error is not None:
            raise self.error
        return self.results.get(query, [])


async def _type_after(pause, session, text, fetch):
    await asyncio.sleep(pause)
    return await debounced_search(session, text, fetch, delay=DELAY)


def test_single_query_shows_results():
    """Typing "siem" fetches once and shows three results."""

    session = SearchSession()
    fetch = RecordingFetch(results={"siem": ["a", "b", "c"]})

    applied = asyncio.run(debounced_search(session, "siem", fetch, delay=DELAY))

    assert applied
    assert fetch.queries == ["siem"]
    assert session.dropdown_status() is DropdownStatus.RESULTS
    assert result_summary(len(session.results)) == "3 produk"


def test_burst_collapses_to_final_text():
    """Keystrokes inside the quiet period produce one fetch for the last text."""

    session = SearchSession()
    fetch = RecordingFetch(results={"siem": ["a"]})

    async def scenario():
        await asyncio.gather(
            _type_after(0, session, "s", fetch),
            _type_after(0.01, session, "sie", fetch),
            _type_after(0.02, session, "siem", fetch),
        )

    asyncio.run(scenario())

    assert fetch.queries == ["siem"]
    assert session.results == ["a"]


def test_blank_query_does_not_fetch():
    session = SearchSession()
    fetch = RecordingFetch()

    applied = asyncio.run(debounced_search(session, "   ", fetch, delay=DELAY))

    assert not applied
    assert fetch.queries == []
    assert session.dropdown_status() is DropdownStatus.HIDDEN


def test_zero_matches_shows_empty_panel():
    session = SearchSession()
    fetch = RecordingFetch()

    asyncio.run(debounced_search(session, "zzz-nonexistent", fetch, delay=DELAY))

    assert fetch.queries == ["zzz-nonexistent"]
    assert session.dropdown_status() is DropdownStatus.EMPTY


def test_fetch_failure_degrades_to_hidden():
    """A backend error clears results and hides the dropdown silently."""

    session = SearchSession(results=["stale"], visible=True)
    fetch = RecordingFetch(error=RuntimeError("backend down"))

    applied = asyncio.run(debounced_search(session, "siem", fetch, delay=DELAY))

    assert not applied
    assert session.dropdown_status() is DropdownStatus.HIDDEN
    assert session.results == []
    assert not session.loading


def test_slow_earlier_response_does_not_overwrite_newer_query():
    """The last dispatched query owns the dropdown even if it resolves first."""

    session = SearchSession()
    fetch = RecordingFetch(
        results={"sie": ["old"], "siem": ["new"]},
        latency={"sie": 0.3, "siem": 0.01},
    )

    async def scenario():
        return await asyncio.gather(
            _type_after(0, session, "sie", fetch),
            _type_after(0.1, session, "siem", fetch),
        )

    first, second = asyncio.run(scenario())

    assert fetch.queries == ["sie", "siem"]
    assert first is False
    assert second is True
    assert session.results == ["new"]
    assert session.dropdown_status() is DropdownStatus.RESULTS


def test_dismiss_during_request_keeps_dropdown_closed():
    session = SearchSession()
    fetch = RecordingFetch(results={"siem": ["a"]}, latency={"siem": 0.1})

    async def dismiss_later():
        await asyncio.sleep(DELAY + 0.03)
        session.dismiss_dropdown()

    async def scenario():
        await asyncio.gather(
            debounced_search(session, "siem", fetch, delay=DELAY),
            dismiss_later(),
        )

    asyncio.run(scenario())

    assert fetch.queries == ["siem"]
    assert session.dropdown_status() is DropdownStatus.HIDDEN
    assert session.query == "siem"
