"""
Debounced header search flow.

One call of ``debounced_search`` handles one keystroke:

1. record the text and take a ticket (under the state lock),
2. sleep for the quiet period,
3. if no newer keystroke arrived, mark the dropdown loading and fetch,
4. apply the result, or hide the dropdown on failure, unless a newer
   request has been dispatched in the meantime.

A burst of keystrokes therefore produces a single fetch for the final text,
and out-of-order responses never overwrite the newest query's results.

The surface is any SearchTransitions object usable with ``async with``: a
Reflex background state (whose context manager is the state lock) or a
SearchSession.
"""

import asyncio
from typing import Any, Awaitable, Callable, Sequence

from catalog_ui import config
from catalog_ui.lib import logs

LOG = logs.logger(__file__)

DEBOUNCE_SECONDS = config.SEARCH_DEBOUNCE_MS / 1000

Fetch = Callable[[str], Awaitable[Sequence[Any]]]


async def debounced_search(
    surface: Any,
    text: str,
    fetch: Fetch,
    delay: float = DEBOUNCE_SECONDS,
) -> bool:
    """
    Run the header search for one input change.

    Args:
        surface: Search state implementing SearchTransitions.
        text: New content of the search input.
        fetch: Coroutine function returning the items for a query.
        delay: Quiet period in seconds.

    Returns:
        True if this call updated the dropdown with fetched results.
    """
    async with surface:
        ticket = surface.note_input(text)

    await asyncio.sleep(delay)

    async with surface:
        query = surface.start_request(ticket)
    if query is None:
        return False

    try:
        items = await fetch(query)
    except Exception as e:
        LOG.error("Search failed for %r: %s", query, e, exc_info=True)
        async with surface:
            surface.fail_request(ticket)
        return False

    async with surface:
        applied = surface.finish_request(ticket, items)
    if not applied:
        LOG.debug("Discarded stale results for %r", query)
    return applied
