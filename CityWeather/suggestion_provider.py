"""Debounced place suggestions for partially typed queries."""
import asyncio
import logging
from typing import Optional, Set
from weather_provider import GeocoderBase, WeatherProviderError
from weather_data import SuggestionResult
from listener import SearchListener


class SuggestionProvider:
    """
    Turns keystrokes into at most ``max_results`` place candidates.

    Each call to ``suggest`` takes a new ticket. A lookup is only issued after
    ``debounce_seconds`` without another call, and a result is only delivered
    to the listener if its ticket is still the latest one, so a slow earlier
    lookup can never overwrite a newer one.
    """

    def __init__(
        self,
        geocoder: GeocoderBase,
        listener: SearchListener,
        debounce_seconds: float = 0.25,
        max_results: int = 6,
    ):
        self.geocoder = geocoder
        self.listener = listener
        self.debounce_seconds = debounce_seconds
        self.max_results = max_results
        self.latest: Optional[SuggestionResult] = None

        self._ticket = 0
        self._pending: Optional[asyncio.Task] = None
        self._tasks: Set[asyncio.Task] = set()

    def suggest(self, query: str) -> Optional[asyncio.Task]:
        """
        Debounced entry point, meant to be called on every input change.

        Must be called from inside the running event loop. A blank query
        clears the suggestion surface immediately without a lookup.
        """
        self._ticket += 1
        ticket = self._ticket
        self._cancel_pending()

        query = query.strip()
        if not query:
            self._apply(ticket, SuggestionResult(SuggestionResult.CLEARED))
            return None

        task = asyncio.get_running_loop().create_task(self._debounced(ticket, query))
        self._pending = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(self._log_failure)
        return task

    async def lookup(self, query: str) -> SuggestionResult:
        """Run one lookup right away, without debounce or ticketing."""
        query = query.strip()
        if not query:
            return SuggestionResult(SuggestionResult.CLEARED)

        try:
            candidates = await asyncio.to_thread(self.geocoder.search, query, self.max_results)
        except WeatherProviderError as e:
            logging.warning(f"Suggestion lookup failed for {query!r}: {e}")
            return SuggestionResult(
                SuggestionResult.FAILED, query=query, message="Could not load suggestions"
            )

        if not candidates:
            return SuggestionResult(SuggestionResult.EMPTY, query=query, message="No results")
        return SuggestionResult(
            SuggestionResult.OK, query=query, candidates=tuple(candidates[:self.max_results])
        )

    def clear(self) -> None:
        """Hide the suggestions: drop the pending lookup and ignore any in flight."""
        self._ticket += 1
        self._cancel_pending()
        self._apply(self._ticket, SuggestionResult(SuggestionResult.CLEARED))

    async def wait_idle(self) -> None:
        """Wait until no debounce timer or lookup is outstanding."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _debounced(self, ticket: int, query: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # past this point the lookup is no longer cancelled, only ignored
        if self._pending is asyncio.current_task():
            self._pending = None

        self._apply(ticket, SuggestionResult(SuggestionResult.LOADING, query=query, message="Searching..."))
        result = await self.lookup(query)
        self._apply(ticket, result)

    def _apply(self, ticket: int, result: SuggestionResult) -> bool:
        if ticket != self._ticket:
            logging.debug(f"Discarding stale suggestions for {result.query!r} (ticket {ticket} < {self._ticket})")
            return False
        self.latest = result
        self.listener.on_suggestions(result)
        return True

    @staticmethod
    def _log_failure(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logging.error(f"Suggestion task failed: {exc!r}", exc_info=exc)

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
