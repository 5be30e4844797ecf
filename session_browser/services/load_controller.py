"""
Load Controller

Drives the fetch lifecycle: idle -> loading -> success | error, with manual
retry and a reload whenever the fail-simulation flag changes.

Every load gets a monotonically increasing request id. Only the outcome of
the most recently issued load is applied; a slower, older response that
settles afterwards is dropped.
"""

import asyncio
import logging
from typing import Callable, Optional, Set

from ..models import LoadPhase
from .data_source import FETCH_FAILURE_MESSAGE, FetchFailure, SessionDataSource
from .record_store import RecordStore

logger = logging.getLogger(__name__)


class LoadController:
    """Owns load phase, error message and the fail-simulation flag."""

    def __init__(
        self,
        source: SessionDataSource,
        store: RecordStore,
        simulate_failure: bool = False,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self._source = source
        self._store = store
        self._on_change = on_change
        self.simulate_failure = simulate_failure
        self.phase = LoadPhase.IDLE
        self.error: Optional[str] = None
        self._latest_request = 0
        self._tasks: Set[asyncio.Task] = set()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def load(self, simulate_failure: Optional[bool] = None) -> LoadPhase:
        """
        Fetch sessions and apply the outcome.

        On success the store is replaced wholesale (completion flags start
        over). On failure the store is left as it was and the message is kept
        for display. Returns the phase after this call settles.
        """
        if simulate_failure is not None:
            self.simulate_failure = simulate_failure
        flag = self.simulate_failure

        self._latest_request += 1
        request_id = self._latest_request
        self.phase = LoadPhase.LOADING
        self.error = None
        logger.info("[load] request=%d started (simulate_failure=%s)", request_id, flag)
        self._changed()

        records = None
        error = None
        try:
            records = await self._source.fetch(flag)
        except FetchFailure as e:
            logger.error("[load] Error fetching sessions: %s", e.message)
            error = e.message
        except Exception as e:
            logger.exception("[load] Unexpected error fetching sessions")
            error = str(e) or FETCH_FAILURE_MESSAGE

        if request_id != self._latest_request:
            logger.info(
                "[load] request=%d settled after newer request=%d, discarding",
                request_id, self._latest_request,
            )
            return self.phase

        if error is None:
            try:
                self._store.replace_all(records)
            except ValueError as e:
                logger.error("[load] Rejected fetched sessions: %s", e)
                error = str(e)

        if error is None:
            self.phase = LoadPhase.SUCCESS
            logger.info("[load] request=%d loaded %d sessions", request_id, len(self._store))
        else:
            self.phase = LoadPhase.ERROR
            self.error = error
        self._changed()
        return self.phase

    async def retry(self) -> LoadPhase:
        """Reload with the current fail-simulation flag."""
        return await self.load(self.simulate_failure)

    def set_simulate_failure(self, enabled: bool) -> Optional[asyncio.Task]:
        """
        Set the flag; a change starts an immediate reload in the background.

        The flag updates before the reload runs, so a repeated call with the
        same value is a no-op. Returns the reload task, or None when unchanged.
        """
        if enabled == self.simulate_failure:
            return None
        self.simulate_failure = enabled
        return self.spawn(self.load(enabled))

    def spawn(self, coro) -> asyncio.Task:
        """Run a load coroutine in the background on the running loop."""
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def aclose(self) -> None:
        """Cancel loads still in flight."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
