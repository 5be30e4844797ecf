"""Application state: record store, load controller, and the list view inputs."""

import asyncio
import logging
from typing import Callable, List, Optional

from .config import BrowserConfig, get_config
from .models import BrowserView, LoadPhase, SortOrder
from .pipeline import Debouncer, derive_view
from .services import (
    DatasetLoader,
    LoadController,
    MockSessionDataSource,
    RecordStore,
    SessionDataSource,
)
from .utils import build_summary, to_session_card

logger = logging.getLogger(__name__)

ViewListener = Callable[[BrowserView], None]


class BrowserState:
    """
    Single owner of the browser's mutable state.

    The record store is written only by the load controller (on load) and by
    toggle_complete. Everything the presentation layer sees is derived on
    demand by view(). All methods must be called from the event loop thread.
    """

    def __init__(self, config: BrowserConfig, source: Optional[SessionDataSource] = None):
        self.config = config

        if source is None:
            dataset = DatasetLoader(config.sessions_data_path).load()
            source = MockSessionDataSource(dataset.sessions, latency=config.fetch_latency)
            logger.info("[startup] Mock data source: %d sessions from %s", len(dataset.sessions), dataset.path)
        self.source = source

        self.store = RecordStore()
        self.controller = LoadController(
            source,
            self.store,
            simulate_failure=config.simulate_failure,
            on_change=self.notify,
        )
        self.search_debouncer: Debouncer[str] = Debouncer(self._commit_search, delay=config.search_debounce)

        # View inputs
        self.search_input = ""
        self.search_term = ""
        self.sort_order = SortOrder.DESC

        self._listeners: List[ViewListener] = []

    # -- rendering -------------------------------------------------------

    def view(self) -> BrowserView:
        """Derive the current render state from the store and view inputs."""
        phase = self.controller.phase
        derived = derive_view(self.store.get_all(), self.search_term, self.sort_order)
        showing_list = phase is LoadPhase.SUCCESS
        return BrowserView(
            phase=phase,
            error=self.controller.error if phase is LoadPhase.ERROR else None,
            records=[to_session_card(r, i) for i, r in enumerate(derived.records)] if showing_list else [],
            search_input=self.search_input,
            search_term=derived.search_term,
            sort_order=self.sort_order,
            total_count=derived.total_count,
            filtered_count=derived.filtered_count,
            no_results=derived.no_results if showing_list else False,
            summary=build_summary(derived.filtered_count, derived.total_count) if showing_list else "",
            simulate_failure=self.controller.simulate_failure,
        )

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a render listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def notify(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                logger.exception("[render] View listener %r failed", listener)

    # -- loading ---------------------------------------------------------

    def start_load(self, simulate_failure: Optional[bool] = None) -> asyncio.Task:
        return self.controller.spawn(self.controller.load(simulate_failure))

    def start_retry(self) -> asyncio.Task:
        return self.controller.spawn(self.controller.retry())

    def set_simulate_failure(self, enabled: bool) -> Optional[asyncio.Task]:
        """Flip the fail-simulation flag; returns the reload task, or None if unchanged."""
        return self.controller.set_simulate_failure(enabled)

    # -- view inputs -----------------------------------------------------

    def set_search_input(self, text: str) -> None:
        """Record a keystroke; the filter term is committed after the debounce delay."""
        self.search_input = text
        self.search_debouncer.push(text)

    def _commit_search(self, text: Optional[str]) -> None:
        term = text or ""
        if term == self.search_term:
            return
        self.search_term = term
        logger.debug("[search] committed term=%r", term)
        self.notify()

    def toggle_sort(self) -> SortOrder:
        self.sort_order = self.sort_order.toggled()
        self.notify()
        return self.sort_order

    # -- mutation --------------------------------------------------------

    def find_record_id(self, raw_id: str):
        """Map an id as received over HTTP (a string) onto the stored id."""
        for record in self.store.get_all():
            if record.id == raw_id or str(record.id) == raw_id:
                return record.id
        return None

    def toggle_complete(self, record_id) -> bool:
        """Flip a record's completion flag. Unknown ids are ignored."""
        changed = self.store.toggle_completed(record_id)
        if changed:
            self.notify()
        else:
            logger.debug("[toggle] unknown session id=%r ignored", record_id)
        return changed

    async def aclose(self) -> None:
        self.search_debouncer.cancel()
        await self.controller.aclose()


_state: Optional[BrowserState] = None


def get_state() -> BrowserState:
    global _state
    if _state is None:
        _state = BrowserState(get_config())
    return _state


def reset_state() -> None:
    """Drop the global state so the next get_state() builds a fresh one."""
    global _state
    _state = None
