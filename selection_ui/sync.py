"""
Ordered background saving of the selection.

Every change to the selection is pushed to the server as the full
list.  Saves run on a single worker thread, so they reach the server
in the order they were issued and a slow save can never land after a
newer one.  Each save carries a monotonic sequence number; a
completion older than the newest acknowledged save is treated as
stale and ignored.

Failures are logged and remembered in ``last_error``.  There is no
retry: the in‑memory selection stays authoritative until the next
successful save or the next reload from the server.
"""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait as wait_futures
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveTicket:
    """Handle for one issued save."""

    sequence: int
    future: "Future[bool]"


class SelectionSync:
    """Push full selections to the API in issuance order."""

    def __init__(self, api: Any, executor: Optional[Executor] = None) -> None:
        self._api = api
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="selection-save")
        self._lock = threading.Lock()
        self._pending: Set["Future[bool]"] = set()
        self.issued = 0
        self.latest_acknowledged = 0
        self.last_error: Optional[Dict[str, Any]] = None

    def save(self, items: Iterable[Dict[str, Any]]) -> SaveTicket:
        """Schedule a save of ``items`` and return its ticket.

        ``items`` is copied immediately so later mutations of the
        caller's list do not leak into this save.
        """
        snapshot = [dict(item) if isinstance(item, dict) else item for item in items]
        with self._lock:
            self.issued += 1
            sequence = self.issued
        future = self._executor.submit(self._run, sequence, snapshot)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return SaveTicket(sequence=sequence, future=future)

    def _forget(self, future: "Future[bool]") -> None:
        with self._lock:
            self._pending.discard(future)

    def _run(self, sequence: int, snapshot: List[Dict[str, Any]]) -> bool:
        saved, error = self._api.save_selected_companies(snapshot)
        self._complete(sequence, len(snapshot), saved, error)
        return saved

    def _complete(self, sequence: int, count: int, saved: bool, error: Optional[Dict[str, Any]]) -> None:
        with self._lock:
            if not saved:
                self.last_error = error
                logger.error("Error saving selections (save #%d): %s", sequence, error)
                return
            if sequence < self.latest_acknowledged:
                logger.debug("Discarding stale acknowledgement for save #%d", sequence)
                return
            self.latest_acknowledged = sequence
            self.last_error = None
            logger.debug("Save #%d acknowledged (%d entries)", sequence, count)

    @property
    def in_sync(self) -> bool:
        """True once the most recently issued save has been acknowledged."""
        with self._lock:
            return self.latest_acknowledged == self.issued

    @property
    def pending(self) -> int:
        """Number of issued saves that have not finished yet."""
        with self._lock:
            return len(self._pending)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until all issued saves have finished.

        Returns ``False`` if some save was still running at ``timeout``.
        """
        with self._lock:
            pending = list(self._pending)
        _, not_done = wait_futures(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        self.wait()
        if self._owns_executor:
            self._executor.shutdown(wait=True)
