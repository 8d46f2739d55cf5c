"""
Service layer for the user's selected companies.

The server stores whatever array the client sends.  Capacity, ordering
and uniqueness by ``id`` are enforced by the client before saving; the
store only guarantees that a write replaces the previous list as a
whole.
"""

import logging
from typing import Any, List

from company_picker_api.app.core.storage import CompanyStore

logger = logging.getLogger(__name__)


class SelectionService:
    """Read and replace the persisted selection."""

    def __init__(self, store: CompanyStore) -> None:
        self._store = store

    async def get_selection(self) -> List[Any]:
        """Return the last persisted selection."""
        return self._store.load_selection()

    async def replace_selection(self, items: List[Any]) -> int:
        """Overwrite the persisted selection with ``items`` verbatim.

        Returns the number of stored entries.
        """
        self._store.save_selection(items)
        logger.debug("Selection replaced with %d entries", len(items))
        return len(items)
