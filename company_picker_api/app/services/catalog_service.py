"""Service layer for the master company catalog."""

import logging
from typing import Any, List

from company_picker_api.app.core.storage import CompanyStore


class CatalogService:
    """Read access to the catalog.  The catalog is never modified over the API."""

    def __init__(self, store: CompanyStore) -> None:
        self._store = store

    async def list_companies(self) -> List[Any]:
        """Return every catalog entry in file order.

        Raises ``StorageError`` if the catalog file cannot be read or
        parsed.
        """
        companies = self._store.load_catalog()
        logging.getLogger(__name__).debug("Loaded %d catalog entries", len(companies))
        return companies
