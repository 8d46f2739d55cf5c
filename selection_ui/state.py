"""
Session state for the selection front‑end.

``SelectionState`` owns the catalog loaded from the server and the
user's current selection.  Companies are plain dictionaries exactly as
the API returns them (``id``, ``name``, ``logo``); the selection keeps
full copies, not references into the catalog, so that it can be
posted back unchanged.

Invariants kept by ``add``: the selection never exceeds ``capacity``
entries and never holds two entries with the same ``id``.  Loading
from the server replaces the state as‑is.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

MAX_SELECTED = 20

Company = Dict[str, Any]


def company_name(company: Any) -> str:
    """Return the display name of a catalog entry.

    A company with an empty or missing ``name`` has the empty name.
    Entries that are not objects fall back to their string form so that
    malformed catalog rows can still be searched.
    """
    if isinstance(company, dict):
        return str(company.get("name") or "")
    return str(company)


def company_id(company: Any) -> Any:
    if isinstance(company, dict):
        return company.get("id")
    return None


class SelectionState:
    """Catalog plus capacity‑bounded selection, unique by ``id``."""

    def __init__(
        self,
        catalog: Iterable[Company] = (),
        selected: Iterable[Company] = (),
        capacity: int = MAX_SELECTED,
    ) -> None:
        self.capacity = capacity
        self._catalog: List[Company] = list(catalog)
        self._selected: List[Company] = list(selected)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def catalog(self) -> Tuple[Company, ...]:
        return tuple(self._catalog)

    @property
    def selected(self) -> Tuple[Company, ...]:
        return tuple(self._selected)

    @property
    def is_full(self) -> bool:
        return len(self._selected) >= self.capacity

    @property
    def can_add(self) -> bool:
        """Whether the add control should be enabled."""
        return len(self._selected) < self.capacity

    def contains(self, cid: Any) -> bool:
        return any(company_id(c) == cid for c in self._selected)

    def find(self, cid: Any) -> Optional[Company]:
        """Return the catalog entry with id ``cid``, or ``None``."""
        for company in self._catalog:
            if company_id(company) == cid:
                return company
        return None

    def filter_catalog(self, query: str) -> List[Company]:
        """Catalog entries whose name contains ``query``, ignoring case.

        An empty query returns the whole catalog.
        """
        needle = (query or "").lower()
        if not needle:
            return list(self._catalog)
        return [c for c in self._catalog if needle in company_name(c).lower()]

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def load_catalog(self, items: Iterable[Company]) -> None:
        self._catalog = list(items)

    def load_selection(self, items: Iterable[Company]) -> None:
        self._selected = list(items)

    def add(self, company: Company) -> bool:
        """Append ``company`` to the selection.

        Returns ``False`` and leaves the selection untouched if it is
        already full or already holds an entry with the same ``id``.
        """
        if self.is_full or self.contains(company_id(company)):
            return False
        self._selected.append(dict(company))
        return True

    def remove(self, cid: Any) -> bool:
        """Drop every selected entry with id ``cid``.

        Returns whether anything was removed.
        """
        before = len(self._selected)
        self._selected = [c for c in self._selected if company_id(c) != cid]
        return len(self._selected) != before
