"""
Controller for the selection front‑end.

``SelectionController`` owns the session state (catalog, selection,
picker menu and failed logos) and exposes the user actions.  Each
action updates the state first and pushes the selection to the server
as a trailing side effect, so rendering never waits on the network.
Front‑ends call :meth:`render` after every action and draw the
returned :class:`~selection_ui.view.PageView`.
"""

import logging
from typing import Any, Dict, Optional, Set

from .state import MAX_SELECTED, SelectionState
from .sync import SaveTicket, SelectionSync
from .view import PageView, render_page

logger = logging.getLogger(__name__)


class SelectionController:
    """State owner and action dispatcher for one browsing session."""

    def __init__(
        self,
        api: Any,
        sync: Optional[SelectionSync] = None,
        capacity: int = MAX_SELECTED,
    ) -> None:
        self.api = api
        self.sync = sync or SelectionSync(api)
        self.state = SelectionState(capacity=capacity)
        self.menu_open = False
        self.query = ""
        self.failed_logos: Set[Any] = set()

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Load the catalog and the saved selection from the server.

        A failed load is logged and leaves that part of the state empty.
        """
        companies, error = self.api.list_companies()
        if error:
            logger.error("Error fetching all companies: %s", error)
        self.state.load_catalog(companies)

        selected, error = self.api.get_selected_companies()
        if error:
            logger.error("Error fetching selected companies: %s", error)
        self.state.load_selection(selected)
        logger.info(
            "Loaded %d companies, %d selected",
            len(self.state.catalog),
            len(self.state.selected),
        )

    # ------------------------------------------------------------------
    # Picker menu
    # ------------------------------------------------------------------
    def toggle_menu(self) -> bool:
        """Open or close the picker.  The search filter is always reset."""
        self.menu_open = not self.menu_open
        self.query = ""
        return self.menu_open

    def search(self, query: str) -> None:
        self.query = query or ""

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def add(self, company: Dict[str, Any]) -> Optional[SaveTicket]:
        """Add ``company`` and save.

        Silently ignored when the selection is full or already holds
        the same ``id``.  Reaching capacity closes the picker.
        """
        if not self.state.add(company):
            return None
        ticket = self.sync.save(self.state.selected)
        if self.state.is_full:
            self.menu_open = False
        return ticket

    def add_by_id(self, company_id: Any) -> Optional[SaveTicket]:
        company = self.state.find(company_id)
        if company is None:
            logger.warning("Company %s is not in the catalog", company_id)
            return None
        return self.add(company)

    def remove(self, company_id: Any) -> SaveTicket:
        """Remove every entry with ``company_id`` and save the result."""
        self.state.remove(company_id)
        return self.sync.save(self.state.selected)

    # ------------------------------------------------------------------
    # Logos
    # ------------------------------------------------------------------
    def logo_failed(self, company_id: Any) -> None:
        self.failed_logos.add(company_id)

    def probe_logos(self) -> int:
        """Check every known logo URL and mark the ones that fail.

        Returns the number of failed logos.
        """
        seen: Set[Any] = set()
        for company in self.state.catalog + self.state.selected:
            if not isinstance(company, dict):
                continue
            cid = company.get("id")
            if cid in seen:
                continue
            seen.add(cid)
            if not self.api.probe_logo(company.get("logo", "")):
                self.logo_failed(cid)
        return len(self.failed_logos)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> PageView:
        return render_page(self.state, self.menu_open, self.query, frozenset(self.failed_logos))

    def close(self) -> None:
        self.sync.close()
