"""
Pure rendering from selection state to a view description.

Nothing here performs I/O or keeps state: every ``render_*`` function
takes the current state and returns frozen dataclasses that a concrete
front‑end draws.  The whole page is re‑rendered after every change.

Logos that failed to load are replaced by a placeholder showing the
first letter of the company name on a background color derived from
the name.  ``generate_color`` keeps the exact 32‑bit arithmetic of the
browser front‑end so placeholder colors stay the same across clients.
"""

from dataclasses import dataclass
from typing import AbstractSet, Any, Iterable, Optional, Tuple

from .state import SelectionState, company_id, company_name

PANEL_LOGO_CLASS = "company-logo"
MENU_LOGO_CLASS = "company-logo-small"
FALLBACK_CLASS = "logo-fallback"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def generate_color(name: str) -> str:
    """Map ``name`` to a stable ``#rrggbb`` color.

    Uses the classic ``hash * 31 + char`` string hash over UTF‑16 code
    units, with the shift wrapping to a signed 32‑bit integer, then
    takes the low three bytes of the hash as red, green and blue.
    """
    h = 0
    data = name.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = unit + (_to_int32(_to_int32(h) << 5) - h)
    h = _to_int32(h)
    return "#" + "".join("%02x" % ((h >> (i * 8)) & 0xFF) for i in range(3))


def fallback_letter(name: str) -> str:
    return name[:1].upper()


@dataclass(frozen=True)
class FallbackLogo:
    text: str
    background: str
    class_name: str


@dataclass(frozen=True)
class Logo:
    """An image logo, or its placeholder once loading has failed."""

    src: str
    alt: str
    class_name: str
    fallback: Optional[FallbackLogo] = None

    @property
    def failed(self) -> bool:
        return self.fallback is not None


@dataclass(frozen=True)
class SelectedRow:
    company_id: Any
    name: str
    logo: Logo


@dataclass(frozen=True)
class MenuRow:
    company_id: Any
    name: str
    logo: Logo


@dataclass(frozen=True)
class PanelView:
    rows: Tuple[SelectedRow, ...]
    empty: bool
    add_enabled: bool


@dataclass(frozen=True)
class MenuView:
    open: bool
    query: str
    rows: Tuple[MenuRow, ...]


@dataclass(frozen=True)
class PageView:
    panel: PanelView
    menu: MenuView


def make_logo(company: Any, class_name: str, failed: bool = False) -> Logo:
    """Build the logo for ``company``, substituting the placeholder if ``failed``."""
    name = company_name(company)
    src = company.get("logo", "") if isinstance(company, dict) else ""
    fallback = None
    if failed:
        fallback = FallbackLogo(
            text=fallback_letter(name),
            background=generate_color(name),
            class_name=f"{class_name} {FALLBACK_CLASS}",
        )
    return Logo(src=src or "", alt=f"{name} Logo", class_name=class_name, fallback=fallback)


def render_panel(state: SelectionState, failed_logos: AbstractSet[Any] = frozenset()) -> PanelView:
    """Describe the selected‑companies panel."""
    rows = tuple(
        SelectedRow(
            company_id=company_id(c),
            name=company_name(c),
            logo=make_logo(c, PANEL_LOGO_CLASS, company_id(c) in failed_logos),
        )
        for c in state.selected
    )
    return PanelView(rows=rows, empty=not rows, add_enabled=state.can_add)


def render_menu(
    items: Iterable[Any],
    query: str = "",
    open: bool = True,
    failed_logos: AbstractSet[Any] = frozenset(),
) -> MenuView:
    """Describe the picker menu; a closed menu has no rows."""
    if not open:
        return MenuView(open=False, query=query, rows=())
    rows = tuple(
        MenuRow(
            company_id=company_id(c),
            name=company_name(c),
            logo=make_logo(c, MENU_LOGO_CLASS, company_id(c) in failed_logos),
        )
        for c in items
    )
    return MenuView(open=True, query=query, rows=rows)


def render_page(
    state: SelectionState,
    menu_open: bool = False,
    query: str = "",
    failed_logos: AbstractSet[Any] = frozenset(),
) -> PageView:
    return PageView(
        panel=render_panel(state, failed_logos),
        menu=render_menu(state.filter_catalog(query), query, menu_open, failed_logos),
    )
