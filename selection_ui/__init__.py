"""
Selection front‑end logic.

``state`` holds the catalog and the user's selection, ``view`` turns
that state into an immutable description of what to draw, ``sync``
pushes the selection back to the server in order, and ``controller``
ties them together for a concrete front‑end such as
``selection_console``.
"""

from .controller import SelectionController  # noqa: F401
from .state import MAX_SELECTED, SelectionState  # noqa: F401
