"""Interactive console front‑end for picking companies.

This module drives a :class:`selection_ui.SelectionController` from a
terminal.  It reads slash commands from standard input, applies them
and redraws the page after every command:

* ``/list`` – show the selected companies.
* ``/menu`` – open or close the company picker.
* ``/search <text>`` – filter the open picker by name.
* ``/add <id>`` – add a company from the catalog.
* ``/remove <id>`` – remove a company from the selection.
* ``/help`` – show the available commands.
* ``/quit`` – wait for pending saves and exit.

Logos cannot be drawn in a terminal, so each one is shown as its URL,
or, once it is known to be broken, as the generated placeholder
``[A #5a0d1f]``.  Pass ``--probe-logos`` to check every logo URL at
startup.

``COMPANY_PICKER_BASE_URL``
    Base URL of the Company Picker API.  Defaults to
    ``http://localhost:5000``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Dict, Optional, TextIO

from company_picker_api.app.core.logging_config import setup_logging
from company_picker_client import DEFAULT_BASE_URL, CompanyPickerAPI
from selection_ui.controller import SelectionController
from selection_ui.view import Logo, PageView


logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  /list             show selected companies
  /menu             open or close the company picker
  /search <text>    filter the picker by name
  /add <id>         add a company by id
  /remove <id>      remove a company by id
  /help             show this message
  /quit             exit"""


def format_logo(logo: Logo) -> str:
    if logo.fallback is not None:
        return f"[{logo.fallback.text} {logo.fallback.background}]"
    return f"<{logo.src}>" if logo.src else "<no logo>"


def format_page(page: PageView) -> str:
    """Render ``page`` as plain text."""
    lines = ["Selected companies:"]
    if page.panel.empty:
        lines.append("  No companies selected")
    for row in page.panel.rows:
        lines.append(f"  {format_logo(row.logo)} {row.name} (id {row.company_id})  [/remove {row.company_id}]")
    lines.append("[+] add company" if page.panel.add_enabled else "[+] add company (disabled: list is full)")
    if page.menu.open:
        header = "Picker"
        if page.menu.query:
            header += f" (search: {page.menu.query!r})"
        lines.append(header + ":")
        if not page.menu.rows:
            lines.append("  no matches")
        for row in page.menu.rows:
            lines.append(f"  {row.company_id:>4}  {format_logo(row.logo)} {row.name}")
    return "\n".join(lines)


class SelectionConsole:
    """Line‑oriented front‑end over a :class:`SelectionController`."""

    def __init__(self, controller: SelectionController, out: TextIO = sys.stdout) -> None:
        self.controller = controller
        self.out = out
        self.running = True
        self._handlers: Dict[str, Callable[[str], None]] = {
            "/list": self._handle_list,
            "/menu": self._handle_menu,
            "/search": self._handle_search,
            "/add": self._handle_add,
            "/remove": self._handle_remove,
            "/help": self._handle_help,
            "/quit": self._handle_quit,
        }

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------
    def _send(self, text: str) -> None:
        self.out.write(text + "\n")
        self.out.flush()

    def _redraw(self) -> None:
        self._send(format_page(self.controller.render()))

    @staticmethod
    def _parse_id(args: str) -> Optional[int]:
        try:
            return int(args.strip())
        except ValueError:
            return None

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def _handle_list(self, args: str) -> None:
        self._redraw()

    def _handle_menu(self, args: str) -> None:
        if not self.controller.menu_open and not self.controller.state.can_add:
            self._send("The list is full.")
            return
        self.controller.toggle_menu()
        self._redraw()

    def _handle_search(self, args: str) -> None:
        if not self.controller.menu_open:
            self._send("Open the picker with /menu first.")
            return
        self.controller.search(args.strip())
        self._redraw()

    def _handle_add(self, args: str) -> None:
        company_id = self._parse_id(args)
        if company_id is None:
            self._send("Usage: /add <id>")
            return
        self.controller.add_by_id(company_id)
        self._redraw()

    def _handle_remove(self, args: str) -> None:
        company_id = self._parse_id(args)
        if company_id is None:
            self._send("Usage: /remove <id>")
            return
        self.controller.remove(company_id)
        self._redraw()

    def _handle_help(self, args: str) -> None:
        self._send(HELP_TEXT)

    def _handle_quit(self, args: str) -> None:
        self.running = False

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, line: str) -> None:
        """Apply one input line."""
        text = line.strip()
        if not text:
            return
        command, _, args = text.partition(" ")
        handler = self._handlers.get(command.lower())
        if handler is None:
            self._send(f"Unknown command {command!r}. Type /help for a list of commands.")
            return
        handler(args)

    def run(self, stdin: TextIO = sys.stdin, load: bool = True) -> None:
        """Read commands until ``/quit`` or end of input.

        ``load=False`` skips loading state from the server, for callers
        that already initialised the controller.
        """
        if load:
            self.controller.initialize()
        self._redraw()
        self._send("Type /help for a list of commands.")
        try:
            for line in stdin:
                self.dispatch(line)
                if not self.running:
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.controller.close()
            if self.controller.sync.last_error:
                self._send("Warning: the last save failed; changes may not be persisted.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="company-picker", description="Pick companies from the catalog")
    parser.add_argument(
        "--base-url",
        default=os.getenv("COMPANY_PICKER_BASE_URL", DEFAULT_BASE_URL),
        help="Company Picker API base URL (default: $COMPANY_PICKER_BASE_URL or %(default)s)",
    )
    parser.add_argument("--probe-logos", action="store_true", help="Check logo URLs and show placeholders for broken ones")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "WARNING"), help="Log level (default: WARNING)")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    controller = SelectionController(CompanyPickerAPI(args.base_url))
    console = SelectionConsole(controller)
    controller.initialize()
    if args.probe_logos:
        failed = controller.probe_logos()
        logger.info("%d logos could not be loaded", failed)
    console.run(load=False)


if __name__ == "__main__":
    main()
