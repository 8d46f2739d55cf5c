"""
Top‑level package for the Company Picker API.

This file makes ``company_picker_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``company_picker_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
