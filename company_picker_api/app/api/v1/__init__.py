"""
Version 1 of the API.

The original front‑end calls the routes at the server root, so this
version is mounted both at ``/`` and under ``/api/v1``.
"""
