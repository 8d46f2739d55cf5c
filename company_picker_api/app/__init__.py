"""
Application package initializer.

The server is split into small pieces: ``core`` holds configuration,
logging and persistence, ``schemas`` the pydantic models, ``services``
the per‑resource logic and ``api/v1/endpoints`` the routers.  The
catalog and the user's selection each live in a single JSON file.

The ASGI application lives in ``main``; it is not imported here so
that the console front‑end can reuse ``core`` without building the
server.
"""
