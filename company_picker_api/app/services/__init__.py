"""
Service layer abstraction.

Each service wraps a ``CompanyStore`` and encapsulates the logic for
one resource.  Handlers never touch files directly, so the JSON store
can be replaced without changing the API layer.
"""
