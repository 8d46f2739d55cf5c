"""
Pydantic schema definitions for API payloads.

The store returns the files' content as‑is, so these models describe
the expected shape for the OpenAPI document and for clients rather
than gatekeeping what is written to disk.
"""
