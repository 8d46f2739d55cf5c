"""
Pydantic schema for companies.

A company is identified by an integer ``id`` that is unique across
the catalog and stable over time.  ``logo`` is a URL to an image; the
front‑end falls back to a generated placeholder when it cannot be
loaded.
"""

from typing import List

from pydantic import BaseModel, Field


class Company(BaseModel):
    """A catalog entry."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Acme"])
    logo: str = Field("", examples=["https://example.com/acme.png"])


CompanyList = List[Company]
