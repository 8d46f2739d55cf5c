"""
Selection endpoints for API v1.

``GET`` returns the persisted selection; ``POST`` replaces it with the
request body.  The body must be a JSON array but its items are stored
verbatim: the client is responsible for the capacity limit and for
uniqueness by ``id``.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from company_picker_api.app.core.storage import CompanyStore, StorageError, get_store
from company_picker_api.app.schemas.company import CompanyList
from company_picker_api.app.services.selection_service import SelectionService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/selected-companies", responses={200: {"model": CompanyList}})
async def get_selected_companies(store: CompanyStore = Depends(get_store)) -> List[Any]:
    """Return the user's saved selection (``[]`` on a fresh install)."""
    try:
        return await SelectionService(store).get_selection()
    except StorageError as e:
        logger.error("Error reading user selections file %s: %s", e.path, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")


@router.post("/selected-companies", response_class=PlainTextResponse)
async def save_selected_companies(
    items: List[Any] = Body(..., examples=[[{"id": 1, "name": "Acme", "logo": "https://example.com/acme.png"}]]),
    store: CompanyStore = Depends(get_store),
) -> str:
    """Replace the saved selection with the request body.

    Responds once the file has been written, or with HTTP 500 if the
    write fails.
    """
    try:
        await SelectionService(store).replace_selection(items)
    except StorageError as e:
        logger.error("Error writing user selections file %s: %s", e.path, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
    return "Selections saved successfully"
