"""
Catalog endpoint for API v1.

Returns the master list of companies exactly as stored.  The catalog
is maintained by editing the backing file; there are no write routes.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from company_picker_api.app.core.storage import CompanyStore, StorageError, get_store
from company_picker_api.app.schemas.company import CompanyList
from company_picker_api.app.services.catalog_service import CatalogService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/companies", responses={200: {"model": CompanyList}})
async def list_companies(store: CompanyStore = Depends(get_store)) -> List[Any]:
    """Return the full catalog.

    Responds with HTTP 500 if the catalog file cannot be read or
    parsed; no partial results are returned.
    """
    try:
        return await CatalogService(store).list_companies()
    except StorageError as e:
        logger.error("Error reading companies file %s: %s", e.path, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
