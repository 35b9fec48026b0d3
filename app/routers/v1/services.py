"""Service catalog router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.response import DataResponse
from app.db.store import VendorStore, get_store
from app.schemas.service import ServiceCreate, ServiceOut
from app.services.catalog import ServiceCatalogService

router = APIRouter(prefix="/services", tags=["Services"])


@router.post("", response_model=DataResponse[ServiceOut], status_code=status.HTTP_201_CREATED)
def create_service(
    body: ServiceCreate,
    store: VendorStore = Depends(get_store),
):
    """Register a service offered by an existing vendor."""
    service = ServiceCatalogService(store).create_service(body)
    return {"data": ServiceOut.model_validate(service)}
