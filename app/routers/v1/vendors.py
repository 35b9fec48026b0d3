"""Vendor router — REFERENCE pattern for all v1 routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the store via Depends(get_store)
  3. Instantiate the service with the store
  4. Call service methods and wrap result in response envelope

Endpoints are plain ``def``: FastAPI runs them in its thread pool and the
store's atomic() section serialises them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.response import DataResponse, ListResponse, listing
from app.db.store import VendorStore, get_store
from app.schemas.contract import ContractOut
from app.schemas.feedback import FeedbackOut
from app.schemas.service import ServiceOut
from app.schemas.vendor import AverageRatingOut, VendorCreate, VendorOut
from app.services.catalog import ServiceCatalogService
from app.services.contract import ContractService
from app.services.feedback import FeedbackService
from app.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VendorOut])
def list_vendors(store: VendorStore = Depends(get_store)):
    """List all vendors in ascending id order."""
    vendors = VendorService(store).list_vendors()
    return listing([VendorOut.model_validate(v) for v in vendors])


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
def create_vendor(
    body: VendorCreate,
    store: VendorStore = Depends(get_store),
):
    """Create a new vendor."""
    vendor = VendorService(store).create_vendor(body)
    return {"data": VendorOut.model_validate(vendor)}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
def get_vendor(
    vendor_id: int,
    store: VendorStore = Depends(get_store),
):
    vendor = VendorService(store).get_vendor(vendor_id)
    return {"data": VendorOut.model_validate(vendor)}


@router.get("/{vendor_id}/rating", response_model=DataResponse[AverageRatingOut])
def get_average_rating(
    vendor_id: int,
    store: VendorStore = Depends(get_store),
):
    average = VendorService(store).average_rating(vendor_id)
    return {"data": AverageRatingOut(vendor_id=vendor_id, average_rating=average)}


@router.get("/{vendor_id}/services", response_model=ListResponse[ServiceOut])
def list_vendor_services(
    vendor_id: int,
    store: VendorStore = Depends(get_store),
):
    services = ServiceCatalogService(store).services_for_vendor(vendor_id)
    return listing([ServiceOut.model_validate(s) for s in services])


@router.get("/{vendor_id}/contracts", response_model=ListResponse[ContractOut])
def list_vendor_contracts(
    vendor_id: int,
    store: VendorStore = Depends(get_store),
):
    contracts = ContractService(store).contracts_for_vendor(vendor_id)
    return listing([ContractOut.model_validate(c) for c in contracts])


@router.get("/{vendor_id}/feedback", response_model=ListResponse[FeedbackOut])
def list_vendor_feedback(
    vendor_id: int,
    store: VendorStore = Depends(get_store),
):
    feedback = FeedbackService(store).feedback_for_vendor(vendor_id)
    return listing([FeedbackOut.model_validate(f) for f in feedback])
