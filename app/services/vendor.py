"""Vendor service — REFERENCE pattern for all services.

How to add a new service:
  1. Create app/services/my_entity.py
  2. Subclass BaseService (holds the VendorStore)
  3. Wrap every method body in ``with self._store.atomic():``
  4. Delegate all storage work to the repositories
  5. Raise AppException subclasses for business rule violations

Rule: No FastAPI here. Pure Python business logic.
"""


import math

from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.domain.vendor import Vendor
from app.schemas.vendor import VendorCreate
from app.services.base import VENDOR_NOT_FOUND, BaseService, now_ns

class VendorService(BaseService):
    def create_vendor(self, data: VendorCreate) -> Vendor:
        if not data.name or not data.contact or not data.email:
            raise InvalidPayloadError("Missing required fields")
        candidate = Vendor(
            id=0,
            name=data.name,
            services=data.services,
            contact=data.contact,
            email=data.email,
            address=data.address,
            ratings=[],
            created_at=now_ns(),
        )
        with self._store.atomic() as store:
            self._check_fits(candidate)
            return self._insert_new(store.vendors, candidate)

    def get_vendor(self, vendor_id: int) -> Vendor:
        with self._store.atomic() as store:
            vendor = store.vendors.get_by_id(vendor_id)
        if vendor is None:
            raise NotFoundError(VENDOR_NOT_FOUND)
        return vendor

    def list_vendors(self) -> list[Vendor]:
        with self._store.atomic() as store:
            vendors = store.vendors.list()
        if not vendors:
            raise NotFoundError("No vendors found")
        return vendors

    def average_rating(self, vendor_id: int) -> float:
        vendor = self.get_vendor(vendor_id)
        if not vendor.ratings:
            raise NotFoundError("No ratings available for this vendor")
        return math.fsum(vendor.ratings) / len(vendor.ratings)
