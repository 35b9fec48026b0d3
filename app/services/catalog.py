"""Services a vendor offers (the catalog)."""


from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.domain.service import Service
from app.schemas.service import ServiceCreate
from app.services.base import BaseService

class ServiceCatalogService(BaseService):
    def create_service(self, data: ServiceCreate) -> Service:
        if not data.name or not data.description or data.price == 0:
            raise InvalidPayloadError("Missing required fields")
        candidate = Service(
            id=0,
            vendor_id=data.vendor_id,
            name=data.name,
            description=data.description,
            price=data.price,
            is_available=True,
        )
        with self._store.atomic() as store:
            self._require_vendor(data.vendor_id)
            self._check_fits(candidate)
            return self._insert_new(store.services, candidate)

    def services_for_vendor(self, vendor_id: int) -> list[Service]:
        with self._store.atomic() as store:
            services = store.services.list_by_vendor(vendor_id)
        if not services:
            raise NotFoundError("No services found for this vendor")
        return services
