from app.db.regions import RegionTag
from app.domain.service import Service
from app.repositories.base import VendorOwnedRepository


class ServiceRepository(VendorOwnedRepository[Service]):
    model = Service
    region = RegionTag.SERVICES
