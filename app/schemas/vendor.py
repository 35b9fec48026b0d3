"""Vendor Pydantic schemas (request DTOs and response models)."""


from app.schemas.common import U64, CamelModel

class VendorCreate(CamelModel):
    name: str
    services: list[str] = []
    contact: str
    email: str
    address: str = ""

class VendorOut(CamelModel):
    id: U64
    name: str
    services: list[str]
    contact: str
    email: str
    address: str
    ratings: list[float]
    created_at: U64

class AverageRatingOut(CamelModel):
    vendor_id: U64
    average_rating: float
