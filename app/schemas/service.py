"""Service Pydantic schemas."""


from app.schemas.common import U64, CamelModel

class ServiceCreate(CamelModel):
    vendor_id: U64
    name: str
    description: str
    price: U64

class ServiceOut(CamelModel):
    id: U64
    vendor_id: U64
    name: str
    description: str
    price: U64
    is_available: bool
