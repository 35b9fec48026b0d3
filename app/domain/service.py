"""Service offered by a vendor."""

from __future__ import annotations

from app.domain.codec import U64, Storable


class Service(Storable):
    id: U64
    vendor_id: U64
    name: str
    description: str
    price: U64
    is_available: bool = True
