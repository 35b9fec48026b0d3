"""Contract binding a vendor to a department."""

from __future__ import annotations

from app.domain.codec import U64, Storable


class Contract(Storable):
    id: U64
    vendor_id: U64
    department_id: U64
    start_date: U64
    end_date: U64
    terms: str
    is_active: bool = True
