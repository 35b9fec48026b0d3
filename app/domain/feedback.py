"""Feedback left by a user about a vendor."""

from __future__ import annotations

from app.domain.codec import U64, Storable


class Feedback(Storable):
    id: U64
    vendor_id: U64
    user_id: U64
    rating: float
    comment: str
    timestamp: U64
