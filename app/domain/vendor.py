"""Vendor entity — the record every other entity points at."""

from __future__ import annotations

from app.domain.codec import U64, Storable


class Vendor(Storable):
    id: U64
    name: str
    services: list[str] = []  # free-text names, independent of Service records
    contact: str
    email: str
    address: str = ""
    ratings: list[float] = []  # append-only, one entry per Feedback
    created_at: U64

    def with_rating(self, rating: float) -> Vendor:
        return self.model_copy(update={"ratings": [*self.ratings, rating]})
