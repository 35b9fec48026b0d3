"""Feedback Pydantic schemas."""


from app.schemas.common import U64, CamelModel

class FeedbackCreate(CamelModel):
    vendor_id: U64
    user_id: U64
    rating: float
    comment: str = ""

class FeedbackOut(CamelModel):
    id: U64
    vendor_id: U64
    user_id: U64
    rating: float
    comment: str
    timestamp: U64
