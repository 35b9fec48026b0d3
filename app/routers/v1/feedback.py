"""Feedback router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.response import DataResponse
from app.db.store import VendorStore, get_store
from app.schemas.feedback import FeedbackCreate, FeedbackOut
from app.services.feedback import FeedbackService

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.post("", response_model=DataResponse[FeedbackOut], status_code=status.HTTP_201_CREATED)
def create_feedback(
    body: FeedbackCreate,
    store: VendorStore = Depends(get_store),
):
    """Record feedback and append its rating to the vendor."""
    feedback = FeedbackService(store).create_feedback(body)
    return {"data": FeedbackOut.model_validate(feedback)}
