"""Feedback service — the only operation that writes to two collections.

``create_feedback`` stores the Feedback record and appends its rating to the
owning Vendor inside one ``atomic()`` section: both writes commit together or
neither does, and no other operation can run in between.
"""


import logging
import math

from app.core.exceptions import AppException, InvalidPayloadError, NotFoundError
from app.domain.feedback import Feedback
from app.schemas.feedback import FeedbackCreate
from app.services.base import VENDOR_NOT_FOUND, BaseService, now_ns

logger = logging.getLogger(__name__)

MIN_RATING = 0.0
MAX_RATING = 5.0

class RatingCapacityError(AppException):
    """The vendor record has no room left for another rating."""

    def __init__(self, vendor_id: int):
        super().__init__(
            "Vendor rating capacity exhausted",
            status_code=409,
            code="RATING_CAPACITY_EXHAUSTED",
        )
        self.vendor_id = vendor_id

class FeedbackService(BaseService):
    def create_feedback(self, data: FeedbackCreate) -> Feedback:
        if (
            data.vendor_id == 0
            or data.user_id == 0
            or math.isnan(data.rating)
            or not MIN_RATING <= data.rating <= MAX_RATING
        ):
            raise InvalidPayloadError("Invalid feedback data")
        candidate = Feedback(
            id=0,
            vendor_id=data.vendor_id,
            user_id=data.user_id,
            rating=data.rating,
            comment=data.comment,
            timestamp=now_ns(),
        )
        with self._store.atomic() as store:
            vendor = store.vendors.get_by_id(data.vendor_id)
            if vendor is None:
                raise NotFoundError(VENDOR_NOT_FOUND)
            self._check_fits(candidate)
            rated = vendor.with_rating(data.rating)
            if not rated.fits():
                logger.warning("Vendor %d cannot hold another rating", vendor.id)
                raise RatingCapacityError(vendor.id)

            feedback = self._insert_new(store.feedback, candidate)
            store.vendors.save(rated)
            return feedback

    def feedback_for_vendor(self, vendor_id: int) -> list[Feedback]:
        with self._store.atomic() as store:
            feedback = store.feedback.list_by_vendor(vendor_id)
        if not feedback:
            raise NotFoundError("No feedback found for this vendor")
        return feedback
