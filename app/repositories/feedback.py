from app.db.regions import RegionTag
from app.domain.feedback import Feedback
from app.repositories.base import VendorOwnedRepository


class FeedbackRepository(VendorOwnedRepository[Feedback]):
    model = Feedback
    region = RegionTag.FEEDBACK
