"""Domain package — stored entities and their codec.

Folder intent:
  codec.py     — Storable base (bounded msgpack encode/decode)
  vendor.py    — Vendor (owns the ratings list)
  service.py   — Service offered by a vendor
  contract.py  — Contract between a vendor and a department
  feedback.py  — Feedback/rating about a vendor
"""

from app.domain.contract import Contract
from app.domain.feedback import Feedback
from app.domain.service import Service
from app.domain.vendor import Vendor

__all__ = [
    "Contract",
    "Feedback",
    "Service",
    "Vendor",
]
