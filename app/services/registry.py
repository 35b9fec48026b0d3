"""Operation boundary: one call per operation, results instead of exceptions.

Every method returns the entity (or list / average) on success and a tagged
:class:`~app.schemas.message.Message` otherwise. Application exceptions raised
by the services are converted here and never escape; storage failures are
fatal and do.

Example::

    registry = VendorRegistry(create_store("vector"))
    registry.create_vendor({"name": "Acme", "contact": "555-0100", "email": "a@acme.com"})
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import AppException, InvalidPayloadError
from app.db.store import VendorStore
from app.domain.contract import Contract
from app.domain.feedback import Feedback
from app.domain.service import Service
from app.domain.vendor import Vendor
from app.schemas.contract import ContractCreate
from app.schemas.feedback import FeedbackCreate
from app.schemas.message import Message
from app.schemas.service import ServiceCreate
from app.schemas.vendor import VendorCreate
from app.services.catalog import ServiceCatalogService
from app.services.contract import ContractService
from app.services.feedback import FeedbackService
from app.services.vendor import VendorService

logger = logging.getLogger(__name__)

T = TypeVar("T")
PayloadT = TypeVar("PayloadT", bound=BaseModel)


def returns_message(func: Callable[..., T]) -> Callable[..., T | Message]:
    """Turn AppException subclasses into their Message variant."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T | Message:
        try:
            return func(*args, **kwargs)
        except AppException as exc:
            logger.info("%s rejected: %s (%s)", func.__name__, exc.message, exc.kind)
            return exc.to_message()

    return wrapper


def _coerce(schema: type[PayloadT], payload: PayloadT | dict) -> PayloadT:
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError("Missing required fields") from exc


class VendorRegistry:
    def __init__(self, store: VendorStore):
        self.store = store
        self._vendors = VendorService(store)
        self._catalog = ServiceCatalogService(store)
        self._contracts = ContractService(store)
        self._feedback = FeedbackService(store)

    # ------------------------------------------------------------------
    # Vendors
    # ------------------------------------------------------------------

    @returns_message
    def create_vendor(self, payload: VendorCreate | dict) -> Vendor | Message:
        return self._vendors.create_vendor(_coerce(VendorCreate, payload))

    @returns_message
    def get_vendor_by_id(self, vendor_id: int) -> Vendor | Message:
        return self._vendors.get_vendor(vendor_id)

    @returns_message
    def list_all_vendors(self) -> list[Vendor] | Message:
        return self._vendors.list_vendors()

    @returns_message
    def calculate_average_rating(self, vendor_id: int) -> float | Message:
        return self._vendors.average_rating(vendor_id)

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    @returns_message
    def create_service(self, payload: ServiceCreate | dict) -> Service | Message:
        return self._catalog.create_service(_coerce(ServiceCreate, payload))

    @returns_message
    def get_services_by_vendor_id(self, vendor_id: int) -> list[Service] | Message:
        return self._catalog.services_for_vendor(vendor_id)

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    @returns_message
    def create_contract(self, payload: ContractCreate | dict) -> Contract | Message:
        return self._contracts.create_contract(_coerce(ContractCreate, payload))

    @returns_message
    def get_contracts_by_vendor_id(self, vendor_id: int) -> list[Contract] | Message:
        return self._contracts.contracts_for_vendor(vendor_id)

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------

    @returns_message
    def create_feedback(self, payload: FeedbackCreate | dict) -> Feedback | Message:
        return self._feedback.create_feedback(_coerce(FeedbackCreate, payload))

    @returns_message
    def get_feedback_by_vendor_id(self, vendor_id: int) -> list[Feedback] | Message:
        return self._feedback.feedback_for_vendor(vendor_id)

