"""Contracts between vendors and departments."""


from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.domain.contract import Contract
from app.schemas.contract import ContractCreate
from app.services.base import BaseService

class ContractService(BaseService):
    def create_contract(self, data: ContractCreate) -> Contract:
        # start/end are only required to be set; their order is not enforced
        if 0 in (data.vendor_id, data.department_id, data.start_date, data.end_date):
            raise InvalidPayloadError("Missing required fields")
        candidate = Contract(
            id=0,
            vendor_id=data.vendor_id,
            department_id=data.department_id,
            start_date=data.start_date,
            end_date=data.end_date,
            terms=data.terms,
            is_active=True,
        )
        with self._store.atomic() as store:
            self._require_vendor(data.vendor_id)
            self._check_fits(candidate)
            return self._insert_new(store.contracts, candidate)

    def contracts_for_vendor(self, vendor_id: int) -> list[Contract]:
        with self._store.atomic() as store:
            contracts = store.contracts.list_by_vendor(vendor_id)
        if not contracts:
            raise NotFoundError("No contracts found for this vendor")
        return contracts
