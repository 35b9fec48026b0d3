from app.db.regions import RegionTag
from app.domain.contract import Contract
from app.repositories.base import VendorOwnedRepository


class ContractRepository(VendorOwnedRepository[Contract]):
    model = Contract
    region = RegionTag.CONTRACTS
