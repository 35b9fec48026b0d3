"""Contract router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.response import DataResponse
from app.db.store import VendorStore, get_store
from app.schemas.contract import ContractCreate, ContractOut
from app.services.contract import ContractService

router = APIRouter(prefix="/contracts", tags=["Contracts"])


@router.post("", response_model=DataResponse[ContractOut], status_code=status.HTTP_201_CREATED)
def create_contract(
    body: ContractCreate,
    store: VendorStore = Depends(get_store),
):
    contract = ContractService(store).create_contract(body)
    return {"data": ContractOut.model_validate(contract)}
