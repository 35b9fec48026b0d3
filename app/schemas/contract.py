"""Contract Pydantic schemas."""


from app.schemas.common import U64, CamelModel

class ContractCreate(CamelModel):
    vendor_id: U64
    department_id: U64
    start_date: U64
    end_date: U64
    terms: str = ""

class ContractOut(CamelModel):
    id: U64
    vendor_id: U64
    department_id: U64
    start_date: U64
    end_date: U64
    terms: str
    is_active: bool
