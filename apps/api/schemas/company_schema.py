from pydantic import BaseModel, ConfigDict
from typing import List, Optional


# Body fields are optional: a missing name reaches the datastore and fails
# its NOT NULL constraint there.
class CompanyIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyOut(BaseModel):
    code: str
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(CompanyOut):
    invoices: List[int] = []


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]
