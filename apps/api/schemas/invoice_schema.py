from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime

from apps.api.schemas.company_schema import CompanyOut


# ============================================================
# Request bodies
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: Optional[str] = None
    amt: Optional[float] = None


class InvoiceUpdate(BaseModel):
    amt: Optional[float] = None
    paid: Optional[bool] = None


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str


class InvoiceOut(BaseModel):
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class InvoiceDetail(BaseModel):
    """An invoice with its owning company inlined in place of comp_code."""
    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None
    company: CompanyOut


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]
