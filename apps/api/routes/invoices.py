from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from apps.api.core.db import get_db
from apps.api.schemas.common_schema import DeletedResponse, ErrorResponse
from apps.api.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from apps.api.services.invoice_service import InvoiceService

router = APIRouter(responses={404: {"model": ErrorResponse}})


def get_invoice_service(db: Session = Depends(get_db)) -> InvoiceService:
    return InvoiceService(db)


def _not_found(invoice_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No such invoice: {invoice_id}")


@router.get("", response_model=InvoiceListResponse)
def list_invoices(service: InvoiceService = Depends(get_invoice_service)):
    return {"invoices": service.list_invoices()}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, service: InvoiceService = Depends(get_invoice_service)):
    invoice = service.get_invoice(invoice_id)
    if invoice is None:
        raise _not_found(invoice_id)
    return {"invoice": invoice}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, service: InvoiceService = Depends(get_invoice_service)):
    invoice = service.create_invoice(payload.comp_code, payload.amt)
    return {"invoice": invoice}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    """
    Replace amt and paid.

    Paying an unpaid invoice stamps paid_date, keeping it paid leaves
    paid_date alone, and marking it unpaid clears paid_date.
    """
    invoice = service.update_invoice(invoice_id, payload.amt, payload.paid)
    if invoice is None:
        raise _not_found(invoice_id)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, service: InvoiceService = Depends(get_invoice_service)):
    if not service.delete_invoice(invoice_id):
        raise _not_found(invoice_id)
    return {"status": "deleted"}
