from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from apps.api.core.db import get_db
from apps.api.schemas.common_schema import DeletedResponse, ErrorResponse
from apps.api.schemas.company_schema import (
    CompanyDetailResponse,
    CompanyIn,
    CompanyListResponse,
    CompanyResponse,
)
from apps.api.services.company_service import CompanyService, InvalidCompanyName

router = APIRouter(responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})


def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    return CompanyService(db)


def _not_found(code: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No such company: {code}")


@router.get("", response_model=CompanyListResponse)
def list_companies_route(service: CompanyService = Depends(get_company_service)):
    return {"companies": service.list_companies()}


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, service: CompanyService = Depends(get_company_service)):
    company = service.get_company(code)
    if company is None:
        raise _not_found(code)
    return {"company": company}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyIn, service: CompanyService = Depends(get_company_service)):
    try:
        company = service.create_company(payload.name, payload.description)
    except InvalidCompanyName as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"company": company}


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(
    code: str,
    payload: CompanyIn,
    service: CompanyService = Depends(get_company_service),
):
    company = service.update_company(code, payload.name, payload.description)
    if company is None:
        raise _not_found(code)
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, service: CompanyService = Depends(get_company_service)):
    if not service.delete_company(code):
        raise _not_found(code)
    return {"status": "deleted"}
