"""
Company endpoints.

Thin controller over ``CompanyService``: validates the request body,
maps failed results to 404/409 and returns the service message.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..dependencies import get_company_service
from ..services.company_service import CompanyService
from ..services.schemas import CompanyInfo
from .schemas import CompanyCreatedResponse, CompanyDto, ErrorResponse, MessageResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/companies", tags=["Companies"])


@router.get("", response_model=List[CompanyInfo], summary="List companies")
async def list_companies(service: CompanyService = Depends(get_company_service)):
    """Retrieve all companies."""
    return await service.get_all()


@router.get(
    "/{company_code}",
    response_model=CompanyInfo,
    responses={404: {"description": "Company not found", "model": ErrorResponse}},
    summary="Get company by code",
)
async def get_company(
    company_code: str, service: CompanyService = Depends(get_company_service)
):
    """Retrieve a company by its code."""
    company = await service.get_by_code(company_code)
    if company is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company {company_code} not found",
        )
    return company


@router.post(
    "",
    response_model=CompanyCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Company already exists", "model": ErrorResponse}},
    summary="Create company",
)
async def create_company(
    company: CompanyDto,
    request: Request,
    service: CompanyService = Depends(get_company_service),
):
    """Create a new company; duplicates within a site are rejected."""
    result = await service.create(company)
    if not result.is_success:
        logger.info("Company create rejected", company_code=company.company_code, reason=result.message)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)

    location = str(request.url_for("get_company", company_code=company.company_code))
    return CompanyCreatedResponse(company=company, location=location)


@router.put(
    "/{company_code}",
    response_model=MessageResponse,
    responses={404: {"description": "Company not found", "model": ErrorResponse}},
    summary="Update company",
)
async def update_company(
    company_code: str,
    company: CompanyDto,
    service: CompanyService = Depends(get_company_service),
):
    """Update an existing company by its code."""
    result = await service.update_by_code(company_code, company)
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)


@router.delete(
    "/{company_code}",
    response_model=MessageResponse,
    responses={404: {"description": "Company not found", "model": ErrorResponse}},
    summary="Delete company",
)
async def delete_company(
    company_code: str, service: CompanyService = Depends(get_company_service)
):
    """Delete a company by its code."""
    result = await service.delete_by_code(company_code)
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)
