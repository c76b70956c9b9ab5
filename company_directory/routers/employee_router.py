"""
Employee endpoints.

Same contract as the company endpoints, over ``EmployeeService``.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..dependencies import get_employee_service
from ..services.employee_service import EmployeeService
from ..services.schemas import EmployeeInfo
from .schemas import EmployeeCreatedResponse, EmployeeDto, ErrorResponse, MessageResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeInfo], summary="List employees")
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return await service.get_all()


@router.get(
    "/{employee_code}",
    response_model=EmployeeInfo,
    responses={404: {"description": "Employee not found", "model": ErrorResponse}},
    summary="Get employee by code",
)
async def get_employee(
    employee_code: str, service: EmployeeService = Depends(get_employee_service)
):
    employee = await service.get_by_code(employee_code)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_code} not found",
        )
    return employee


@router.post(
    "",
    response_model=EmployeeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Employee already exists", "model": ErrorResponse}},
    summary="Create employee",
)
async def create_employee(
    employee: EmployeeDto,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
):
    result = await service.create(employee)
    if not result.is_success:
        logger.info("Employee create rejected", employee_code=employee.employee_code, reason=result.message)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)

    location = str(request.url_for("get_employee", employee_code=employee.employee_code))
    return EmployeeCreatedResponse(employee=employee, location=location)


@router.put(
    "/{employee_code}",
    response_model=MessageResponse,
    responses={404: {"description": "Employee not found", "model": ErrorResponse}},
    summary="Update employee",
)
async def update_employee(
    employee_code: str,
    employee: EmployeeDto,
    service: EmployeeService = Depends(get_employee_service),
):
    result = await service.update_by_code(employee_code, employee)
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)


@router.delete(
    "/{employee_code}",
    response_model=MessageResponse,
    responses={404: {"description": "Employee not found", "model": ErrorResponse}},
    summary="Delete employee",
)
async def delete_employee(
    employee_code: str, service: EmployeeService = Depends(get_employee_service)
):
    result = await service.delete_by_code(employee_code)
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return MessageResponse(message=result.message)
