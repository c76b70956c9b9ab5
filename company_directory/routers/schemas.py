"""
Request and response models for the HTTP API.

The DTOs extend the service info models with the input rules enforced at
the boundary: alphanumeric codes, numeric phone numbers, postal code
format and length limits.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from ..services.schemas import CompanyInfo, EmployeeInfo

ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")
POSTAL_CODE_PATTERN = re.compile(r"^[A-Za-z]\d[A-Za-z] \d[A-Za-z]\d$")


def check_alphanumeric(value: Optional[str], field_name: str) -> Optional[str]:
    """Reject non-empty values containing anything but letters and digits."""
    if value and not ALPHANUMERIC_PATTERN.match(value):
        raise ValueError(f"{field_name} must be alphanumeric.")
    return value


def check_numeric(value: Optional[str], field_name: str) -> Optional[str]:
    if value and not NUMERIC_PATTERN.match(value):
        raise ValueError(f"{field_name} must be numeric.")
    return value


class CompanyDto(CompanyInfo):
    """Company request body."""

    company_code: str = Field(..., min_length=1)
    site_id: Optional[str] = None
    company_name: Optional[str] = Field(None, max_length=25)
    address_line1: Optional[str] = Field(None, max_length=100)
    address_line2: Optional[str] = Field(None, max_length=100)
    address_line3: Optional[str] = Field(None, max_length=100)
    postal_zip_code: Optional[str] = Field(None, max_length=7)
    phone_number: Optional[str] = Field(None, max_length=10)
    fax_number: Optional[str] = Field(None, max_length=20)
    equipment_company_code: str = Field(..., min_length=1, max_length=50)

    @field_validator(
        "company_code",
        "site_id",
        "company_name",
        "address_line1",
        "address_line2",
        "address_line3",
        "fax_number",
    )
    @classmethod
    def validate_alphanumeric(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        return check_alphanumeric(v, info.field_name)

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: Optional[str]) -> Optional[str]:
        return check_numeric(v, "phone_number")

    @field_validator("postal_zip_code")
    @classmethod
    def validate_postal_zip_code(cls, v: Optional[str]) -> Optional[str]:
        if v and not POSTAL_CODE_PATTERN.match(v):
            raise ValueError("Please specify a valid postal_zip_code.")
        return v


class EmployeeDto(EmployeeInfo):
    """Employee request body."""

    employee_code: str = Field(..., min_length=1)
    site_id: Optional[str] = None
    employee_name: str = Field(..., min_length=1, max_length=50)
    company_code: str = Field(..., min_length=1, max_length=100)
    occupation_name: Optional[str] = Field(None, max_length=100)
    employee_status: str = Field(..., min_length=1, max_length=20)
    email_address: EmailStr
    phone_number: Optional[str] = Field(None, max_length=10)

    @field_validator(
        "employee_code",
        "site_id",
        "employee_name",
        "company_code",
        "occupation_name",
        "employee_status",
    )
    @classmethod
    def validate_alphanumeric(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        return check_alphanumeric(v, info.field_name)

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: Optional[str]) -> Optional[str]:
        return check_numeric(v, "phone_number")

    @field_validator("last_modified")
    @classmethod
    def validate_last_modified(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        moment = v if v.tzinfo else v.replace(tzinfo=timezone.utc)
        if moment > datetime.now(timezone.utc):
            raise ValueError("last_modified must not be in the future.")
        return v


class CompanyCreatedResponse(BaseModel):
    """Response for a created company."""

    company: CompanyDto
    location: str


class EmployeeCreatedResponse(BaseModel):
    """Response for a created employee."""

    employee: EmployeeDto
    location: str


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str
    error_code: Optional[str] = None
