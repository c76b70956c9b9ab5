"""
Info models exchanged with the service layer.

These are the external-facing shapes; validation rules for incoming
requests live on the HTTP DTOs that extend them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities import utc_now


class CompanyInfo(BaseModel):
    """Company information."""

    company_code: Optional[str] = None
    site_id: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    postal_zip_code: Optional[str] = None
    country: Optional[str] = None
    phone_number: Optional[str] = None
    fax_number: Optional[str] = None
    equipment_company_code: Optional[str] = None
    status: Optional[str] = None
    last_modified: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EmployeeInfo(BaseModel):
    """Employee information."""

    employee_code: Optional[str] = None
    site_id: Optional[str] = None
    employee_name: Optional[str] = None
    company_code: Optional[str] = None
    occupation_name: Optional[str] = None
    employee_status: Optional[str] = None
    email_address: Optional[str] = None
    phone_number: Optional[str] = None
    last_modified: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ResultInfo(BaseModel):
    """Outcome of a create, update or delete request."""

    is_success: bool
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
