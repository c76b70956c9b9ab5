"""
Domain entities for the company directory.

Core business records for companies and employees plus the uniform
result type returned by every mutating repository operation.
These entities are framework-agnostic and contain only business data.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, Optional, Tuple


def utc_now() -> datetime:
    """Current UTC instant (timezone-aware)."""
    return datetime.now(timezone.utc)


@dataclass
class Company:
    """
    Company record.

    The pair (site_id, company_code) is unique. ``id`` and ``last_modified``
    are managed by the store and never take part in merge or equality.
    """

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

    id: Optional[int] = field(default=None, compare=False)
    last_modified: Optional[datetime] = field(default=None, compare=False)

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "company_code",
        "site_id",
        "company_name",
        "address_line1",
        "address_line2",
        "address_line3",
        "postal_zip_code",
        "country",
        "phone_number",
        "fax_number",
        "equipment_company_code",
        "status",
    )
    CODE_FIELD: ClassVar[str] = "company_code"
    NAME_FIELD: ClassVar[str] = "company_name"

    def __str__(self) -> str:
        return f"Company(code={self.company_code}, site={self.site_id}, name={self.company_name})"


@dataclass
class Employee:
    """
    Employee record.

    The pair (site_id, employee_code) is unique.
    """

    employee_code: Optional[str] = None
    site_id: Optional[str] = None
    employee_name: Optional[str] = None
    company_code: Optional[str] = None
    occupation_name: Optional[str] = None
    employee_status: Optional[str] = None
    email_address: Optional[str] = None
    phone_number: Optional[str] = None

    id: Optional[int] = field(default=None, compare=False)
    last_modified: Optional[datetime] = field(default=None, compare=False)

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "employee_code",
        "site_id",
        "employee_name",
        "company_code",
        "occupation_name",
        "employee_status",
        "email_address",
        "phone_number",
    )
    CODE_FIELD: ClassVar[str] = "employee_code"
    NAME_FIELD: ClassVar[str] = "employee_name"

    def __str__(self) -> str:
        return f"Employee(code={self.employee_code}, site={self.site_id}, name={self.employee_name})"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a mutating operation.

    Business rule failures (duplicate code, not found) are expressed as
    ``is_success=False`` instead of exceptions.
    """

    is_success: bool
    message: str
    timestamp: datetime = field(default_factory=utc_now)
