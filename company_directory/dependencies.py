"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Optional

from .domain.exceptions import ServiceNotInitializedException

if TYPE_CHECKING:
    from .services.company_service import CompanyService
    from .services.employee_service import EmployeeService

# Service instances (set by main app during startup)
_company_service: Optional["CompanyService"] = None
_employee_service: Optional["EmployeeService"] = None


def set_services(
    company_service: Optional["CompanyService"],
    employee_service: Optional["EmployeeService"],
) -> None:
    """
    Set the service instances used by the routers.

    Called by main app during startup; pass None to reset on shutdown.
    """
    global _company_service, _employee_service
    _company_service = company_service
    _employee_service = employee_service


async def get_company_service() -> "CompanyService":
    """Get company service instance for dependency injection."""
    if _company_service is None:
        raise ServiceNotInitializedException("company")
    return _company_service


async def get_employee_service() -> "EmployeeService":
    """Get employee service instance for dependency injection."""
    if _employee_service is None:
        raise ServiceNotInitializedException("employee")
    return _employee_service
