"""Conversions between service info models and domain entities."""

from ..domain.entities import Company, Employee
from .schemas import CompanyInfo, EmployeeInfo


def company_to_entity(info: CompanyInfo) -> Company:
    return Company(**{name: getattr(info, name) for name in Company.FIELDS})


def company_to_info(company: Company) -> CompanyInfo:
    return CompanyInfo.model_validate(company)


def employee_to_entity(info: EmployeeInfo) -> Employee:
    return Employee(**{name: getattr(info, name) for name in Employee.FIELDS})


def employee_to_info(employee: Employee) -> EmployeeInfo:
    return EmployeeInfo.model_validate(employee)
