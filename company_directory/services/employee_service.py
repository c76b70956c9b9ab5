"""Employee service: maps ``EmployeeInfo`` to ``Employee`` entities."""

from typing import Any, Optional

from ..domain.entities import Employee
from ..repositories.employee_repository import EmployeeRepository
from .base_service import BaseService
from .mapping import employee_to_entity, employee_to_info
from .schemas import EmployeeInfo


class EmployeeService(BaseService[Employee, EmployeeInfo]):
    """Service for employee CRUD operations."""

    label = "Employee"

    def __init__(self, repository: EmployeeRepository, logger: Optional[Any] = None):
        super().__init__(repository, employee_to_entity, employee_to_info, logger)
