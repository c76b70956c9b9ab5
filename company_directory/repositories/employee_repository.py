"""
Employee repository.

Binds the code-keyed repository rules to employee records.
"""

from ..domain.entities import Employee
from .base_repository import BaseRepository, RepositoryMessages


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for employees keyed by ``employee_code`` within a site."""

    entity_type = Employee
    label = "employee"
    messages = RepositoryMessages(
        duplicate="Employee already exists with the same EmployeeCode.",
        saved="Employee details saved successfully.",
        save_failed="Failed to save employee details.",
        not_found="Employee not found with the given employee code.",
        unchanged="Same employee details already exist.",
        updated="Employee details updated successfully.",
        update_failed="Failed to update employee details.",
    )
