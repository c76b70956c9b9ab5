"""
Repository layer - Data access abstractions.

This layer provides the entity store contract, the retry executor and the
company/employee repositories that enforce uniqueness and merge rules.
"""

from .company_repository import CompanyRepository
from .employee_repository import EmployeeRepository
from .retry import RetryExecutor
from .store import IEntityStore, SqlAlchemyStore

__all__ = [
    "CompanyRepository",
    "EmployeeRepository",
    "IEntityStore",
    "RetryExecutor",
    "SqlAlchemyStore",
]
