"""
Company service.

Application service for company records: maps ``CompanyInfo`` to
``Company`` entities and normalizes repository outcomes.
"""

from typing import Any, Optional

from ..domain.entities import Company
from ..repositories.company_repository import CompanyRepository
from .base_service import BaseService
from .mapping import company_to_entity, company_to_info
from .schemas import CompanyInfo


class CompanyService(BaseService[Company, CompanyInfo]):
    """Service for company CRUD operations."""

    label = "Company"

    def __init__(self, repository: CompanyRepository, logger: Optional[Any] = None):
        """
        Initialize service with repository.

        Args:
            repository: Repository for company persistence
            logger: Structured logger
        """
        super().__init__(repository, company_to_entity, company_to_info, logger)
