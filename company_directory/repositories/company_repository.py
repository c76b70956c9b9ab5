"""
Company repository.

Binds the code-keyed repository rules to company records.
"""

from ..domain.entities import Company
from .base_repository import BaseRepository, RepositoryMessages


class CompanyRepository(BaseRepository[Company]):
    """Repository for companies keyed by ``company_code`` within a site."""

    entity_type = Company
    label = "company"
    messages = RepositoryMessages(
        duplicate="Company already found with the same Companycode.",
        saved="Company details saved successfully.",
        save_failed="Failed to save company details.",
        not_found="Company not found with the given company code.",
        unchanged="Same company details already exists.",
        updated="Company details updated successfully.",
        update_failed="Failed to update company details.",
    )
