"""
Tests for the company repository.

Covers:
- Duplicate detection on create
- Partial merge and no-op update
- Delete not-found handling
- Store failures through the retry executor
"""

import pytest

from company_directory.domain.entities import Company, OperationResult
from company_directory.repositories.company_repository import CompanyRepository


@pytest.fixture
def repository(mock_store, fast_retry, mock_logger):
    return CompanyRepository(mock_store, fast_retry, logger=mock_logger)


class TestRepositoryInitialization:
    def test_store_required(self):
        with pytest.raises(ValueError):
            CompanyRepository(None)

    def test_default_retry_executor(self, mock_store):
        repository = CompanyRepository(mock_store)

        assert repository.retry.max_retries == 3
        assert repository.code_field == "company_code"
        assert repository.name_field == "company_name"


class TestCompanyReads:
    """Test read operations."""

    @pytest.mark.asyncio
    async def test_get_all(self, repository, mock_store, sample_company):
        mock_store.find_all.return_value = [sample_company]

        assert await repository.get_all() == [sample_company]

    @pytest.mark.asyncio
    async def test_get_by_code_returns_first_match(self, repository, mock_store, sample_company):
        second = Company(company_code="C1", site_id="2")
        mock_store.find.return_value = [sample_company, second]

        result = await repository.get_by_code("C1")

        assert result is sample_company
        mock_store.find.assert_awaited_once_with(company_code="C1")

    @pytest.mark.asyncio
    async def test_get_by_code_missing(self, repository, mock_store):
        assert await repository.get_by_code("NOPE") is None

    @pytest.mark.asyncio
    async def test_get_by_name(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]

        result = await repository.get_by_name("Acme")

        assert result is sample_company
        mock_store.find.assert_awaited_once_with(company_name="Acme")

    @pytest.mark.asyncio
    async def test_read_retried_then_propagated(self, repository, mock_store):
        mock_store.find_all.side_effect = ConnectionError("db down")

        with pytest.raises(ConnectionError):
            await repository.get_all()

        assert mock_store.find_all.await_count == 4

    @pytest.mark.asyncio
    async def test_read_recovers_after_transient_failure(
        self, repository, mock_store, sample_company
    ):
        mock_store.find.side_effect = [ConnectionError("blip"), [sample_company]]

        assert await repository.get_by_code("C1") is sample_company


class TestCompanyCreate:
    """Test create rules."""

    @pytest.mark.asyncio
    async def test_create_success(self, repository, mock_store, sample_company):
        result = await repository.create(sample_company)

        assert isinstance(result, OperationResult)
        assert result.is_success is True
        assert result.message == "Company details saved successfully."
        mock_store.find.assert_awaited_once_with(site_id="1", company_code="C1")
        mock_store.insert.assert_awaited_once_with(sample_company)

    @pytest.mark.asyncio
    async def test_create_duplicate_in_same_site(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]

        result = await repository.create(Company(company_code="C1", site_id="1"))

        assert result.is_success is False
        assert result.message == "Company already found with the same Companycode."
        mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_insert_rejected(self, repository, mock_store, sample_company):
        mock_store.insert.return_value = False

        result = await repository.create(sample_company)

        assert result.is_success is False
        assert result.message == "Failed to save company details."

    @pytest.mark.asyncio
    async def test_create_store_failure_propagates(self, repository, mock_store, sample_company):
        mock_store.insert.side_effect = RuntimeError("write failed")

        with pytest.raises(RuntimeError):
            await repository.create(sample_company)

        assert mock_store.insert.await_count == 4


class TestCompanyUpdate:
    """Test update rules."""

    @pytest.mark.asyncio
    async def test_update_not_found(self, repository, mock_store):
        result = await repository.update_by_code("C9", Company(company_code="C9"))

        assert result.is_success is False
        assert result.message == "Company not found with the given company code."
        mock_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_identical_is_noop(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]
        incoming = Company(**{name: getattr(sample_company, name) for name in Company.FIELDS})

        result = await repository.update_by_code("C1", incoming)

        assert result.is_success is True
        assert result.message == "Same company details already exists."
        mock_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_partial_merge(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]
        incoming = Company(company_code="C1", phone_number="6135559999")

        result = await repository.update_by_code("C1", incoming)

        assert result.is_success is True
        assert result.message == "Company details updated successfully."
        persisted = mock_store.update.await_args.args[0]
        assert persisted is sample_company
        assert persisted.phone_number == "6135559999"
        assert persisted.company_name == "Acme"

    @pytest.mark.asyncio
    async def test_repeated_partial_update_writes_once(
        self, repository, mock_store, sample_company
    ):
        mock_store.find.return_value = [sample_company]
        incoming = Company(company_code="C1", status="Inactive")

        first = await repository.update_by_code("C1", incoming)
        second = await repository.update_by_code("C1", incoming)

        assert first.message == "Company details updated successfully."
        assert second.is_success is True
        assert second.message == "Same company details already exists."
        assert mock_store.update.await_count == 1

    @pytest.mark.asyncio
    async def test_update_store_rejects(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]
        mock_store.update.return_value = False

        result = await repository.update_by_code("C1", Company(company_name="Other"))

        assert result.is_success is False
        assert result.message == "Failed to update company details."


class TestCompanyDelete:
    """Test delete rules."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]

        assert await repository.delete_by_code("C1") is True
        mock_store.delete.assert_awaited_once_with(company_code="C1")

    @pytest.mark.asyncio
    async def test_delete_missing_logs_warning(self, repository, mock_store, mock_logger):
        assert await repository.delete_by_code("C9") is False

        mock_store.delete.assert_not_awaited()
        mock_logger.warning.assert_called_once_with(
            "Company with company code C9 not available."
        )

    @pytest.mark.asyncio
    async def test_delete_store_returns_false(self, repository, mock_store, sample_company):
        mock_store.find.return_value = [sample_company]
        mock_store.delete.return_value = False

        assert await repository.delete_by_code("C1") is False
