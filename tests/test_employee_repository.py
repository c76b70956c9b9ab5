"""
Tests for the employee repository.
"""

import pytest

from company_directory.domain.entities import Employee
from company_directory.repositories.employee_repository import EmployeeRepository


@pytest.fixture
def repository(mock_store, fast_retry, mock_logger):
    return EmployeeRepository(mock_store, fast_retry, logger=mock_logger)


class TestEmployeeRepository:
    """Employee rules mirror the company rules with employee messages."""

    def test_code_and_name_fields(self, repository):
        assert repository.code_field == "employee_code"
        assert repository.name_field == "employee_name"

    @pytest.mark.asyncio
    async def test_get_by_code(self, repository, mock_store, sample_employee):
        mock_store.find.return_value = [sample_employee]

        assert await repository.get_by_code("E1") is sample_employee
        mock_store.find.assert_awaited_once_with(employee_code="E1")

    @pytest.mark.asyncio
    async def test_get_by_name_missing(self, repository, mock_store):
        assert await repository.get_by_name("Nobody") is None
        mock_store.find.assert_awaited_once_with(employee_name="Nobody")

    @pytest.mark.asyncio
    async def test_create_success(self, repository, mock_store, sample_employee):
        result = await repository.create(sample_employee)

        assert result.is_success is True
        assert result.message == "Employee details saved successfully."
        mock_store.find.assert_awaited_once_with(site_id="1", employee_code="E1")

    @pytest.mark.asyncio
    async def test_create_duplicate(self, repository, mock_store, sample_employee):
        mock_store.find.return_value = [sample_employee]

        result = await repository.create(sample_employee)

        assert result.is_success is False
        assert result.message == "Employee already exists with the same EmployeeCode."
        mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_insert_rejected(self, repository, mock_store, sample_employee):
        mock_store.insert.return_value = False

        result = await repository.create(sample_employee)

        assert result.message == "Failed to save employee details."

    @pytest.mark.asyncio
    async def test_update_not_found(self, repository):
        result = await repository.update_by_code("E9", Employee(employee_code="E9"))

        assert result.is_success is False
        assert result.message == "Employee not found with the given employee code."

    @pytest.mark.asyncio
    async def test_update_identical(self, repository, mock_store, sample_employee):
        mock_store.find.return_value = [sample_employee]
        incoming = Employee(**{name: getattr(sample_employee, name) for name in Employee.FIELDS})

        result = await repository.update_by_code("E1", incoming)

        assert result.is_success is True
        assert result.message == "Same employee details already exist."
        mock_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_merges(self, repository, mock_store, sample_employee):
        mock_store.find.return_value = [sample_employee]

        result = await repository.update_by_code(
            "E1", Employee(employee_code="E1", employee_status="Inactive")
        )

        assert result.message == "Employee details updated successfully."
        persisted = mock_store.update.await_args.args[0]
        assert persisted.employee_status == "Inactive"
        assert persisted.email_address == "jane@example.com"

    @pytest.mark.asyncio
    async def test_update_with_nothing_new_skips_write(
        self, repository, mock_store, sample_employee
    ):
        mock_store.find.return_value = [sample_employee]

        result = await repository.update_by_code(
            "E1", Employee(employee_code="E1", employee_status="Active")
        )

        assert result.is_success is True
        assert result.message == "Same employee details already exist."
        mock_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_rejected(self, repository, mock_store, sample_employee):
        mock_store.find.return_value = [sample_employee]
        mock_store.update.return_value = False

        result = await repository.update_by_code("E1", Employee(employee_name="Janet"))

        assert result.is_success is False
        assert result.message == "Failed to update employee details."

    @pytest.mark.asyncio
    async def test_delete_missing(self, repository, mock_store, mock_logger):
        assert await repository.delete_by_code("E9") is False
        mock_logger.warning.assert_called_once_with(
            "Employee with employee code E9 not available."
        )

    @pytest.mark.asyncio
    async def test_delete_failure_propagates_after_retries(
        self, repository, mock_store, sample_employee
    ):
        mock_store.find.return_value = [sample_employee]
        mock_store.delete.side_effect = ConnectionError("db down")

        with pytest.raises(ConnectionError):
            await repository.delete_by_code("E1")

        assert mock_store.delete.await_count == 4
