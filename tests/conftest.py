"""
Test configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from company_directory.app import app
from company_directory.database import create_db_engine, create_session_factory, init_db
from company_directory.dependencies import get_company_service, get_employee_service
from company_directory.domain.entities import Company, Employee
from company_directory.models import Base, CompanyRecord, EmployeeRecord
from company_directory.repositories.retry import RetryExecutor
from company_directory.repositories.store import SqlAlchemyStore


async def no_sleep(seconds: float) -> None:
    """Sleep replacement so retry tests run instantly."""
    return None


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine with fresh tables for each test"""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def company_store(session_factory):
    return SqlAlchemyStore(session_factory, CompanyRecord, Company)


@pytest.fixture
def employee_store(session_factory):
    return SqlAlchemyStore(session_factory, EmployeeRecord, Employee)


@pytest.fixture
def mock_logger():
    """Logger double recording structured log calls."""
    return MagicMock()


@pytest.fixture
def fast_retry(mock_logger):
    """Retry executor with the default budget and no real waiting."""
    return RetryExecutor(logger=mock_logger, sleep=no_sleep)


@pytest.fixture
def mock_store():
    """Store double; every method is an AsyncMock."""
    store = AsyncMock()
    store.find.return_value = []
    store.find_all.return_value = []
    store.insert.return_value = True
    store.update.return_value = True
    store.delete.return_value = True
    return store


@pytest.fixture
def sample_company():
    """Sample company for testing"""
    return Company(
        company_code="C1",
        site_id="1",
        company_name="Acme",
        address_line1="1 Main St",
        postal_zip_code="K1A 0B1",
        country="Canada",
        phone_number="6135550100",
        equipment_company_code="EQ1",
        status="Active",
    )


@pytest.fixture
def sample_employee():
    """Sample employee for testing"""
    return Employee(
        employee_code="E1",
        site_id="1",
        employee_name="Jane",
        company_code="C1",
        occupation_name="Engineer",
        employee_status="Active",
        email_address="jane@example.com",
        phone_number="6135550101",
    )


@pytest.fixture
def sample_company_data():
    """Sample company request body"""
    return {
        "company_code": "C1",
        "site_id": "1",
        "company_name": "Acme",
        "address_line1": "1MainSt",
        "postal_zip_code": "K1A 0B1",
        "country": "Canada",
        "phone_number": "6135550100",
        "equipment_company_code": "EQ1",
        "status": "Active",
    }


@pytest.fixture
def sample_employee_data():
    """Sample employee request body"""
    return {
        "employee_code": "E1",
        "site_id": "1",
        "employee_name": "Jane",
        "company_code": "C1",
        "occupation_name": "Engineer",
        "employee_status": "Active",
        "email_address": "jane@example.com",
        "phone_number": "6135550101",
    }


@pytest.fixture
def company_service():
    return AsyncMock()


@pytest.fixture
def employee_service():
    return AsyncMock()


@pytest.fixture(scope="function")
def client(company_service, employee_service):
    """
    Test client with service dependencies overridden.

    The lifespan is not entered, so no database is created.
    """
    app.dependency_overrides[get_company_service] = lambda: company_service
    app.dependency_overrides[get_employee_service] = lambda: employee_service
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
