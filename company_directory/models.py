"""
Database models for the company directory service.

SQLAlchemy ORM tables backing the company and employee stores. The
(site_id, code) unique constraints make concurrent creates of the same
record fail at the database instead of producing duplicates.
"""

from typing import Any

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base: Any = declarative_base()


class CompanyRecord(Base):
    """
    Company table.

    Attributes:
        id: Surrogate primary key
        company_code: Business code, unique within a site
        site_id: Tenant/site identifier
        last_modified: UTC timestamp of the last insert or update
    """

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)

    company_code = Column(String(50), nullable=False, index=True)
    site_id = Column(String(50), nullable=True, index=True)
    company_name = Column(String(100), nullable=True, index=True)

    address_line1 = Column(String(100), nullable=True)
    address_line2 = Column(String(100), nullable=True)
    address_line3 = Column(String(100), nullable=True)
    postal_zip_code = Column(String(10), nullable=True)
    country = Column(String(100), nullable=True)
    phone_number = Column(String(20), nullable=True)
    fax_number = Column(String(20), nullable=True)
    equipment_company_code = Column(String(50), nullable=True)
    status = Column(String(20), nullable=True)

    last_modified = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("site_id", "company_code", name="uq_companies_site_code"),
    )

    def __repr__(self) -> str:
        return f"<CompanyRecord(code='{self.company_code}', site='{self.site_id}')>"


class EmployeeRecord(Base):
    """Employee table, unique on (site_id, employee_code)."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)

    employee_code = Column(String(50), nullable=False, index=True)
    site_id = Column(String(50), nullable=True, index=True)
    employee_name = Column(String(100), nullable=True, index=True)
    company_code = Column(String(50), nullable=True, index=True)
    occupation_name = Column(String(100), nullable=True)
    employee_status = Column(String(20), nullable=True)
    email_address = Column(String(255), nullable=True)
    phone_number = Column(String(20), nullable=True)

    last_modified = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("site_id", "employee_code", name="uq_employees_site_code"),
    )

    def __repr__(self) -> str:
        return f"<EmployeeRecord(code='{self.employee_code}', site='{self.site_id}')>"
