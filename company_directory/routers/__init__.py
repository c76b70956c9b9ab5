"""
API routers for company directory endpoints.
"""

from . import company_router, employee_router

__all__ = ["company_router", "employee_router"]
