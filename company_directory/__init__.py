"""
Company Directory Service.

Layered CRUD service for company and employee records with
retry-wrapped persistence and uniform operation results.
"""

__version__ = "1.0.0"
