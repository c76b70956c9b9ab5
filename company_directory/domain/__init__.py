"""
Domain layer - Core business entities and domain logic.

This layer contains the company and employee records, the operation
result type and the merge rules, independent of any infrastructure.
"""
