"""
Service layer - HR business rules.

Validation, uniqueness and referential checks, pagination and the
correlation gate, delegating storage to a repository.
"""
