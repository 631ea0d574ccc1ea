"""
Repository layer - Data access abstractions.

This layer provides interfaces for HR record storage and retrieval,
hiding implementation details from the business logic.
"""
