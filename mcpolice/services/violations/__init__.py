"""
Violation service package.

Exports:
    ViolationService: Validation, enrichment, persistence and queries
    QueryResult: Page of violations with the filtered total
"""

from mcpolice.services.violations.service import QueryResult, ViolationService

__all__ = ["QueryResult", "ViolationService"]
