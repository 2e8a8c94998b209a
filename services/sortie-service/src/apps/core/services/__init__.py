# services/sortie-service/src/apps/core/services/__init__.py
"""
Sortie Service - Service Layer

Business logic layer for sortie recording and reporting.
"""

from .exceptions import (
    SortieServiceError,
    SortieNotFoundError,
    SortieValidationError,
    SortieConflictError,
    SortieCreationError,
    StoreUnavailableError,
)

from .numbering_service import SortieNumberService
from .sortie_service import SortieService
from .report_service import ReportService
from .reference_service import ReferenceDataService

__all__ = [
    # Exceptions
    'SortieServiceError',
    'SortieNotFoundError',
    'SortieValidationError',
    'SortieConflictError',
    'SortieCreationError',
    'StoreUnavailableError',
    # Services
    'SortieNumberService',
    'SortieService',
    'ReportService',
    'ReferenceDataService',
]
