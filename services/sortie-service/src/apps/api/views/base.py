# services/sortie-service/src/apps/api/views/base.py
"""
Base Views and Mixins

Common functionality for Sortie Service API views.
"""

import logging
from uuid import UUID

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from apps.core.services.exceptions import (
    SortieServiceError,
    SortieNotFoundError,
    SortieValidationError,
    SortieConflictError,
    SortieCreationError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


class UserContextMixin:
    """
    Mixin for extracting the acting operator from the request.

    The operator is identified by the X-User-ID request header.
    """

    def get_user_id(self) -> UUID:
        """
        Extract the operator ID from the request.

        Raises:
            SortieValidationError: If the header is missing or malformed
        """
        user_id = self.request.headers.get('X-User-ID')

        if not user_id:
            raise SortieValidationError(
                message="User ID is required",
                field="user_id"
            )

        try:
            return UUID(str(user_id))
        except ValueError:
            raise SortieValidationError(
                message="Invalid user ID format",
                field="user_id"
            )


class ExceptionHandlerMixin:
    """Mixin for handling service layer exceptions."""

    def handle_exception(self, exc):
        """Convert service exceptions to appropriate HTTP responses."""

        if isinstance(exc, SortieNotFoundError):
            return Response(
                exc.to_dict(),
                status=status.HTTP_404_NOT_FOUND
            )

        if isinstance(exc, SortieValidationError):
            return Response(
                exc.to_dict(),
                status=status.HTTP_400_BAD_REQUEST
            )

        if isinstance(exc, SortieConflictError):
            return Response(
                exc.to_dict(),
                status=status.HTTP_409_CONFLICT
            )

        if isinstance(exc, StoreUnavailableError):
            response = Response(
                exc.to_dict(),
                status=status.HTTP_503_SERVICE_UNAVAILABLE
            )
            response['Retry-After'] = '1'
            return response

        if isinstance(exc, SortieCreationError):
            logger.error(f"{exc.code}: {exc.message} ({exc.details.get('reason')})")
            return Response(
                exc.to_dict(),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        if isinstance(exc, SortieServiceError):
            return Response(
                exc.to_dict(),
                status=status.HTTP_400_BAD_REQUEST
            )

        # Everything else goes through the shared DRF exception handler
        return super().handle_exception(exc)


class BaseSortieViewSet(
    UserContextMixin,
    ExceptionHandlerMixin,
    ViewSet
):
    """
    Base ViewSet for Sortie Service.

    Provides operator context extraction, plus exception handling.
    """

    def parse_id(self, pk) -> UUID:
        """Parse a URL identifier; malformed IDs cannot match any sortie."""
        try:
            return UUID(str(pk))
        except ValueError:
            raise SortieNotFoundError(sortie_id=str(pk))

    def validate_input(self, serializer_class, data, message="Invalid request data"):
        """
        Validate request data with a serializer.

        Returns:
            The bound, valid serializer

        Raises:
            SortieValidationError: Carrying the field errors
        """
        serializer = serializer_class(data=data)
        if not serializer.is_valid():
            raise SortieValidationError(
                message=message,
                details={'errors': serializer.errors}
            )
        return serializer


class PaginationMixin:
    """Mixin for pagination support."""

    max_page_size = 100

    @property
    def default_page_size(self):
        return settings.SORTIE_LIST_PAGE_SIZE

    def get_pagination_params(self):
        """Extract pagination parameters from request."""
        try:
            page = int(self.request.query_params.get('page', 1))
            page = max(1, page)
        except (TypeError, ValueError):
            page = 1

        try:
            page_size = int(self.request.query_params.get('page_size', self.default_page_size))
            page_size = min(max(1, page_size), self.max_page_size)
        except (TypeError, ValueError):
            page_size = self.default_page_size

        return page, page_size
