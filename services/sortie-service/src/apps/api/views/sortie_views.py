# services/sortie-service/src/apps/api/views/sortie_views.py
"""
Sortie Views

REST API views for recording and querying sorties.
"""

import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import SortieService
from apps.api.serializers import (
    SortieCreateSerializer,
    SortieStatusSerializer,
    SortieSummarySerializer,
    CrewAssignmentSerializer,
    PassengerRecordSerializer,
    CargoRecordSerializer,
)
from .base import BaseSortieViewSet, PaginationMixin

logger = logging.getLogger(__name__)


class SortieViewSet(BaseSortieViewSet, PaginationMixin):
    """
    ViewSet for sortie operations.

    Provides sortie recording, listing, search, status changes and deletion.
    """

    # ==========================================================================
    # List and Retrieve
    # ==========================================================================

    def list(self, request):
        """
        List sorties, newest takeoff first.

        GET /api/v1/sorties/sorties/
        """
        page, page_size = self.get_pagination_params()

        result = SortieService.list_sorties(page=page, page_size=page_size)

        serializer = SortieSummarySerializer(result['sorties'], many=True)
        return Response({
            'results': serializer.data,
            'total': result['total'],
            'page': result['page'],
            'page_size': result['page_size'],
            'total_pages': result['total_pages'],
            'has_next': result['has_next'],
            'has_previous': result['has_previous'],
        })

    def retrieve(self, request, pk=None):
        """
        Retrieve a sortie with its crew, passengers and cargo.

        GET /api/v1/sorties/sorties/{id}/
        """
        result = SortieService.get_sortie_with_details(self.parse_id(pk))

        cargo = result['cargo']
        return Response({
            'sortie': SortieSummarySerializer(result['sortie']).data,
            'crew': CrewAssignmentSerializer(result['crew'], many=True).data,
            'passengers': PassengerRecordSerializer(result['passengers'], many=True).data,
            'cargo': CargoRecordSerializer(cargo).data if cargo else None,
        })

    # ==========================================================================
    # Create and Delete
    # ==========================================================================

    def create(self, request):
        """
        Record a sortie with its crew, passengers and cargo.

        POST /api/v1/sorties/sorties/
        """
        user_id = self.get_user_id()

        serializer = self.validate_input(
            SortieCreateSerializer,
            request.data,
            message="Invalid sortie submission"
        )

        sortie = SortieService.create_sortie(
            submission=serializer.to_submission(),
            created_by=user_id,
        )

        return Response({
            'success': True,
            'sortieId': str(sortie.id),
            'sortieNumber': sortie.sortie_number,
            'message': 'Sortie created successfully',
        }, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        """
        Delete a sortie and its dependent records.

        DELETE /api/v1/sorties/sorties/{id}/
        """
        user_id = self.get_user_id()

        SortieService.delete_sortie(
            sortie_id=self.parse_id(pk),
            deleted_by=user_id
        )

        return Response(status=status.HTTP_204_NO_CONTENT)

    # ==========================================================================
    # Status
    # ==========================================================================

    @action(detail=True, methods=['post'], url_path='status')
    def update_status(self, request, pk=None):
        """
        Change a sortie's status.

        POST /api/v1/sorties/sorties/{id}/status/
        """
        user_id = self.get_user_id()
        sortie_id = self.parse_id(pk)

        serializer = self.validate_input(SortieStatusSerializer, request.data)

        SortieService.update_status(
            sortie_id=sortie_id,
            status=serializer.validated_data['status'],
            changed_by=user_id
        )

        sortie = SortieService.get_sortie(sortie_id)
        return Response(SortieSummarySerializer(sortie).data)

    # ==========================================================================
    # Search
    # ==========================================================================

    @action(detail=False, methods=['get'])
    def search(self, request):
        """
        Search sorties by aircraft, location, mission type, dates and number.

        GET /api/v1/sorties/sorties/search/
        """
        sorties = SortieService.search_sorties(request.query_params)

        serializer = SortieSummarySerializer(sorties, many=True)
        return Response({
            'results': serializer.data,
            'count': len(sorties),
        })
