"""Catalog API views.

Exposes the ``CatalogService`` via HTTP using a DRF ViewSet.  Absent
entries are reported by the service as ``NotFound`` values and are
mapped to an empty-bodied 404 here.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.catalog.dtos import CatalogEntryInput
from modules.catalog.models import CatalogEntry
from modules.catalog.repositories.django_repository import CatalogDjangoRepository
from modules.catalog.serializers import CatalogEntrySerializer
from modules.catalog.services import CatalogService
from modules.core.results import NotFound


class CatalogViewSet(GenericViewSet):
    """ViewSet for catalog CRUD operations.

    Uses ``CatalogService`` with ``CatalogDjangoRepository`` (DIP).
    Updates are full replacements, so only ``PUT`` is routed.
    ``queryset`` only feeds schema generation; reads go through the
    service.
    """

    queryset = CatalogEntry.objects.all()
    serializer_class = CatalogEntrySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CatalogService(repository=CatalogDjangoRepository())

    def _bind(self, request: Request) -> CatalogEntryInput:
        serializer = CatalogEntrySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return CatalogEntryInput(**serializer.validated_data)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=CatalogEntrySerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/catalog"""
        entries = self._service.list_entries()
        return Response(CatalogEntrySerializer(entries, many=True).data)

    @extend_schema(responses={200: CatalogEntrySerializer, 404: None})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/catalog/{pk}"""
        entry = self._service.get_entry(pk)
        if isinstance(entry, NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(CatalogEntrySerializer(entry).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(responses={200: CatalogEntrySerializer})
    def create(self, request: Request) -> Response:
        """POST /api/catalog"""
        entry = self._service.create_entry(self._bind(request))
        return Response(CatalogEntrySerializer(entry).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: CatalogEntrySerializer, 404: None})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/catalog/{pk}"""
        if isinstance(self._service.get_entry(pk), NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)

        entry = self._service.update_entry(pk, self._bind(request))
        if isinstance(entry, NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(CatalogEntrySerializer(entry).data)

    @extend_schema(responses={200: None, 404: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/catalog/{pk}"""
        if isinstance(self._service.delete_entry(pk), NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)
