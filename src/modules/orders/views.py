"""Order API views.

Exposes ``OrderService`` via HTTP using a DRF ViewSet.  Writes run the
``OrderValidator`` first: a failed check is answered with 422 and a
plain-text message, and nothing is persisted.
"""

from __future__ import annotations

from django.conf import settings
from django.http import HttpResponse
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.catalog.repositories.django_repository import CatalogDjangoRepository
from modules.catalog.services import CatalogService
from modules.core.results import NotFound
from modules.orders.dtos import OrderInput
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService
from modules.orders.validation import OrderValidationError, OrderValidator

UNPROCESSABLE = OpenApiResponse(description="Order failed validation (plain text).")


def _unprocessable(error: OrderValidationError) -> HttpResponse:
    return HttpResponse(
        error.message,
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content_type="text/plain; charset=utf-8",
    )


class OrderViewSet(GenericViewSet):
    """ViewSet for order CRUD operations.

    Uses ``OrderService`` and ``OrderValidator`` with injected
    repositories (DIP).  Updates are full replacements, so only ``PUT``
    is routed.  ``queryset`` only feeds schema generation.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(order_repository=OrderDjangoRepository())
        self._validator = OrderValidator(
            catalog=CatalogService(repository=CatalogDjangoRepository()),
            reference_check=settings.ORDER_REFERENCE_CHECK,
        )

    def _bind(self, request: Request) -> OrderInput:
        serializer = OrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return OrderInput(**serializer.validated_data)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(responses={200: OrderSerializer, 422: UNPROCESSABLE})
    def create(self, request: Request) -> Response | HttpResponse:
        """POST /api/orders"""
        dto = self._bind(request)

        error = self._validator.validate(dto)
        if error is not None:
            return _unprocessable(error)

        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=OrderSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/orders"""
        orders = self._service.list_orders()
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(responses={200: OrderSerializer, 404: None})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/orders/{pk}"""
        order = self._service.get_order(pk)
        if isinstance(order, NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(responses={200: OrderSerializer, 404: None, 422: UNPROCESSABLE})
    def update(self, request: Request, pk: str | None = None) -> Response | HttpResponse:
        """PUT /api/orders/{pk}

        The stored order must exist (404) before the replacement is
        validated (422).
        """
        if isinstance(self._service.get_order(pk), NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)

        dto = self._bind(request)
        error = self._validator.validate(dto)
        if error is not None:
            return _unprocessable(error)

        order = self._service.update_order(pk, dto)
        if isinstance(order, NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    @extend_schema(responses={200: None, 404: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/orders/{pk}"""
        if isinstance(self._service.delete_order(pk), NotFound):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)
