"""Catalog DRF serializers for API input/output.

Serializers only bind the camelCase wire format to the snake_case DTO
fields.  Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

SMALLINT_MAX = 32767
BIGINT_MAX = 2**63 - 1


class CatalogEntrySerializer(serializers.Serializer):
    """Read/write serializer for the catalog resource.

    Works against ``CatalogEntryRecord`` instances on output.  Any ``id``
    sent by the client is ignored.
    """

    id = serializers.IntegerField(read_only=True)
    itemName = serializers.CharField(source="item_name", max_length=255)
    brand = serializers.CharField(max_length=255)
    starRating = serializers.IntegerField(
        source="star_rating",
        required=False,
        allow_null=True,
        min_value=-SMALLINT_MAX - 1,
        max_value=SMALLINT_MAX,
    )
    price = serializers.IntegerField(
        required=False, allow_null=True, min_value=-BIGINT_MAX - 1, max_value=BIGINT_MAX
    )
    quantity = serializers.IntegerField(
        required=False, allow_null=True, min_value=-BIGINT_MAX - 1, max_value=BIGINT_MAX
    )
