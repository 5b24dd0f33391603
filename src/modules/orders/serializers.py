"""Order DRF serializers for API input/output.

The quantities array is exposed under the single stable name
``quantities``.  Length agreement between ``itemIDs`` and
``quantities`` is checked by ``OrderValidator`` (422), not here.
"""

from __future__ import annotations

from rest_framework import serializers


class OrderSerializer(serializers.Serializer):
    """Read/write serializer for the order resource."""

    id = serializers.IntegerField(read_only=True)
    purchaserName = serializers.CharField(source="purchaser_name", max_length=255)
    itemIDs = serializers.ListField(
        source="item_ids", child=serializers.IntegerField(), allow_empty=True
    )
    quantities = serializers.ListField(
        child=serializers.IntegerField(), allow_empty=True
    )
