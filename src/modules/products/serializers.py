"""Product DRF serializers for API output.

Input is parsed into Pydantic DTOs (``dtos.py``).  Prices render as
decimal strings (``"699.99"``), never as floats.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    category_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "category_id",
            "name",
            "description",
            "price_av",
            "price_ap",
            "stock_quantity",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
