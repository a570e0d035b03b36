"""Category DRF serializers for API output.

Input is parsed into Pydantic DTOs (``dtos.py``); the serializer only
renders the canonical JSON shape.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Read serializer for the Category resource."""

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "description",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
