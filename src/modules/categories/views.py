"""Category API views.

Exposes the ``CategoryService`` via HTTP using a DRF ViewSet.
Application errors propagate to ``api_exception_handler``, which maps
their kind onto the HTTP status code.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.translators import parse_input


class CategoryViewSet(ViewSet):
    """ViewSet for Category CRUD operations.

    Uses ``CategoryService`` with ``CategoryDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = CategorySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/v1/categories/"""
        categories = self._service.list_categories()
        return Response(CategorySerializer(categories, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/categories/{pk}/"""
        category = self._service.get_category(pk)
        return Response(CategorySerializer(category).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        dto = parse_input(CreateCategoryDTO, request.data)
        category = self._service.create_category(dto)
        return Response(
            CategorySerializer(category).data, status=status.HTTP_201_CREATED
        )

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/categories/{pk}/"""
        dto = parse_input(UpdateCategoryDTO, request.data)
        category = self._service.update_category(pk, dto)
        return Response(CategorySerializer(category).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        self._service.delete_category(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
