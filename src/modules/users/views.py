"""User API views.

Only creation and listing are exposed; users are read-only afterwards.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.translators import parse_input
from modules.users.dtos import CreateUserDTO
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.serializers import UserSerializer
from modules.users.services import UserService


class UserViewSet(ViewSet):
    """ViewSet for the User resource (create + list)."""

    serializer_class = UserSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=UserDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/v1/users/"""
        users = self._service.list_users()
        return Response(UserSerializer(users, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/users/"""
        dto = parse_input(CreateUserDTO, request.data)
        user = self._service.create_user(dto)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
