"""Unit tests for CategoryService.

Covers:
- create_category: happy path, storage failures translated.
- update_category: partial update, no-op update, not found.
- delete_category: happy path, not found.
- get_category / list_categories.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import uuid6
from django.db import IntegrityError, OperationalError

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.categories.services import CategoryService
from modules.core.exceptions import DomainRuleViolation, InternalError

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return CategoryService(repository=mock_repo)


# ===========================================================================
# create_category
# ===========================================================================


class TestCreateCategory:
    def test_success(self, service, mock_repo):
        mock_repo.save.side_effect = lambda c: c

        category = service.create_category(
            CreateCategoryDTO(name="Electronics", description="Gadgets")
        )

        assert category.name == "Electronics"
        assert category.description == "Gadgets"
        assert category.id.version == 7
        mock_repo.save.assert_called_once()

    def test_distinct_ids(self, service, mock_repo):
        mock_repo.save.side_effect = lambda c: c
        a = service.create_category(CreateCategoryDTO(name="A"))
        b = service.create_category(CreateCategoryDTO(name="B"))
        assert a.id != b.id

    def test_check_violation_becomes_validation(self, service, mock_repo):
        mock_repo.save.side_effect = IntegrityError(
            "CHECK constraint failed: categories_name_not_empty"
        )
        with pytest.raises(DomainRuleViolation):
            service.create_category(CreateCategoryDTO(name="X"))

    def test_unexpected_storage_failure_is_internal(self, service, mock_repo):
        mock_repo.save.side_effect = OperationalError("database is locked")
        with pytest.raises(InternalError) as exc_info:
            service.create_category(CreateCategoryDTO(name="X"))
        assert "locked" not in exc_info.value.message


# ===========================================================================
# update_category
# ===========================================================================


class TestUpdateCategory:
    def test_passes_only_supplied_fields(self, service, mock_repo):
        category = Category(name="Books", description="New")
        mock_repo.update.return_value = category
        dto = UpdateCategoryDTO.model_validate({"description": "New"})

        result = service.update_category("some-id", dto)

        assert result is category
        mock_repo.update.assert_called_once_with("some-id", {"description": "New"})

    def test_empty_update_passes_no_changes(self, service, mock_repo):
        service.update_category("some-id", UpdateCategoryDTO())
        mock_repo.update.assert_called_once_with("some-id", {})

    def test_not_found(self, service, mock_repo):
        mock_repo.update.side_effect = Category.DoesNotExist()
        with pytest.raises(CategoryNotFound):
            service.update_category("missing", UpdateCategoryDTO(name="X"))


# ===========================================================================
# delete_category
# ===========================================================================


class TestDeleteCategory:
    def test_success(self, service, mock_repo):
        service.delete_category("some-id")
        mock_repo.delete.assert_called_once_with("some-id")

    def test_not_found(self, service, mock_repo):
        mock_repo.delete.side_effect = Category.DoesNotExist()
        with pytest.raises(CategoryNotFound):
            service.delete_category("missing")


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_get_category(self, service, mock_repo):
        category = Category(name="Books")
        mock_repo.find_by_id.return_value = category
        assert service.get_category(str(category.id)) is category

    def test_get_category_not_found(self, service, mock_repo):
        mock_repo.find_by_id.return_value = None
        missing = str(uuid6.uuid7())
        with pytest.raises(CategoryNotFound, match=missing):
            service.get_category(missing)

    def test_list_categories_delegates(self, service, mock_repo):
        mock_repo.find_all.return_value = [Category(name="A")]
        assert len(service.list_categories()) == 1
        mock_repo.find_all.assert_called_once_with(None)
