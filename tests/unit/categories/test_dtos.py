"""Unit tests for Category DTOs.

Covers:
- CreateCategoryDTO: required name, whitespace stripping, default description.
- UpdateCategoryDTO: presence tracking via changes(), null and empty rejection.
- Immutability.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.categories.dtos import (
    CategoryOutputDTO,
    CreateCategoryDTO,
    UpdateCategoryDTO,
)

pytestmark = pytest.mark.unit


class TestCreateCategoryDTO:
    def test_valid(self):
        dto = CreateCategoryDTO(name="Electronics", description="Gadgets")
        assert dto.name == "Electronics"
        assert dto.description == "Gadgets"

    def test_description_defaults_to_empty(self):
        assert CreateCategoryDTO(name="Books").description == ""

    def test_name_is_stripped(self):
        assert CreateCategoryDTO(name="  Books  ").name == "Books"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateCategoryDTO(name=name)

    def test_name_longer_than_column_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateCategoryDTO(name="x" * 256)
        assert exc_info.value.errors()[0]["loc"] == ("name",)

    def test_name_at_column_limit_accepted(self):
        assert len(CreateCategoryDTO(name="x" * 255).name) == 255

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateCategoryDTO()

    def test_frozen(self):
        dto = CreateCategoryDTO(name="Books")
        with pytest.raises(ValidationError):
            dto.name = "Comics"


class TestUpdateCategoryDTO:
    def test_empty_update_has_no_changes(self):
        assert UpdateCategoryDTO().changes() == {}

    def test_changes_only_include_supplied_fields(self):
        dto = UpdateCategoryDTO.model_validate({"description": "New"})
        assert dto.changes() == {"description": "New"}

    def test_empty_description_is_a_change(self):
        dto = UpdateCategoryDTO.model_validate({"description": ""})
        assert dto.changes() == {"description": ""}

    def test_explicit_null_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be null"):
            UpdateCategoryDTO.model_validate({"name": None})

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            UpdateCategoryDTO.model_validate({"name": " "})

    def test_name_longer_than_column_rejected(self):
        with pytest.raises(ValidationError):
            UpdateCategoryDTO.model_validate({"name": "x" * 256})


class TestCategoryOutputDTO:
    def test_from_entity(self, make_category):
        category = make_category(name="Books", description="Paper")
        dto = CategoryOutputDTO.from_entity(category)
        assert dto.id == category.id
        assert dto.name == "Books"
        assert dto.created_at == category.created_at
