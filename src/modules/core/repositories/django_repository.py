"""Django ORM implementation of the generic repository contract.

Entity repositories subclass ``DjangoRepository`` and set ``model``.
Every mutating method runs inside ``transaction.atomic`` so a constraint
failure rolls back to a savepoint and leaves the caller's transaction
usable.  Malformed identifiers behave like unknown ones.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class DjangoRepository(IRepository[M]):
    """Concrete repository backed by Django ORM."""

    model: ClassVar[Type[models.Model]]

    @property
    def _label(self) -> str:
        return self.model._meta.model_name

    def _does_not_exist(self, id: str) -> Exception:
        return self.model.DoesNotExist(f"{self.model.__name__} {id} does not exist.")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: str) -> Optional[M]:
        """Retrieve an entity by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return self.model.objects.filter(pk=id).first()
        except (ValueError, ValidationError):
            return None

    def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[M]:
        """List entities with optional Django ORM look-ups.

        Examples of valid filters::

            {"category_id": "0190..."}
            {"name__icontains": "phone"}
        """
        queryset = self.model.objects.all()
        try:
            if filters:
                queryset = queryset.filter(**filters)
            return list(queryset)
        except (ValueError, ValidationError):
            return []

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: M) -> M:
        """Persist (create or replace) an entity."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            f"{self._label}.saved",
            entity_id=str(entity.pk),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def update(self, id: str, changes: Mapping[str, Any]) -> M:
        """Write only the changed columns (plus ``updated_at``).

        Raises:
            DoesNotExist: if no entity matches ``id``.
        """
        try:
            entity = self.model.objects.select_for_update().get(pk=id)
        except (ValueError, ValidationError):
            raise self._does_not_exist(id) from None

        if not changes:
            return entity

        for field, value in changes.items():
            setattr(entity, field, value)
        entity.save(
            update_fields=[self.model._meta.get_field(field).name for field in changes]
        )
        logger.info(
            f"{self._label}.updated",
            entity_id=str(entity.pk),
            fields=sorted(changes),
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> None:
        """Hard-delete an entity; dependent rows follow their FK rules.

        Raises:
            DoesNotExist: if no entity matches ``id``.
        """
        try:
            deleted, per_model = self.model.objects.filter(pk=id).delete()
        except (ValueError, ValidationError):
            raise self._does_not_exist(id) from None

        if not per_model.get(self.model._meta.label):
            raise self._does_not_exist(id)
        logger.info(
            f"{self._label}.deleted",
            entity_id=str(id),
            rows_deleted=deleted,
        )
