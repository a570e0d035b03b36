"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
entity-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Contract shared by every implementation:

- ``save`` inserts (or replaces) a full entity and returns it.
- ``find_by_id`` returns ``None`` when nothing matches.
- ``update`` and ``delete`` raise the entity's ``DoesNotExist`` when
  nothing matches; ``delete`` therefore succeeds only once per id.
- Constraint failures surface as ``django.db.IntegrityError``.

Implementations backing ``ICategoryRepository`` must remove every Product
of a deleted Category as part of the same delete (cascade).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Category``, ``Product``).
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist a new entity (insert-or-replace)."""

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional filters."""

    @abstractmethod
    def update(self, id: str, changes: Mapping[str, Any]) -> T:
        """Apply ``changes`` to the entity and refresh ``updated_at``."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove an entity by ID."""
