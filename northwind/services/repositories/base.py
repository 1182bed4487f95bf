"""Capability set shared by every entity repository.

Repositories do not inherit from a common base class. Each one implements
these methods against its own model, and callers that only need the generic
operations type against ``Repository``.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

ModelT = TypeVar("ModelT")
KeyT = TypeVar("KeyT", contravariant=True)


class Repository(Protocol[ModelT, KeyT]):
    """Generic CRUD access for one aggregate type.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises NotFoundError if missing
    - add / update / delete : Stage a write in the current session
    """

    def find_by_id(self, entity_id: KeyT) -> ModelT | None: ...

    def get_by_id(self, entity_id: KeyT) -> ModelT: ...

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> Sequence[ModelT]: ...

    def add(self, entity: ModelT) -> ModelT: ...

    def update(self, entity: ModelT) -> ModelT: ...

    def delete(self, entity: ModelT) -> None: ...

    def exists(self, entity_id: KeyT) -> bool: ...
