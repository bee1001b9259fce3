"""Base entity class for domain entities."""

from typing import Any


class BaseEntity:
    """Base class for entities identified by ``id``."""

    def __init__(self, id: int | None = None) -> None:
        self.id = id

    def __eq__(self, other: Any) -> bool:
        """Entities with the same type and id are equal."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
