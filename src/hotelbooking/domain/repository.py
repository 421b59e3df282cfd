"""Storage capability consumed by the booking core."""

from typing import Protocol, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    """Protocol for entity stores.

    Implemented by the in-memory and Postgres adapters under
    hotelbooking.infra.repositories.
    """

    def get_all(self) -> list[T]:
        """Return every stored entity, unfiltered."""
        ...

    def add(self, entity: T) -> None:
        """Persist *entity*. Id assignment is up to the store."""
        ...
