from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from studydeck.core import container
from studydeck.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Binds the request-scoped database session into the container while the
    use case is built.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
