"""Infrastructure providers; the persistence component is swappable."""

from .persistence import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
