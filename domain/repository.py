import threading
from typing import Protocol, runtime_checkable

from domain.models import Recipe


class RecipeStoreError(Exception):
    def __init__(self, id: str) -> None:
        super().__init__(id)
        self.id = id


class RecipeNotFound(RecipeStoreError):
    def __str__(self) -> str:
        return f"Recipe not found: {self.id}"


class RecipeConflict(RecipeStoreError):
    def __str__(self) -> str:
        return f"Recipe already exists: {self.id}"


@runtime_checkable
class RecipeStore(Protocol):
    def add(self, id: str, recipe: Recipe) -> None: ...

    def get(self, id: str) -> Recipe: ...

    def update(self, id: str, recipe: Recipe) -> None: ...

    def list(self) -> dict[str, Recipe]: ...

    def remove(self, id: str) -> None: ...


class MemoryRecipeStore:
    """Recipes held in a dict for the lifetime of the process.

    Safe to share between request threads. Every operation takes the same
    lock, so nobody sees half an add, update or remove.
    """

    def __init__(self, *, allow_overwrite: bool = False) -> None:
        self.allow_overwrite = allow_overwrite
        self._recipes: dict[str, Recipe] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def add(self, id: str, recipe: Recipe) -> None:
        with self._lock:
            if id in self._recipes and not self.allow_overwrite:
                raise RecipeConflict(id)
            self._recipes[id] = recipe

    def get(self, id: str) -> Recipe:
        with self._lock:
            try:
                return self._recipes[id]
            except KeyError:
                raise RecipeNotFound(id) from None

    def update(self, id: str, recipe: Recipe) -> None:
        with self._lock:
            if id not in self._recipes:
                raise RecipeNotFound(id)
            self._recipes[id] = recipe

    def list(self) -> dict[str, Recipe]:
        # A copy, callers iterate it without holding the lock.
        with self._lock:
            return dict(self._recipes)

    def remove(self, id: str) -> None:
        with self._lock:
            try:
                del self._recipes[id]
            except KeyError:
                raise RecipeNotFound(id) from None
