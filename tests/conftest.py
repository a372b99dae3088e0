import pytest

from domain.repository import MemoryRecipeStore


@pytest.fixture
def store() -> MemoryRecipeStore:
    return MemoryRecipeStore()


@pytest.fixture
def tomato_soup() -> dict[str, object]:
    return {"name": "Tomato Soup", "ingredients": ["tomatoes", "onion", "stock"]}
