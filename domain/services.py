from domain.models import Recipe
from domain.repository import RecipeStore
from domain.slug import make_slug


class InvalidRecipeName(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Recipe name has no usable characters: {name!r}")
        self.name = name


def recipe_from_json(body: bytes | str) -> Recipe:
    """Raises `pydantic.ValidationError` for bad JSON or a missing `name`."""
    return Recipe.model_validate_json(body)


def create_recipe(body: bytes | str, *, store: RecipeStore) -> tuple[str, Recipe]:
    recipe = recipe_from_json(body)
    id = make_slug(recipe.name)
    if not id:
        raise InvalidRecipeName(recipe.name)
    store.add(id, recipe)
    return id, recipe


def get_recipe(id: str, *, store: RecipeStore) -> Recipe:
    return store.get(id)


def list_recipes(*, store: RecipeStore) -> dict[str, Recipe]:
    return store.list()


def update_recipe(id: str, body: bytes | str, *, store: RecipeStore) -> Recipe:
    # The id stays put even if the name changes.
    recipe = recipe_from_json(body)
    store.update(id, recipe)
    return recipe


def delete_recipe(id: str, *, store: RecipeStore) -> None:
    store.remove(id)
