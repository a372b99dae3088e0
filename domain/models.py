from typing import Any

from pydantic import BaseModel, ConfigDict


class Recipe(BaseModel):
    """A recipe as sent by the client. Only `name` is required."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str

    def __repr__(self) -> str:
        return f"<Recipe(name={self.name})>"

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
