from dataclasses import dataclass, field


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Expected string field '{key}', got {type(value).__name__}")
    return value


def _require_str_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"Expected list of strings in field '{key}'")
    return list(value)


@dataclass
class Recipe:
    name: str = ""
    description: str = ""
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data) -> "Recipe":
        if not isinstance(data, dict):
            raise ValueError(f"Expected recipe object, got {type(data).__name__}")
        return Recipe(name=_require_str(data, "name"), description=_require_str(data, "description"))


@dataclass
class RecipeDetails:
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> "RecipeDetails":
        if not isinstance(data, dict):
            raise ValueError(f"Expected recipe details object, got {type(data).__name__}")
        return RecipeDetails(ingredients=_require_str_list(data, "ingredients"),
                             instructions=_require_str_list(data, "instructions"))
