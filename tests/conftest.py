"""Shared fixtures: an in-memory stand-in for the Reflex state and a mocked recipe service."""

from unittest.mock import AsyncMock, Mock

import pytest

from cookmate import controller
from cookmate.model.recipe import Recipe, RecipeDetails


class FakeState:
    """Carries the same fields as `cookmate.state.State` and supports `async with` like a background state."""

    def __init__(self):
        self.ingredients_text = ""
        self.recipes = []
        self.recipes_phase = controller.RECIPES_IDLE
        self.error = ""
        self.selected_recipe = None
        self.details = None
        self.step_images = []
        self.detail_phase = controller.DETAIL_IDLE
        self.detail_error = ""
        self.selection_token = 0
        self.current_step = 0
        self.theme = ""
        self.locked = False
        self.transitions = 0

    async def __aenter__(self):
        assert not self.locked, "state lock is not re-entrant"
        self.locked = True
        return self

    async def __aexit__(self, *exc_info):
        self.locked = False
        self.transitions += 1
        return False

    def snapshot(self) -> dict:
        return {key: value for key, value in vars(self).items() if key not in ("locked", "transitions")}


@pytest.fixture
def state():
    return FakeState()


@pytest.fixture
def service():
    mock_service = Mock()
    mock_service.request_recipe_list = AsyncMock(return_value=[
        Recipe(name="Chicken Fried Rice", description="Quick wok classic."),
        Recipe(name="Tomato Chicken Stew", description="Slow and hearty."),
        Recipe(name="Spanish Rice", description="Smoky tomato rice."),
    ])
    mock_service.request_cover_image = AsyncMock(side_effect=lambda name: f"data:image/png;base64,{name}")
    mock_service.request_recipe_details = AsyncMock(return_value=RecipeDetails(
        ingredients=["1 cup rice", "2 eggs"],
        instructions=["Cook the rice.", "Scramble the eggs.", "Fry everything together."],
    ))
    mock_service.request_step_image = AsyncMock(side_effect=lambda step: f"image:{step}")
    return mock_service
