# controller.py
"""
Recipe flow orchestration.

Every function here works on a `state` object carrying the UI fields listed in
`cookmate.state.State`. Long-running flows only touch the state inside
`async with state:` blocks, which is how Reflex background events take the
state lock; each block is one atomic transition pushed to the browser when it
exits.
"""
import asyncio
import logging

from cookmate import carousel
from cookmate.errors import GenerationError
from cookmate.generation.recipe_service import RecipeService
from cookmate.model.recipe import Recipe
from cookmate.theme import THEME_KEY, ThemePreference

log = logging.getLogger(__name__)

# Phases of the recipe list.
RECIPES_IDLE = "idle"
RECIPES_LOADING = "recipes-loading"
RECIPES_READY = "recipes-ready"
RECIPES_ERROR = "recipes-error"

# Phases of the detail view, independent of the list.
DETAIL_IDLE = "idle"
DETAIL_LOADING = "detail-loading"
DETAIL_IMAGES_PENDING = "detail-images-pending"
DETAIL_READY = "detail-ready"
DETAIL_ERROR = "detail-error"

NO_MATCHES_MESSAGE = "Could not find any recipes. Try different ingredients."
LIST_FAILED_MESSAGE = "Failed to fetch recipes. Please check your connection and API key."


def detail_failed_message(recipe_name: str) -> str:
    return f"Failed to fetch details for {recipe_name}."


def no_steps_message(recipe_name: str) -> str:
    return f"No cooking steps were found for {recipe_name}."


async def attach_cover_images(service: RecipeService, recipes: list[Recipe]) -> list[Recipe]:
    """Fetches every cover concurrently; the result keeps the order of `recipes`."""
    images = await asyncio.gather(*(service.request_cover_image(recipe.name) for recipe in recipes))
    return [Recipe(name=recipe.name, description=recipe.description, image_url=image_url)
            for recipe, image_url in zip(recipes, images)]


async def fetch_step_images(service: RecipeService, instructions: list[str]) -> list[str]:
    """One image per instruction, issued together and index-aligned with `instructions`."""
    return list(await asyncio.gather(*(service.request_step_image(step) for step in instructions)))


async def submit_ingredients(state, service: RecipeService, text: str | None = None) -> None:
    """Submits `text`, or the bound `ingredients_text` of the state when no text is given."""
    async with state:
        if text is None:
            text = state.ingredients_text
        if not text or not text.strip() or state.recipes_phase == RECIPES_LOADING:
            return
        state.recipes_phase = RECIPES_LOADING
        state.error = ""
        state.recipes = []
        _reset_detail(state)

    try:
        recipes = await service.request_recipe_list(text)
    except GenerationError as e:
        log.error(f"Recipe list request failed: {e}")
        async with state:
            state.recipes_phase = RECIPES_ERROR
            state.error = LIST_FAILED_MESSAGE
        return

    if not recipes:
        log.info(f"No recipes found for ingredients: {text!r}")
        async with state:
            state.recipes_phase = RECIPES_ERROR
            state.error = NO_MATCHES_MESSAGE
        return

    recipes = await attach_cover_images(service, recipes)
    async with state:
        state.recipes = recipes
        state.recipes_phase = RECIPES_READY
    log.info(f"Loaded {len(recipes)} recipes")


async def select_recipe(state, service: RecipeService, recipe: Recipe) -> None:
    async with state:
        _reset_detail(state)
        state.selected_recipe = recipe
        state.detail_phase = DETAIL_LOADING
        token = state.selection_token

    try:
        details = await service.request_recipe_details(recipe.name)
    except GenerationError as e:
        log.error(f"Detail request for {recipe.name} failed: {e}")
        async with state:
            if _is_current(state, token, "details"):
                state.detail_phase = DETAIL_ERROR
                state.detail_error = detail_failed_message(recipe.name)
        return

    async with state:
        if not _is_current(state, token, "details"):
            return
        if not details.instructions:
            state.detail_phase = DETAIL_ERROR
            state.detail_error = no_steps_message(recipe.name)
            return
        state.details = details
        state.detail_phase = DETAIL_IMAGES_PENDING

    images = await fetch_step_images(service, details.instructions)
    async with state:
        if not _is_current(state, token, "step images"):
            return
        state.step_images = images
        state.detail_phase = DETAIL_READY


def close_detail(state) -> None:
    """Drops the detail view; the recipe list is left untouched."""
    _reset_detail(state)


def next_step(state) -> None:
    state.current_step = carousel.next_step(state.current_step, _step_count(state))


def previous_step(state) -> None:
    state.current_step = carousel.previous_step(state.current_step, _step_count(state))


class StateThemeStore:
    """Exposes the state's persisted `theme` field as a theme preference store under `THEME_KEY`."""

    def __init__(self, state):
        self.state = state

    def get(self, key, default=None):
        if key != THEME_KEY:
            return default
        return self.state.theme or default

    def __setitem__(self, key, value):
        if key != THEME_KEY:
            raise KeyError(key)
        self.state.theme = value


def theme_preference(state) -> ThemePreference:
    return ThemePreference(StateThemeStore(state))


def load_theme(state, prefers_dark: bool = False) -> str:
    preference = theme_preference(state)
    theme = preference.load(prefers_dark)
    preference.save()
    return theme


def toggle_theme(state) -> str:
    preference = theme_preference(state)
    preference.load()
    return preference.toggle()


def _reset_detail(state) -> None:
    # Bumping the token orphans any request still in flight for the previous selection.
    state.selection_token += 1
    state.selected_recipe = None
    state.details = None
    state.step_images = []
    state.detail_phase = DETAIL_IDLE
    state.detail_error = ""
    state.current_step = 0


def _is_current(state, token: int, what: str) -> bool:
    if state.selection_token != token:
        log.debug(f"Discarding stale {what} for selection {token}")
        return False
    return True


def _step_count(state) -> int:
    return len(state.details.instructions) if state.details else 0
