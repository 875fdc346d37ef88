# state.py
import functools
import logging

import reflex as rx

from cookmate import carousel, controller
from cookmate.config import load_settings
from cookmate.generation.recipe_service import RecipeService
from cookmate.model.recipe import Recipe, RecipeDetails
from cookmate.theme import DARK, THEME_KEY, THEMES

PREFERS_DARK_SCRIPT = "window.matchMedia('(prefers-color-scheme: dark)').matches"

log = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def get_recipe_service() -> RecipeService:
    return RecipeService.from_settings(load_settings())


class State(rx.State):
    # Contents of the ingredients text box.
    ingredients_text: str = ""

    # Recipe list and its phase.
    recipes: list[Recipe] = []
    recipes_phase: str = controller.RECIPES_IDLE
    error: str = ""

    # Detail view of the selected recipe.
    selected_recipe: Recipe | None = None
    details: RecipeDetails | None = None
    step_images: list[str] = []
    detail_phase: str = controller.DETAIL_IDLE
    detail_error: str = ""
    # Bumped on every select/close so late results for an older selection are dropped.
    selection_token: int = 0
    current_step: int = 0

    theme: str = rx.LocalStorage("", name=THEME_KEY)

    @rx.var
    def is_loading(self) -> bool:
        return self.recipes_phase == controller.RECIPES_LOADING

    @rx.var
    def can_submit(self) -> bool:
        return self.recipes_phase != controller.RECIPES_LOADING and bool(self.ingredients_text.strip())

    @rx.var
    def show_welcome(self) -> bool:
        return self.recipes_phase == controller.RECIPES_IDLE

    @rx.var
    def has_recipes(self) -> bool:
        return self.recipes_phase == controller.RECIPES_READY and len(self.recipes) > 0

    @rx.var
    def detail_open(self) -> bool:
        return self.selected_recipe is not None

    @rx.var
    def selected_name(self) -> str:
        return self.selected_recipe.name if self.selected_recipe else ""

    @rx.var
    def detail_loading(self) -> bool:
        return self.detail_phase == controller.DETAIL_LOADING

    @rx.var
    def has_details(self) -> bool:
        return self.details is not None and self.detail_phase in (controller.DETAIL_IMAGES_PENDING,
                                                                  controller.DETAIL_READY)

    @rx.var
    def images_ready(self) -> bool:
        return self.detail_phase == controller.DETAIL_READY and len(self.step_images) > 0

    @rx.var
    def ingredients(self) -> list[str]:
        return self.details.ingredients if self.details else []

    @rx.var
    def instructions(self) -> list[str]:
        return self.details.instructions if self.details else []

    @rx.var
    def current_instruction(self) -> str:
        steps = self.details.instructions if self.details else []
        return steps[carousel.clamp_step(self.current_step, len(steps))] if steps else ""

    @rx.var
    def current_step_image(self) -> str:
        if not self.step_images:
            return ""
        return self.step_images[carousel.clamp_step(self.current_step, len(self.step_images))]

    @rx.var
    def step_label(self) -> str:
        return carousel.step_label(self.current_step, len(self.details.instructions) if self.details else 0)

    @rx.var
    def is_first_step(self) -> bool:
        return carousel.is_first_step(self.current_step)

    @rx.var
    def is_last_step(self) -> bool:
        return carousel.is_last_step(self.current_step, len(self.details.instructions) if self.details else 0)

    @rx.var
    def is_dark(self) -> bool:
        return self.theme == DARK

    @rx.event
    def set_ingredients_text(self, value: str):
        self.ingredients_text = value

    @rx.event(background=True)
    async def submit_ingredients(self, form_data: dict):
        """Submits the bound `ingredients_text`, the same value `can_submit` checks."""
        await controller.submit_ingredients(self, get_recipe_service())

    @rx.event(background=True)
    async def select_recipe(self, index: int):
        async with self:
            if not 0 <= index < len(self.recipes):
                log.warning(f"Ignoring selection of unknown recipe index {index}")
                return
            recipe = self.recipes[index]
        await controller.select_recipe(self, get_recipe_service(), recipe)

    @rx.event
    def close_detail(self):
        controller.close_detail(self)

    @rx.event
    def set_detail_open(self, is_open: bool):
        if not is_open:
            controller.close_detail(self)

    @rx.event
    def next_step(self):
        controller.next_step(self)

    @rx.event
    def previous_step(self):
        controller.previous_step(self)

    @rx.event
    def toggle_theme(self):
        controller.toggle_theme(self)

    @rx.event
    def load_theme(self):
        """Keeps a stored preference, otherwise asks the browser for its color scheme."""
        if self.theme in THEMES:
            return
        return rx.call_script(PREFERS_DARK_SCRIPT, callback=State.apply_system_theme)

    @rx.event
    def apply_system_theme(self, prefers_dark: bool):
        controller.load_theme(self, bool(prefers_dark))
