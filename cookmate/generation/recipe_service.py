# recipe_service.py
import base64
import json
import logging
import random
from urllib.parse import quote

from google import genai
from google.genai import types

from cookmate.config import DEFAULT_IMAGE_MODEL, DEFAULT_TEXT_MODEL, Settings
from cookmate.errors import GenerationError
from cookmate.generation import prompts
from cookmate.model.recipe import Recipe, RecipeDetails

log = logging.getLogger(__name__)


def cover_placeholder(recipe_name: str) -> str:
    return f"https://picsum.photos/400/300?random={quote(recipe_name, safe='')}"


def step_placeholder() -> str:
    return f"https://picsum.photos/1280/720?random={random.random()}"


def to_data_uri(image_bytes: bytes, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"


class RecipeService:
    """Talks to the generative backend: recipe text in JSON mode, images via Imagen."""

    def __init__(self, client: genai.Client, text_model: str = DEFAULT_TEXT_MODEL,
                 image_model: str = DEFAULT_IMAGE_MODEL):
        self.client = client
        self.text_model = text_model
        self.image_model = image_model

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecipeService":
        return cls(genai.Client(api_key=settings.api_key), settings.text_model, settings.image_model)

    async def request_recipe_list(self, ingredients: str) -> list[Recipe]:
        payload = await self._generate_json(prompts.recipe_list_prompt(ingredients), prompts.RECIPE_LIST_SCHEMA)
        try:
            if not isinstance(payload, list):
                raise ValueError(f"Expected a list of recipes, got {type(payload).__name__}")
            recipes = [Recipe.from_dict(item) for item in payload]
        except ValueError as e:
            log.error(f"Recipe suggestions did not match schema: {e}", exc_info=True)
            raise GenerationError("Failed to parse recipe suggestions from AI.") from e
        if len(recipes) > prompts.MAX_RECIPES:
            log.debug(f"Truncating {len(recipes)} suggestions to {prompts.MAX_RECIPES}")
        return recipes[:prompts.MAX_RECIPES]

    async def request_recipe_details(self, recipe_name: str) -> RecipeDetails:
        payload = await self._generate_json(prompts.recipe_details_prompt(recipe_name),
                                            prompts.RECIPE_DETAILS_SCHEMA)
        try:
            return RecipeDetails.from_dict(payload)
        except ValueError as e:
            log.error(f"Details for {recipe_name} did not match schema: {e}", exc_info=True)
            raise GenerationError("Failed to parse recipe details from AI.") from e

    async def request_cover_image(self, recipe_name: str) -> str:
        """Never raises; falls back to a placeholder derived from the recipe name."""
        try:
            return await self._generate_image(prompts.cover_image_prompt(recipe_name), prompts.COVER_ASPECT_RATIO)
        except Exception as e:
            log.warning(f"Error generating cover image for: {recipe_name!r}: {e}", exc_info=True)
            return cover_placeholder(recipe_name)

    async def request_step_image(self, instruction: str) -> str:
        """Never raises; falls back to a random placeholder so failed steps differ visually."""
        try:
            return await self._generate_image(prompts.step_image_prompt(instruction), prompts.STEP_ASPECT_RATIO)
        except Exception as e:
            log.warning(f"Error generating image for instruction: {instruction!r}: {e}", exc_info=True)
            return step_placeholder()

    async def _generate_json(self, prompt: str, schema: types.Schema):
        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
        except Exception as e:
            log.error(f"Error calling {self.text_model}: {e}", exc_info=True)
            raise GenerationError("The recipe generator is unavailable.") from e

        text = (response.text or "").strip()
        try:
            return json.loads(text)
        except ValueError as e:
            log.error(f"Response from {self.text_model} is not valid JSON: {text[:200]!r}")
            raise GenerationError("The recipe generator returned malformed data.") from e

    async def _generate_image(self, prompt: str, aspect_ratio: str) -> str:
        response = await self.client.aio.models.generate_images(
            model=self.image_model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type="image/png",
                aspect_ratio=aspect_ratio,
            ),
        )
        image_bytes = response.generated_images[0].image.image_bytes
        if not image_bytes:
            raise ValueError("Image response carried no bytes")
        return to_data_uri(image_bytes)
