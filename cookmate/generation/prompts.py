# prompts.py
from google.genai import types

MAX_RECIPES = 6

COVER_ASPECT_RATIO = "4:3"
STEP_ASPECT_RATIO = "16:9"

RECIPE_LIST_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(type=types.Type.STRING, description="The name of the recipe."),
            "description": types.Schema(type=types.Type.STRING,
                                        description="A brief, enticing description of the dish."),
        },
        required=["name", "description"],
    ),
)

RECIPE_DETAILS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "ingredients": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="A list of all ingredients required for the recipe, with measurements.",
        ),
        "instructions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="A list of step-by-step instructions to prepare the dish.",
        ),
    },
    required=["ingredients", "instructions"],
)


def recipe_list_prompt(ingredients: str) -> str:
    return (f"Suggest up to {MAX_RECIPES} diverse and creative recipes I can cook "
            f"with the following ingredients: {ingredients.strip()}.")


def recipe_details_prompt(recipe_name: str) -> str:
    return (f'Provide detailed cooking instructions for "{recipe_name}". I need a list of ingredients '
            f"with measurements and a clear, step-by-step guide for the instructions.")


def cover_image_prompt(recipe_name: str) -> str:
    return (f'A delicious, professional food photograph of "{recipe_name}". '
            f"Centered, well-lit, on a clean, light-colored background.")


def step_image_prompt(instruction: str) -> str:
    return (f'A minimalist, clean, 2D animated style illustration showing this cooking step: "{instruction}". '
            f"Flat design, simple colored background, no text.")
