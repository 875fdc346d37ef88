# config.py
import os
from dataclasses import dataclass

from cookmate.errors import ConfigurationError

API_KEY_ENV = "API_KEY"
TEXT_MODEL_ENV = "TEXT_MODEL"
IMAGE_MODEL_ENV = "IMAGE_MODEL"

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"


@dataclass(frozen=True)
class Settings:
    api_key: str
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL


def load_settings(environ=None) -> Settings:
    """
        Reads the settings from the environment.

        Raises:
            ConfigurationError: if the API credential is missing or blank.
        """
    environ = os.environ if environ is None else environ
    api_key = (environ.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable not set.")
    return Settings(
        api_key=api_key,
        text_model=environ.get(TEXT_MODEL_ENV) or DEFAULT_TEXT_MODEL,
        image_model=environ.get(IMAGE_MODEL_ENV) or DEFAULT_IMAGE_MODEL,
    )
