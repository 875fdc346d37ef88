class CookmateError(Exception):
    """Base class for errors raised by the cookmate package."""


class ConfigurationError(CookmateError):
    """Required configuration is missing; the app must not start."""


class GenerationError(CookmateError):
    """The generative backend failed or returned data that does not match the expected schema."""
