# theme.py
import logging

THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)

log = logging.getLogger(__name__)


def resolve_theme(stored: str | None, prefers_dark: bool = False) -> str:
    """Stored preference wins, then the system preference, then light."""
    if stored in THEMES:
        return stored
    return DARK if prefers_dark else LIGHT


def toggled(theme: str) -> str:
    return LIGHT if theme == DARK else DARK


class ThemePreference:
    """
        Process-wide theme setting with an explicit load / save lifecycle.

        The backing store is injected and only needs `get` and item assignment:
        the browser local storage var in the app, a plain dict in tests.
        """

    def __init__(self, store, key: str = THEME_KEY):
        self.store = store
        self.key = key
        self.theme = LIGHT

    def load(self, prefers_dark: bool = False) -> str:
        self.theme = resolve_theme(self.store.get(self.key), prefers_dark)
        return self.theme

    def save(self) -> None:
        self.store[self.key] = self.theme

    def toggle(self) -> str:
        self.theme = toggled(self.theme)
        self.save()
        log.debug(f"Theme switched to {self.theme}")
        return self.theme
