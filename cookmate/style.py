# style.py
import reflex as rx

from cookmate.state import State

ACCENT = "#22c55e"


def themed(light: str, dark: str):
    return rx.cond(State.is_dark, dark, light)


page_style = dict(
    min_height="100vh",
    width="100%",
    background_color=themed("#ffffff", "#111827"),
    color=themed("#1f2937", "#e5e7eb"),
    transition="background-color 0.3s",
)

header_style = dict(
    background_color=themed("#ffffff", "#1f2937"),
    box_shadow="0 2px 6px rgba(0, 0, 0, 0.15)",
    padding="1em 1.5em",
    width="100%",
)

title_style = dict(
    font_size="1.75em",
    font_weight="bold",
)

panel_style = dict(
    background_color=themed("#ffffff", "#1f2937"),
    border_radius="0.75em",
    box_shadow="0 4px 12px rgba(0, 0, 0, 0.12)",
    padding="1.5em",
    width="100%",
    max_width="42em",
)

input_style = dict(
    width="100%",
    background_color=themed("#f9fafb", "#374151"),
)

button_style = dict(
    width="100%",
    background_color=ACCENT,
    color="white",
    font_weight="bold",
    cursor="pointer",
)

card_style = dict(
    background_color=themed("#ffffff", "#1f2937"),
    border_radius="0.75em",
    box_shadow="0 2px 8px rgba(0, 0, 0, 0.12)",
    overflow="hidden",
    cursor="pointer",
    transition="transform 0.3s",
    _hover={"transform": "scale(1.03)"},
    width="100%",
)

card_image_style = dict(
    height="12em",
    width="100%",
    object_fit="cover",
)

section_heading_style = dict(
    font_size="1.25em",
    font_weight="600",
    color=themed("#15803d", "#4ade80"),
    margin_bottom="0.5em",
)

caption_style = dict(
    position="absolute",
    bottom="0.5em",
    left="0.5em",
    right="0.5em",
    padding="0.5em",
    color="white",
    font_size="0.875em",
    background_color="rgba(0, 0, 0, 0.6)",
    border_radius="0.25em",
)

error_style = dict(
    color="#ef4444",
    text_align="center",
    margin_top="2em",
)
