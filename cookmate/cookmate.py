"""CookMate AI: recipe ideas and cooking animations from the ingredients you have."""
import reflex as rx

from cookmate import style
from cookmate.state import State, get_recipe_service


def loading_spinner(message: str) -> rx.Component:
    return rx.vstack(
        rx.spinner(size="3", color=style.ACCENT),
        rx.text(message, size="4", color_scheme="gray"),
        align="center",
        padding="3em",
        width="100%",
    )


def header() -> rx.Component:
    return rx.hstack(
        rx.hstack(
            rx.icon("chef-hat", size=36, color=style.ACCENT),
            rx.heading("CookMate AI", size="7", weight="bold"),
            align="center",
        ),
        rx.icon_button(
            rx.cond(State.is_dark, rx.icon("sun", color="#facc15"), rx.icon("moon")),
            on_click=State.toggle_theme,
            aria_label="Toggle theme",
            variant="ghost",
            radius="full",
        ),
        justify="between",
        align="center",
        style=style.header_style,
    )


def ingredient_input() -> rx.Component:
    return rx.box(
        rx.form(
            rx.vstack(
                rx.text("Enter ingredients you have (e.g., chicken, tomatoes, rice)", size="2", weight="medium"),
                rx.text_area(
                    name="ingredients",
                    value=State.ingredients_text,
                    on_change=State.set_ingredients_text,
                    placeholder="eggs, onion, cheese, bell pepper...",
                    rows="4",
                    style=style.input_style,
                ),
                rx.button(
                    rx.icon("sparkles", size=18),
                    rx.cond(State.is_loading, "Thinking...", "Find Recipes"),
                    type="submit",
                    disabled=~State.can_submit,
                    size="3",
                    style=style.button_style,
                ),
                width="100%",
            ),
            on_submit=State.submit_ingredients,
            reset_on_submit=False,
        ),
        style=style.panel_style,
    )


def welcome() -> rx.Component:
    return rx.vstack(
        rx.icon("chef-hat", size=96, color=style.ACCENT),
        rx.heading("Welcome to CookMate AI!", size="6"),
        rx.text("Tell me what ingredients you have, and I'll whip up some ideas.", size="4", color_scheme="gray"),
        align="center",
        margin_top="4em",
    )


def recipe_card(recipe, index) -> rx.Component:
    return rx.box(
        rx.image(
            src=recipe.image_url,
            alt="A dish of " + recipe.name,
            style=style.card_image_style,
        ),
        rx.vstack(
            rx.heading(recipe.name, size="5"),
            rx.text(recipe.description, color_scheme="gray"),
            rx.text("View Recipe →", color=style.ACCENT, weight="bold"),
            padding="1.5em",
            spacing="2",
        ),
        on_click=State.select_recipe(index),
        style=style.card_style,
    )


def recipe_grid() -> rx.Component:
    return rx.vstack(
        rx.heading("Recipe Suggestions", size="8", text_align="center"),
        rx.grid(
            rx.foreach(State.recipes, lambda recipe, index: recipe_card(recipe, index)),
            columns=rx.breakpoints(initial="1", sm="2", lg="3"),
            spacing="6",
            width="100%",
        ),
        align="center",
        margin_top="3em",
        width="100%",
    )


def step_carousel() -> rx.Component:
    return rx.vstack(
        rx.box(
            rx.image(
                src=State.current_step_image,
                alt=State.step_label,
                width="100%",
                aspect_ratio="16 / 9",
                object_fit="cover",
                border_radius="0.5em",
            ),
            rx.text(State.current_instruction, style=style.caption_style),
            position="relative",
            width="100%",
        ),
        rx.hstack(
            rx.icon_button(
                rx.icon("chevron-left"),
                on_click=State.previous_step,
                disabled=State.is_first_step,
                radius="full",
                variant="soft",
            ),
            rx.text(State.step_label, weight="bold"),
            rx.icon_button(
                rx.icon("chevron-right"),
                on_click=State.next_step,
                disabled=State.is_last_step,
                radius="full",
                variant="soft",
            ),
            justify="between",
            align="center",
            width="100%",
        ),
        width="100%",
    )


def recipe_detail_body() -> rx.Component:
    return rx.grid(
        rx.box(
            rx.text("Ingredients", style=style.section_heading_style),
            rx.unordered_list(rx.foreach(State.ingredients, rx.list_item)),
            rx.text("Instructions", style=style.section_heading_style, margin_top="1.5em"),
            rx.ordered_list(rx.foreach(State.instructions, rx.list_item)),
            padding="1em",
        ),
        rx.box(
            rx.text("Cooking Animation", style=style.section_heading_style, text_align="center"),
            rx.cond(
                State.images_ready,
                step_carousel(),
                loading_spinner("Generating animations..."),
            ),
            padding="1em",
        ),
        columns=rx.breakpoints(initial="1", lg="2"),
        spacing="4",
    )


def recipe_detail_modal() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.hstack(
                rx.dialog.title(State.selected_name, size="6", margin="0"),
                rx.icon_button(rx.icon("x"), on_click=State.close_detail, variant="ghost"),
                justify="between",
                align="center",
                width="100%",
            ),
            rx.divider(margin_y="0.75em"),
            rx.scroll_area(
                rx.cond(
                    State.detail_loading,
                    loading_spinner("Preparing recipe details..."),
                    rx.cond(
                        State.has_details,
                        recipe_detail_body(),
                        rx.text(State.detail_error, style=style.error_style),
                    ),
                ),
                max_height="75vh",
                type="auto",
            ),
            max_width="64em",
            width="100%",
        ),
        open=State.detail_open,
        on_open_change=State.set_detail_open,
    )


def index() -> rx.Component:
    return rx.box(
        header(),
        rx.container(
            rx.center(ingredient_input()),
            rx.cond(State.is_loading, loading_spinner("Finding delicious recipes...")),
            rx.cond(State.error != "", rx.text(State.error, style=style.error_style)),
            rx.cond(State.show_welcome, welcome()),
            rx.cond(State.has_recipes, recipe_grid()),
            size="4",
            padding="2em",
        ),
        recipe_detail_modal(),
        style=style.page_style,
    )


# Fails with ConfigurationError when the API credential is missing, so the app never starts without it.
get_recipe_service()

app = rx.App()
app.add_page(index, title="CookMate AI", on_load=State.load_theme)
