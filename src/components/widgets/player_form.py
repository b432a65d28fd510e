"""
New player form widget.
"""
import logging
from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import html

from src.core.models import NewPlayer

from .base import BaseWidget, WidgetConfig
from .registry import register_widget

logger = logging.getLogger(__name__)

FORM_ID = "new-player-form"
NAME_INPUT_ID = "new-player-name"
BREED_INPUT_ID = "new-player-breed"
IMAGE_INPUT_ID = "new-player-image"


def _field(label: str, input_id: str, input_type: str, placeholder: str) -> html.Div:
    return html.Div(
        [
            dbc.Label(label, html_for=input_id),
            dbc.Input(
                id=input_id,
                name=input_id,
                type=input_type,
                placeholder=placeholder,
                required=True,
                value="",
            ),
        ],
        className="mb-2",
    )


def render_new_player_form() -> List:
    """Build the inputs and submit button of the creation form."""
    return [
        _field("Name", NAME_INPUT_ID, "text", "Puppy Name"),
        _field("Breed", BREED_INPUT_ID, "text", "Puppy Breed"),
        _field("Image URL", IMAGE_INPUT_ID, "url", "Puppy Image"),
        dbc.Button("Add New Player", type="submit", color="primary"),
    ]


def build_player_payload(
    name: Optional[str], breed: Optional[str], image_url: Optional[str]
) -> NewPlayer:
    """Turn the current input values into a creation payload, as entered."""
    return NewPlayer(
        name=name or "",
        breed=breed or "",
        image_url=image_url or "",
    )


@register_widget("new_player_form")
class NewPlayerFormWidget(BaseWidget):
    """Creation form; submission is handled by the roster callbacks."""

    def __init__(self, config: WidgetConfig):
        super().__init__(config)
        logger.info(f"[NewPlayerFormWidget] Initialized '{config.id}'")

    def render(self) -> html.Div:
        return self._tile(
            dbc.Form(
                render_new_player_form(),
                id=FORM_ID,
                prevent_default_on_submit=True,
            ),
            "new-player-tile",
        )
