"""
Player details widget.

Shows one player's extended information inside a modal overlay. The modal is
dismissed by its close control or by clicking the backdrop; dismissing only
hides it, the rendered details stay mounted until the next player is shown.
"""
import logging
from typing import Any, List, Mapping, Union

import dash_bootstrap_components as dbc
from dash import html

from src.core.models import Player

from .base import BaseWidget, WidgetConfig
from .registry import register_widget

logger = logging.getLogger(__name__)

DETAILS_CONTAINER_ID = "playerDetails"
MODAL_ID = "playerModal"
MODAL_CLOSE_ID = "playerModal-close"


def render_single_player(player: Union[Player, Mapping[str, Any]]) -> List:
    """Build the detail view of one player (a Player or a raw API record)."""
    player = Player.coerce(player)
    children = [
        html.H2(player.name),
        html.P(f"Player ID: {player.id}"),
        html.P(f"Breed: {player.breed}"),
        html.P(f"Team: {player.team_name}", className="player-team"),
    ]
    if player.status:
        children.append(html.P(f"Status: {player.status}"))
    children.append(html.Img(src=player.image_url, alt=player.name, className="player-image"))
    return children


@register_widget("player_details")
class PlayerDetailsWidget(BaseWidget):
    """Modal holding the details container."""

    def __init__(self, config: WidgetConfig, size: str = "lg"):
        super().__init__(config)
        self.size = size

    def render(self) -> html.Div:
        modal = dbc.Modal(
            [
                dbc.ModalHeader(dbc.ModalTitle(self.config.title), close_button=False),
                dbc.ModalBody(html.Div(id=DETAILS_CONTAINER_ID)),
                dbc.ModalFooter(
                    html.Button("×", id=MODAL_CLOSE_ID, className="close", n_clicks=0)
                ),
            ],
            id=MODAL_ID,
            is_open=False,
            centered=True,
            backdrop=True,
            size=self.size,
        )
        return html.Div(modal, id=self.config.id, className="player-details-tile")
