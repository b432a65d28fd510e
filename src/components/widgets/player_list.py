"""
Player list widget.

Renders the roster as one card per player. Each card carries a "details"
and a "remove" button whose ids are pattern-matching dicts, so a single
callback handles every card no matter how often the list is re-rendered.
"""
import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from dash import dcc, html

from src.core.models import Player

from .base import BaseWidget, WidgetConfig
from .registry import register_widget

logger = logging.getLogger(__name__)

PLAYERS_CONTAINER_ID = "players-list"
REMOVE_CONFIRM_ID = "remove-player-confirm"
DETAILS_BUTTON_TYPE = "player-details"
REMOVE_BUTTON_TYPE = "player-remove"

EMPTY_MESSAGE = "No players found!"
REMOVE_CONFIRM_MESSAGE = "Are you sure you want to remove this player?"


def details_button_id(player_id: int) -> dict:
    return {"type": DETAILS_BUTTON_TYPE, "index": player_id}


def remove_button_id(player_id: int) -> dict:
    return {"type": REMOVE_BUTTON_TYPE, "index": player_id}


def render_player_card(player: Union[Player, Mapping[str, Any]]) -> html.Div:
    """Build the summary card of one player (a Player or a raw API record)."""
    player = Player.coerce(player)
    return html.Div(
        [
            html.H2(player.name),
            html.P(f"Player ID: {player.id}"),
            html.Img(src=player.image_url, alt=player.name, className="player-image"),
            html.Div(
                [
                    html.Button(
                        "See Puppy Details",
                        id=details_button_id(player.id),
                        className="dtlBtn",
                        n_clicks=0,
                    ),
                    html.Button(
                        "Remove Puppy",
                        id=remove_button_id(player.id),
                        className="rmvBtn",
                        n_clicks=0,
                    ),
                ],
                className="player-card-actions",
            ),
        ],
        className="player-card",
    )


def render_all_players(
    players: Optional[Sequence[Union[Player, Mapping[str, Any]]]]
) -> List:
    """
    Build the full content of the players container.

    The result replaces the container's children entirely; an absent or
    empty list renders the "no players" message instead of cards.

    Args:
        players: Players (or raw API records) in display order, or None when
            the fetch failed

    Returns:
        List: Dash components for the container
    """
    if not players:
        return [html.P(EMPTY_MESSAGE, className="players-empty")]

    logger.debug(f"[PlayerList] Rendering {len(players)} player cards")
    return [render_player_card(player) for player in players]


@register_widget("player_list")
class PlayerListWidget(BaseWidget):
    """Roster list: the `<main>` container plus the removal confirmation."""

    def __init__(self, config: WidgetConfig, confirm_message: str = REMOVE_CONFIRM_MESSAGE):
        super().__init__(config)
        self.confirm_message = confirm_message

    def render(self) -> html.Div:
        return self._tile(
            html.Div(
                [
                    html.Main(id=PLAYERS_CONTAINER_ID, className="players-grid"),
                    dcc.ConfirmDialog(
                        id=REMOVE_CONFIRM_ID, message=self.confirm_message
                    ),
                ]
            ),
            "player-list-tile",
        )
