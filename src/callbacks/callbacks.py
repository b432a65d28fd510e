"""Roster callbacks.

User actions are wired as sequential chains: a mutation (submit / confirmed
removal) calls the roster service and bumps the `roster-refresh` store, and
the refresh callback re-fetches and re-renders the whole list. The initial
page load fires the refresh callback too, which performs the first fetch.
"""
import logging
from typing import Any, List, Optional, Tuple

import dash
from dash import ALL, Input, Output, State
from dash.exceptions import PreventUpdate

from src.components.widgets.player_details import (
    DETAILS_CONTAINER_ID,
    MODAL_CLOSE_ID,
    MODAL_ID,
    render_single_player,
)
from src.components.widgets.player_form import (
    BREED_INPUT_ID,
    FORM_ID,
    IMAGE_INPUT_ID,
    NAME_INPUT_ID,
    build_player_payload,
)
from src.components.widgets.player_list import (
    DETAILS_BUTTON_TYPE,
    PLAYERS_CONTAINER_ID,
    REMOVE_BUTTON_TYPE,
    REMOVE_CONFIRM_ID,
    render_all_players,
)
from src.core import roster_service
from src.core.api_client import PlayerApiClient

logger = logging.getLogger(__name__)

REFRESH_STORE_ID = "roster-refresh"
PENDING_REMOVAL_STORE_ID = "pending-removal"


# ---------------------------------------------------------------------------
# Controllers (plain functions, called by the Dash callbacks below)
# ---------------------------------------------------------------------------
def clicked_player_id(triggered_id: Any, value: Any, button_type: str) -> Optional[int]:
    """
    Resolve which card button was actually clicked.

    Re-rendering the list mounts fresh buttons with ``n_clicks=0``, which
    still fires pattern-matching callbacks; those are filtered out here.
    """
    if not isinstance(triggered_id, dict) or triggered_id.get("type") != button_type:
        return None
    if not value:
        return None
    return triggered_id.get("index")


def next_refresh_token(current: Optional[int]) -> int:
    return (current or 0) + 1


def load_roster(client: Optional[PlayerApiClient] = None) -> List:
    """Fetch the full roster and build the list container's content."""
    players = roster_service.fetch_all_players(client)
    return render_all_players(players)


def open_player_details(
    player_id: Any, client: Optional[PlayerApiClient] = None
) -> Optional[Tuple[List, bool]]:
    """
    Fetch one player for the details modal.

    Returns:
        (children, is_open) or None if the player could not be fetched
    """
    player = roster_service.fetch_single_player(player_id, client)
    if player is None:
        return None
    return render_single_player(player), True


def confirm_removal(player_id: Any, client: Optional[PlayerApiClient] = None):
    """Remove a confirmed player; the caller refreshes the list afterwards."""
    logger.info(f"[RosterCallbacks] Removal confirmed for player #{player_id}")
    roster_service.remove_player(player_id, client)


def submit_new_player(
    name: Optional[str],
    breed: Optional[str],
    image_url: Optional[str],
    client: Optional[PlayerApiClient] = None,
):
    """Create a player from the form values; the caller refreshes the list."""
    payload = build_player_payload(name, breed, image_url)
    return roster_service.add_new_player(payload, client)


# ---------------------------------------------------------------------------
# Dash wiring
# ---------------------------------------------------------------------------
def register_callbacks(app):
    """Register the roster callbacks on the Dash app."""

    @app.callback(
        Output(PLAYERS_CONTAINER_ID, "children"),
        Input(REFRESH_STORE_ID, "data"),
    )
    def refresh_player_list(_refresh_token):
        """Re-fetch and fully re-render the roster."""
        return load_roster()

    @app.callback(
        Output(DETAILS_CONTAINER_ID, "children"),
        Output(MODAL_ID, "is_open"),
        Input({"type": DETAILS_BUTTON_TYPE, "index": ALL}, "n_clicks"),
        Input(MODAL_CLOSE_ID, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_player_details(_details_clicks, close_clicks):
        """Open the modal on a details click, hide it on the close control."""
        ctx = dash.callback_context
        if not ctx.triggered:
            raise PreventUpdate

        if ctx.triggered_id == MODAL_CLOSE_ID:
            if not close_clicks:
                raise PreventUpdate
            return dash.no_update, False

        player_id = clicked_player_id(
            ctx.triggered_id, ctx.triggered[0]["value"], DETAILS_BUTTON_TYPE
        )
        if player_id is None:
            raise PreventUpdate

        opened = open_player_details(player_id)
        if opened is None:
            # Failed fetch: leave the detail region as it is
            return dash.no_update, dash.no_update
        return opened

    @app.callback(
        Output(REMOVE_CONFIRM_ID, "displayed"),
        Output(PENDING_REMOVAL_STORE_ID, "data"),
        Input({"type": REMOVE_BUTTON_TYPE, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def request_removal(_remove_clicks):
        """Ask for confirmation before removing the clicked player."""
        ctx = dash.callback_context
        if not ctx.triggered:
            raise PreventUpdate

        player_id = clicked_player_id(
            ctx.triggered_id, ctx.triggered[0]["value"], REMOVE_BUTTON_TYPE
        )
        if player_id is None:
            raise PreventUpdate

        logger.debug(f"[RosterCallbacks] Asking to confirm removal of #{player_id}")
        return True, player_id

    @app.callback(
        Output(REFRESH_STORE_ID, "data", allow_duplicate=True),
        Input(REMOVE_CONFIRM_ID, "submit_n_clicks"),
        State(PENDING_REMOVAL_STORE_ID, "data"),
        State(REFRESH_STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def remove_confirmed_player(submit_clicks, player_id, refresh_token):
        """Remove the pending player, then trigger a full list refresh."""
        if not submit_clicks or player_id is None:
            raise PreventUpdate

        confirm_removal(player_id)
        return next_refresh_token(refresh_token)

    @app.callback(
        Output(REFRESH_STORE_ID, "data", allow_duplicate=True),
        Output(NAME_INPUT_ID, "value"),
        Output(BREED_INPUT_ID, "value"),
        Output(IMAGE_INPUT_ID, "value"),
        Input(FORM_ID, "n_submit"),
        State(NAME_INPUT_ID, "value"),
        State(BREED_INPUT_ID, "value"),
        State(IMAGE_INPUT_ID, "value"),
        State(REFRESH_STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def submit_player_form(n_submit, name, breed, image_url, refresh_token):
        """Create the player, refresh the list and clear the form."""
        if not n_submit:
            raise PreventUpdate

        submit_new_player(name, breed, image_url)
        return next_refresh_token(refresh_token), "", "", ""

    logger.info("✅ Roster callbacks registered")
