"""
Widget components for the roster page.

Importing this package registers every widget type with `WidgetRegistry`
so pages can create them from configuration.
"""
import logging

from .base import BaseWidget, WidgetConfig
from .player_details import PlayerDetailsWidget, render_single_player
from .player_form import NewPlayerFormWidget, build_player_payload, render_new_player_form
from .player_list import PlayerListWidget, render_all_players
from .registry import WidgetRegistry, register_widget

# Get module logger
logger = logging.getLogger("roster.widgets")

__all__ = [
    # Base classes
    "BaseWidget",
    "WidgetConfig",
    # Widget implementations
    "PlayerListWidget",
    "PlayerDetailsWidget",
    "NewPlayerFormWidget",
    # Pure renderers
    "render_all_players",
    "render_single_player",
    "render_new_player_form",
    "build_player_payload",
    # plug-and-play system
    "WidgetRegistry",
    "register_widget",
]

logger.debug(f"Available widget types: {WidgetRegistry.get_available_types()}")
