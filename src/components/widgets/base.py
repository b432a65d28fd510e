"""
Base widget classes and configuration models.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from dash import html

# Get module logger
logger = logging.getLogger(__name__)


@dataclass
class WidgetConfig:
    """
    Configuration model for a roster page widget.

    Attributes:
        id: Unique identifier for the widget wrapper
        title: Display title for the widget
        widget_type: Registered widget type ('player_list', 'player_details', ...)
        styles: CSS styles to apply to the widget wrapper
        properties: Additional widget properties
    """

    id: str
    title: str
    widget_type: str
    styles: Dict[str, Any] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "WidgetConfig":
        """
        Build a config from a page YAML widget entry.

        Raises:
            ValueError: If the entry has no 'id' or 'type'
        """
        for key in ("id", "type"):
            if not config_dict.get(key):
                raise ValueError(f"Missing required key '{key}' in widget config")

        return cls(
            id=config_dict["id"],
            title=config_dict.get("title", ""),
            widget_type=config_dict["type"],
            styles=config_dict.get("styles") or {},
            properties=config_dict.get("properties") or {},
        )


class BaseWidget(ABC):
    """
    Abstract base class for all roster widgets.

    A widget renders the static container its callbacks write into. The
    container content itself is produced by pure render functions so that
    it can be rebuilt from fresh data on every callback.
    """

    def __init__(self, config: WidgetConfig):
        self.config = config
        logger.debug(f"Initialized BaseWidget: id='{config.id}'")

    @abstractmethod
    def render(self) -> html.Div:
        """
        Render widget as Dash components.

        Returns:
            html.Div: Complete widget structure, ready to be placed in the page
        """

    def _tile(self, body, class_name: str) -> html.Div:
        """Wrap widget body in the standard titled tile."""
        children = []
        if self.config.title:
            children.append(html.H2(self.config.title, className="tile-header"))
        children.append(body)

        return html.Div(
            children,
            id=self.config.id,
            className=f"tile {class_name}",
            style=self.config.styles,
        )
