"""
Widget Registry for plug-and-play widget management.

This module provides a centralized registry for registering widget types
and creating them from page configuration.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from .base import BaseWidget, WidgetConfig

# Get module logger
logger = logging.getLogger(__name__)


class WidgetRegistry:
    """
    Registry for managing widget types.

    Attributes:
        _widget_types: Dictionary mapping widget type names to their classes
        _default_configs: Dictionary mapping widget type names to default kwargs
    """

    _widget_types: Dict[str, Type[BaseWidget]] = {}
    _default_configs: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        widget_type: str,
        widget_class: Type[BaseWidget],
        default_config: Optional[Dict[str, Any]] = None,
    ):
        """
        Register a widget type in the registry.

        Args:
            widget_type: Unique identifier for the widget type
            widget_class: Widget class to register
            default_config: Default keyword arguments for this widget type

        Raises:
            ValueError: If widget_type is already registered
        """
        if widget_type in cls._widget_types:
            raise ValueError(f"Widget type '{widget_type}' is already registered")

        cls._widget_types[widget_type] = widget_class
        cls._default_configs[widget_type] = default_config or {}

        logger.info(
            f"✅ Registered widget type: '{widget_type}' -> {widget_class.__name__}"
        )

    @classmethod
    def unregister(cls, widget_type: str):
        """Unregister a widget type from the registry."""
        if widget_type in cls._widget_types:
            del cls._widget_types[widget_type]
            cls._default_configs.pop(widget_type, None)
            logger.info(f"🗑️ Unregistered widget type: '{widget_type}'")

    @classmethod
    def create(cls, widget_config: WidgetConfig, **kwargs) -> BaseWidget:
        """
        Create a widget instance from its configuration.

        Args:
            widget_config: Widget configuration (its widget_type selects the class)
            **kwargs: Overrides for the type's default configuration

        Returns:
            BaseWidget: Instance of the requested widget

        Raises:
            ValueError: If the widget type is not registered
        """
        widget_type = widget_config.widget_type
        if widget_type not in cls._widget_types:
            raise ValueError(
                f"Widget type '{widget_type}' is not registered. "
                f"Available types: {cls.get_available_types()}"
            )

        widget_class = cls._widget_types[widget_type]
        config = {**cls._default_configs.get(widget_type, {}), **widget_config.properties, **kwargs}

        logger.debug(f"Creating widget '{widget_config.id}' of type '{widget_type}'")
        return widget_class(widget_config, **config)

    @classmethod
    def get_available_types(cls) -> List[str]:
        return list(cls._widget_types.keys())

    @classmethod
    def has_widget_type(cls, widget_type: str) -> bool:
        return widget_type in cls._widget_types


def register_widget(widget_type: str, default_config: Optional[Dict[str, Any]] = None):
    """
    Decorator to register a widget class.

    Args:
        widget_type: Unique identifier for the widget type
        default_config: Default keyword arguments for this widget type
    """

    def decorator(widget_class):
        WidgetRegistry.register(widget_type, widget_class, default_config)
        return widget_class

    return decorator
