"""
Base class for configuration-driven pages.

This module provides a reusable base class for creating pages from YAML
configuration files, with widget creation through the widget registry and
layout generation.
"""
import logging
import os
from typing import Any, Dict, Optional

import yaml
from dash import html

# Importing the package registers the widget types
from src.components.widgets import WidgetConfig, WidgetRegistry

# Get module logger
logger = logging.getLogger(__name__)


class PageBase:
    """
    Base class for configuration-driven pages.

    This class handles:
    - Loading configuration from YAML files
    - Creating widgets from configuration
    - Generating the page layout

    Subclasses should define:
    - page_id: Unique page identifier
    - title: Page display title
    """

    def __init__(
        self,
        page_id: str,
        title: str,
        config_path: Optional[str] = None,
    ):
        """
        Initialize a configuration-driven page.

        Args:
            page_id: Unique identifier for the page
            title: Display title for the page
            config_path: Path to configuration file (defaults to pages/{page_id}/config.yaml)
        """
        self.page_id = page_id
        self.title = title
        self.config_path = config_path or self._get_default_config_path()
        self.widgets: Dict[str, Any] = {}
        self._config = None

        logger.info(f"[PageBase:{self.page_id}] Initialized page '{title}'")

    def _get_default_config_path(self) -> str:
        current_dir = os.path.dirname(os.path.abspath(__file__))
        return os.path.join(current_dir, self.page_id, "config.yaml")

    def _load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load page configuration from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Dict[str, Any]: Page configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        path = config_path or self.config_path

        logger.info(f"[PageBase:{self.page_id}] Loading configuration from: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if not isinstance(config, dict):
                raise ValueError("Configuration must be a mapping")
            if "page" not in config:
                raise ValueError("Configuration missing 'page' section")
            if "widgets" not in config:
                raise ValueError("Configuration missing 'widgets' section")

            # Override page config from YAML if present
            if "id" in config["page"]:
                self.page_id = config["page"]["id"]
            if "title" in config["page"]:
                self.title = config["page"]["title"]

            self._config = config
            logger.info(f"[PageBase:{self.page_id}] Configuration loaded successfully")

            return config

        except FileNotFoundError:
            logger.error(
                f"[PageBase:{self.page_id}] Configuration file not found: {path}"
            )
            raise
        except yaml.YAMLError as e:
            logger.error(
                f"[PageBase:{self.page_id}] Invalid YAML in configuration: {e}"
            )
            raise

    def _create_widgets_from_config(self):
        """Create widget instances from configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded. Call _load_config() first.")

        logger.info(f"[PageBase:{self.page_id}] Creating widgets from configuration...")

        for widget_dict in self._config["widgets"]:
            widget_config = WidgetConfig.from_dict(widget_dict)
            self.widgets[widget_config.id] = WidgetRegistry.create(widget_config)
            logger.debug(
                f"[PageBase:{self.page_id}] Created widget: {widget_config.id}"
            )

        logger.info(
            f"[PageBase:{self.page_id}] Created {len(self.widgets)} widgets successfully"
        )

    def _generate_layout_from_config(self) -> html.Div:
        """
        Generate page layout from the created widgets, in configuration order.

        Returns:
            html.Div: Complete page layout
        """
        if not self.widgets:
            raise RuntimeError(
                "No widgets created. Call _create_widgets_from_config() first."
            )

        rendered_widgets = [widget.render() for widget in self.widgets.values()]

        logger.info(
            f"[PageBase:{self.page_id}] Generated layout with {len(rendered_widgets)} widgets"
        )

        return html.Div(
            [
                html.Div(
                    [html.H2(self.title, className="page-title")],
                    className="page-title-bar",
                ),
                html.Div(rendered_widgets, className="page-body"),
            ],
            id=f"{self.page_id}-page",
            className="page",
        )

    def build(self) -> html.Div:
        """
        Build the page layout using configuration-driven approach.

        Returns:
            html.Div: The complete Dash layout for the page, or an error
            layout if the configuration could not be used.
        """
        logger.info(f"[PageBase:{self.page_id}] Building page")

        try:
            self._load_config()
            self._create_widgets_from_config()
            layout = self._generate_layout_from_config()

            logger.info(f"[PageBase:{self.page_id}] Page built successfully")
            return layout

        except (OSError, ValueError, RuntimeError, yaml.YAMLError) as e:
            logger.error(
                f"[PageBase:{self.page_id}] Failed to build page: {e}", exc_info=True
            )
            return self._build_error_layout(str(e))

    def _build_error_layout(self, error_message: str) -> html.Div:
        """
        Build an error layout when configuration fails.

        Args:
            error_message: Error message to display

        Returns:
            html.Div: Error layout
        """
        return html.Div(
            [
                html.Div(
                    [html.H2(self.title, className="page-title")],
                    className="page-title-bar",
                ),
                html.Div(
                    [
                        html.H3("Configuration Error", className="text-danger"),
                        html.P(
                            "Failed to load page configuration. "
                            "Please check the configuration file."
                        ),
                        html.Pre(error_message, className="config-error"),
                    ],
                    className="page-body",
                ),
            ],
            id=f"{self.page_id}-page",
            className="page",
        )
