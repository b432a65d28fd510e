"""
Roster page using the configuration-driven page system.
"""
import logging
from typing import Optional

from src.pages.base import PageBase

# Get module logger
logger = logging.getLogger(__name__)


class RosterPage(PageBase):
    """
    Roster page: creation form, player list and details modal.
    """

    def __init__(self, config_path: Optional[str] = None):
        super().__init__(
            page_id="roster",
            title="Puppy Bowl Roster",
            config_path=config_path,
        )


def create_roster_page(config_path: Optional[str] = None) -> RosterPage:
    """
    Factory function to create a RosterPage instance.

    Returns:
        RosterPage: A new instance of the RosterPage class
    """
    return RosterPage(config_path=config_path)
