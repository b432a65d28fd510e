"""
Roster page module.

This module exports the roster page components for use in the main application.
"""
from .page import RosterPage, create_roster_page

__all__ = [
    "RosterPage",
    "create_roster_page",
]
