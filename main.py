"""Web application layout and entry point for the Puppy Bowl roster."""
from typing import Optional

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html

from src.callbacks import register_all_callbacks
from src.callbacks.callbacks import PENDING_REMOVAL_STORE_ID, REFRESH_STORE_ID
from src.core import roster_service
from src.core.api_client import PlayerApiClient
from src.core.config import RosterSettings, load_settings
from src.core.logging_config import logger
from src.pages.roster import create_roster_page


def initialize_application(settings: Optional[RosterSettings] = None) -> RosterSettings:
    """Resolve settings and point the roster service at the cohort's API.

    No request is made here: the first fetch happens when the page loads and
    the list refresh callback fires.
    """
    logger.info("🚀 Initialization of application...")

    settings = settings or load_settings()
    roster_service.configure_api_client(PlayerApiClient.from_settings(settings))

    logger.info(f"✅ Application initialized for cohort '{settings.cohort_name}'")
    logger.info(f"🌐 Players API: {settings.base_url}/players")
    return settings


# Initialize now
settings = initialize_application()

app = dash.Dash(
    __name__,
    title="Puppy Bowl Roster",
    external_stylesheets=[dbc.themes.BOOTSTRAP],
)
server = app.server


# ----------------------
# Header / footer
# ----------------------
header = html.Header(
    html.Div(
        [
            html.H1("🐶 Puppy Bowl", className="header-title"),
            html.Span(f"Cohort {settings.cohort_name}", className="header-cohort"),
        ],
        className="header-inner",
    ),
    className="header",
)

footer = html.Footer("Puppy Bowl roster manager", className="footer")


# ----------------------
# App layout
# ----------------------
roster_page = create_roster_page().build()

app.layout = html.Div(
    [
        header,
        html.Div(roster_page, id="page-content", className="content"),
        # Stores used by the roster callbacks:
        # - `roster-refresh`: bumped after every mutation, triggers a full re-fetch.
        dcc.Store(id=REFRESH_STORE_ID, data=0),
        # - `pending-removal`: id of the player awaiting removal confirmation.
        dcc.Store(id=PENDING_REMOVAL_STORE_ID),
        footer,
    ],
    className="app-root",
)

register_all_callbacks(app)


# Run
if __name__ == "__main__":
    app.run(
        debug=settings.debug,
        host=settings.host,
        port=settings.port,
    )
