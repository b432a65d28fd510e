"""Roster operations used by the UI.

These wrap `PlayerApiClient` with the application's error policy: a failed
request is logged once and reported to the caller as ``None``. Callbacks
never see an exception from the API layer.
"""
import logging
import threading
from typing import Any, List, Mapping, Optional, Union

from src.core.api_client import PlayerApiClient
from src.core.config import load_settings
from src.core.models import NewPlayer, Player

logger = logging.getLogger(__name__)

_client: Optional[PlayerApiClient] = None
_client_lock = threading.Lock()


def get_api_client() -> PlayerApiClient:
    """Return the process-wide client, building it from settings on first use."""
    global _client
    with _client_lock:
        if _client is None:
            logger.info("🔄 [RosterService] Creating API client from settings...")
            _client = PlayerApiClient.from_settings(load_settings())
        return _client


def configure_api_client(client: Optional[PlayerApiClient]):
    """Replace the process-wide client (None resets to lazy creation)."""
    global _client
    with _client_lock:
        _client = client


def fetch_all_players(client: Optional[PlayerApiClient] = None) -> Optional[List[Player]]:
    """
    Fetch all players.

    Returns:
        List[Player] or None: Players in server order, None if the request failed
    """
    result = (client or get_api_client()).list_players()
    if not result.ok:
        logger.error(f"❌ Uh oh, trouble fetching players! {result.failure!r}")
        return None
    return result.value


def fetch_single_player(
    player_id: Any, client: Optional[PlayerApiClient] = None
) -> Optional[Player]:
    """Fetch one player by id, None if the request failed."""
    result = (client or get_api_client()).get_player(player_id)
    if not result.ok:
        logger.error(
            f"❌ Oh no, trouble fetching player #{player_id}! {result.failure!r}"
        )
        return None
    return result.value


def add_new_player(
    player: Union[NewPlayer, Mapping[str, Any]],
    client: Optional[PlayerApiClient] = None,
) -> Optional[Player]:
    """
    Add a player to the roster.

    Args:
        player: A NewPlayer, or a mapping with name, breed and imageUrl
        client: API client (defaults to the process-wide one)

    Returns:
        Player or None: The created player as returned by the API
    """
    if not isinstance(player, NewPlayer):
        player = NewPlayer.from_mapping(player)

    result = (client or get_api_client()).create_player(player)
    if not result.ok:
        logger.error(
            f"❌ Oops, something went wrong with adding that player! {result.failure!r}"
        )
        return None

    logger.info(f"✅ [RosterService] Added player #{result.value.id} ({result.value.name})")
    return result.value


def remove_player(player_id: Any, client: Optional[PlayerApiClient] = None) -> None:
    """Remove a player from the roster. Outcome is only logged."""
    result = (client or get_api_client()).delete_player(player_id)
    if not result.ok:
        logger.error(
            f"❌ Whoops, trouble removing player #{player_id} from the roster! "
            f"{result.failure!r}"
        )
        return
    logger.info(f"✅ Player #{player_id} has been removed!")
