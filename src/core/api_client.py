"""HTTP client for the players API.

Every call performs exactly one request and returns an `ApiResult`. Status,
transport and payload problems are raised internally as `RequestFailure`
and handed back inside the result, so nothing escapes to the caller.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

import requests

from src.core.config import RosterSettings
from src.core.models import NewPlayer, Player

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a request failed."""

    NOT_FOUND = "not_found"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    INVALID_RESPONSE = "invalid_response"


class RequestFailure(Exception):
    """A failed request against the players API."""

    def __init__(
        self, kind: FailureKind, message: str, status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int) -> "RequestFailure":
        if status_code == 404:
            kind = FailureKind.NOT_FOUND
        elif 400 <= status_code < 500:
            kind = FailureKind.CLIENT_ERROR
        else:
            kind = FailureKind.SERVER_ERROR
        return cls(kind, f"HTTP error! status: {status_code}", status_code)

    def __repr__(self) -> str:
        return (
            f"RequestFailure(kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Either a value or a `RequestFailure`, never both."""

    value: Optional[T] = None
    failure: Optional[RequestFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def error(cls, failure: RequestFailure) -> "ApiResult[T]":
        return cls(failure=failure)


class PlayerApiClient:
    """
    Thin client for the cohort-scoped players endpoints.

    Endpoints:
    - GET    {base_url}/players       -> {"data": {"players": [...]}}
    - GET    {base_url}/players/{id}  -> {"data": {"player": {...}}}
    - POST   {base_url}/players       -> {"data": {"player": {...}}}
    - DELETE {base_url}/players/{id}  -> body not interpreted
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Cohort base URL, without the ``/players`` suffix
            session: HTTP session to reuse (a new one is created otherwise)
            timeout: Per-request timeout in seconds, None to wait indefinitely
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

        logger.info(f"[PlayerApiClient] Initialized for {self.base_url}")

    @classmethod
    def from_settings(
        cls, settings: RosterSettings, session: Optional[requests.Session] = None
    ) -> "PlayerApiClient":
        return cls(settings.base_url, session=session, timeout=settings.request_timeout)

    def _url(self, player_id: Any = None) -> str:
        if player_id is None:
            return f"{self.base_url}/players"
        return f"{self.base_url}/players/{player_id}"

    def _request(
        self, method: str, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        logger.debug(f"[PlayerApiClient] {method} {url}")

        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise RequestFailure(FailureKind.NETWORK, f"Request failed: {e}") from e

        if not response.ok:
            raise RequestFailure.from_status(response.status_code)

        return response

    @staticmethod
    def _envelope(response: requests.Response, key: str) -> Any:
        """Extract ``data.<key>`` from a JSON response body."""
        try:
            body = response.json()
        except ValueError as e:
            raise RequestFailure(
                FailureKind.INVALID_RESPONSE,
                "Response body is not valid JSON",
                response.status_code,
            ) from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict) or key not in data:
            raise RequestFailure(
                FailureKind.INVALID_RESPONSE,
                f"Response is missing 'data.{key}'",
                response.status_code,
            )
        return data[key]

    @staticmethod
    def _parse_player(record: Any, status_code: int) -> Player:
        try:
            return Player.from_api(record)
        except ValueError as e:
            raise RequestFailure(
                FailureKind.INVALID_RESPONSE, str(e), status_code
            ) from e

    def list_players(self) -> ApiResult[List[Player]]:
        """Fetch every player of the cohort, in server order."""
        try:
            response = self._request("GET", self._url())
            records = self._envelope(response, "players")
            if not isinstance(records, list):
                raise RequestFailure(
                    FailureKind.INVALID_RESPONSE,
                    "'data.players' is not a list",
                    response.status_code,
                )
            players = [self._parse_player(r, response.status_code) for r in records]
        except RequestFailure as failure:
            return ApiResult.error(failure)

        logger.debug(f"[PlayerApiClient] Fetched {len(players)} players")
        return ApiResult.success(players)

    def get_player(self, player_id: Any) -> ApiResult[Player]:
        """Fetch a single player by id."""
        try:
            response = self._request("GET", self._url(player_id))
            player = self._parse_player(
                self._envelope(response, "player"), response.status_code
            )
        except RequestFailure as failure:
            return ApiResult.error(failure)
        return ApiResult.success(player)

    def create_player(self, new_player: NewPlayer) -> ApiResult[Player]:
        """Create a player and return the server's copy of it."""
        try:
            response = self._request("POST", self._url(), new_player.to_payload())
            player = self._parse_player(
                self._envelope(response, "player"), response.status_code
            )
        except RequestFailure as failure:
            return ApiResult.error(failure)
        return ApiResult.success(player)

    def delete_player(self, player_id: Any) -> ApiResult[None]:
        """Delete a player; the response body is ignored."""
        try:
            self._request("DELETE", self._url(player_id))
        except RequestFailure as failure:
            return ApiResult.error(failure)
        return ApiResult.success()
