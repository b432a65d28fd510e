"""
Roster data model.

Players and teams are owned by the remote API; these classes are read-only
snapshots parsed from its JSON payloads.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Team:
    """A team a player may be assigned to."""

    name: str
    id: Optional[int] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Team":
        return cls(name=str(data.get("name") or ""), id=data.get("id"))


@dataclass(frozen=True)
class Player:
    """
    A roster entry as returned by the players API.

    Attributes:
        id: Server-assigned identifier
        name: Player name
        breed: Breed of the puppy
        image_url: Picture URL (``imageUrl`` on the wire)
        team: Assigned team, if any
        status: Field/bench status reported by the API
        team_id: Raw team reference (``teamId``)
        cohort_id: Owning cohort (``cohortId``)
    """

    id: int
    name: str
    breed: str = ""
    image_url: str = ""
    team: Optional[Team] = None
    status: Optional[str] = None
    team_id: Optional[int] = None
    cohort_id: Optional[int] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Player":
        """
        Build a Player from an API record.

        Raises:
            ValueError: If the record is not a mapping or has no usable id
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Player record must be an object, got {type(data).__name__}")

        try:
            player_id = int(data["id"])
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Player record has no valid id: {data!r}")

        team = data.get("team")
        return cls(
            id=player_id,
            name=str(data.get("name") or ""),
            breed=str(data.get("breed") or ""),
            image_url=str(data.get("imageUrl") or ""),
            team=Team.from_api(team) if isinstance(team, Mapping) else None,
            status=data.get("status"),
            team_id=data.get("teamId"),
            cohort_id=data.get("cohortId"),
        )

    @classmethod
    def coerce(cls, value: Union["Player", Mapping[str, Any]]) -> "Player":
        """Return ``value`` as a Player, parsing plain API records."""
        if isinstance(value, Player):
            return value
        return cls.from_api(value)

    @property
    def team_name(self) -> str:
        """Team name, or ``"Unassigned"`` when the player has no team."""
        return self.team.name if self.team else "Unassigned"


@dataclass(frozen=True)
class NewPlayer:
    """Payload for creating a player."""

    name: str
    breed: str
    image_url: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NewPlayer":
        """Accept either wire (``imageUrl``) or Python (``image_url``) keys."""
        return cls(
            name=str(data.get("name") or ""),
            breed=str(data.get("breed") or ""),
            image_url=str(data.get("imageUrl") or data.get("image_url") or ""),
        )

    def to_payload(self) -> Dict[str, str]:
        return {"name": self.name, "breed": self.breed, "imageUrl": self.image_url}
