"""Player data class."""

# Mexicano Pairing
# Copyright (C) 2025  Mexicano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set

from mexicanopairing.constants import DEFAULT_RATING
from mexicanopairing.exceptions import InvalidPlayerDataException
from mexicanopairing.models.enums import Gender, PlayerStatus


@dataclass
class Player:
    """
    Session player as supplied by the application each round.

    Identity and attendance are owned by the caller; the running statistics
    are mutated between rounds by the scoring layer. The pairing pipeline
    only reads a player, it never writes to one.

    Attributes
    ----------
    id : str
        Unique identifier, stable across rounds.
    name : str
        Display name.
    rating : float
        Skill estimate used for seeding courts.
    gender : Gender
        Only consulted for mixed doubles.
    status : PlayerStatus
        Attendance status; only ``ACTIVE`` players are scheduled.
    skip_rounds : set of int
        Round numbers the player has opted out of.
    partner_id : str or None
        Id of the fixed partner. The relation is symmetric.
    total_points : float
        Points scored so far; ranks fixed pairs.
    wins, losses, ties : int
        Match outcomes so far.
    play_count, sit_count : int
        Rounds played and rounds sat out, as tracked by the application.
    compensation_points : float
        Bonus awarded for sitting out, consumed by scoring.

    Examples
    --------
    Creating a player::

        player = Player(id="p-001", name="Ana", rating=6.5, gender="female")
    """

    id: str
    name: str = ""
    rating: float = DEFAULT_RATING
    gender: Gender = Gender.UNSPECIFIED
    status: PlayerStatus = PlayerStatus.ACTIVE
    skip_rounds: Set[int] = field(default_factory=set)
    partner_id: Optional[str] = None

    # Running statistics (mutated by collaborators)
    total_points: float = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    play_count: int = 0
    sit_count: int = 0
    compensation_points: float = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidPlayerDataException("Player id must be a non-empty string")
        try:
            self.gender = Gender(self.gender or Gender.UNSPECIFIED)
            self.status = PlayerStatus(self.status)
        except ValueError as e:
            raise InvalidPlayerDataException(f"Invalid player data: {e}") from e
        self.skip_rounds = set(self.skip_rounds or ())

    @property
    def is_active(self) -> bool:
        """Whether the player is present and playing in the session."""
        return self.status == PlayerStatus.ACTIVE

    def is_skipping(self, round_number: int) -> bool:
        """Check if the player opted out of ``round_number``."""
        return round_number in self.skip_rounds

    @property
    def is_male(self) -> bool:
        return self.gender == Gender.MALE

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "gender": self.gender.value,
            "status": self.status.value,
            "skip_rounds": sorted(self.skip_rounds),
            "partner_id": self.partner_id,
            "total_points": self.total_points,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "play_count": self.play_count,
            "sit_count": self.sit_count,
            "compensation_points": self.compensation_points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        if "id" not in data:
            raise InvalidPlayerDataException("Player data is missing 'id'")
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            rating=data.get("rating", DEFAULT_RATING),
            gender=data.get("gender") or Gender.UNSPECIFIED,
            status=data.get("status", PlayerStatus.ACTIVE),
            skip_rounds=set(int(r) for r in data.get("skip_rounds") or ()),
            partner_id=data.get("partner_id"),
            total_points=data.get("total_points", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            ties=data.get("ties", 0),
            play_count=data.get("play_count", 0),
            sit_count=data.get("sit_count", 0),
            compensation_points=data.get("compensation_points", 0),
        )

    def __str__(self) -> str:
        return f"{self.name or self.id} ({self.rating})"
