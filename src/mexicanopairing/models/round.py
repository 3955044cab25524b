"""Data models for a generated round."""

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
from typing import Any, Dict, List, Mapping, Optional

from mexicanopairing.exceptions import InvalidPlayerDataException
from mexicanopairing.models.player import Player
from mexicanopairing.type_hints import Team


@dataclass
class Match:
    """One court's game: two teams of two.

    Attributes
    ----------
    team1 : tuple of Player
        First team, exactly two players.
    team2 : tuple of Player
        Second team, exactly two players.
    court : int
        Court number (1-indexed, 1 is the highest-ranked court).
    team1_score, team2_score : int or None
        Points entered once the match is played.
    """

    team1: Team
    team2: Team
    court: int = 1
    team1_score: Optional[int] = None
    team2_score: Optional[int] = None

    def __post_init__(self) -> None:
        self.team1 = tuple(self.team1)
        self.team2 = tuple(self.team2)
        if len(self.team1) != 2 or len(self.team2) != 2:
            raise ValueError("A match needs exactly two players per team")
        ids = {p.id for p in self.players}
        if len(ids) != 4:
            raise ValueError("A match cannot contain the same player twice")

    @property
    def players(self) -> List[Player]:
        """All four players on court, team1 first."""
        return [*self.team1, *self.team2]

    @property
    def is_scored(self) -> bool:
        return self.team1_score is not None and self.team2_score is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary of player ids."""
        return {
            "court": self.court,
            "team1": [p.id for p in self.team1],
            "team2": [p.id for p in self.team2],
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], players_by_id: Mapping[str, Player]
    ) -> "Match":
        """Deserialize match, resolving ids against ``players_by_id``."""
        return cls(
            team1=tuple(_lookup(players_by_id, pid) for pid in data["team1"]),
            team2=tuple(_lookup(players_by_id, pid) for pid in data["team2"]),
            court=data.get("court", 1),
            team1_score=data.get("team1_score"),
            team2_score=data.get("team2_score"),
        )


@dataclass
class Round:
    """Everything generated for a single round.

    Attributes
    ----------
    number : int
        Round number (1-indexed).
    matches : list of Match
        One match per court, highest-ranked court first.
    sitting_players : list of Player
        Eligible players who were not placed on a court.
    skipping_players : list of Player
        Active players absent because they opted out of this round.
        They are not eligible, so they never appear in ``sitting_players``.
    """

    number: int
    matches: List[Match] = field(default_factory=list)
    sitting_players: List[Player] = field(default_factory=list)
    skipping_players: List[Player] = field(default_factory=list)

    @property
    def playing_players(self) -> List[Player]:
        """Players on court, in court order."""
        return [p for match in self.matches for p in match.players]

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "number": self.number,
            "matches": [m.to_dict() for m in self.matches],
            "sitting_players": [p.id for p in self.sitting_players],
            "skipping_players": [p.id for p in self.skipping_players],
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], players_by_id: Mapping[str, Player]
    ) -> "Round":
        """Deserialize round data, resolving ids against ``players_by_id``."""
        return cls(
            number=data["number"],
            matches=[Match.from_dict(m, players_by_id) for m in data.get("matches", [])],
            sitting_players=[
                _lookup(players_by_id, pid) for pid in data.get("sitting_players", [])
            ],
            skipping_players=[
                _lookup(players_by_id, pid) for pid in data.get("skipping_players", [])
            ],
        )


def _lookup(players_by_id: Mapping[str, Player], player_id: str) -> Player:
    try:
        return players_by_id[player_id]
    except KeyError:
        raise InvalidPlayerDataException(f"Unknown player id: {player_id}") from None
