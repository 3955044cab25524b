"""Partner, opponent and sit-out history for one session."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from mexicanopairing.models.player import Player
from mexicanopairing.type_hints import PairKey, Team


def pair_key(player1_id: str, player2_id: str) -> PairKey:
    """Unordered key for a pair of players."""
    return frozenset((player1_id, player2_id))


@dataclass
class RoundRecord:
    """What one round contributes to the history.

    Attributes
    ----------
    partner_pairs : list of frozenset of str
        One entry per team that took the court.
    opponent_pairs : list of frozenset of str
        The four cross-team pairs of every match.
    sitter_ids : list of str
        Eligible players that sat out.
    player_ids : list of str
        Players that took the court.
    """

    partner_pairs: List[PairKey] = field(default_factory=list)
    opponent_pairs: List[PairKey] = field(default_factory=list)
    sitter_ids: List[str] = field(default_factory=list)
    player_ids: List[str] = field(default_factory=list)

    def add_match(self, team1: Team, team2: Team) -> None:
        """Record the partnerships and cross pairs of one match."""
        for team in (team1, team2):
            self.partner_pairs.append(pair_key(team[0].id, team[1].id))
            self.player_ids.extend(p.id for p in team)
        for a in team1:
            for b in team2:
                self.opponent_pairs.append(pair_key(a.id, b.id))

    def add_sitters(self, sitters: Iterable[Player]) -> None:
        self.sitter_ids.extend(p.id for p in sitters)


@dataclass
class HistoryTracker:
    """
    Accumulated repetition counters for one generator instance.

    Counters only ever grow through :meth:`apply`. The round generator
    owns its tracker exclusively; pass a pre-seeded tracker to the
    generator to start a session from stored history.

    Attributes
    ----------
    partner_counts : Counter of frozenset to int
        How often each unordered pair has been on the same team.
    opponent_counts : Counter of frozenset to int
        How often each unordered pair has faced each other.
    sit_counts : Counter of str to int
        How often each player has sat out.
    play_counts : Counter of str to int
        How often each player has taken the court.
    """

    partner_counts: Counter = field(default_factory=Counter)
    opponent_counts: Counter = field(default_factory=Counter)
    sit_counts: Counter = field(default_factory=Counter)
    play_counts: Counter = field(default_factory=Counter)

    def partner_count(self, player1_id: str, player2_id: str) -> int:
        return self.partner_counts[pair_key(player1_id, player2_id)]

    def opponent_count(self, player1_id: str, player2_id: str) -> int:
        return self.opponent_counts[pair_key(player1_id, player2_id)]

    def sit_count(self, player_id: str) -> int:
        return self.sit_counts[player_id]

    def play_count(self, player_id: str) -> int:
        return self.play_counts[player_id]

    def partner_repeats(self, team1: Team, team2: Team) -> int:
        """Sum of previous partnerships for both teams of a split."""
        return self.partner_count(team1[0].id, team1[1].id) + self.partner_count(
            team2[0].id, team2[1].id
        )

    def opponent_repeats(self, team1: Team, team2: Team) -> int:
        """Sum of previous meetings over the four cross pairs of a split."""
        return sum(self.opponent_count(a.id, b.id) for a in team1 for b in team2)

    def apply(self, record: RoundRecord) -> None:
        """Add one round's contribution to the counters."""
        self.partner_counts.update(record.partner_pairs)
        self.opponent_counts.update(record.opponent_pairs)
        self.sit_counts.update(record.sitter_ids)
        self.play_counts.update(record.player_ids)

    def copy(self) -> "HistoryTracker":
        return HistoryTracker(
            partner_counts=Counter(self.partner_counts),
            opponent_counts=Counter(self.opponent_counts),
            sit_counts=Counter(self.sit_counts),
            play_counts=Counter(self.play_counts),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize history to dictionary."""
        return {
            "partner_counts": _pairs_to_list(self.partner_counts),
            "opponent_counts": _pairs_to_list(self.opponent_counts),
            "sit_counts": dict(self.sit_counts),
            "play_counts": dict(self.play_counts),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryTracker":
        """Deserialize history from dictionary."""
        return cls(
            partner_counts=_pairs_from_list(data.get("partner_counts", [])),
            opponent_counts=_pairs_from_list(data.get("opponent_counts", [])),
            sit_counts=Counter(
                {str(k): int(v) for k, v in data.get("sit_counts", {}).items()}
            ),
            play_counts=Counter(
                {str(k): int(v) for k, v in data.get("play_counts", {}).items()}
            ),
        )


def _pairs_to_list(counts: Counter) -> List[Dict[str, Any]]:
    return [
        {"players": sorted(pair), "count": count}
        for pair, count in sorted(counts.items(), key=lambda item: sorted(item[0]))
    ]


def _pairs_from_list(entries: List[Dict[str, Any]]) -> Counter:
    counts: Counter = Counter()
    for entry in entries:
        first, second = entry["players"]
        counts[pair_key(str(first), str(second))] += int(entry["count"])
    return counts
