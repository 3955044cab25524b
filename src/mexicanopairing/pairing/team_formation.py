"""Team forming strategies.

Each court receives a ranked group of four players. A strategy turns that
group into two teams of two. Three of the four strategies choose between
the three possible splits of the group:

    {p1, p2} v {p3, p4}
    {p1, p3} v {p2, p4}
    {p1, p4} v {p2, p3}

Splits are scored with a cost tuple compared lexicographically, so earlier
terms always dominate later ones. The fixed-partner strategy has no choice
to make: the two pairs on court face each other.
"""

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

import random
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from mexicanopairing.constants import PLAYERS_PER_COURT
from mexicanopairing.models.enums import MatchupPreference, PairingMode
from mexicanopairing.pairing.history import HistoryTracker
from mexicanopairing.type_hints import Group, Split, Team
from mexicanopairing.utils import setup_logger

logger = setup_logger(__name__)

SplitCost = Tuple[float, ...]


def candidate_splits(group: Sequence) -> List[Split]:
    """The three ways to split a group of four into two teams."""
    p1, p2, p3, p4 = group
    return [
        ((p1, p2), (p3, p4)),
        ((p1, p3), (p2, p4)),
        ((p1, p4), (p2, p3)),
    ]


def rating_gap(split: Split) -> float:
    """Absolute difference between the two teams' average ratings."""
    team1, team2 = split
    gap = abs((team1[0].rating + team1[1].rating) - (team2[0].rating + team2[1].rating))
    # rounded so that float noise does not break exact ties
    return round(gap / 2, 9)


def is_mixed_team(team: Team) -> bool:
    """One man and one woman."""
    first, second = team
    return (first.is_male and second.is_female) or (
        first.is_female and second.is_male
    )


def is_mixed_split(split: Split) -> bool:
    return is_mixed_team(split[0]) and is_mixed_team(split[1])


def _mexicano_cost(
    split: Split, history: HistoryTracker, balance_teams: bool
) -> SplitCost:
    return (
        history.partner_repeats(*split),
        rating_gap(split) if balance_teams else 0,
        history.opponent_repeats(*split),
    )


def _americano_cost(
    split: Split, history: HistoryTracker, balance_teams: bool
) -> SplitCost:
    return (
        history.opponent_repeats(*split),
        rating_gap(split) if balance_teams else 0,
        history.partner_repeats(*split),
    )


def _choose_split(
    splits: List[Split],
    cost: Callable[[Split, HistoryTracker, bool], SplitCost],
    history: HistoryTracker,
    balance_teams: bool,
    rng: Optional[random.Random],
) -> Split:
    """Lowest-cost split; exact ties go to the first candidate unless seeded."""
    costs = [cost(split, history, balance_teams) for split in splits]
    best = min(costs)
    tied = [split for split, c in zip(splits, costs) if c == best]
    if rng is not None and len(tied) > 1:
        return rng.choice(tied)
    return tied[0]


class TeamFormation(Enum):
    """Closed set of team forming strategies, chosen once per session."""

    MEXICANO = "mexicano"
    AMERICANO = "americano"
    MIXED_MEXICANO = "mixed_mexicano"
    FIXED_PARTNER = "fixed_partner"

    @classmethod
    def for_mode(
        cls, mode: PairingMode, matchup_preference: MatchupPreference
    ) -> "TeamFormation":
        """Strategy for a session's mode and matchup preference.

        Mixed doubles is selected either by the mixed Mexicano mode or by
        asking for mixed-only matchups in plain Mexicano.
        """
        mode = PairingMode(mode)
        if mode == PairingMode.MIXED_MEXICANO:
            return cls.MIXED_MEXICANO
        if mode == PairingMode.MEXICANO:
            if MatchupPreference(matchup_preference) == MatchupPreference.MIXED_ONLY:
                return cls.MIXED_MEXICANO
            return cls.MEXICANO
        if mode == PairingMode.AMERICANO:
            return cls.AMERICANO
        return cls.FIXED_PARTNER

    @property
    def uses_fixed_pairs(self) -> bool:
        return self is TeamFormation.FIXED_PARTNER

    @property
    def uses_mixed_courts(self) -> bool:
        return self is TeamFormation.MIXED_MEXICANO

    def form_teams(
        self,
        group: Group,
        history: HistoryTracker,
        balance_teams: bool = True,
        rng: Optional[random.Random] = None,
    ) -> Split:
        """Turn a ranked group of four into ``(team1, team2)``.

        Parameters
        ----------
        group : list of Player
            Four players, best ranked first. For fixed partners the group
            is ``[a0, a1, b0, b1]`` with pair ``a`` ranked above pair ``b``.
        history : HistoryTracker
            Read-only; the round generator records the result afterwards.
        balance_teams : bool
            Whether the rating gap between teams breaks repetition ties.
        rng : random.Random or None
            Picks among splits that tie on every cost term.
        """
        if len(group) != PLAYERS_PER_COURT:
            raise ValueError(
                f"Team forming needs {PLAYERS_PER_COURT} players, got {len(group)}"
            )

        if self is TeamFormation.FIXED_PARTNER:
            return (group[0], group[1]), (group[2], group[3])

        splits = candidate_splits(group)
        if self is TeamFormation.AMERICANO:
            return _choose_split(splits, _americano_cost, history, balance_teams, rng)

        if self is TeamFormation.MIXED_MEXICANO:
            mixed = [split for split in splits if is_mixed_split(split)]
            if mixed:
                return _choose_split(mixed, _mexicano_cost, history, balance_teams, rng)
            logger.warning(
                "No mixed split possible for %s; using best split ignoring gender",
                [p.id for p in group],
            )

        return _choose_split(splits, _mexicano_cost, history, balance_teams, rng)
