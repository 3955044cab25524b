"""Rating updates from scored matches.

Ratings seed the courts every round, so moving them after each result lets
winners climb courts and losers drop. The update is Elo-style: each team
is rated by its average, the expected share of points follows a logistic
curve of the rating gap, and every player moves by the difference between
the share their team actually won and the share it was expected to win.
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

from mexicanopairing.constants import (
    RATING_K_FACTOR,
    RATING_MAX,
    RATING_MIN,
    RATING_SCALE,
)
from mexicanopairing.models.round import Match
from mexicanopairing.type_hints import Team


def team_rating(team: Team) -> float:
    return (team[0].rating + team[1].rating) / 2


def expected_share(team1: Team, team2: Team) -> float:
    """Share of the points team1 is expected to win."""
    gap = team_rating(team2) - team_rating(team1)
    return 1 / (1 + 10 ** (gap / RATING_SCALE))


def rating_delta(match: Match, k_factor: float = RATING_K_FACTOR) -> float:
    """Rating change for each team1 player; team2 players move the other way.

    A 0-0 score counts as an even result.
    """
    total = match.team1_score + match.team2_score
    actual = match.team1_score / total if total else 0.5
    return k_factor * (actual - expected_share(match.team1, match.team2))


def clamp_rating(rating: float) -> float:
    return round(max(RATING_MIN, min(RATING_MAX, rating)), 4)
