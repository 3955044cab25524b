"""Ranking of the playing pool and its division into courts."""

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

from typing import Dict, List, Sequence, Tuple

from mexicanopairing.constants import PLAYERS_PER_COURT, PLAYERS_PER_TEAM
from mexicanopairing.models.player import Player
from mexicanopairing.type_hints import Group, Team


# ========== Ranking ==========


def rank_players(players: Sequence[Player]) -> List[Player]:
    """Sort players by rating desc; ties keep input order."""
    return sorted(players, key=lambda p: -p.rating)


def team_points(team: Team) -> float:
    """Combined points of a fixed pair, the pair's rank key."""
    return team[0].total_points + team[1].total_points


def rank_pairs(pairs: Sequence[Team]) -> List[Team]:
    """Sort fixed pairs by combined points desc; ties keep discovery order."""
    return sorted(pairs, key=lambda pair: -team_points(pair))


def partner_pairs(players: Sequence[Player]) -> Tuple[List[Team], List[Player]]:
    """Discover fixed pairs among ``players``.

    A pair is opened by whichever partner appears first. Players whose
    partner is missing from ``players``, or whose partner does not point
    back at them, are returned as unpaired.

    Returns
    -------
    tuple of (list of Team, list of Player)
        Pairs in discovery order and unpaired players in input order.
    """
    by_id: Dict[str, Player] = {p.id: p for p in players}
    paired_ids = set()
    pairs: List[Team] = []
    unpaired: List[Player] = []

    for player in players:
        if player.id in paired_ids:
            continue
        partner = by_id.get(player.partner_id) if player.partner_id else None
        if (
            partner is None
            or partner.id == player.id
            or partner.id in paired_ids
            or partner.partner_id != player.id
        ):
            unpaired.append(player)
            continue
        pairs.append((player, partner))
        paired_ids.update((player.id, partner.id))

    return pairs, unpaired


# ========== Court grouping ==========


def group_courts(ranked: Sequence[Player]) -> List[Group]:
    """Chunk a ranked pool into groups of four, best group first."""
    return [
        list(ranked[i : i + PLAYERS_PER_COURT])
        for i in range(0, len(ranked) - PLAYERS_PER_COURT + 1, PLAYERS_PER_COURT)
    ]


def group_pairs(ranked_pairs: Sequence[Team]) -> List[Group]:
    """Chunk ranked fixed pairs two at a time; the group is [a0, a1, b0, b1]."""
    per_court = PLAYERS_PER_COURT // PLAYERS_PER_TEAM
    return [
        [*ranked_pairs[i], *ranked_pairs[i + 1]]
        for i in range(0, len(ranked_pairs) - per_court + 1, per_court)
    ]


def group_mixed_courts(ranked: Sequence[Player]) -> List[Group]:
    """Chunk a ranked pool so that courts hold two men and two women.

    Each court takes the next two best men and the next two best women
    while both are available; whatever is left is chunked by overall rank.
    Groups are returned best first, by their average rank position.
    """
    position = {p.id: i for i, p in enumerate(ranked)}
    men = [p for p in ranked if p.is_male]
    women = [p for p in ranked if p.is_female]
    court_count = len(ranked) // PLAYERS_PER_COURT

    groups: List[Group] = []
    while len(groups) < court_count and len(men) >= 2 and len(women) >= 2:
        group = [men.pop(0), men.pop(0), women.pop(0), women.pop(0)]
        groups.append(sorted(group, key=lambda p: position[p.id]))

    used = {p.id for group in groups for p in group}
    groups.extend(group_courts([p for p in ranked if p.id not in used]))

    return sorted(
        groups, key=lambda group: sum(position[p.id] for p in group)
    )
