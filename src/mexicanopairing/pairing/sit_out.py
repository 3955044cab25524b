"""Sit-out scheduling.

When more players are eligible than the courts can hold, the scheduler
decides who rests. Players who have sat out the most are the first to be
put back on court, so over a session the number of rounds each player
sits out never differs by more than one.

Courts that run at their own pace fill one court at a time; there the
players who have played least are put on court first instead.
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

from typing import Callable, Dict, List, Sequence, Set, Tuple

from mexicanopairing.constants import PLAYERS_PER_COURT
from mexicanopairing.models.enums import Gender
from mexicanopairing.models.player import Player
from mexicanopairing.pairing.history import HistoryTracker
from mexicanopairing.type_hints import Unit
from mexicanopairing.utils import setup_logger

logger = setup_logger(__name__)

# Higher priority plays first
Priority = Callable[[Unit, HistoryTracker], int]


def playing_slots(eligible_count: int, courts: int) -> int:
    """Number of players that can be placed on court this round."""
    return min(courts, eligible_count // PLAYERS_PER_COURT) * PLAYERS_PER_COURT


def unit_sit_count(unit: Unit, history: HistoryTracker) -> int:
    """Sit count of a unit; a fixed pair carries both partners' counts."""
    return sum(history.sit_count(p.id) for p in unit)


def unit_play_count(unit: Unit, history: HistoryTracker) -> int:
    return sum(history.play_count(p.id) for p in unit)


def least_played_first(unit: Unit, history: HistoryTracker) -> int:
    """Priority for filling a single court: fewest games played goes first."""
    return -unit_play_count(unit, history)


def _priority_order(
    units: Sequence[Unit], history: HistoryTracker, priority: Priority
) -> List[int]:
    # sorted() is stable so ties keep input order
    return sorted(range(len(units)), key=lambda i: -priority(units[i], history))


def _split_units(
    units: Sequence[Unit], playing_idx: Set[int]
) -> Tuple[List[Unit], List[Unit]]:
    playing = [u for i, u in enumerate(units) if i in playing_idx]
    sitting = [u for i, u in enumerate(units) if i not in playing_idx]
    logger.debug(
        "Sitting out %s of %s units: %s",
        len(sitting),
        len(units),
        [p.id for unit in sitting for p in unit],
    )
    return playing, sitting


def select_sitters(
    units: Sequence[Unit],
    unit_slots: int,
    history: HistoryTracker,
    priority: Priority = unit_sit_count,
) -> Tuple[List[Unit], List[Unit]]:
    """Split units into those who play and those who sit.

    Parameters
    ----------
    units : sequence of tuple of Player
        Scheduling units in input order: single players, or fixed pairs.
    unit_slots : int
        How many units fit on court.
    history : HistoryTracker
        Read-only here; the caller records the sitters once the round is final.
    priority : callable
        Units with the highest priority play. Defaults to the sit count,
        so whoever sat out most plays first.

    Returns
    -------
    tuple of (list, list)
        Playing units and sitting units, each in input order.
    """
    if len(units) <= unit_slots:
        return list(units), []

    order = _priority_order(units, history, priority)
    return _split_units(units, set(order[:unit_slots]))


def select_mixed_sitters(
    players: Sequence[Player],
    slots: int,
    history: HistoryTracker,
    priority: Priority = unit_sit_count,
) -> Tuple[List[Unit], List[Unit]]:
    """Like :func:`select_sitters` for single players, keeping courts mixed.

    Priority still decides who plays. Only among players of equal priority
    at the cut are men and women taken alternately, so that up to half of
    the slots go to each gender whenever enough of them are eligible.
    """
    units = [(p,) for p in players]
    if len(units) <= slots:
        return units, []

    order = _priority_order(units, history, priority)
    half = slots // 2
    counts = {Gender.MALE: 0, Gender.FEMALE: 0}
    playing_idx: Set[int] = set()
    position = 0

    while len(playing_idx) < slots:
        level = priority(units[order[position]], history)
        tier = [i for i in order[position:] if priority(units[i], history) == level]
        position += len(tier)

        free = slots - len(playing_idx)
        chosen = tier if len(tier) <= free else _balanced_pick(units, tier, free, counts, half)
        for i in chosen:
            playing_idx.add(i)
            gender = units[i][0].gender
            if gender in counts:
                counts[gender] += 1

    return _split_units(units, playing_idx)


def _balanced_pick(
    units: Sequence[Unit],
    tier: List[int],
    count: int,
    counts: Dict[Gender, int],
    half: int,
) -> List[int]:
    """Take ``count`` of ``tier``, favouring the gender that is short of ``half``."""
    counts = dict(counts)
    remaining = list(tier)
    chosen = []
    for _ in range(count):
        wanted = sorted(
            (g for g in (Gender.MALE, Gender.FEMALE) if counts[g] < half),
            key=lambda g: counts[g],
        )
        pick = next(
            (i for g in wanted for i in remaining if units[i][0].gender == g),
            remaining[0],
        )
        remaining.remove(pick)
        chosen.append(pick)
        gender = units[pick][0].gender
        if gender in counts:
            counts[gender] += 1
    return chosen
