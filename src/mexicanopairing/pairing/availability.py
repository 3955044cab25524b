"""Eligibility of players for a given round."""

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

from typing import List, Sequence

from mexicanopairing.models.player import Player


def available_players(players: Sequence[Player], round_number: int) -> List[Player]:
    """Players eligible for ``round_number``, in input order.

    A player is eligible when active and not opted out of the round.
    """
    return [p for p in players if p.is_active and not p.is_skipping(round_number)]


def skipping_players(players: Sequence[Player], round_number: int) -> List[Player]:
    """Active players who opted out of ``round_number``."""
    return [p for p in players if p.is_active and p.is_skipping(round_number)]
