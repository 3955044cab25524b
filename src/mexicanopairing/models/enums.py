"""Enumerations shared by the data model and the pairing pipeline."""

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

from enum import Enum

from mexicanopairing.constants import (
    GENDER_FEMALE,
    GENDER_MALE,
    GENDER_UNSPECIFIED,
    MATCHUP_ANY,
    MATCHUP_MIXED_ONLY,
    MODE_AMERICANO,
    MODE_FIXED_PARTNER,
    MODE_MEXICANO,
    MODE_MIXED_MEXICANO,
    STATUS_ACTIVE,
    STATUS_DEPARTED,
    STATUS_LATE,
    STATUS_NO_SHOW,
)


class Gender(str, Enum):
    """Player gender, only consulted for mixed doubles."""

    MALE = GENDER_MALE
    FEMALE = GENDER_FEMALE
    UNSPECIFIED = GENDER_UNSPECIFIED


class PlayerStatus(str, Enum):
    """Attendance status. Only ACTIVE players are ever scheduled."""

    ACTIVE = STATUS_ACTIVE
    LATE = STATUS_LATE
    DEPARTED = STATUS_DEPARTED
    NO_SHOW = STATUS_NO_SHOW


class PairingMode(str, Enum):
    """Session format chosen when the session is created."""

    MEXICANO = MODE_MEXICANO
    AMERICANO = MODE_AMERICANO
    FIXED_PARTNER = MODE_FIXED_PARTNER
    MIXED_MEXICANO = MODE_MIXED_MEXICANO


class MatchupPreference(str, Enum):
    """Whether teams must be mixed doubles."""

    ANY = MATCHUP_ANY
    MIXED_ONLY = MATCHUP_MIXED_ONLY
