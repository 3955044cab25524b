"""Mexicano Pairing: round generation for social padel and tennis sessions.

This package builds rounds for Mexicano, Americano, mixed Mexicano and
fixed-partner doubles sessions, keeping sit-outs fair and partner and
opponent repetition low.
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

from mexicanopairing.exceptions import (
    ConfigurationException,
    InvalidArgumentException,
    InvalidConfigurationException,
    MexicanoPairingException,
)
from mexicanopairing.models import (
    Gender,
    GeneratorConfig,
    Match,
    MatchupPreference,
    PairingMode,
    Player,
    PlayerStatus,
    Round,
)
from mexicanopairing.pairing import HistoryTracker, RoundGenerator, TeamFormation

__version__ = "0.1.0"

__all__ = [
    "RoundGenerator",
    "HistoryTracker",
    "TeamFormation",
    "GeneratorConfig",
    "Player",
    "Match",
    "Round",
    "Gender",
    "PlayerStatus",
    "PairingMode",
    "MatchupPreference",
    "MexicanoPairingException",
    "ConfigurationException",
    "InvalidConfigurationException",
    "InvalidArgumentException",
]
