"""GeneratorConfig data class."""

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

from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING, Any, Dict, Optional

from mexicanopairing.constants import (
    DEFAULT_MATCHUP_PREFERENCE,
    DEFAULT_MODE,
    MSG_INVALID_COURTS,
)
from mexicanopairing.exceptions import InvalidConfigurationException
from mexicanopairing.models.enums import MatchupPreference, PairingMode

if TYPE_CHECKING:
    from mexicanopairing.pairing.team_formation import TeamFormation


@dataclass
class GeneratorConfig:
    """Round generator settings, fixed for the lifetime of a session.

    Attributes
    ----------
    courts : int
        Number of courts available each round.
    balance_teams : bool
        Use the rating difference between teams as a tie-break when
        choosing how to split a court.
    matchup_preference : MatchupPreference
        ``MIXED_ONLY`` asks for one man and one woman per team.
    mode : PairingMode
        Session format.
    seed : int or None
        Seed for tie-breaking among equally good splits. ``None`` keeps
        the choice fully deterministic (first candidate wins).
    """

    courts: int
    balance_teams: bool = True
    matchup_preference: MatchupPreference = MatchupPreference(
        DEFAULT_MATCHUP_PREFERENCE
    )
    mode: PairingMode = PairingMode(DEFAULT_MODE)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Coerce string settings to enums and check ranges.

        Raises
        ------
        InvalidConfigurationException
            If courts is not a positive integer or a mode or preference is unknown.
        """
        if (
            isinstance(self.courts, bool)
            or not isinstance(self.courts, Integral)
            or self.courts < 1
        ):
            raise InvalidConfigurationException(f"{MSG_INVALID_COURTS}: {self.courts!r}")
        try:
            self.mode = PairingMode(self.mode)
        except ValueError:
            raise InvalidConfigurationException(
                f"Unknown pairing mode: {self.mode!r}"
            ) from None
        try:
            self.matchup_preference = MatchupPreference(self.matchup_preference)
        except ValueError:
            raise InvalidConfigurationException(
                f"Unknown matchup preference: {self.matchup_preference!r}"
            ) from None

    @property
    def team_formation(self) -> "TeamFormation":
        """Team forming strategy implied by mode and matchup preference."""
        # Import here to avoid circular imports
        from mexicanopairing.pairing.team_formation import TeamFormation

        return TeamFormation.for_mode(self.mode, self.matchup_preference)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "courts": self.courts,
            "balance_teams": self.balance_teams,
            "matchup_preference": self.matchup_preference.value,
            "mode": self.mode.value,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """Deserialize configuration from dictionary."""
        if "courts" not in data:
            raise InvalidConfigurationException("Configuration is missing 'courts'")
        return cls(
            courts=data["courts"],
            balance_teams=data.get("balance_teams", True),
            matchup_preference=data.get(
                "matchup_preference", DEFAULT_MATCHUP_PREFERENCE
            ),
            mode=data.get("mode", DEFAULT_MODE),
            seed=data.get("seed"),
        )
