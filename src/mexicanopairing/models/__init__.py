from mexicanopairing.models.config import GeneratorConfig
from mexicanopairing.models.enums import (
    Gender,
    MatchupPreference,
    PairingMode,
    PlayerStatus,
)
from mexicanopairing.models.player import Player
from mexicanopairing.models.round import Match, Round

__all__ = [
    "Player",
    "Match",
    "Round",
    "GeneratorConfig",
    "Gender",
    "PlayerStatus",
    "PairingMode",
    "MatchupPreference",
]
