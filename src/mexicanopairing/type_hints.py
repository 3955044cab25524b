"""Type hints used in Mexicano Pairing."""

from typing import FrozenSet, List, Literal, Tuple

# Mode and preference literals (for type hints)
PairingModeName = Literal["mexicano", "americano", "fixed_partner", "mixed_mexicano"]
MatchupPreferenceName = Literal["any", "mixed_only"]

# List of players
Players = List["Player"]
# Two players sharing a side of the net
Team = Tuple["Player", "Player"]
# One court's worth of players, ranked
Group = List["Player"]
# A candidate division of a group into two teams
Split = Tuple[Team, Team]
# Unordered pair of player ids, used as a counter key
PairKey = FrozenSet[str]
# Players scheduled together for sit-out purposes (one player, or a fixed pair)
Unit = Tuple["Player", ...]

#  LocalWords:  PairKey
