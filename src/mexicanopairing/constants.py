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

# --- Constants ---

# Session sizing
MIN_PLAYERS = 4
PLAYERS_PER_COURT = 4
PLAYERS_PER_TEAM = 2
DEFAULT_RATING = 5.0

# Pairing modes
MODE_MEXICANO = "mexicano"
MODE_AMERICANO = "americano"
MODE_FIXED_PARTNER = "fixed_partner"
MODE_MIXED_MEXICANO = "mixed_mexicano"
DEFAULT_MODE = MODE_MEXICANO

# Matchup preferences
MATCHUP_ANY = "any"
MATCHUP_MIXED_ONLY = "mixed_only"
DEFAULT_MATCHUP_PREFERENCE = MATCHUP_ANY

# Player statuses
STATUS_ACTIVE = "active"
STATUS_LATE = "late"
STATUS_DEPARTED = "departed"
STATUS_NO_SHOW = "no_show"

# Genders
GENDER_MALE = "male"
GENDER_FEMALE = "female"
GENDER_UNSPECIFIED = "unspecified"

# Error messages surfaced to the UI layer
MSG_MIN_PLAYERS = f"Minimum {MIN_PLAYERS} players required"
MSG_INVALID_ROUND_NUMBER = "Round number must be a positive integer"
MSG_INVALID_COURTS = "Number of courts must be a positive integer"
MSG_INVALID_COURT_NUMBER = "Court number must be between 1 and the number of courts"
MSG_MISSING_SCORE = "Match has no score to rate"

# Rating updates after a scored match (Elo-style, on the 0-10 rating scale)
RATING_K_FACTOR = 1.0
RATING_SCALE = 4.0
RATING_MIN = 0.0
RATING_MAX = 10.0

# Americano-style scoring used by the session simulator
POINTS_PER_GAME = 24

# Environment variables read by the logging setup
ENV_LOG_DIR = "MEXICANO_PAIRING_LOG_DIR"
ENV_LOG_LEVEL = "MEXICANO_PAIRING_LOG_LEVEL"
LOG_FILE_NAME = "mexicano-pairing.log"
