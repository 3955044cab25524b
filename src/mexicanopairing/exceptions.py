"""Exceptions for use in Mexicano Pairing"""

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


# ========== Base Application Exception ==========


class MexicanoPairingException(Exception):
    """Base exception for all Mexicano Pairing errors.

    All custom exceptions in the library inherit from this class, so callers
    can catch every library-specific error with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(MexicanoPairingException):
    """Raised when a generator cannot be built from the supplied session.

    The canonical case is a player pool below the four-player floor.
    """

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid (courts, mode, partners)."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(MexicanoPairingException):
    """Base exception for round generation errors."""

    pass


class InvalidArgumentException(PairingException):
    """Raised when a round is requested with a bad round number."""

    pass


# ========== Player Exceptions ==========


class PlayerException(MexicanoPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass
