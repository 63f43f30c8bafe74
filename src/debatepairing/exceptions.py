"""Exceptions for use in Debate Pairing"""

# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
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


class DebatePairingException(Exception):
    """Base exception for all Debate Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every package-specific error with a single except clause.
    Pairing conflicts are never raised; they are returned as data.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(DebatePairingException):
    """Base exception for pairing-related errors."""

    pass


class NoTeamsAvailableException(PairingException):
    """Raised when a round is requested with an empty team list."""

    def __init__(self, message: str = "No teams available for pairing") -> None:
        super().__init__(message)


class InvalidPairingException(PairingException):
    """Raised when a pairing record is structurally invalid."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(DebatePairingException):
    """Base exception for tournament history errors."""

    pass


class RoundAlreadyRecordedException(TournamentException):
    """Raised when pairings for a round number are recorded twice."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class PairingNotFoundException(TournamentException):
    """Raised when a room cannot be found in a recorded round."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DebatePairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(DebatePairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a snapshot or history file cannot be loaded."""

    pass
