"""Debate tournament pairing engine.

Assigns teams to rooms or byes, seats judge panels while avoiding conflicts
of interest, and scores the quality of each room.
"""

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

from debatepairing.exceptions import NoTeamsAvailableException
from debatepairing.models import (
    Conflict,
    ConflictType,
    Judge,
    PairingResult,
    Severity,
    Team,
    TournamentConfig,
)
from debatepairing.pairing import PairingEngine, generate_tournament_pairings
from debatepairing.validation import validate_pairing

__all__ = [
    "generate_tournament_pairings",
    "validate_pairing",
    "PairingEngine",
    "Team",
    "Judge",
    "TournamentConfig",
    "PairingResult",
    "Conflict",
    "ConflictType",
    "Severity",
    "NoTeamsAvailableException",
]
