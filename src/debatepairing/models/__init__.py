from debatepairing.models.judge import CrossTournamentStats, Judge
from debatepairing.models.pairing_result import (
    Conflict,
    ConflictType,
    PairingResult,
    Severity,
)
from debatepairing.models.team import CrossTournamentPerformance, Team
from debatepairing.models.tournament_config import TournamentConfig

__all__ = [
    "Team",
    "CrossTournamentPerformance",
    "Judge",
    "CrossTournamentStats",
    "TournamentConfig",
    "Conflict",
    "ConflictType",
    "Severity",
    "PairingResult",
]
