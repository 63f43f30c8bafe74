from debatepairing.tournament.history import (
    DebateRecord,
    JudgeFeedback,
    PreliminaryStatus,
    TournamentHistory,
    build_judge_snapshots,
    build_team_snapshots,
)
from debatepairing.tournament.snapshot import (
    RoundSnapshot,
    load_history,
    load_snapshot,
    save_history,
    save_snapshot,
)
from debatepairing.tournament.stats import PairingStats, compute_pairing_stats
from debatepairing.tournament.withdrawal import WithdrawalOutcome, withdraw_team

__all__ = [
    "DebateRecord",
    "JudgeFeedback",
    "PreliminaryStatus",
    "TournamentHistory",
    "build_team_snapshots",
    "build_judge_snapshots",
    "RoundSnapshot",
    "load_snapshot",
    "save_snapshot",
    "load_history",
    "save_history",
    "PairingStats",
    "compute_pairing_stats",
    "WithdrawalOutcome",
    "withdraw_team",
]
