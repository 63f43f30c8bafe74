from debatepairing.validation.conflicts import (
    debate_conflicts,
    validate_pairing,
    validate_round,
)
from debatepairing.validation.quality import (
    average_quality,
    score_pairing,
    score_round,
)
from debatepairing.validation.round_checks import (
    round_save_errors,
    update_pairing,
    validate_round_for_save,
)

__all__ = [
    "validate_pairing",
    "validate_round",
    "debate_conflicts",
    "score_pairing",
    "score_round",
    "average_quality",
    "round_save_errors",
    "validate_round_for_save",
    "update_pairing",
]
