from debatepairing.pairing.common import (
    identity_shuffler,
    random_shuffler,
    select_bye_team,
    sort_by_standings,
)
from debatepairing.pairing.engine import (
    PairingEngine,
    assign_room_names,
    generate_preliminary_rounds,
    generate_tournament_pairings,
    pairing_method_for_round,
    record_pairings_on_teams,
)
from debatepairing.pairing.judges import JudgeAssigner, panel_size, select_head_judge
from debatepairing.pairing.swiss import determine_sides

__all__ = [
    "PairingEngine",
    "generate_tournament_pairings",
    "generate_preliminary_rounds",
    "record_pairings_on_teams",
    "pairing_method_for_round",
    "assign_room_names",
    "JudgeAssigner",
    "panel_size",
    "select_head_judge",
    "determine_sides",
    "select_bye_team",
    "sort_by_standings",
    "random_shuffler",
    "identity_shuffler",
]
