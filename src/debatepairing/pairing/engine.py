"""Round pairing engine.

One engine is built per round. ``generate`` runs the whole pipeline:

1. pick a bye if the field is odd,
2. pair the rest (fold for rounds 1-5, Swiss afterwards),
3. seat judge panels,
4. name the rooms,
5. detect conflicts and score each room.

The inputs are never modified. The only state the engine keeps is the judge
``workload`` map, which callers may read after ``generate`` to persist
assignment counts for the next round.
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

from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from debatepairing.constants import (
    BYE_ROOM_PREFIX,
    FOLD_ROUND_LIMIT,
    METHOD_FOLD,
    METHOD_SWISS,
    OPPOSITION,
    PROPOSITION,
    ROOM_PREFIX,
)
from debatepairing.exceptions import InvalidPairingException, NoTeamsAvailableException
from debatepairing.models import Judge, PairingResult, Team, TournamentConfig
from debatepairing.pairing.common import random_shuffler, select_bye_team, sort_by_standings
from debatepairing.pairing.fold import pair_fold_system, pair_round_one
from debatepairing.pairing.judges import JudgeAssigner
from debatepairing.pairing.swiss import pair_swiss
from debatepairing.type_hints import PairingMethod, Shuffler, Workload
from debatepairing.utils import setup_logger
from debatepairing.validation import score_round, validate_round

logger = setup_logger(__name__)


def pairing_method_for_round(round_number: int) -> PairingMethod:
    """Fold up to round 5, Swiss afterwards.

    The switch point does not follow the configured preliminary round count.
    """
    return METHOD_FOLD if round_number <= FOLD_ROUND_LIMIT else METHOD_SWISS


def assign_room_names(pairings: Sequence[PairingResult]) -> List[PairingResult]:
    """Number rooms in output order with one counter for debates and byes."""
    for number, pairing in enumerate(pairings, start=1):
        prefix = BYE_ROOM_PREFIX if pairing.is_bye_round else ROOM_PREFIX
        pairing.room_name = f"{prefix} {number}"
    return list(pairings)


class PairingEngine:
    """Generates the pairings for a single round of a tournament."""

    def __init__(
        self,
        teams: Sequence[Team],
        judges: Sequence[Judge],
        config: TournamentConfig,
        round_number: int,
        shuffle: Optional[Shuffler] = None,
    ) -> None:
        if round_number < 1:
            raise InvalidPairingException(
                f"Round number must be 1 or greater, got {round_number}"
            )
        self.teams: List[Team] = list(teams)
        self.judges: List[Judge] = list(judges)
        self.config = config
        self.round_number = round_number
        self.method: PairingMethod = pairing_method_for_round(round_number)
        self.shuffle: Shuffler = shuffle or random_shuffler()
        self.teams_by_id: Dict[str, Team] = {team.id: team for team in self.teams}
        self.workload: Workload = {}

    def generate(self) -> List[PairingResult]:
        """Produce every room of the round. Raises if there are no teams."""
        logger.info(
            "Generating %s pairings for round %s", self.method, self.round_number
        )
        logger.info("Teams: %s, Judges: %s", len(self.teams), len(self.judges))

        if not self.teams:
            raise NoTeamsAvailableException()

        if self.method == METHOD_FOLD:
            pairings = self._generate_fold_pairings()
        else:
            pairings = self._generate_swiss_pairings()

        self._log_unpaired(pairings)

        assigner = JudgeAssigner(self.judges, self.config.judges_per_debate)
        pairings = assigner.assign_all(pairings, self.teams_by_id)
        self.workload = assigner.workload

        pairings = assign_room_names(pairings)
        pairings = validate_round(pairings, self.teams_by_id)
        pairings = score_round(pairings, self.teams_by_id, self.config.judges_per_debate)
        return pairings

    def _take_bye(self, teams: List[Team], pairings: List[PairingResult]) -> None:
        """Move the bye team (odd fields only) out of ``teams`` into a bye."""
        if len(teams) % 2 == 0:
            return
        bye_team = select_bye_team(teams)
        pairings.append(PairingResult.bye(bye_team.id))
        teams.remove(bye_team)

    def _generate_fold_pairings(self) -> List[PairingResult]:
        pairings: List[PairingResult] = []
        available = list(self.teams)
        self._take_bye(available, pairings)

        if self.round_number == 1:
            pairings.extend(pair_round_one(available, self.shuffle))
        else:
            pairings.extend(pair_fold_system(available))
        return pairings

    def _generate_swiss_pairings(self) -> List[PairingResult]:
        pairings: List[PairingResult] = []
        ranked = sort_by_standings(self.teams)
        self._take_bye(ranked, pairings)

        pairings.extend(pair_swiss(ranked))
        return pairings

    def _log_unpaired(self, pairings: Sequence[PairingResult]) -> None:
        placed = {team_id for p in pairings for team_id in p.team_ids}
        dropped = [t.display_name for t in self.teams if t.id not in placed]
        if dropped:
            logger.warning(
                "Round %s leaves %s team(s) unpaired: %s",
                self.round_number,
                len(dropped),
                ", ".join(dropped),
            )


def generate_tournament_pairings(
    teams: Sequence[Team],
    judges: Sequence[Judge],
    config: TournamentConfig,
    round_number: int,
    shuffle: Optional[Shuffler] = None,
) -> List[PairingResult]:
    """Generate all pairings for one round. See ``PairingEngine``."""
    return PairingEngine(teams, judges, config, round_number, shuffle).generate()


def record_pairings_on_teams(
    teams: Sequence[Team], pairings: Sequence[PairingResult], round_number: int
) -> List[Team]:
    """Copies of ``teams`` with one round's sides, opponents and byes added.

    A bye counts as a proposition turn. Standings are left alone since no
    results are known yet.
    """
    updated = [
        replace(
            team,
            side_history=list(team.side_history),
            opponents_faced=list(team.opponents_faced),
            bye_rounds=list(team.bye_rounds),
        )
        for team in teams
    ]
    by_id = {team.id: team for team in updated}

    for pairing in pairings:
        prop_team = by_id.get(pairing.proposition_team_id)
        if pairing.is_bye_round:
            if prop_team is not None:
                prop_team.side_history.append(PROPOSITION)
                prop_team.bye_rounds.append(round_number)
            continue
        opp_team = by_id.get(pairing.opposition_team_id)
        if prop_team is None or opp_team is None:
            continue
        prop_team.side_history.append(PROPOSITION)
        prop_team.opponents_faced.append(opp_team.id)
        opp_team.side_history.append(OPPOSITION)
        opp_team.opponents_faced.append(prop_team.id)
    return updated


def generate_preliminary_rounds(
    teams: Sequence[Team],
    judges: Sequence[Judge],
    config: TournamentConfig,
    rounds: Optional[int] = None,
    shuffle: Optional[Shuffler] = None,
) -> List[List[PairingResult]]:
    """Pair the fold rounds 1..``rounds`` in one go, before any results.

    Teams start with empty side, opponent and bye histories; each round's
    pairings are added to them before the next round is paired. Judge
    workload carries over from round to round. ``rounds`` defaults to the
    fold rounds the tournament has, at most 5.
    """
    if rounds is None:
        rounds = min(FOLD_ROUND_LIMIT, config.prelim_rounds)
    if rounds < 1:
        raise InvalidPairingException("At least one round must be generated")
    if rounds > FOLD_ROUND_LIMIT:
        raise InvalidPairingException(
            f"Can only generate up to {FOLD_ROUND_LIMIT} preliminary rounds "
            "at once using fold system"
        )
    if rounds > config.prelim_rounds:
        raise InvalidPairingException(
            f"Tournament only has {config.prelim_rounds} preliminary rounds"
        )
    if not teams:
        raise NoTeamsAvailableException()

    shuffle = shuffle or random_shuffler()
    round_teams = [
        replace(team, side_history=[], opponents_faced=[], bye_rounds=[])
        for team in teams
    ]
    round_judges = list(judges)
    all_rounds: List[List[PairingResult]] = []

    for round_number in range(1, rounds + 1):
        engine = PairingEngine(round_teams, round_judges, config, round_number, shuffle)
        pairings = engine.generate()
        all_rounds.append(pairings)
        round_teams = record_pairings_on_teams(round_teams, pairings, round_number)
        round_judges = [
            replace(
                judge,
                assignments_this_tournament=engine.workload.get(
                    judge.id, judge.assignments_this_tournament
                ),
            )
            for judge in round_judges
        ]

    logger.info("Generated %s preliminary rounds", len(all_rounds))
    return all_rounds
