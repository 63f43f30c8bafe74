"""Debate history and the team/judge snapshots derived from it.

The engine only sees per-round snapshots. This module rebuilds them from a
plain record of what has happened so far, and keeps that record up to date
as rounds are paired and results come in.
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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from debatepairing.constants import (
    DEFAULT_FEEDBACK_SCORE,
    OPPOSITION,
    POOR_FEEDBACK_THRESHOLD,
    PROPOSITION,
    WIN_PERFORMANCE_WEIGHT,
)
from debatepairing.exceptions import (
    PairingNotFoundException,
    RoundAlreadyRecordedException,
    RoundNotFoundException,
)
from debatepairing.models import Judge, PairingResult, Team, TournamentConfig
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class DebateRecord:
    """One room of a past round, with its result once known.

    Attributes:
        round_number: Round the room belongs to
        room_name: Room label from the pairing
        proposition_team_id: Proposition team, or the bye team
        opposition_team_id: Opposition team, None for byes
        judges: Panel judge ids
        head_judge_id: Head judge id, if any
        is_bye: True for a bye (public speaking) room
        winner_team_id: Winning team once the result is in
        proposition_points: Team points awarded to proposition
        opposition_points: Team points awarded to opposition
    """

    round_number: int
    room_name: str = ""
    proposition_team_id: Optional[str] = None
    opposition_team_id: Optional[str] = None
    judges: List[str] = field(default_factory=list)
    head_judge_id: Optional[str] = None
    is_bye: bool = False
    winner_team_id: Optional[str] = None
    proposition_points: float = 0.0
    opposition_points: float = 0.0

    @property
    def is_decided(self) -> bool:
        return self.is_bye or self.winner_team_id is not None

    def involves(self, team_id: str) -> bool:
        return team_id in (self.proposition_team_id, self.opposition_team_id)

    def side_of(self, team_id: str) -> Optional[str]:
        if self.proposition_team_id == team_id:
            return PROPOSITION
        if self.opposition_team_id == team_id:
            return OPPOSITION
        return None

    def opponent_of(self, team_id: str) -> Optional[str]:
        if self.proposition_team_id == team_id:
            return self.opposition_team_id
        if self.opposition_team_id == team_id:
            return self.proposition_team_id
        return None

    def points_for(self, team_id: str) -> float:
        if self.proposition_team_id == team_id:
            return self.proposition_points
        if self.opposition_team_id == team_id:
            return self.opposition_points
        return 0.0

    @classmethod
    def from_pairing(cls, round_number: int, pairing: PairingResult) -> "DebateRecord":
        return cls(
            round_number=round_number,
            room_name=pairing.room_name,
            proposition_team_id=pairing.proposition_team_id,
            opposition_team_id=pairing.opposition_team_id,
            judges=list(pairing.judges),
            head_judge_id=pairing.head_judge_id,
            is_bye=pairing.is_bye_round,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_number": self.round_number,
            "room_name": self.room_name,
            "proposition_team_id": self.proposition_team_id,
            "opposition_team_id": self.opposition_team_id,
            "judges": list(self.judges),
            "head_judge_id": self.head_judge_id,
            "is_bye": self.is_bye,
            "winner_team_id": self.winner_team_id,
            "proposition_points": self.proposition_points,
            "opposition_points": self.opposition_points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DebateRecord":
        return cls(
            round_number=data["round_number"],
            room_name=data.get("room_name", ""),
            proposition_team_id=data.get("proposition_team_id"),
            opposition_team_id=data.get("opposition_team_id"),
            judges=list(data.get("judges") or []),
            head_judge_id=data.get("head_judge_id"),
            is_bye=data.get("is_bye", False),
            winner_team_id=data.get("winner_team_id"),
            proposition_points=data.get("proposition_points", 0.0),
            opposition_points=data.get("opposition_points", 0.0),
        )


@dataclass
class JudgeFeedback:
    """A team's marks for a judge after a debate."""

    judge_id: str
    team_id: str
    clarity: float
    fairness: float
    knowledge: float
    helpfulness: float
    bias_detected: bool = False

    @property
    def average(self) -> float:
        return (self.clarity + self.fairness + self.knowledge + self.helpfulness) / 4

    @property
    def is_poor_and_biased(self) -> bool:
        return self.bias_detected and self.average < POOR_FEEDBACK_THRESHOLD

    def to_dict(self) -> Dict[str, Any]:
        return {
            "judge_id": self.judge_id,
            "team_id": self.team_id,
            "clarity": self.clarity,
            "fairness": self.fairness,
            "knowledge": self.knowledge,
            "helpfulness": self.helpfulness,
            "bias_detected": self.bias_detected,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JudgeFeedback":
        return cls(
            judge_id=data["judge_id"],
            team_id=data["team_id"],
            clarity=data["clarity"],
            fairness=data["fairness"],
            knowledge=data["knowledge"],
            helpfulness=data["helpfulness"],
            bias_detected=data.get("bias_detected", False),
        )


def build_team_snapshots(
    teams: Sequence[Team], debates: Sequence[DebateRecord], config: TournamentConfig
) -> List[Team]:
    """Rebuild each team's standing from the debates recorded so far.

    Identity fields and ``cross_tournament_performance`` are kept from the
    given teams; everything else is recomputed. A bye counts as a
    proposition turn in the side history.
    """
    ordered = sorted(debates, key=lambda d: d.round_number)
    snapshots = []
    for team in teams:
        side_history = []
        opponents = []
        bye_rounds = []
        wins = 0
        points = 0.0
        for debate in ordered:
            if not debate.involves(team.id):
                continue
            if debate.is_bye:
                side_history.append(PROPOSITION)
                bye_rounds.append(debate.round_number)
                if config.bye_awards_win:
                    wins += 1
                continue
            side_history.append(debate.side_of(team.id))
            opponent = debate.opponent_of(team.id)
            if opponent is not None:
                opponents.append(opponent)
            if debate.winner_team_id == team.id:
                wins += 1
            points += debate.points_for(team.id)

        snapshots.append(
            replace(
                team,
                side_history=side_history,
                opponents_faced=opponents,
                bye_rounds=bye_rounds,
                wins=wins,
                total_points=points,
                performance_score=wins * WIN_PERFORMANCE_WEIGHT + points,
            )
        )
    return snapshots


def build_judge_snapshots(
    judges: Sequence[Judge],
    teams: Sequence[Team],
    debates: Sequence[DebateRecord],
    feedback: Sequence[JudgeFeedback],
    config: TournamentConfig,
) -> List[Judge]:
    """Rebuild each judge's record and conflict list for the next round.

    A judge is conflicted with every team from their own school and with any
    team that reported biased, poor feedback about them. Conflicts already
    present on the judge are kept.
    """
    snapshots = []
    for judge in judges:
        conflicts = list(judge.conflicts)

        if judge.school_id:
            for team in teams:
                if team.school_id == judge.school_id and team.id not in conflicts:
                    conflicts.append(team.id)

        own_feedback = [f for f in feedback if f.judge_id == judge.id]
        for entry in own_feedback:
            if entry.is_poor_and_biased and entry.team_id not in conflicts:
                conflicts.append(entry.team_id)

        judged = [d for d in debates if judge.id in d.judges]
        elimination = [d for d in judged if config.is_elimination_round(d.round_number)]
        if own_feedback:
            avg_feedback = sum(f.average for f in own_feedback) / len(own_feedback)
        else:
            avg_feedback = DEFAULT_FEEDBACK_SCORE

        snapshots.append(
            replace(
                judge,
                conflicts=conflicts,
                total_debates_judged=len(judged),
                elimination_debates=len(elimination),
                avg_feedback_score=avg_feedback,
                assignments_this_tournament=len(judged),
            )
        )
    return snapshots


@dataclass
class PreliminaryStatus:
    """Progress through the preliminary rounds."""

    total_prelims: int
    completed_prelims: int
    incomplete_rounds: List[int] = field(default_factory=list)

    @property
    def all_complete(self) -> bool:
        if self.incomplete_rounds:
            return False
        return self.completed_prelims >= self.total_prelims

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_prelims": self.total_prelims,
            "completed_prelims": self.completed_prelims,
            "all_complete": self.all_complete,
            "incomplete_rounds": list(self.incomplete_rounds),
        }


class TournamentHistory:
    """Running record of a tournament's rounds.

    Pairings go in with ``record_round``, results with ``record_result``;
    ``snapshot`` turns the record into engine inputs for the next round.
    """

    def __init__(
        self,
        config: TournamentConfig,
        debates: Optional[Sequence[DebateRecord]] = None,
        rounds: Optional[Sequence[int]] = None,
    ) -> None:
        self.config = config
        self.debates: List[DebateRecord] = list(debates or [])
        # Rounds played, including rounds in which nobody could be paired
        self.played_rounds: Set[int] = set(rounds or [])
        self.played_rounds.update(d.round_number for d in self.debates)

    @property
    def recorded_rounds(self) -> List[int]:
        return sorted(self.played_rounds)

    def next_round_number(self) -> int:
        rounds = self.recorded_rounds
        return rounds[-1] + 1 if rounds else 1

    def round_debates(self, round_number: int) -> List[DebateRecord]:
        debates = [d for d in self.debates if d.round_number == round_number]
        if not debates:
            raise RoundNotFoundException(f"Round {round_number} has not been recorded")
        return debates

    def record_round(
        self, round_number: int, pairings: Sequence[PairingResult]
    ) -> List[DebateRecord]:
        """Store the pairings of a round. Each round may be stored once."""
        if round_number in self.recorded_rounds:
            raise RoundAlreadyRecordedException(
                f"Round {round_number} already has pairings"
            )
        records = [DebateRecord.from_pairing(round_number, p) for p in pairings]
        self.debates.extend(records)
        self.played_rounds.add(round_number)
        if not records:
            logger.warning("Round %s was played with no rooms", round_number)
        logger.info("Recorded %s rooms for round %s", len(records), round_number)
        return records

    def record_result(
        self,
        round_number: int,
        room_name: str,
        winner_team_id: str,
        proposition_points: float = 0.0,
        opposition_points: float = 0.0,
    ) -> DebateRecord:
        """Store the outcome of one debate."""
        for debate in self.round_debates(round_number):
            if debate.room_name != room_name:
                continue
            if debate.is_bye:
                raise PairingNotFoundException(
                    f"{room_name} in round {round_number} is a bye and has no result"
                )
            if not debate.involves(winner_team_id):
                raise PairingNotFoundException(
                    f"Team {winner_team_id} did not debate in {room_name}"
                )
            if debate.winner_team_id is not None:
                logger.warning(
                    "Overwriting result for %s in round %s", room_name, round_number
                )
            debate.winner_team_id = winner_team_id
            debate.proposition_points = proposition_points
            debate.opposition_points = opposition_points
            return debate
        raise PairingNotFoundException(
            f"No room named {room_name!r} in round {round_number}"
        )

    def pending_debates(self) -> List[DebateRecord]:
        return [d for d in self.debates if not d.is_decided]

    def preliminary_status(self) -> PreliminaryStatus:
        """Which recorded preliminary rounds still have debates without results.

        A round counts as complete once every debate in it is decided; a
        round played with no rooms is complete.
        """
        prelims = [
            n for n in self.recorded_rounds if not self.config.is_elimination_round(n)
        ]
        pending = {d.round_number for d in self.pending_debates()}
        incomplete = [n for n in prelims if n in pending]
        return PreliminaryStatus(
            total_prelims=self.config.prelim_rounds,
            completed_prelims=len(prelims) - len(incomplete),
            incomplete_rounds=incomplete,
        )

    def preliminaries_complete(self) -> bool:
        """True once every configured preliminary round has all its results."""
        return self.preliminary_status().all_complete

    def snapshot(
        self,
        teams: Sequence[Team],
        judges: Sequence[Judge],
        feedback: Sequence[JudgeFeedback] = (),
    ) -> Tuple[List[Team], List[Judge]]:
        """Engine inputs for the next round."""
        team_snapshots = build_team_snapshots(teams, self.debates, self.config)
        judge_snapshots = build_judge_snapshots(
            judges, teams, self.debates, feedback, self.config
        )
        return team_snapshots, judge_snapshots

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tournament": self.config.to_dict(),
            "rounds": self.recorded_rounds,
            "debates": [d.to_dict() for d in self.debates],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentHistory":
        return cls(
            config=TournamentConfig.from_dict(data.get("tournament") or {}),
            debates=[DebateRecord.from_dict(d) for d in data.get("debates") or []],
            rounds=[int(n) for n in data.get("rounds") or []],
        )
