"""Deterministic builders for teams, judges and configs.

Used by the test suite, the simulator and the ``debate-test`` CLI. Nothing
here is random: the same arguments always give the same objects.
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

from typing import Any, List, Optional

from debatepairing.models import Judge, Team, TournamentConfig


def school_id_for(index: int, num_schools: int) -> Optional[str]:
    """School of the ``index``-th (0-based) object, round-robin."""
    if num_schools <= 0:
        return None
    return f"school-{index % num_schools + 1}"


def make_teams(
    count: int, num_schools: int = 0, prefix: str = "team", **fields: Any
) -> List[Team]:
    """Build ``count`` fresh teams ``team-1`` .. ``team-N``.

    With ``num_schools`` the teams are spread over that many schools in turn.
    Extra keyword arguments are applied to every team.
    """
    teams = []
    for i in range(count):
        school = school_id_for(i, num_schools)
        teams.append(
            Team(
                id=f"{prefix}-{i + 1}",
                name=f"{prefix.title()} {i + 1}",
                school_id=school,
                school_name=school.replace("-", " ").title() if school else None,
                **fields,
            )
        )
    return teams


def make_judges(
    count: int,
    num_schools: int = 0,
    prefix: str = "judge",
    experience_step: int = 0,
    **fields: Any,
) -> List[Judge]:
    """Build ``count`` judges ``judge-1`` .. ``judge-N``.

    ``experience_step`` gives the i-th judge ``i * experience_step`` debates
    judged, so later judges rank higher.
    """
    judges = []
    for i in range(count):
        school = school_id_for(i, num_schools)
        judge_fields = dict(fields)
        if experience_step:
            judge_fields.setdefault("total_debates_judged", i * experience_step)
        judges.append(
            Judge(
                id=f"{prefix}-{i + 1}",
                name=f"{prefix.title()} {i + 1}",
                school_id=school,
                school_name=school.replace("-", " ").title() if school else None,
                **judge_fields,
            )
        )
    return judges


def make_config(**overrides: Any) -> TournamentConfig:
    """A ``TournamentConfig`` with test-friendly defaults."""
    values = {
        "name": "Test Tournament",
        "prelim_rounds": 5,
        "elimination_rounds": 0,
        "judges_per_debate": 1,
        "bye_awards_win": True,
    }
    values.update(overrides)
    return TournamentConfig(**values)
