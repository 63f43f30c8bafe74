"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from debatepairing.exceptions import InvalidConfigurationException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    prelim_rounds : int
        Number of preliminary rounds.
    elimination_rounds : int
        Number of elimination rounds. Rounds numbered above ``prelim_rounds``
        count as elimination rounds when judge records are rebuilt.
    judges_per_debate : int
        Target panel size. Odd targets allow majority decisions; when fewer
        eligible judges exist the panel shrinks to the nearest odd size.
    bye_awards_win : bool
        Whether a bye is counted as a win when standings are rebuilt from
        debate history.
    """

    name: str = "Untitled Tournament"
    prelim_rounds: int = 5
    elimination_rounds: int = 0
    judges_per_debate: int = 3
    bye_awards_win: bool = True

    def __post_init__(self) -> None:
        if self.prelim_rounds < 0:
            raise InvalidConfigurationException(
                f"prelim_rounds must be >= 0, got {self.prelim_rounds}"
            )
        if self.elimination_rounds < 0:
            raise InvalidConfigurationException(
                f"elimination_rounds must be >= 0, got {self.elimination_rounds}"
            )
        if self.judges_per_debate < 0:
            raise InvalidConfigurationException(
                f"judges_per_debate must be >= 0, got {self.judges_per_debate}"
            )

    @property
    def total_rounds(self) -> int:
        return self.prelim_rounds + self.elimination_rounds

    def is_elimination_round(self, round_number: int) -> bool:
        return round_number > self.prelim_rounds

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "prelim_rounds": self.prelim_rounds,
            "elimination_rounds": self.elimination_rounds,
            "judges_per_debate": self.judges_per_debate,
            "bye_awards_win": self.bye_awards_win,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        try:
            return cls(
                name=data.get("name", "Untitled Tournament"),
                prelim_rounds=int(data.get("prelim_rounds", 5)),
                elimination_rounds=int(data.get("elimination_rounds", 0)),
                judges_per_debate=int(data.get("judges_per_debate", 3)),
                bye_awards_win=bool(data.get("bye_awards_win", True)),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise InvalidConfigurationException(
                f"Invalid tournament configuration: {e}"
            ) from e
