"""Type hints used in Debate Pairing."""

from typing import Callable, Dict, List, Literal, Sequence

# Side type alias (for type hints)
Side = Literal["proposition", "opposition"]

# Pairing method used for a round
PairingMethod = Literal["fold", "swiss"]

# Team and judge identifiers are opaque strings
TeamId = str
JudgeId = str

# Returns a new ordering of the given teams (round 1 only)
Shuffler = Callable[[Sequence["Team"]], List["Team"]]

# Judge id -> assignments counted so far
Workload = Dict[str, int]

#  LocalWords:  Shuffler
