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

# --- Constants ---
# Debate sides
PROPOSITION = "proposition"
OPPOSITION = "opposition"

# Pairing methods
METHOD_FOLD = "fold"
METHOD_SWISS = "swiss"

# Rounds up to and including this number use fold pairing, later rounds Swiss.
# Fixed regardless of the tournament's preliminary round count.
FOLD_ROUND_LIMIT = 5

# Room naming. One counter is shared by debates and byes.
ROOM_PREFIX = "Room"
BYE_ROOM_PREFIX = "Public Speaking"

# Opponent candidate score: CANDIDATE_BASE_SCORE - |performance difference|
CANDIDATE_BASE_SCORE = 1000

# Judge ranking weights (pre-sort of the whole pool)
JUDGE_WEIGHT_DEBATES = 0.4
JUDGE_WEIGHT_ELIMINATION = 0.3
JUDGE_WEIGHT_FEEDBACK = 0.2
JUDGE_WEIGHT_CONSISTENCY = 0.1

# Per-pairing tie-break among equally loaded judges
JUDGE_QUALITY_FEEDBACK_FACTOR = 10

# Head judge experience: debates + elimination * 2 + feedback * 5
HEAD_JUDGE_ELIMINATION_FACTOR = 2
HEAD_JUDGE_FEEDBACK_FACTOR = 5

# Side imbalance above this |prop - opp| is reported
SIDE_IMBALANCE_LIMIT = 2

# Quality scoring
QUALITY_BASE_SCORE = 100
QUALITY_MIN_SCORE = 0
QUALITY_MAX_SCORE = 100
BYE_QUALITY_SCORE = 0
ERROR_PENALTY = 25
WARNING_PENALTY = 10
FULL_PANEL_BONUS = 10
CLOSE_MATCH_THRESHOLD = 50
CLOSE_MATCH_BONUS = 15
MISMATCH_THRESHOLD = 200
MISMATCH_PENALTY = 15

# Snapshot building
WIN_PERFORMANCE_WEIGHT = 100
DEFAULT_FEEDBACK_SCORE = 3.0
DEFAULT_CONSISTENCY_SCORE = 1.0
# Feedback flagged as biased with an average below this creates a judge conflict
POOR_FEEDBACK_THRESHOLD = 2.5

# Schedule statistics weights
STATS_REPEAT_WEIGHT = 10
STATS_SIDE_WEIGHT = 5
STATS_MULTIPLE_BYE_WEIGHT = 20
STATS_SCHOOL_WEIGHT = 15
STATS_OVERLOAD_WEIGHT = 3
STATS_SIDE_BALANCE_LIMIT = 1
STATS_OVERLOAD_LIMIT = 2

# Environment variable controlling the package log level
LOG_LEVEL_ENV_VAR = "DEBATEPAIRING_LOG_LEVEL"
