# Station Pairing
# Copyright (C) 2025  Station Pairing developers
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
CURRENT_TOURNAMENT_VERSION = 2

# Player status
STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
PLAYER_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)

# Partner modes (only meaningful for game types with more than one player per side)
PARTNER_MODE_FIXED = "fixed"
PARTNER_MODE_ROTATING = "rotating"
PARTNER_MODES = (PARTNER_MODE_FIXED, PARTNER_MODE_ROTATING)
DEFAULT_PARTNER_MODE = PARTNER_MODE_ROTATING

# Game status
GAME_PENDING = "pending"
GAME_COMPLETED = "completed"

# Game results
RESULT_TEAM1_WIN = "team1-win"
RESULT_TEAM2_WIN = "team2-win"
RESULT_DRAW = "draw"
GAME_RESULTS = (RESULT_TEAM1_WIN, RESULT_TEAM2_WIN, RESULT_DRAW)

# Points awarded per game outcome (configurable per tournament)
DEFAULT_SCORING = {"win": 3, "draw": 1, "loss": 0}

# Round timer defaults, duration in minutes
DEFAULT_TIMER = {"enabled": False, "duration": 30}

# Matchup scorer weights
WEIGHT_GAME_COUNT = 10.0  # per average game already played
WEIGHT_REPEAT_OPPONENT = 20.0  # per opponent pair that has met before
WEIGHT_VARIETY = 5.0  # per player switching game type
WEIGHT_JITTER = 5.0  # upper bound of the random tie breaker

# Legacy (version 1) equipment keys and the game types they map to
LEGACY_EQUIPMENT = {
    "shuffleboards": ("shuffleboard", "Shuffleboard", "shuffleboard", "Shuffleboard"),
    "dartboards": ("darts", "Darts", "dartboard", "Dartboard"),
}

# Violation categories in the scheduling report
VIOLATION_GAME_TYPE_REPEAT = "pairing_uniqueness"
VIOLATION_GENERAL_REPEAT = "general_pairing"
VIOLATION_TEAMMATE_REPEAT = "teammate_repeat"

VIOLATION_NAMES = {
    VIOLATION_GAME_TYPE_REPEAT: "Repeat opponents (same game type)",
    VIOLATION_GENERAL_REPEAT: "Repeat opponents (across game types)",
    VIOLATION_TEAMMATE_REPEAT: "Repeat partners",
}
