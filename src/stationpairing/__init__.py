"""Station Pairing: round scheduling for team party tournaments.

Teams rotate through game stations over a fixed number of rounds. The
scheduler balances games played, avoids rematches, rotates or fixes
partnerships and leaves unassignable players resting.
"""

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

from stationpairing.models import (
    Game,
    GameType,
    Player,
    PlayerRef,
    Round,
    Station,
    Team,
    Tournament,
    TournamentSettings,
)
from stationpairing.scheduling import (
    ScheduleReport,
    ScoringWeights,
    SetupValidation,
    build_schedule,
    generate_partnerships,
    generate_schedule,
    validate_tournament_setup,
)

__version__ = "1.0.0"

__all__ = [
    "Game",
    "GameType",
    "Player",
    "PlayerRef",
    "Round",
    "ScheduleReport",
    "ScoringWeights",
    "SetupValidation",
    "Station",
    "Team",
    "Tournament",
    "TournamentSettings",
    "build_schedule",
    "generate_partnerships",
    "generate_schedule",
    "validate_tournament_setup",
]
