"""Round scheduling for Station Pairing.

Validation runs once before generation; the scheduler then asks the
partnership generator for each team's groupings station by station.
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

from stationpairing.scheduling.history import SchedulerState, Violation
from stationpairing.scheduling.partnerships import (
    available_partnerships,
    generate_partnerships,
)
from stationpairing.scheduling.report import PlayerStats, ScheduleReport
from stationpairing.scheduling.scheduler import (
    ScheduleResult,
    build_schedule,
    generate_schedule,
    replay_schedule,
    schedule_round,
)
from stationpairing.scheduling.scorer import ScoringWeights, score_matchup
from stationpairing.scheduling.setup_validator import (
    SetupValidation,
    validate_tournament_setup,
)

__all__ = [
    "PlayerStats",
    "ScheduleReport",
    "ScheduleResult",
    "SchedulerState",
    "ScoringWeights",
    "SetupValidation",
    "Violation",
    "available_partnerships",
    "build_schedule",
    "generate_partnerships",
    "generate_schedule",
    "replay_schedule",
    "schedule_round",
    "score_matchup",
    "validate_tournament_setup",
]
