"""Scheduling report: participation per player and the rules that had to bend."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from stationpairing.constants import VIOLATION_NAMES
from stationpairing.models import Tournament
from stationpairing.scheduling.history import SchedulerState, Violation


@dataclass
class PlayerStats:
    """Participation of one player over the whole schedule."""

    player_id: str
    name: str
    team_name: str
    total_games: int = 0
    game_types: Dict[str, int] = field(default_factory=dict)
    rest_rounds: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playerId": self.player_id,
            "name": self.name,
            "teamName": self.team_name,
            "totalGames": self.total_games,
            "gameTypes": dict(self.game_types),
            "restRounds": list(self.rest_rounds),
        }


@dataclass
class ScheduleReport:
    """Summary of a generated schedule.

    Attributes
    ----------
    players : list of PlayerStats
        One entry per active player, in team and roster order.
    violations : list of Violation
        Repeat opponents and repeat partners, in scheduling order.
    """

    players: List[PlayerStats] = field(default_factory=list)
    violations: List[Violation] = field(default_factory=list)

    @classmethod
    def from_state(cls, state: SchedulerState, tournament: Tournament) -> "ScheduleReport":
        type_names = {gt.id: gt.name for gt in tournament.settings.game_types}
        players = []
        for team in tournament.teams:
            for player in team.active_players:
                per_type = state.game_type_counts.get(player.id, {})
                players.append(
                    PlayerStats(
                        player_id=player.id,
                        name=player.name,
                        team_name=team.name,
                        total_games=state.games_played(player.id),
                        game_types={
                            name: per_type.get(type_id, 0)
                            for type_id, name in type_names.items()
                        },
                        rest_rounds=list(state.rest_rounds.get(player.id, [])),
                    )
                )
        return cls(players=players, violations=list(state.violations))

    @property
    def game_count_spread(self) -> int:
        """Difference between the most and fewest games any player got."""
        if not self.players:
            return 0
        counts = [p.total_games for p in self.players]
        return max(counts) - min(counts)

    def violations_by_type(self) -> Dict[str, List[Violation]]:
        grouped: Dict[str, List[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.type, []).append(violation)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": [p.to_dict() for p in self.players],
            "violations": [v.to_dict() for v in self.violations],
            "gameCountSpread": self.game_count_spread,
        }

    def summary_text(self) -> str:
        """Render the report as plain text."""
        lines = ["SCHEDULING REPORT", "=" * 60]
        if not self.violations:
            lines.append("All scheduling rules were followed.")
        else:
            lines.append(
                f"Schedule generated with {len(self.violations)} rule violation(s):"
            )
            for violation_type, violations in self.violations_by_type().items():
                lines.append("")
                lines.append(f"{VIOLATION_NAMES.get(violation_type, violation_type)}:")
                lines.extend(f"  - {v.description}" for v in violations)

        lines.append("")
        lines.append("PLAYER PARTICIPATION")
        lines.append("-" * 40)
        for stats in self.players:
            per_type = ", ".join(f"{name}: {count}" for name, count in stats.game_types.items())
            lines.append(
                f"{stats.name} ({stats.team_name}): Total: {stats.total_games}, "
                f"Games: [{per_type}], Rests: {len(stats.rest_rounds)}"
            )
        lines.append("")
        lines.append(f"Game count spread: {self.game_count_spread}")
        return "\n".join(lines)
