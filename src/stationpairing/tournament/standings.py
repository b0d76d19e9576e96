"""Team standings and tournament progress."""

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

from dataclasses import dataclass
from typing import Any, Dict, List

from stationpairing.constants import (
    DEFAULT_SCORING,
    RESULT_DRAW,
    RESULT_TEAM1_WIN,
    RESULT_TEAM2_WIN,
)
from stationpairing.models import Tournament


@dataclass
class TeamStanding:
    """Accumulated results of one team."""

    team_id: str
    team_name: str
    points: float = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    games_played: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teamId": self.team_id,
            "teamName": self.team_name,
            "points": self.points,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "gamesPlayed": self.games_played,
        }


def calculate_standings(tournament: Tournament) -> List[TeamStanding]:
    """Compute team standings from recorded results.

    Only games with a result count. Teams are ordered by points, then wins,
    then fewer games played.
    """
    scoring = dict(DEFAULT_SCORING)
    scoring.update(tournament.settings.scoring)

    standings = {
        team.id: TeamStanding(team_id=team.id, team_name=team.name)
        for team in tournament.teams
    }

    for round_data in tournament.schedule:
        for game in round_data.games:
            if not game.result:
                continue
            team1 = standings.get(game.team1_id)
            team2 = standings.get(game.team2_id)
            if team1 is None or team2 is None:
                continue

            team1.games_played += 1
            team2.games_played += 1
            if game.result == RESULT_TEAM1_WIN:
                winner, loser = team1, team2
            elif game.result == RESULT_TEAM2_WIN:
                winner, loser = team2, team1
            elif game.result == RESULT_DRAW:
                for side in (team1, team2):
                    side.draws += 1
                    side.points += scoring["draw"]
                continue
            else:
                continue
            winner.wins += 1
            winner.points += scoring["win"]
            loser.losses += 1
            loser.points += scoring["loss"]

    return sorted(
        standings.values(),
        key=lambda s: (-s.points, -s.wins, s.games_played),
    )


def is_tournament_complete(tournament: Tournament) -> bool:
    """True once every round has games and every game has a result."""
    if not tournament.schedule:
        return False
    if not any(round_data.games for round_data in tournament.schedule):
        return False
    return all(round_data.is_completed for round_data in tournament.schedule)


def current_round(tournament: Tournament) -> int:
    """First round with a game still missing its result.

    Falls back to the last round once everything is scored, and to 1 when
    there is no schedule.
    """
    if not tournament.schedule:
        return 1
    for round_data in tournament.schedule:
        if any(not game.result for game in round_data.games):
            return round_data.round
    return tournament.schedule[-1].round
