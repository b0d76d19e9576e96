"""Result recording for scheduled games.

Games are the only part of a schedule that changes after generation: scoring
sets a game's result and status in place. Resetting clears every result while
keeping the schedule itself.
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

from stationpairing.constants import GAME_COMPLETED, GAME_PENDING, GAME_RESULTS
from stationpairing.exceptions import InvalidResultException
from stationpairing.models import Game, Tournament
from stationpairing.utils import setup_logger
from stationpairing.utils.validation import validate_choice

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and clearing game results.

    This class is responsible for:
    - Validating results against the known outcomes
    - Marking games completed or pending
    - Resetting a whole schedule's results
    """

    def record_result(self, tournament: Tournament, game_id: str, result: str) -> Game:
        """Record the result of one game.

        Args:
            tournament: Tournament whose schedule holds the game
            game_id: ID of the game
            result: ``"team1-win"``, ``"team2-win"`` or ``"draw"``

        Returns:
            The updated game

        Raises:
            InvalidResultException: If the result is not a known outcome
            GameNotFoundException: If no game has that ID
        """
        check = validate_choice(result, GAME_RESULTS, "Result")
        if not check:
            raise InvalidResultException(check.error_message)

        round_data, game = tournament.find_game(game_id)
        previous = game.result
        game.result = result
        game.status = GAME_COMPLETED

        if previous and previous != result:
            logger.info(
                f"Round {round_data.round}, {game.station_name}: result changed "
                f"from {previous} to {result}"
            )
        else:
            logger.info(f"Round {round_data.round}, {game.station_name}: {result}")
        return game

    def clear_result(self, tournament: Tournament, game_id: str) -> Game:
        """Return a game to pending.

        Raises:
            GameNotFoundException: If no game has that ID
        """
        _, game = tournament.find_game(game_id)
        game.result = None
        game.status = GAME_PENDING
        return game

    def reset_results(self, tournament: Tournament) -> int:
        """Clear every result in the schedule, keeping the games.

        Returns:
            Number of games that had a result
        """
        cleared = 0
        for round_data in tournament.schedule:
            for game in round_data.games:
                if game.result is not None or game.status != GAME_PENDING:
                    cleared += 1
                game.result = None
                game.status = GAME_PENDING
        logger.info(f"Reset {cleared} game result(s) in {tournament.name!r}")
        return cleared
