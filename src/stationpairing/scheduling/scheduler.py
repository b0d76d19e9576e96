"""Round scheduling engine.

Builds a complete multi-round schedule: every round, each station is offered
to the best available matchup of two teams' partnerships, and players left
over rest. Rounds are computed one after another as a fold over a
:class:`SchedulerState`, so round ``n``'s history feeds round ``n + 1``'s
scoring while the "already playing this round" set starts empty each round.
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

import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Optional, Sequence, Set, Tuple

from stationpairing.constants import PARTNER_MODE_FIXED
from stationpairing.exceptions import InvalidSetupException
from stationpairing.models import (
    Game,
    GameType,
    Player,
    PlayerRef,
    Round,
    Station,
    Team,
    Tournament,
)
from stationpairing.scheduling.history import SchedulerState
from stationpairing.scheduling.partnerships import available_partnerships
from stationpairing.scheduling.scorer import DEFAULT_WEIGHTS, ScoringWeights, score_matchup
from stationpairing.scheduling.setup_validator import (
    SetupValidation,
    validate_tournament_setup,
)
from stationpairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class StationSlot:
    """A station together with the game type played on it."""

    station: Station
    game_type: GameType

    @property
    def players_per_team(self) -> int:
        return self.game_type.players_per_team

    @property
    def partner_mode(self) -> str:
        return self.game_type.effective_partner_mode


@dataclass
class Matchup:
    """Best candidate found so far for a station."""

    team1: Team
    team2: Team
    team1_players: List[Player]
    team2_players: List[Player]
    score: float


@dataclass
class ScheduleResult:
    """A generated schedule plus what was learned while building it.

    Attributes
    ----------
    rounds : list of Round
        The schedule, rounds 1..N.
    state : SchedulerState
        History after the last round; feeds the scheduling report.
    validation : SetupValidation
        Validator output the generation ran under (warnings included).
    unfilled_slots : list of tuple
        ``(round, game type ID, station ID)`` for every station left empty.
    """

    rounds: List[Round]
    state: SchedulerState
    validation: SetupValidation
    seed: Optional[int] = None
    unfilled_slots: List[Tuple[int, str, str]] = field(default_factory=list)


def station_slots(game_types: Sequence[GameType]) -> List[StationSlot]:
    """Flatten every game type's stations into one list of slots."""
    return [StationSlot(station, gt) for gt in game_types for station in gt.stations]


def _available_count(team: Team, busy: Set[str]) -> int:
    return sum(1 for p in team.active_players if p.id not in busy)


def find_best_matchup(
    slot: StationSlot,
    teams: Sequence[Team],
    round_number: int,
    busy: Set[str],
    state: SchedulerState,
    rng: Optional[random.Random] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Optional[Matchup]:
    """Pick the highest scoring pair of partnerships for a station.

    Every pair of teams with enough free players is tried, with every
    combination of their fully available partnerships. Ties keep the first
    combination found.

    Returns:
        The winning Matchup, or None when no team pair can field a game
    """
    size = slot.players_per_team
    candidates = [team for team in teams if _available_count(team, busy) >= size]
    if len(candidates) < 2:
        return None

    best: Optional[Matchup] = None
    for team1, team2 in combinations(candidates, 2):
        team1_groups = available_partnerships(team1, slot.game_type, round_number, busy)
        if not team1_groups:
            continue
        team2_groups = available_partnerships(team2, slot.game_type, round_number, busy)
        for team1_players in team1_groups:
            for team2_players in team2_groups:
                score = score_matchup(
                    team1_players,
                    team2_players,
                    state,
                    slot.game_type.id,
                    rng=rng,
                    weights=weights,
                )
                if best is None or score > best.score:
                    best = Matchup(team1, team2, team1_players, team2_players, score)
    return best


def build_game(
    slot: StationSlot, matchup: Matchup, rng: Optional[random.Random] = None
) -> Game:
    """Materialize a matchup as a pending game with player snapshots."""
    return Game(
        id=generate_id(rng=rng),
        station=slot.station.id,
        station_name=slot.station.name,
        game_type=slot.game_type.id,
        game_type_name=slot.game_type.name,
        team1_players=[PlayerRef.snapshot(matchup.team1, p) for p in matchup.team1_players],
        team2_players=[PlayerRef.snapshot(matchup.team2, p) for p in matchup.team2_players],
    )


def schedule_round(
    state: SchedulerState,
    round_number: int,
    teams: Sequence[Team],
    game_types: Sequence[GameType],
    rng: random.Random,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Tuple[SchedulerState, Round]:
    """Schedule one round.

    Args:
        state: History of the previous rounds; it is not modified
        round_number: Round to schedule (1-indexed)
        teams: Teams in tournament order
        game_types: Configured game types
        rng: Random source for station order, jitter and game IDs
        weights: Scorer weights

    Returns:
        Tuple of (history including this round, the round)
    """
    next_state = state.copy()
    busy: Set[str] = set()
    games: List[Game] = []

    slots = station_slots(game_types)
    rng.shuffle(slots)

    for slot in slots:
        matchup = find_best_matchup(
            slot, teams, round_number, busy, next_state, rng=rng, weights=weights
        )
        if matchup is None:
            logger.debug(f"Round {round_number}: {slot.station.name} left empty")
            continue

        game = build_game(slot, matchup, rng=rng)
        games.append(game)
        busy.update(game.player_ids)
        next_state.record_game(
            game, round_number, fixed_partners=slot.partner_mode == PARTNER_MODE_FIXED
        )

    for team in teams:
        for player in team.active_players:
            if player.id not in busy:
                next_state.record_rest(player.id, round_number)

    next_state.rounds_scheduled = round_number
    return next_state, Round(round=round_number, games=games, timer=None)


def build_schedule(
    tournament: Tournament,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    weights: Optional[ScoringWeights] = None,
) -> ScheduleResult:
    """Validate a tournament and generate its full schedule.

    Args:
        tournament: Tournament snapshot; it is not modified
        rng: Random source; takes precedence over ``seed``
        seed: Seed for a fresh random source, for reproducible schedules
        weights: Scorer weights, defaults to :data:`DEFAULT_WEIGHTS`

    Returns:
        ScheduleResult with the rounds and the final history

    Raises:
        InvalidSetupException: If the setup does not validate
    """
    validation = validate_tournament_setup(tournament)
    if not validation.valid:
        logger.error(f"Cannot generate schedule: {', '.join(validation.errors)}")
        raise InvalidSetupException(validation.errors)

    for warning in validation.warnings:
        logger.warning(warning)

    if rng is None:
        rng = random.Random(seed)
    weights = weights or DEFAULT_WEIGHTS

    teams = tournament.teams
    game_types = tournament.settings.game_types
    num_rounds = tournament.settings.rounds
    total_slots = len(station_slots(game_types))

    logger.info(
        f"Scheduling {num_rounds} rounds for {len(teams)} teams of "
        f"{validation.summary['playersPerTeam']} players; game types: "
        + ", ".join(f"{gt.name} ({len(gt.stations)} stations)" for gt in game_types)
    )

    state = SchedulerState()
    rounds: List[Round] = []
    unfilled: List[Tuple[int, str, str]] = []
    for round_number in range(1, num_rounds + 1):
        state, round_data = schedule_round(
            state, round_number, teams, game_types, rng, weights
        )
        rounds.append(round_data)

        used = {(game.game_type, game.station) for game in round_data.games}
        unfilled.extend(
            (round_number, slot.game_type.id, slot.station.id)
            for slot in station_slots(game_types)
            if (slot.game_type.id, slot.station.id) not in used
        )
        logger.info(
            f"Round {round_number}: {len(round_data.games)}/{total_slots} stations filled"
        )

    if state.violations:
        logger.warning(
            f"Schedule generated with {len(state.violations)} repeat pairing(s)"
        )
    for team in teams:
        for player in team.active_players:
            logger.debug(
                f"{player.name} ({team.name}): games {state.games_played(player.id)}, "
                f"rests {state.rest_count(player.id)}"
            )

    return ScheduleResult(
        rounds=rounds,
        state=state,
        validation=validation,
        seed=seed,
        unfilled_slots=unfilled,
    )


def generate_schedule(
    tournament: Tournament,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    weights: Optional[ScoringWeights] = None,
) -> List[Round]:
    """Generate the full schedule for a tournament.

    The result is plain data; storing it (or not, for a preview) is up to the
    caller.

    Raises:
        InvalidSetupException: If the setup does not validate
    """
    return build_schedule(tournament, rng=rng, seed=seed, weights=weights).rounds


def replay_schedule(tournament: Tournament) -> SchedulerState:
    """Rebuild the scheduling history of a stored schedule.

    Games are folded in the order they are stored, so a schedule saved from
    :func:`build_schedule` gives back the same history the generator ended
    with.
    """
    state = SchedulerState()
    for round_data in tournament.schedule:
        for game in round_data.games:
            game_type = tournament.settings.get_game_type(game.game_type)
            fixed = (
                game_type is not None
                and game_type.effective_partner_mode == PARTNER_MODE_FIXED
            )
            state.record_game(game, round_data.round, fixed_partners=fixed)

        playing = round_data.playing_ids
        for team in tournament.teams:
            for player in team.active_players:
                if player.id not in playing:
                    state.record_rest(player.id, round_data.round)
        state.rounds_scheduled = round_data.round
    return state
