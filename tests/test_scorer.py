import random

import pytest

from stationpairing.models import Player
from stationpairing.scheduling import SchedulerState, ScoringWeights, score_matchup
from stationpairing.scheduling.history import pair_key
from stationpairing.scheduling.scorer import count_repeat_opponents

ALICE = Player(id="a", name="Alice")
BOB = Player(id="b", name="Bob")
CARA = Player(id="c", name="Cara")
DAN = Player(id="d", name="Dan")


def test_fresh_state_scores_zero_without_jitter():
    assert score_matchup([ALICE], [BOB], SchedulerState(), "darts") == 0


def test_game_count_penalty_uses_average():
    state = SchedulerState()
    state.game_counts["a"] = 3
    state.game_counts["b"] = 1

    assert score_matchup([ALICE], [BOB], state, "darts") == pytest.approx(-20.0)


def test_repeat_opponent_penalty():
    state = SchedulerState()
    state.opponent_counts[pair_key("a", "b")] = 2

    assert count_repeat_opponents([ALICE], [BOB], state) == 1
    assert score_matchup([ALICE], [BOB], state, "darts") == pytest.approx(-20.0)


def test_variety_bonus_for_switching_game_type():
    state = SchedulerState()
    state.last_activity["a"] = "cornhole"
    state.last_activity["b"] = "darts"

    assert score_matchup([ALICE], [BOB], state, "darts") == pytest.approx(5.0)


def test_players_without_history_get_no_variety_bonus():
    state = SchedulerState()
    state.last_activity["a"] = "cornhole"

    assert score_matchup([ALICE], [BOB], state, "cornhole") == 0


def test_jitter_stays_within_weight():
    rng = random.Random(4)
    for _ in range(200):
        score = score_matchup([ALICE], [BOB], SchedulerState(), "darts", rng=rng)
        assert 0 <= score < 5


def test_custom_weights():
    state = SchedulerState()
    state.game_counts["a"] = 2
    state.opponent_counts[pair_key("a", "b")] = 1
    weights = ScoringWeights(game_count=1.0, repeat_opponent=100.0, variety=0.0, jitter=0.0)

    assert score_matchup([ALICE], [BOB], state, "darts", weights=weights) == pytest.approx(-101.0)


def test_non_repeat_always_beats_repeat():
    state = SchedulerState()
    state.opponent_counts[pair_key("a", "b")] = 1

    for seed in range(100):
        rng = random.Random(seed)
        repeat = score_matchup([ALICE], [BOB], state, "darts", rng=rng)
        fresh = score_matchup([ALICE], [CARA], state, "darts", rng=rng)
        assert fresh > repeat


def test_team_games_count_every_cross_pair():
    state = SchedulerState()
    state.opponent_counts[pair_key("a", "c")] = 1
    state.opponent_counts[pair_key("b", "d")] = 1
    # Teammates who played together are not opponents
    state.opponent_counts[pair_key("a", "b")] = 1

    assert count_repeat_opponents([ALICE, BOB], [CARA, DAN], state) == 2


def test_empty_matchup_is_never_chosen():
    assert score_matchup([], [], SchedulerState(), "darts") == float("-inf")
