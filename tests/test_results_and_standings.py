import pytest

from stationpairing.exceptions import GameNotFoundException, InvalidResultException
from stationpairing.scheduling import generate_schedule
from stationpairing.tournament import (
    ResultRecorder,
    calculate_standings,
    current_round,
    is_tournament_complete,
)


@pytest.fixture
def scheduled(make_tournament):
    tournament = make_tournament(team_sizes=(2, 2), rounds=3)
    tournament.schedule = generate_schedule(tournament, seed=7)
    return tournament


def _game(tournament, round_number):
    return tournament.get_round(round_number).games[0]


def test_record_result_completes_game(scheduled):
    game = _game(scheduled, 1)

    updated = ResultRecorder().record_result(scheduled, game.id, "team1-win")

    assert updated is game
    assert game.result == "team1-win"
    assert game.is_completed


def test_record_result_rejects_unknown_outcome(scheduled):
    game = _game(scheduled, 1)

    with pytest.raises(InvalidResultException):
        ResultRecorder().record_result(scheduled, game.id, "forfeit")
    assert game.result is None


def test_record_result_unknown_game(scheduled):
    with pytest.raises(GameNotFoundException):
        ResultRecorder().record_result(scheduled, "missing", "draw")


def test_clear_and_reset_results(scheduled):
    recorder = ResultRecorder()
    first = _game(scheduled, 1)
    second = _game(scheduled, 2)
    recorder.record_result(scheduled, first.id, "draw")
    recorder.record_result(scheduled, second.id, "team2-win")

    recorder.clear_result(scheduled, first.id)
    assert first.result is None
    assert first.status == "pending"

    assert recorder.reset_results(scheduled) == 1
    assert second.result is None
    assert len(scheduled.schedule) == 3


def test_standings_use_scoring_settings(scheduled):
    recorder = ResultRecorder()
    first = _game(scheduled, 1)
    second = _game(scheduled, 2)
    recorder.record_result(scheduled, first.id, "team1-win")
    recorder.record_result(scheduled, second.id, "draw")

    standings = {s.team_id: s for s in calculate_standings(scheduled)}
    winner = standings[first.team1_id]
    loser = standings[first.team2_id]

    assert winner.wins == 1
    assert loser.losses == 1
    assert winner.draws == loser.draws == 1
    assert winner.points == 4
    assert loser.points == 1
    assert winner.games_played == loser.games_played == 2
    assert calculate_standings(scheduled)[0].team_id == first.team1_id


def test_custom_points(scheduled):
    scheduled.settings.scoring = {"win": 2, "draw": 1, "loss": -1}
    game = _game(scheduled, 1)
    ResultRecorder().record_result(scheduled, game.id, "team2-win")

    standings = {s.team_id: s for s in calculate_standings(scheduled)}

    assert standings[game.team2_id].points == 2
    assert standings[game.team1_id].points == -1


def test_standings_before_any_result(scheduled):
    standings = calculate_standings(scheduled)

    assert [s.points for s in standings] == [0, 0]
    assert standings[0].to_dict()["gamesPlayed"] == 0


def test_progress_tracking(scheduled, make_tournament):
    recorder = ResultRecorder()

    assert current_round(scheduled) == 1
    assert not is_tournament_complete(scheduled)

    recorder.record_result(scheduled, _game(scheduled, 1).id, "draw")
    assert current_round(scheduled) == 2

    for round_number in (2, 3):
        recorder.record_result(scheduled, _game(scheduled, round_number).id, "team1-win")

    assert is_tournament_complete(scheduled)
    assert current_round(scheduled) == 3

    empty = make_tournament()
    assert current_round(empty) == 1
    assert not is_tournament_complete(empty)
