import random
from collections import Counter
from typing import List, get_type_hints

import pytest

from stationpairing.exceptions import InvalidSetupException
from stationpairing.models import GameType, Player, Station
from stationpairing.scheduling import (
    SchedulerState,
    build_schedule,
    generate_partnerships,
    generate_schedule,
    replay_schedule,
    schedule_round,
)
from stationpairing.scheduling.history import pair_key
from stationpairing.scheduling.scheduler import Matchup


def _game_counts(rounds):
    counts = Counter()
    for round_data in rounds:
        for game in round_data.games:
            counts.update(game.player_ids)
    return counts


def _mixed_tournament(make_tournament, make_game_type, rounds=6):
    return make_tournament(
        team_sizes=(4, 4, 4, 4),
        game_types=[
            make_game_type("Darts", stations=2),
            make_game_type("Cornhole", stations=1, players_per_team=2, partner_mode="rotating"),
        ],
        rounds=rounds,
    )


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_no_player_is_double_booked(make_tournament, make_game_type, seed):
    rounds = generate_schedule(_mixed_tournament(make_tournament, make_game_type), seed=seed)

    for round_data in rounds:
        ids = [pid for game in round_data.games for pid in game.player_ids]
        assert len(ids) == len(set(ids))


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_games_are_between_different_teams(make_tournament, make_game_type, seed):
    rounds = generate_schedule(_mixed_tournament(make_tournament, make_game_type), seed=seed)

    for round_data in rounds:
        for game in round_data.games:
            assert {p.team_id for p in game.team1_players} == {game.team1_id}
            assert {p.team_id for p in game.team2_players} == {game.team2_id}
            assert game.team1_id != game.team2_id


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_sides_match_players_per_team(make_tournament, make_game_type, seed):
    tournament = _mixed_tournament(make_tournament, make_game_type)
    sizes = {gt.id: gt.players_per_team for gt in tournament.settings.game_types}

    for round_data in generate_schedule(tournament, seed=seed):
        for game in round_data.games:
            assert len(game.team1_players) == sizes[game.game_type]
            assert len(game.team2_players) == sizes[game.game_type]


def test_fixed_partnerships_are_kept_in_games(make_tournament, make_game_type):
    cornhole = make_game_type("Cornhole", stations=1, players_per_team=2, partner_mode="fixed")
    tournament = make_tournament(team_sizes=(4, 4, 4), game_types=[cornhole], rounds=8)
    fixed = {
        team.id: {frozenset(p.id for p in g) for g in generate_partnerships(team, cornhole, 1)}
        for team in tournament.teams
    }

    for round_data in generate_schedule(tournament, seed=11):
        for game in round_data.games:
            assert frozenset(p.player_id for p in game.team1_players) in fixed[game.team1_id]
            assert frozenset(p.player_id for p in game.team2_players) in fixed[game.team2_id]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_game_counts_stay_balanced(make_tournament, make_game_type, seed):
    tournament = make_tournament(
        team_sizes=(4, 4, 4, 4),
        game_types=[make_game_type("Darts", stations=2)],
        rounds=10,
    )
    rounds = generate_schedule(tournament, seed=seed)
    counts = _game_counts(rounds)
    all_ids = [p.id for team in tournament.teams for p in team.players]

    per_player = [counts[pid] for pid in all_ids]
    assert max(per_player) - min(per_player) <= 2


def test_no_rematches_when_avoidable(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(3, 3, 3, 3, 3, 3),
        game_types=[make_game_type("Darts", stations=1)],
        rounds=6,
    )
    result = build_schedule(tournament, seed=8)

    faced = Counter()
    for round_data in result.rounds:
        for game in round_data.games:
            for a in game.team1_players:
                for b in game.team2_players:
                    faced[pair_key(a.player_id, b.player_id)] += 1

    assert faced
    assert max(faced.values()) == 1
    assert result.state.violations == []


def test_rematches_tolerated_when_unavoidable(make_tournament):
    tournament = make_tournament(team_sizes=(2, 2), rounds=10)
    result = build_schedule(tournament, seed=3)

    assert len(result.rounds) == 10
    assert all(len(r.games) == 1 for r in result.rounds)
    assert result.state.violations


def test_end_to_end_darts_scenario(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(2, 2, 2, 2),
        game_types=[make_game_type("Darts", stations=2)],
        rounds=3,
    )
    rounds = generate_schedule(tournament, seed=42)

    assert [r.round for r in rounds] == [1, 2, 3]
    everyone = {p.id for team in tournament.teams for p in team.players}
    for round_data in rounds:
        assert len(round_data.games) <= 2
        playing = round_data.playing_ids
        assert len(playing) == 4
        assert len(everyone - playing) == 4
        for game in round_data.games:
            assert game.status == "pending"
            assert game.result is None
            assert game.game_type_name == "Darts"

    counts = _game_counts(rounds)
    assert all(counts[pid] in (1, 2) for pid in everyone)


def test_same_seed_gives_same_schedule(make_tournament, make_game_type):
    tournament = _mixed_tournament(make_tournament, make_game_type)

    first = [r.to_dict() for r in generate_schedule(tournament, seed=99)]
    second = [r.to_dict() for r in generate_schedule(tournament, seed=99)]

    assert first == second


def test_explicit_rng_is_used(make_tournament, make_game_type):
    tournament = _mixed_tournament(make_tournament, make_game_type)

    first = generate_schedule(tournament, rng=random.Random(5))
    second = generate_schedule(tournament, rng=random.Random(5))

    assert [g.id for r in first for g in r.games] == [g.id for r in second for g in r.games]


def test_generation_does_not_modify_tournament(make_tournament, make_game_type):
    tournament = _mixed_tournament(make_tournament, make_game_type)
    before = tournament.to_dict()

    generate_schedule(tournament, seed=1)

    assert tournament.to_dict() == before


def test_schedule_round_leaves_input_state_untouched(make_tournament):
    tournament = make_tournament(team_sizes=(2, 2, 2))
    state = SchedulerState()

    next_state, round_data = schedule_round(
        state, 1, tournament.teams, tournament.settings.game_types, random.Random(1)
    )

    assert state.game_counts == Counter()
    assert state.rounds_scheduled == 0
    assert next_state.rounds_scheduled == 1
    assert sum(next_state.game_counts.values()) == 2
    assert len(round_data.games) == 1
    resting = [pid for pid, rounds in next_state.rest_rounds.items() if rounds == [1]]
    assert len(resting) == 4


def test_unfillable_station_is_skipped(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(2, 2),
        game_types=[
            make_game_type("Cornhole", players_per_team=2, partner_mode="fixed"),
            make_game_type("Darts"),
        ],
        rounds=4,
    )
    result = build_schedule(tournament, seed=6)

    assert len(result.rounds) == 4
    assert all(len(r.games) == 1 for r in result.rounds)
    assert [round_number for round_number, _, _ in result.unfilled_slots] == [1, 2, 3, 4]


def test_invalid_setup_raises(make_tournament):
    with pytest.raises(InvalidSetupException) as excinfo:
        generate_schedule(make_tournament(team_sizes=(3,)))

    assert excinfo.value.errors == ["At least 2 teams are required"]


def test_inactive_players_never_scheduled(make_tournament, make_team):
    tournament = make_tournament(team_sizes=(2, 2), rounds=4)
    tournament.teams[0] = make_team(1, 2, inactive=2)

    for round_data in generate_schedule(tournament, seed=2):
        for game in round_data.games:
            assert all("-x" not in pid for pid in game.player_ids)


def test_player_snapshots_survive_renames(make_tournament):
    tournament = make_tournament(team_sizes=(2, 2), rounds=1)
    rounds = generate_schedule(tournament, seed=1)
    game = rounds[0].games[0]
    ref = game.team1_players[0]
    original_name = ref.player_name

    team = tournament.get_team(ref.team_id)
    team.get_player(ref.player_id).name = "Renamed"
    team.name = "Renamed Team"

    assert game.team1_players[0].player_name == original_name
    assert game.team1_players[0].team_name != "Renamed Team"


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_station_order_changes_between_rounds(make_tournament, make_game_type, seed):
    # Whichever station is filled first leaves the other one unfillable
    tournament = make_tournament(
        team_sizes=(2, 2),
        game_types=[
            make_game_type("Cornhole", players_per_team=2, partner_mode="fixed"),
            make_game_type("Darts"),
        ],
        rounds=20,
    )

    played = Counter(r.games[0].game_type for r in generate_schedule(tournament, seed=seed))

    assert set(played) == {"cornhole", "darts"}


def test_zero_rounds_is_rejected(make_tournament):
    with pytest.raises(InvalidSetupException) as excinfo:
        generate_schedule(make_tournament(rounds=0))

    assert "Number of rounds must be at least 1" in excinfo.value.errors


def test_unfilled_slots_tell_game_types_apart(make_tournament):
    # Both game types name their only station "lane"
    cornhole = GameType(
        id="cornhole",
        name="Cornhole",
        players_per_team=2,
        partner_mode="fixed",
        stations=[Station(id="lane", name="Cornhole Lane")],
    )
    darts = GameType(id="darts", name="Darts", stations=[Station(id="lane", name="Darts Lane")])
    tournament = make_tournament(team_sizes=(2, 2), game_types=[cornhole, darts], rounds=4)

    result = build_schedule(tournament, seed=6)

    assert len(result.unfilled_slots) == 4
    for round_data, (round_number, game_type, station) in zip(result.rounds, result.unfilled_slots):
        assert round_number == round_data.round
        assert station == "lane"
        assert game_type != round_data.games[0].game_type


def test_replay_rebuilds_generation_history(make_tournament, make_game_type):
    tournament = _mixed_tournament(make_tournament, make_game_type, rounds=8)
    result = build_schedule(tournament, seed=12)
    tournament.schedule = result.rounds

    replayed = replay_schedule(tournament)

    assert replayed.game_counts == result.state.game_counts
    assert replayed.rest_rounds == result.state.rest_rounds
    assert replayed.violations == result.state.violations
    assert replayed.rounds_scheduled == 8


def test_partnership_annotations_resolve():
    assert get_type_hints(Matchup)["team1_players"] == List[Player]
    assert get_type_hints(generate_partnerships)["return"] == List[List[Player]]
