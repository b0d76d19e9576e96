from stationpairing.models import Team
from stationpairing.scheduling import validate_tournament_setup


def test_single_team_is_rejected(make_tournament):
    result = validate_tournament_setup(make_tournament(team_sizes=(2,)))

    assert not result.valid
    assert result.errors == ["At least 2 teams are required"]
    assert result.summary["teams"] == 1


def test_no_teams_is_rejected(make_tournament):
    result = validate_tournament_setup(make_tournament(team_sizes=()))

    assert not result.valid
    assert result.summary["playersPerTeam"] == 0


def test_unequal_team_sizes_are_rejected(make_tournament):
    result = validate_tournament_setup(make_tournament(team_sizes=(2, 3)))

    assert not result.valid
    assert (
        "All teams must have the same number of active players. Current sizes: 2, 3"
        in result.errors
    )


def test_inactive_players_do_not_count(make_tournament, make_team):
    tournament = make_tournament(team_sizes=(2, 2))
    tournament.teams[1] = make_team(2, 2, inactive=1)

    assert validate_tournament_setup(tournament).valid


def test_minimal_feasible_setup_is_valid(make_tournament):
    result = validate_tournament_setup(make_tournament(team_sizes=(2, 2), rounds=1))

    assert result.valid
    assert bool(result)
    assert result.errors == []
    assert result.summary == {
        "teams": 2,
        "playersPerTeam": 2,
        "totalPlayers": 4,
        "totalStations": 1,
        "gameTypes": 1,
    }


def test_game_type_without_stations(make_tournament, make_game_type):
    tournament = make_tournament(game_types=[make_game_type("Cornhole", stations=0)])
    result = validate_tournament_setup(tournament)

    assert not result.valid
    assert "Cornhole has no stations configured" in result.errors


def test_game_type_larger_than_team(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(2, 2),
        game_types=[make_game_type("Tug", players_per_team=3, partner_mode="fixed")],
    )
    result = validate_tournament_setup(tournament)

    assert not result.valid
    assert (
        "Tug requires 3 players per team, but teams only have 2 players" in result.errors
    )


def test_not_enough_players_for_stations(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(1, 1), game_types=[make_game_type(stations=2)]
    )
    result = validate_tournament_setup(tournament)

    assert not result.valid
    assert "Not enough players. Need at least 4 players total for 2 stations" in result.errors


def test_missing_game_types_and_rounds(make_tournament):
    result = validate_tournament_setup(make_tournament(game_types=[], rounds=0))

    assert not result.valid
    assert "At least one game type is required" in result.errors
    assert "Number of rounds must be at least 1" in result.errors


def test_errors_are_aggregated(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(2, 3),
        game_types=[make_game_type("Cornhole", stations=0), make_game_type("Darts")],
    )
    result = validate_tournament_setup(tournament)

    assert len(result.errors) == 2
    assert result.errors[0].startswith("All teams must have the same number")
    assert result.errors[1] == "Cornhole has no stations configured"


def test_under_utilization_warning(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(2, 2),
        game_types=[make_game_type("Cornhole", stations=2, players_per_team=2, partner_mode="fixed")],
    )
    result = validate_tournament_setup(tournament)

    assert result.valid
    assert (
        "Some game types may not be fully utilized. "
        "Consider reducing stations or changing team sizes."
    ) in result.warnings


def test_missing_partner_mode_warning(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(4, 4),
        game_types=[make_game_type("Cornhole", players_per_team=2)],
    )
    result = validate_tournament_setup(tournament)

    assert result.valid
    assert (
        "Cornhole is 2v2 but partner mode not set. Defaulting to 'rotating'."
        in result.warnings
    )


def test_uneven_group_warning(make_tournament, make_game_type):
    tournament = make_tournament(
        team_sizes=(5, 5),
        game_types=[make_game_type("Cornhole", players_per_team=2, partner_mode="rotating")],
    )
    result = validate_tournament_setup(tournament)

    assert result.valid
    assert any("1 player(s) per team will rotate sitting out" in w for w in result.warnings)


def test_validation_is_idempotent(make_tournament):
    tournament = make_tournament(team_sizes=(2, 3))

    first = validate_tournament_setup(tournament)
    second = validate_tournament_setup(tournament)

    assert first.to_dict() == second.to_dict()


def test_validation_does_not_modify_tournament(make_tournament):
    tournament = make_tournament(team_sizes=(3, 3))
    before = tournament.to_dict()

    validate_tournament_setup(tournament)

    assert tournament.to_dict() == before
    assert all(isinstance(team, Team) for team in tournament.teams)
