import pytest

from stationpairing.models import (
    GameType,
    Player,
    Station,
    Team,
    Tournament,
    TournamentSettings,
)


def build_game_type(
    name="Darts", stations=1, players_per_team=1, partner_mode=None, type_id=None
):
    type_id = type_id or name.lower()
    return GameType(
        id=type_id,
        name=name,
        players_per_team=players_per_team,
        partner_mode=partner_mode,
        stations=[
            Station(id=f"{type_id}-{i}", name=f"{name} {i}")
            for i in range(1, stations + 1)
        ],
    )


def build_team(index, size, inactive=0):
    team_id = f"T{index}"
    players = [Player(id=f"{team_id}-p{i}", name=f"Player {team_id}.{i}") for i in range(1, size + 1)]
    players += [
        Player(id=f"{team_id}-x{i}", name=f"Bench {team_id}.{i}", status="inactive")
        for i in range(1, inactive + 1)
    ]
    return Team(id=team_id, name=f"Team {index}", players=players)


def build_tournament(team_sizes=(2, 2), game_types=None, rounds=3):
    if game_types is None:
        game_types = [build_game_type()]
    return Tournament(
        id="tournament-1",
        name="Summer Party",
        teams=[build_team(i, size) for i, size in enumerate(team_sizes, start=1)],
        settings=TournamentSettings(rounds=rounds, game_types=list(game_types)),
    )


@pytest.fixture
def make_tournament():
    return build_tournament


@pytest.fixture
def make_game_type():
    return build_game_type


@pytest.fixture
def make_team():
    return build_team
