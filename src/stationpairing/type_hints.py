"""Type hints used in Station Pairing."""

from typing import TYPE_CHECKING, List, Literal, Optional

if TYPE_CHECKING:
    from stationpairing.models.team import Player

# Player status literals
PlayerStatus = Literal["active", "inactive"]

# Partner mode literals
PartnerMode = Literal["fixed", "rotating"]

# Game status and result literals
GameStatus = Literal["pending", "completed"]
GameResult = Literal["team1-win", "team2-win", "draw"]
MaybeResult = Optional[GameResult]

# One side of a game: the teammates fielded together
Partnership = List["Player"]
# All partnerships a team can field for a game type in one round
Partnerships = List[Partnership]
