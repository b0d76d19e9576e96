"""Upgrade tournaments stored in the legacy (version 1) format.

Version 1 tournaments described their equipment as plain counts under
``settings.equipment``. Version 2 replaced that with explicit game types and
stations. Loading goes through :func:`migrate_tournament_data` so the rest of
the package only ever sees version 2 data.
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

import copy
from typing import Any, Dict, List

from stationpairing.constants import (
    CURRENT_TOURNAMENT_VERSION,
    DEFAULT_TIMER,
    LEGACY_EQUIPMENT,
)
from stationpairing.utils import setup_logger

logger = setup_logger(__name__)


def needs_migration(data: Dict[str, Any]) -> bool:
    return data.get("version") != CURRENT_TOURNAMENT_VERSION


def equipment_to_game_types(equipment: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Convert legacy equipment counts into game type dictionaries."""
    game_types = []
    for key, (type_id, type_name, station_id, station_name) in LEGACY_EQUIPMENT.items():
        count = int(equipment.get(key) or 0)
        if count <= 0:
            continue
        game_types.append(
            {
                "id": type_id,
                "name": type_name,
                "playersPerTeam": 1,
                "stations": [
                    {"id": f"{station_id}-{i}", "name": f"{station_name} {i}"}
                    for i in range(1, count + 1)
                ],
            }
        )
    return game_types


def migrate_tournament_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a version 2 copy of ``data``; the input is left untouched.

    Version 2 data is returned as a copy without changes.
    """
    migrated = copy.deepcopy(data)
    if not needs_migration(migrated):
        return migrated

    settings = migrated.setdefault("settings", {})
    equipment = settings.pop("equipment", None) or {}
    if not settings.get("gameTypes"):
        settings["gameTypes"] = equipment_to_game_types(equipment)
    settings.setdefault("timer", dict(DEFAULT_TIMER))
    migrated.setdefault("playerPool", [])
    migrated["version"] = CURRENT_TOURNAMENT_VERSION

    logger.info(
        f"Migrated tournament {migrated.get('name', migrated.get('id', '?'))!r} "
        f"to version {CURRENT_TOURNAMENT_VERSION} "
        f"({len(settings['gameTypes'])} game types)"
    )
    return migrated
