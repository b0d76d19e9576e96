"""Shared helpers for Station Pairing: logging setup and ID generation."""

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

import logging
import random
import uuid
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger that writes to the shared package handler.

    The handler is attached once to the ``stationpairing`` parent logger, so
    module loggers propagate to it and a single ``setLevel`` on the root or
    package logger controls verbosity.
    """
    global _handler
    package_logger = logging.getLogger("stationpairing")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
        package_logger.setLevel(level)
    return logging.getLogger(name)


def generate_id(prefix: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """Generate a unique identifier.

    Args:
        prefix: Optional prefix, joined to the ID with an underscore
        rng: Random source; when given the ID is derived from it so seeded
            runs produce the same IDs

    Returns:
        A UUID4 string, optionally prefixed
    """
    if rng is None:
        value = uuid.uuid4()
    else:
        value = uuid.UUID(int=rng.getrandbits(128), version=4)
    return f"{prefix}_{value}" if prefix else str(value)
