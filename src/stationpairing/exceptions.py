"""Exceptions for use in Station Pairing"""

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

from typing import List, Optional


# ========== Base Application Exception ==========


class StationPairingException(Exception):
    """Base exception for all Station Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(StationPairingException):
    """Base exception for schedule generation errors."""

    pass


class InvalidSetupException(SchedulingException):
    """Raised when a tournament setup cannot be scheduled.

    The validator's error messages are kept on ``errors`` so callers can
    surface each of them.
    """

    def __init__(self, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        super().__init__(
            "Cannot generate schedule: " + ", ".join(self.errors)
            if self.errors
            else "Cannot generate schedule"
        )


# ========== Tournament Exceptions ==========


class TournamentException(StationPairingException):
    """Base exception for tournament-related errors."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class GameNotFoundException(TournamentException):
    """Raised when a requested game does not exist in the schedule."""

    pass


# ========== Result Exceptions ==========


class ResultException(StationPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is not one of the known outcomes."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(StationPairingException):
    """Base exception for validation errors."""

    pass


class InvalidTournamentDataException(ValidationException):
    """Raised when tournament data is malformed or incomplete."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(StationPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
