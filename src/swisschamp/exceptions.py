"""Exceptions for use in Swiss Champ"""

# Swiss Champ
# Copyright (C) 2025  Swiss Champ developers
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


# ========== Base Application Exception ==========


class SwissChampException(Exception):
    """Base exception for all Swiss Champ errors.

    Every error raised by the championship engine inherits from this class,
    so callers can catch misuse of the engine with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissChampException):
    """Base exception for pairing-related errors."""

    pass


class OddFieldException(PairingException):
    """Raised when pairings are requested for an odd number of participants."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(SwissChampException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class TournamentCompletedException(TournamentStateException):
    """Raised when a completed tournament is asked to pair another round."""

    pass


class RoundNotPairedException(TournamentStateException):
    """Raised when the current round has no pairings yet."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(SwissChampException):
    """Base exception for participant-related errors."""

    pass


class ParticipantNotFoundException(ParticipantException):
    """Raised when a requested participant cannot be found."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissChampException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is not one of the known codes."""

    pass


class HumanPairingSimulationException(ResultException):
    """Raised when the rating model is asked to decide the human's game."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissChampException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== Snapshot/Resource Exceptions ==========


class ResourceException(SwissChampException):
    """Base exception for resource-related errors."""

    pass


class SnapshotException(ResourceException):
    """Raised when a snapshot lacks data that cannot be defaulted."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
