"""ChampionshipConfig data class."""

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

from dataclasses import dataclass

from swisschamp.constants import DEFAULT_TOTAL_PLAYERS, DEFAULT_TOTAL_ROUNDS
from swisschamp.exceptions import InvalidConfigurationException


@dataclass
class ChampionshipConfig:
    """Championship configuration settings.

    Attributes
    ----------
    total_rounds : int
        Number of rounds, fixed at creation.
    total_players : int
        Field size including the human. Must be even so every round pairs
        everybody.
    """

    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    total_players: int = DEFAULT_TOTAL_PLAYERS

    def validate(self) -> None:
        """Raise InvalidConfigurationException if the settings cannot run."""
        if self.total_rounds < 1:
            raise InvalidConfigurationException(
                f"total_rounds must be at least 1, got {self.total_rounds}"
            )
        if self.total_players < 2:
            raise InvalidConfigurationException(
                f"total_players must be at least 2, got {self.total_players}"
            )
        if self.total_players % 2 != 0:
            raise InvalidConfigurationException(
                f"total_players must be even, got {self.total_players}"
            )
