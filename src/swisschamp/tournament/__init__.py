"""Championship management for Swiss Champ.

Standings, tiebreaks, result recording and round progression. The round
controller lives in ``swisschamp.tournament.round_manager`` and is imported
from there (it depends on the pairing package, which depends on standings).
"""

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

from swisschamp.tournament.standings import (
    human_position,
    leaderboard,
    rank_participants,
    recalculate_standings,
    rounds_played,
)
from swisschamp.tournament.tiebreak_calculator import TiebreakCalculator

__all__ = [
    "TiebreakCalculator",
    "human_position",
    "leaderboard",
    "rank_participants",
    "recalculate_standings",
    "rounds_played",
]
