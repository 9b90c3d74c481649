"""Swiss Champ: Swiss-system championship engine.

One human plus a field of synthetic opponents play a fixed number of rounds.
Every function takes a TournamentState and returns a new one.
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

__version__ = "0.1.0"

from swisschamp.models import (
    ChampionshipConfig,
    HumanProfile,
    Pairing,
    Participant,
    TournamentState,
)
from swisschamp.pairing import generate_pairings_for_current_round
from swisschamp.simulation import generate_field
from swisschamp.tournament import (
    human_position,
    leaderboard,
    rank_participants,
    recalculate_standings,
    rounds_played,
)
from swisschamp.tournament.opponents import OpponentProfile, to_opponent_profile
from swisschamp.tournament.result_recorder import (
    get_human_pairing_for_round,
    record_human_result,
    simulate_remaining_matches,
)
from swisschamp.tournament.round_manager import (
    advance_round,
    ensure_current_round_pairings,
    human_opponent_for_round,
    is_round_complete,
    play_human_turn,
    start_championship,
)

__all__ = [
    "ChampionshipConfig",
    "HumanProfile",
    "OpponentProfile",
    "Pairing",
    "Participant",
    "TournamentState",
    "advance_round",
    "ensure_current_round_pairings",
    "generate_field",
    "generate_pairings_for_current_round",
    "get_human_pairing_for_round",
    "human_opponent_for_round",
    "human_position",
    "is_round_complete",
    "leaderboard",
    "play_human_turn",
    "rank_participants",
    "recalculate_standings",
    "record_human_result",
    "rounds_played",
    "simulate_remaining_matches",
    "start_championship",
    "to_opponent_profile",
]
