"""Round management for championships.

This module drives the per-round lifecycle:

    pairings pending -> pairings generated -> human result recorded
    -> round simulated -> round complete -> advanced | completed

Every step is idempotent. A human turn (pair, record, simulate) can be
replayed with its own result, for example on every re-render of a screen,
without playing anything twice. Advancing is a separate step the caller
takes once the round is complete.
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

from dataclasses import replace
from typing import Optional

from swisschamp.models import (
    ChampionshipConfig,
    HumanProfile,
    Participant,
    TournamentState,
)
from swisschamp.pairing.greedy_swiss import generate_pairings_for_current_round
from swisschamp.simulation.field_generator import generate_field
from swisschamp.tournament.result_recorder import (
    ResultRecorder,
    get_human_pairing_for_round,
)
from swisschamp.type_hints import HumanResult, RandomSource
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)


def ensure_current_round_pairings(state: TournamentState) -> TournamentState:
    """Pair the current round if it is not paired yet."""
    return generate_pairings_for_current_round(state)


def is_round_complete(state: TournamentState) -> bool:
    """True if the current round has boards and all of them are decided."""
    pairings = state.current_round_pairings
    return bool(pairings) and all(p.is_decided for p in pairings)


def advance_round(state: TournamentState) -> TournamentState:
    """Move to the next round, or complete the championship after the last one.

    Does nothing while the current round is still being played or once the
    championship is completed.
    """
    if state.completed or not is_round_complete(state):
        logger.debug("Round %s cannot advance yet", state.current_round)
        return state
    if state.current_round >= state.total_rounds:
        logger.info(
            "Championship %s completed after %s rounds",
            state.season_id,
            state.total_rounds,
        )
        return replace(state, completed=True)
    logger.info("Advancing to round %s", state.current_round + 1)
    return replace(state, current_round=state.current_round + 1)


def human_opponent_for_round(
    state: TournamentState, round_number: int
) -> Optional[Participant]:
    """The participant facing the human in ``round_number``, or None."""
    pairing = get_human_pairing_for_round(state, round_number)
    if pairing is None:
        return None
    return state.participant(pairing.opponent_of(state.human_id))


def play_human_turn(
    state: TournamentState,
    result: HumanResult,
    rng: Optional[RandomSource] = None,
) -> TournamentState:
    """Run one full turn after the human finished a game.

    Ensures pairings, records the human's result and simulates the rest of
    the round, leaving the round complete but not advanced. Calling it again
    with the returned state returns that same state. Follow it with
    ``advance_round`` to move on.
    """
    recorder = ResultRecorder(rng)
    state = ensure_current_round_pairings(state)
    state = recorder.record_human_result(state, result)
    return recorder.simulate_remaining_matches(state)


def start_championship(
    human_profile: HumanProfile,
    config: Optional[ChampionshipConfig] = None,
    rng: Optional[RandomSource] = None,
) -> TournamentState:
    """Generate a fresh field and pair its first round."""
    return ensure_current_round_pairings(generate_field(human_profile, config, rng))
