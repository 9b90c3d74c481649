"""Result recording for championships.

The human's result is reported from outside; every other board of the
current round is decided by the rating model.
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
from typing import List, Optional

from swisschamp.constants import (
    HUMAN_RESULTS,
    OUTCOME_DRAW,
    OUTCOME_FIRST_WINS,
    OUTCOME_SECOND_WINS,
    RESULT_DRAW,
    RESULT_WIN,
)
from swisschamp.exceptions import InvalidResultException, RoundNotPairedException
from swisschamp.models import Pairing, TournamentState
from swisschamp.simulation.rating_model import ResultSimulator
from swisschamp.tournament.standings import recalculate_standings
from swisschamp.type_hints import HumanResult, Outcome, RandomSource
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)


def get_human_pairing_for_round(
    state: TournamentState, round_number: int
) -> Optional[Pairing]:
    """The board the human plays in ``round_number``, or None."""
    for pairing in state.pairings:
        if pairing.round_number == round_number and pairing.involves(state.human_id):
            return pairing
    return None


def human_result_to_outcome(result: HumanResult, human_is_first: bool = True) -> Outcome:
    """Translate the human's win/loss/draw into a board outcome code."""
    if result not in HUMAN_RESULTS:
        raise InvalidResultException(
            f"Unknown result {result!r}; expected one of {', '.join(HUMAN_RESULTS)}"
        )
    if result == RESULT_DRAW:
        return OUTCOME_DRAW
    human_won = result == RESULT_WIN
    if human_won == human_is_first:
        return OUTCOME_FIRST_WINS
    return OUTCOME_SECOND_WINS


class ResultRecorder:
    """Handles recording results for the current round.

    This class is responsible for:
    - Recording the human's reported result (first write wins)
    - Simulating every other undecided board of the round
    - Recomputing standings after each change
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.simulator = ResultSimulator(rng)

    def record_human_result(
        self, state: TournamentState, result: HumanResult
    ) -> TournamentState:
        """Set the outcome of the human's board in the current round.

        Raises:
            InvalidResultException: If result is not win, loss or draw
            RoundNotPairedException: If the human has no board this round
        """
        round_number = state.current_round
        pairing = get_human_pairing_for_round(state, round_number)
        if pairing is None:
            raise RoundNotPairedException(
                f"Round {round_number} has no pairing for the human yet"
            )
        outcome = human_result_to_outcome(result, pairing.first_id == state.human_id)
        if pairing.is_decided:
            logger.debug(
                "Human result for round %s already recorded (%s), ignoring %s",
                round_number,
                pairing.outcome,
                result,
            )
            return state

        decided = replace(pairing, outcome=outcome)
        pairings = [decided if p is pairing else p for p in state.pairings]
        logger.info("Round %s: human reported %s", round_number, result)
        return recalculate_standings(replace(state, pairings=pairings))

    def simulate_remaining_matches(self, state: TournamentState) -> TournamentState:
        """Decide every undecided current-round board the human does not play."""
        round_number = state.current_round
        by_id = state.participants_by_id()
        pairings: List[Pairing] = []
        simulated = 0
        for pairing in state.pairings:
            if (
                pairing.round_number != round_number
                or pairing.is_decided
                or pairing.involves(state.human_id)
            ):
                pairings.append(pairing)
                continue
            first = by_id.get(pairing.first_id)
            second = by_id.get(pairing.second_id)
            if first is None or second is None:
                logger.warning(
                    "Not simulating round %s table %s: unknown participant",
                    pairing.round_number,
                    pairing.table,
                )
                pairings.append(pairing)
                continue
            outcome = self.simulator.simulate_pairing_result(first, second)
            pairings.append(replace(pairing, outcome=outcome))
            simulated += 1

        if not simulated:
            logger.debug("Round %s: no boards left to simulate", round_number)
            return state
        logger.info("Round %s: simulated %s boards", round_number, simulated)
        return recalculate_standings(replace(state, pairings=pairings))


def record_human_result(
    state: TournamentState, result: HumanResult
) -> TournamentState:
    """Record the human's result for the current round."""
    return ResultRecorder().record_human_result(state, result)


def simulate_remaining_matches(
    state: TournamentState, rng: Optional[RandomSource] = None
) -> TournamentState:
    """Simulate every other board of the current round."""
    return ResultRecorder(rng).simulate_remaining_matches(state)
