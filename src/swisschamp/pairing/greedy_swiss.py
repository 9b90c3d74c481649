"""Greedy Swiss Pairing System Implementation.

Pairs the field top-down in standings order, giving each participant the
closest remaining opponent by score group, avoiding repeats where possible.
This is a deliberate heuristic rather than an optimal matching: the field is
small and the results are simulation flavour, not a competitive guarantee.
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
from typing import Dict, List

from swisschamp.constants import RATING_WEIGHT, REPEAT_PENALTY, SCORE_GROUP_WEIGHT
from swisschamp.exceptions import OddFieldException, TournamentCompletedException
from swisschamp.models import Pairing, Participant, TournamentState
from swisschamp.tournament.standings import recalculate_standings, sort_by_ranking
from swisschamp.type_hints import MatchPairing
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)


def already_played(a: Participant, b: Participant) -> bool:
    """Check either side's opponent set for a previous pairing."""
    return a.has_played(b.id) or b.has_played(a.id)


def pairing_score(p: Participant, q: Participant) -> float:
    """Desirability of pairing ``p`` with ``q``; higher is better.

    A repeat costs far more than any realistic score gap, a full point of
    score gap costs far more than any realistic rating gap.
    """
    repeat_penalty = REPEAT_PENALTY if already_played(p, q) else 0.0
    score_group_penalty = abs(p.points - q.points) * SCORE_GROUP_WEIGHT
    rating_penalty = abs(p.rating - q.rating) * RATING_WEIGHT
    return repeat_penalty - score_group_penalty - rating_penalty


def _best_opponent_index(p: Participant, unpaired: List[Participant]) -> int:
    # First maximum wins, so equal candidates keep standings order
    best_index = 0
    best_score = pairing_score(p, unpaired[0])
    for index in range(1, len(unpaired)):
        score = pairing_score(p, unpaired[index])
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def assign_sides(p: Participant, q: Participant, table: int, human_id: str) -> MatchPairing:
    """Pick (first, second) ids for a board.

    The human always moves first. Other boards keep the greedy order on odd
    tables and swap it on even tables.
    """
    if q.id == human_id:
        return q.id, p.id
    if p.id == human_id:
        return p.id, q.id
    if table % 2 == 0:
        return q.id, p.id
    return p.id, q.id


def create_greedy_swiss_pairings(
    participants: List[Participant], round_number: int, human_id: str
) -> List[Pairing]:
    """Create one round of pairings for an even field.

    Parameters
    ----------
    participants : list of Participant
        The whole field with current points, tiebreak and opponents.
    round_number : int
        The 1-based round being paired.
    human_id : str
        Id of the human, who is always given the first move.

    Returns
    -------
    list of Pairing
        Undecided pairings with tables numbered 1..N/2 in formation order.

    Raises
    ------
    OddFieldException
        If the field is empty or has an odd number of participants.
    """
    if not participants or len(participants) % 2 != 0:
        raise OddFieldException(
            f"Cannot pair round {round_number}: field of {len(participants)} "
            "participants is not a positive even number"
        )

    unpaired = sort_by_ranking(participants)
    pairings: List[Pairing] = []
    table = 1
    while unpaired:
        p = unpaired.pop(0)
        q = unpaired.pop(_best_opponent_index(p, unpaired))
        if already_played(p, q):
            logger.debug(
                "Round %s: no fresh opponent left for %s, repeating against %s",
                round_number,
                p.name,
                q.name,
            )
        first_id, second_id = assign_sides(p, q, table, human_id)
        pairings.append(
            Pairing(
                round_number=round_number,
                table=table,
                first_id=first_id,
                second_id=second_id,
            )
        )
        table += 1
    return pairings


def _record_opponents(
    participants: List[Participant], pairings: List[Pairing]
) -> List[Participant]:
    by_id: Dict[str, Participant] = {p.id: p for p in participants}
    for pairing in pairings:
        first, second = by_id[pairing.first_id], by_id[pairing.second_id]
        by_id[first.id] = first.with_opponent(second.id)
        by_id[second.id] = second.with_opponent(first.id)
    return [by_id[p.id] for p in participants]


def generate_pairings_for_current_round(state: TournamentState) -> TournamentState:
    """Pair ``state.current_round`` unless it is already paired.

    Returns the same state object when pairings for the round exist.

    Raises
    ------
    TournamentCompletedException
        If the championship is over and the round has no pairings.
    OddFieldException
        If the field cannot be fully paired.
    """
    round_number = state.current_round
    if state.has_pairings_for_round(round_number):
        logger.debug("Round %s already paired, nothing to do", round_number)
        return state
    if state.completed:
        raise TournamentCompletedException(
            f"Championship {state.season_id} is completed; cannot pair round "
            f"{round_number}"
        )
    state.validate()

    new_pairings = create_greedy_swiss_pairings(
        state.participants, round_number, state.human_id
    )
    participants = _record_opponents(state.participants, new_pairings)

    logger.info(
        "Paired round %s of %s: %s boards",
        round_number,
        state.total_rounds,
        len(new_pairings),
    )
    return recalculate_standings(
        replace(
            state,
            participants=participants,
            pairings=[*state.pairings, *new_pairings],
        )
    )
