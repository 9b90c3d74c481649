"""Standings: recalculation and ranking order."""

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
from typing import Iterable, List, Tuple

from swisschamp.constants import DEFAULT_LEADERBOARD_SIZE
from swisschamp.exceptions import ParticipantNotFoundException
from swisschamp.models import Participant, TournamentState
from swisschamp.tournament.tiebreak_calculator import TiebreakCalculator


def ranking_key(participant: Participant) -> Tuple[float, float, int]:
    """Sort key for descending points, tiebreak, then rating."""
    return (-participant.points, -participant.tiebreak, -participant.rating)


def sort_by_ranking(participants: Iterable[Participant]) -> List[Participant]:
    # sorted() is stable, so full ties keep their input order
    return sorted(participants, key=ranking_key)


def recalculate_standings(state: TournamentState) -> TournamentState:
    """Return a new state with every participant's points and tiebreak rebuilt."""
    participants = TiebreakCalculator().calculate_all_tiebreaks(
        state.participants, state.pairings
    )
    return replace(state, participants=participants, pairings=list(state.pairings))


def rank_participants(state: TournamentState) -> List[Participant]:
    """The field in leaderboard order."""
    return sort_by_ranking(state.participants)


def human_position(state: TournamentState) -> int:
    """1-based leaderboard position of the human."""
    for position, participant in enumerate(rank_participants(state), start=1):
        if participant.id == state.human_id:
            return position
    raise ParticipantNotFoundException(f"Human {state.human_id} is not in the field")


def leaderboard(
    state: TournamentState, limit: int = DEFAULT_LEADERBOARD_SIZE
) -> List[Participant]:
    """The top ``limit`` participants in leaderboard order."""
    return rank_participants(state)[:limit]


def rounds_played(state: TournamentState) -> int:
    """Number of rounds fully played, for progress display."""
    if state.completed:
        return state.total_rounds
    return state.current_round - 1
