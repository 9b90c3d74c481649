"""Tiebreak calculation for championships.

Points and Buchholz are always rebuilt from the full pairing list so the
calculation can run after every mutation without accumulating drift.
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
from typing import Dict, Iterable, List

from swisschamp.models import Pairing, Participant
from swisschamp.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates points and Buchholz scores for championship standings.

    Buchholz here is the plain sum of the current points of every opponent
    a participant has been paired against, whether or not that game has
    been decided yet.
    """

    def calculate_points(
        self, participants: Iterable[Participant], pairings: Iterable[Pairing]
    ) -> Dict[str, float]:
        """Sum match points per participant id over every decided pairing.

        Args:
            participants: The whole field
            pairings: Every pairing of every round

        Returns:
            Mapping of participant id to points, starting from zero
        """
        points = {p.id: 0.0 for p in participants}
        for pairing in pairings:
            if not pairing.is_decided:
                continue
            if pairing.first_id not in points or pairing.second_id not in points:
                logger.warning(
                    "Skipping round %s table %s: unknown participant",
                    pairing.round_number,
                    pairing.table,
                )
                continue
            points[pairing.first_id] += pairing.score_for(pairing.first_id)
            points[pairing.second_id] += pairing.score_for(pairing.second_id)
        return points

    def calculate_buchholz(
        self, participant: Participant, points: Dict[str, float]
    ) -> float:
        """Sum the current points of every recorded opponent."""
        return sum(points.get(opp_id, 0.0) for opp_id in participant.opponents)

    def calculate_all_tiebreaks(
        self, participants: List[Participant], pairings: Iterable[Pairing]
    ) -> List[Participant]:
        """Return new participants with points and tiebreak recomputed."""
        points = self.calculate_points(participants, pairings)
        return [
            replace(
                participant,
                points=points[participant.id],
                tiebreak=self.calculate_buchholz(participant, points),
                opponents=list(participant.opponents),
            )
            for participant in participants
        ]
