"""Rating model: expected score and simulated outcomes between synthetic entrants."""

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

import random
from typing import Optional

from swisschamp.constants import (
    DRAW_BASELINE,
    DRAW_CLOSE_BONUS,
    DRAW_GAP_SPAN,
    DRAW_MAX_PROBABILITY,
    DRAW_MIN_PROBABILITY,
    ELO_SCALE,
    OUTCOME_DRAW,
    OUTCOME_FIRST_WINS,
    OUTCOME_SECOND_WINS,
)
from swisschamp.exceptions import HumanPairingSimulationException
from swisschamp.models import Participant
from swisschamp.type_hints import Outcome, RandomSource
from swisschamp.utils import clamp, setup_logger

logger = setup_logger(__name__)


def expected_score(rating_a: float, rating_b: float) -> float:
    """Logistic expected score of A against B."""
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / ELO_SCALE))


def draw_probability(rating_a: float, rating_b: float) -> float:
    """Chance of a draw: 14% for equal ratings, 8% from a 600 point gap on."""
    closeness = 1.0 - clamp(abs(rating_a - rating_b) / DRAW_GAP_SPAN, 0.0, 1.0)
    return clamp(
        DRAW_BASELINE + closeness * DRAW_CLOSE_BONUS,
        DRAW_MIN_PROBABILITY,
        DRAW_MAX_PROBABILITY,
    )


def simulate_outcome(
    first_rating: float, second_rating: float, rng: Optional[RandomSource] = None
) -> Outcome:
    """Decide a game between two synthetic entrants.

    Two uniform draws are consumed: the first decides whether the game is
    drawn, the second whether the first side beats the second.
    """
    rng = rng or random.random
    if rng() < draw_probability(first_rating, second_rating):
        return OUTCOME_DRAW
    if rng() < expected_score(first_rating, second_rating):
        return OUTCOME_FIRST_WINS
    return OUTCOME_SECOND_WINS


class ResultSimulator:
    """Simulates results for boards that do not involve the human."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or random.random

    def simulate_pairing_result(
        self, first: Participant, second: Participant
    ) -> Outcome:
        """Return the outcome code for ``first`` against ``second``.

        Raises
        ------
        HumanPairingSimulationException
            If either side is the human; those results are always supplied
            by whoever plays the actual game.
        """
        if first.is_human or second.is_human:
            raise HumanPairingSimulationException(
                f"Refusing to simulate {first.name} vs {second.name}: "
                "the human's result must be reported"
            )
        outcome = simulate_outcome(first.rating, second.rating, self.rng)
        logger.debug(
            "Simulated %s (%s) vs %s (%s): %s",
            first.name,
            first.rating,
            second.name,
            second.rating,
            outcome,
        )
        return outcome
