"""Opponent profiles handed to the external game engine."""

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

import re
from dataclasses import dataclass
from typing import Any, Dict

from swisschamp.constants import (
    DIFFICULTY_RATING_FLOOR,
    DIFFICULTY_RATING_SPAN,
    HUE_STEP,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
)
from swisschamp.models import Participant
from swisschamp.utils import clamp, round_half_up


@dataclass
class OpponentProfile:
    """What the game engine needs to play as a synthetic participant."""

    id: str
    name: str
    glyph: str
    rating: int
    difficulty: int
    colour: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "glyph": self.glyph,
            "rating": self.rating,
            "difficulty": self.difficulty,
            "colour": self.colour,
        }


def difficulty_for_rating(rating: int) -> int:
    """Map a rating linearly onto engine difficulty: 100 -> 1, 1500 -> 10."""
    scaled = (rating - DIFFICULTY_RATING_FLOOR) / DIFFICULTY_RATING_SPAN
    steps = MAX_DIFFICULTY - MIN_DIFFICULTY
    difficulty = round_half_up(scaled * steps) + MIN_DIFFICULTY
    return int(clamp(difficulty, MIN_DIFFICULTY, MAX_DIFFICULTY))


def colour_for_id(participant_id: str) -> str:
    """Stable display colour derived from the digits of an id."""
    digits = re.sub(r"\D+", "", participant_id)
    index = int(digits) if digits and int(digits) else 1
    return f"hsl({(index * HUE_STEP) % 360}, 70%, 50%)"


def to_opponent_profile(participant: Participant) -> OpponentProfile:
    """Build the engine-facing profile of a participant."""
    return OpponentProfile(
        id=participant.id,
        name=participant.name,
        glyph=participant.glyph,
        rating=participant.rating,
        difficulty=difficulty_for_rating(participant.rating),
        colour=colour_for_id(participant.id),
    )
