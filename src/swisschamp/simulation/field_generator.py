"""Field generator: the human plus a tiered population of synthetic entrants."""

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
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from swisschamp.constants import (
    BOT_ID_PREFIX,
    HUMAN_GLYPH,
    RATING_JITTER,
    SEASON_ID_PREFIX,
    TIER_HIGH_BAND,
    TIER_LOW_BAND,
    TIER_LOW_SHARE,
    TIER_MID_BAND,
    TIER_MID_SHARE,
)
from swisschamp.models import (
    ChampionshipConfig,
    HumanProfile,
    Participant,
    TournamentState,
)
from swisschamp.type_hints import RandomSource, RatingBand
from swisschamp.utils import clamp, generate_id, round_half_up, setup_logger

logger = setup_logger(__name__)


class SkillTier(Enum):
    """Skill tiers of the synthetic field."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


TIER_BANDS = {
    SkillTier.LOW: TIER_LOW_BAND,
    SkillTier.MID: TIER_MID_BAND,
    SkillTier.HIGH: TIER_HIGH_BAND,
}

TIER_NAMES = {
    SkillTier.LOW: [
        "Anxious Pupil", "Lost Pawn", "Clumsy King", "Timid Bishop",
        "Shy Rook", "Limping Knight", "Failed Gambit", "Forgotten Castle",
        "Rookie Check", "Chaotic Opening", "Absent White", "Puzzled Black",
        "Accidental Capture",
    ],
    SkillTier.MID: [
        "Shrewd Candidate", "Solid Player", "Stubborn Defence", "Patient Attack",
        "Passed Pawn", "Steady Middlegame", "Active Rooks", "Crossed Bishops",
        "Outpost Knight", "Basic Tactics", "Accepted Gambit", "Minor Sicilian",
        "Quiet French",
    ],
    SkillTier.HIGH: [
        "Relentless Master", "Grand Tactician", "Supreme Strategist",
        "Endgame King", "Brilliant Attack", "Deadly Combination",
        "Elegant Sacrifice", "Zugzwang Expert", "Deep Manoeuvre",
        "Sharp Variation", "Fierce Veteran", "Regional Champion",
        "Unstoppable Elite",
    ],
}

TIER_GLYPHS = {
    SkillTier.LOW: [
        "😅", "🐣", "🤓", "😬", "🐢", "😵", "🫣", "🙈", "🐥", "😟", "🤔", "😓", "🐌",
    ],
    SkillTier.MID: [
        "🧐", "🤨", "🎯", "🔍", "🧩", "⚡", "🛡️", "⚔️", "🎲", "🔧", "🦊", "🐺", "🦉",
    ],
    SkillTier.HIGH: [
        "🏆", "🦁", "👑", "🐉", "🔥", "🧠", "🦾", "🥷", "💎", "⚡", "🦅", "🌟", "💀",
    ],
}


@dataclass
class SyntheticEntrant:
    """A synthetic entrant before ids are assigned."""

    name: str
    glyph: str
    rating: int
    tier: SkillTier


class FieldGenerator:
    """Builds the synthetic part of the field in three rating tiers."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or random.random

    @staticmethod
    def tier_sizes(synthetic_count: int) -> List[int]:
        """Split the synthetic field 35% / 35% / remainder."""
        low = round_half_up(synthetic_count * TIER_LOW_SHARE)
        mid = round_half_up(synthetic_count * TIER_MID_SHARE)
        return [low, mid, synthetic_count - low - mid]

    def create_entrants(self, synthetic_count: int) -> List[SyntheticEntrant]:
        """Create and shuffle ``synthetic_count`` synthetic entrants."""
        entrants: List[SyntheticEntrant] = []
        for tier, size in zip(SkillTier, self.tier_sizes(synthetic_count)):
            entrants.extend(self._create_tier(tier, size))
        self._shuffle(entrants)
        return entrants

    def _create_tier(self, tier: SkillTier, size: int) -> List[SyntheticEntrant]:
        band = TIER_BANDS[tier]
        names = TIER_NAMES[tier]
        glyphs = TIER_GLYPHS[tier]
        return [
            SyntheticEntrant(
                name=names[i % len(names)],
                glyph=glyphs[i % len(glyphs)],
                rating=self._spread_rating(band, i, size),
                tier=tier,
            )
            for i in range(size)
        ]

    def _spread_rating(self, band: RatingBand, index: int, size: int) -> int:
        # Linear spread across the band, then jitter kept inside it
        low, high = band
        position = 0.0 if size <= 1 else index / (size - 1)
        base = low + position * (high - low)
        jitter = (self.rng() - 0.5) * RATING_JITTER
        return round_half_up(clamp(base + jitter, low, high))

    def _shuffle(self, items: List[SyntheticEntrant]) -> None:
        # Fisher-Yates driven by the injected random source
        for i in range(len(items) - 1, 0, -1):
            j = int(self.rng() * (i + 1))
            items[i], items[j] = items[j], items[i]


def generate_field(
    human_profile: HumanProfile,
    config: Optional[ChampionshipConfig] = None,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
) -> TournamentState:
    """Create a fresh championship: the human plus ``total_players - 1`` entrants.

    Parameters
    ----------
    human_profile : HumanProfile
        Id, name and rating of the human entrant.
    config : ChampionshipConfig, optional
        Round count and field size; defaults to 7 rounds and 40 players.
    rng : callable, optional
        Uniform [0, 1) source for rating jitter and the shuffle.
    now : datetime, optional
        Creation timestamp; read from the clock when omitted.

    Raises
    ------
    InvalidConfigurationException
        If the configuration cannot produce a pairable field.
    """
    config = config or ChampionshipConfig()
    config.validate()

    human = Participant(
        id=human_profile.id,
        name=human_profile.name,
        glyph=HUMAN_GLYPH,
        rating=human_profile.rating,
        is_human=True,
    )
    entrants = FieldGenerator(rng).create_entrants(config.total_players - 1)
    participants = [human] + [
        Participant(
            id=f"{BOT_ID_PREFIX}-{i + 1}",
            name=entrant.name,
            glyph=entrant.glyph,
            rating=entrant.rating,
        )
        for i, entrant in enumerate(entrants)
    ]

    state = TournamentState(
        season_id=generate_id(SEASON_ID_PREFIX),
        current_round=1,
        total_rounds=config.total_rounds,
        participants=participants,
        human_id=human_profile.id,
        started_at=now or datetime.now(timezone.utc),
    )
    state.validate()
    logger.info(
        "Generated field of %s players for %s rounds (season %s)",
        len(participants),
        config.total_rounds,
        state.season_id,
    )
    return state
