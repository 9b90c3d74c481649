import itertools
from datetime import datetime, timezone

import pytest

from swisschamp.models import Participant, TournamentState

START = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def _build_state(ratings=(1000, 1000, 1000), human_rating=1000, total_rounds=1):
    human = Participant(id="human", name="Human", rating=human_rating, is_human=True)
    bots = [
        Participant(id=f"bot-{i + 1}", name=f"Bot {i + 1}", rating=rating)
        for i, rating in enumerate(ratings)
    ]
    return TournamentState(
        season_id="season-test",
        current_round=1,
        total_rounds=total_rounds,
        participants=[human, *bots],
        human_id="human",
        started_at=START,
    )


def _fixed_rng(*values):
    values_iter = itertools.cycle(values)
    return lambda: next(values_iter)


@pytest.fixture
def make_state():
    """Factory for a small hand-built championship with fixed ratings."""
    return _build_state


@pytest.fixture
def fixed_rng():
    """Factory for a random source cycling through the given values."""
    return _fixed_rng
