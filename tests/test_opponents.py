import pytest

from swisschamp.models import Participant
from swisschamp.tournament.opponents import (
    colour_for_id,
    difficulty_for_rating,
    to_opponent_profile,
)


@pytest.mark.parametrize(
    "rating, difficulty",
    [(100, 1), (1500, 10), (800, 6), (50, 1), (3000, 10)],
)
def test_difficulty_for_rating(rating, difficulty):
    assert difficulty_for_rating(rating) == difficulty


def test_colour_uses_digits_of_id():
    assert colour_for_id("champ-bot-3") == "hsl(111, 70%, 50%)"
    assert colour_for_id("champ-bot-10") == "hsl(10, 70%, 50%)"


def test_colour_without_digits_falls_back():
    assert colour_for_id("human") == "hsl(37, 70%, 50%)"
    assert colour_for_id("bot-0") == colour_for_id("human")


def test_to_opponent_profile():
    bot = Participant(id="champ-bot-2", name="Solid Player", glyph="🧐", rating=650)
    profile = to_opponent_profile(bot)
    assert profile.to_dict() == {
        "id": "champ-bot-2",
        "name": "Solid Player",
        "glyph": "🧐",
        "rating": 650,
        "difficulty": 5,
        "colour": "hsl(74, 70%, 50%)",
    }
