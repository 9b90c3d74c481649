import random

import pytest

from swisschamp.exceptions import HumanPairingSimulationException
from swisschamp.models import Participant
from swisschamp.simulation.rating_model import (
    ResultSimulator,
    draw_probability,
    expected_score,
    simulate_outcome,
)


def test_expected_score_is_even_for_equal_ratings():
    assert expected_score(1000, 1000) == pytest.approx(0.5)


def test_expected_score_follows_logistic_curve():
    assert expected_score(1400, 1000) == pytest.approx(1 / 1.1)
    assert expected_score(1000, 1400) == pytest.approx(1 - 1 / 1.1)
    assert expected_score(1234, 987) + expected_score(987, 1234) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "rating_a, rating_b, expected",
    [
        (1000, 1000, 0.14),
        (1000, 1300, 0.11),
        (1300, 1000, 0.11),
        (1000, 1600, 0.08),
        (100, 3000, 0.08),
    ],
)
def test_draw_probability_rises_as_ratings_close(rating_a, rating_b, expected):
    assert draw_probability(rating_a, rating_b) == pytest.approx(expected)


def test_draw_probability_stays_within_bounds():
    for gap in range(0, 3000, 50):
        assert 0.06 <= draw_probability(1000, 1000 + gap) <= 0.16


def test_simulate_outcome_draw_when_first_draw_is_low(fixed_rng):
    assert simulate_outcome(1000, 1000, fixed_rng(0.0)) == "draw"
    assert simulate_outcome(1000, 1000, fixed_rng(0.13)) == "draw"


def test_simulate_outcome_second_draw_decides_winner(fixed_rng):
    assert simulate_outcome(1000, 1000, fixed_rng(0.5, 0.1)) == "first-wins"
    assert simulate_outcome(1000, 1000, fixed_rng(0.5, 0.9)) == "second-wins"


def test_stronger_side_wins_more_often():
    rng = random.Random(42).random
    outcomes = [simulate_outcome(1500, 500, rng) for _ in range(500)]
    assert outcomes.count("first-wins") > outcomes.count("second-wins")
    assert set(outcomes) <= {"first-wins", "second-wins", "draw"}


def test_simulator_refuses_human_boards(fixed_rng):
    human = Participant(id="h", name="Human", rating=1000, is_human=True)
    bot = Participant(id="b", name="Bot", rating=1000)
    simulator = ResultSimulator(fixed_rng(0.5))

    with pytest.raises(HumanPairingSimulationException):
        simulator.simulate_pairing_result(human, bot)
    with pytest.raises(HumanPairingSimulationException):
        simulator.simulate_pairing_result(bot, human)


def test_simulator_uses_injected_source(fixed_rng):
    a = Participant(id="a", name="A", rating=1000)
    b = Participant(id="b", name="B", rating=1000)
    assert ResultSimulator(fixed_rng(0.01)).simulate_pairing_result(a, b) == "draw"
