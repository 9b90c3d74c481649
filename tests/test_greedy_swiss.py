import random
from dataclasses import replace

import pytest

from swisschamp.exceptions import OddFieldException, TournamentCompletedException
from swisschamp.models import Participant
from swisschamp.pairing.greedy_swiss import (
    already_played,
    assign_sides,
    create_greedy_swiss_pairings,
    generate_pairings_for_current_round,
    pairing_score,
)
from swisschamp.tournament.result_recorder import (
    record_human_result,
    simulate_remaining_matches,
)
from swisschamp.tournament.round_manager import advance_round


def _board_ids(pairings):
    return [(p.table, p.first_id, p.second_id) for p in pairings]


def test_first_round_follows_standings_order(make_state):
    state = generate_pairings_for_current_round(make_state())
    assert _board_ids(state.pairings) == [
        (1, "human", "bot-1"),
        (2, "bot-3", "bot-2"),
    ]


def test_opponents_recorded_on_both_sides(make_state):
    state = generate_pairings_for_current_round(make_state())
    opponents = {p.id: p.opponents for p in state.participants}
    assert opponents == {
        "human": ["bot-1"],
        "bot-1": ["human"],
        "bot-2": ["bot-3"],
        "bot-3": ["bot-2"],
    }


def test_second_round_prefers_score_group_and_new_opponent(make_state, fixed_rng):
    state = generate_pairings_for_current_round(make_state(total_rounds=2))
    state = record_human_result(state, "win")
    # bot-3 moves first on table 2, so a first-wins result gives it the point
    state = simulate_remaining_matches(state, fixed_rng(0.5, 0.1))
    state = advance_round(state)
    state = generate_pairings_for_current_round(state)

    assert _board_ids(state.pairings_for_round(2)) == [
        (1, "human", "bot-3"),
        (2, "bot-2", "bot-1"),
    ]
    assert state.participant("human").tiebreak == 1.0


def test_generation_is_idempotent(make_state):
    first = generate_pairings_for_current_round(make_state())
    second = generate_pairings_for_current_round(first)
    assert second is first
    assert second.pairings == first.pairings


def test_input_state_is_not_mutated(make_state):
    state = make_state()
    generate_pairings_for_current_round(state)
    assert state.pairings == []
    assert all(p.opponents == [] for p in state.participants)


def test_human_moves_first_even_when_picked_as_opponent():
    bots = [Participant(id=f"bot-{i}", name=f"Bot {i}", rating=1500) for i in range(3)]
    human = Participant(id="human", name="Human", rating=100, is_human=True)
    pairings = create_greedy_swiss_pairings(
        [*bots, human], round_number=1, human_id="human"
    )
    human_board = next(p for p in pairings if p.involves("human"))
    assert human_board.first_id == "human"


def test_even_tables_swap_sides():
    p = Participant(id="p", name="P", rating=1000)
    q = Participant(id="q", name="Q", rating=1000)
    assert assign_sides(p, q, 1, "human") == ("p", "q")
    assert assign_sides(p, q, 2, "human") == ("q", "p")
    assert assign_sides(p, q, 3, "human") == ("p", "q")


def test_repeat_penalty_dominates_score_and_rating():
    p = Participant(id="p", name="P", rating=1000, points=1.0, opponents=["q"])
    q = Participant(id="q", name="Q", rating=1000, points=1.0, opponents=["p"])
    r = Participant(id="r", name="R", rating=1500, points=0.0)
    assert already_played(p, q)
    assert pairing_score(p, r) > pairing_score(p, q)


def test_score_group_dominates_rating():
    p = Participant(id="p", name="P", rating=1000, points=1.0)
    same_group = Participant(id="q", name="Q", rating=1500, points=1.0)
    close_rating = Participant(id="r", name="R", rating=1000, points=0.0)
    assert pairing_score(p, same_group) > pairing_score(p, close_rating)


def test_repeat_allowed_when_unavoidable(make_state):
    state = make_state(ratings=(1000,), total_rounds=3)
    for round_number in range(1, 4):
        state = generate_pairings_for_current_round(state)
        assert _board_ids(state.pairings_for_round(round_number)) == [
            (1, "human", "bot-1")
        ]
        state = advance_round(record_human_result(state, "draw"))

    assert state.completed
    assert state.participant("human").opponents == ["bot-1"]
    assert state.participant("bot-1").opponents == ["human"]


def test_small_field_survives_more_rounds_than_opponents(make_state):
    rng = random.Random(5).random
    state = make_state(total_rounds=5)
    for _ in range(5):
        state = generate_pairings_for_current_round(state)
        boards = state.current_round_pairings
        assert sorted(p.table for p in boards) == [1, 2]
        assert sorted(pid for p in boards for pid in (p.first_id, p.second_id)) == [
            "bot-1",
            "bot-2",
            "bot-3",
            "human",
        ]
        state = record_human_result(state, "loss")
        state = simulate_remaining_matches(state, rng)
        state = advance_round(state)
    assert state.completed


@pytest.mark.parametrize("ratings", [(1000, 1000), (), (900, 900, 900, 900)])
def test_odd_field_is_rejected(make_state, ratings):
    with pytest.raises(OddFieldException):
        generate_pairings_for_current_round(make_state(ratings=ratings))


def test_empty_field_is_rejected():
    with pytest.raises(OddFieldException):
        create_greedy_swiss_pairings([], round_number=1, human_id="human")


def test_completed_championship_without_pairings_cannot_be_paired(make_state):
    state = replace(make_state(), completed=True)
    with pytest.raises(TournamentCompletedException):
        generate_pairings_for_current_round(state)
