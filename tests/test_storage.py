import json
import random
from datetime import datetime, timezone

import pytest

from swisschamp.constants import SNAPSHOT_VERSION
from swisschamp.exceptions import FileLoadException, SnapshotException
from swisschamp.models import ChampionshipConfig, HumanProfile
from swisschamp.storage import dump_state, load_state, load_state_from_dict, save_state
from swisschamp.tournament.result_recorder import simulate_remaining_matches
from swisschamp.tournament.round_manager import (
    advance_round,
    play_human_turn,
    start_championship,
)

LEGACY_SNAPSHOT = {
    "seasonId": "season-legacy",
    "currentRound": 2,
    "totalRounds": 3,
    "startedAt": 1735732800000,
    "userId": "u1",
    "players": [
        {"id": "u1", "name": "Me", "emoji": "🙂", "elo": 1100, "isUser": True,
         "points": 7, "buchholz": 3},
        {"id": "b1", "name": "Bot", "emoji": "🤖", "elo": 900, "isUser": False,
         "opponents": "not-a-list"},
    ],
    "pairings": [
        {"round": 1, "table": 1, "whiteId": "u1", "blackId": "b1", "result": "1-0"},
    ],
}


def _championship(rounds=2, players=6, seed=4):
    rng = random.Random(seed).random
    profile = HumanProfile(id="user-1", name="Player", rating=900)
    state = start_championship(profile, ChampionshipConfig(rounds, players), rng)
    return advance_round(play_human_turn(state, "draw", rng))


def test_save_and_load_preserves_state(tmp_path):
    state = _championship()
    path = save_state(state, tmp_path / "champ.json")
    loaded = load_state(path)

    assert loaded.season_id == state.season_id
    assert loaded.current_round == state.current_round
    assert loaded.participants == state.participants
    assert loaded.pairings == state.pairings
    assert loaded.started_at == state.started_at
    assert loaded.completed == state.completed


def test_snapshot_is_versioned_json(tmp_path):
    path = save_state(_championship(), tmp_path / "nested" / "champ.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == SNAPSHOT_VERSION
    assert data["human_id"] == "user-1"
    assert isinstance(data["started_at"], str)


def test_legacy_snapshot_is_migrated():
    state = load_state_from_dict(LEGACY_SNAPSHOT)

    assert state.season_id == "season-legacy"
    assert state.current_round == 2
    assert state.human_id == "u1"
    assert state.started_at == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert not state.completed

    human = state.participant("u1")
    assert human.is_human and human.rating == 1100 and human.glyph == "🙂"
    # stored points are recomputed from the pairings
    assert human.points == 1.0
    assert human.opponents == []

    bot = state.participant("b1")
    assert bot.opponents == []
    assert state.pairings[0].outcome == "first-wins"


def test_missing_optional_fields_get_defaults():
    data = dump_state(_championship())
    for key in ("started_at", "completed", "pairings"):
        del data[key]
    state = load_state_from_dict(data)
    assert state.pairings == []
    assert not state.completed
    assert state.started_at.tzinfo is not None
    assert all(p.points == 0.0 for p in state.participants)


@pytest.mark.parametrize("missing", ["participants", "human_id", "total_rounds"])
def test_unrecoverable_snapshot_raises(missing):
    data = dump_state(_championship())
    del data[missing]
    with pytest.raises(SnapshotException):
        load_state_from_dict(data)


def test_non_object_snapshot_raises():
    with pytest.raises(SnapshotException):
        load_state_from_dict([1, 2, 3])


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileLoadException):
        load_state(tmp_path / "nope.json")


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_state(path)


def _snapshot(participants, pairings=(), **extra):
    data = {
        "season_id": "season-damaged",
        "current_round": 1,
        "total_rounds": 2,
        "human_id": "u1",
        "participants": participants,
        "pairings": list(pairings),
    }
    data.update(extra)
    return data


HUMAN = {"id": "u1", "name": "Me", "rating": 1000, "is_human": True}


def test_unusable_participant_numbers_fall_back_to_defaults():
    bot = {"id": "b1", "name": "Bot", "rating": "unknown", "points": "lots",
           "tiebreak": [1, 2]}
    state = load_state_from_dict(_snapshot([HUMAN, bot]))
    loaded = state.participant("b1")
    assert loaded.rating == 0
    assert loaded.points == 0.0
    assert loaded.tiebreak == 0.0


def test_unusable_current_round_falls_back_to_first():
    state = load_state_from_dict(_snapshot([HUMAN], current_round="second"))
    assert state.current_round == 1


@pytest.mark.parametrize("total_rounds", ["three", None, [3]])
def test_unusable_total_rounds_raises(total_rounds):
    with pytest.raises(SnapshotException):
        load_state_from_dict(_snapshot([HUMAN], total_rounds=total_rounds))


@pytest.mark.parametrize(
    "participants, pairings",
    [
        ([HUMAN, "b1"], []),
        ([HUMAN], ["u1-b1"]),
        ([HUMAN], [{"round": "one", "table": 1, "whiteId": "u1", "blackId": "b1"}]),
    ],
)
def test_non_object_entries_raise(participants, pairings):
    with pytest.raises(SnapshotException):
        load_state_from_dict(_snapshot(participants, pairings))


def test_unknown_stored_result_loads_as_undecided():
    bot = {"id": "b1", "name": "Bot", "rating": 900}
    board = {"round": 1, "table": 1, "whiteId": "u1", "blackId": "b1", "result": "2-0"}
    state = load_state_from_dict(_snapshot([HUMAN, bot], [board]))
    assert state.pairings[0].outcome is None
    assert state.participant("u1").points == 0.0


def test_out_of_range_timestamp_falls_back_to_now():
    state = load_state_from_dict(_snapshot([HUMAN], started_at=10 ** 20))
    assert state.started_at.tzinfo is not None
    assert state.started_at.year >= 2025


def test_board_with_unknown_participant_is_not_simulated():
    players = [HUMAN, {"id": "b1", "name": "Bot 1", "rating": 900},
               {"id": "b2", "name": "Bot 2", "rating": 800}]
    boards = [
        {"round_number": 1, "table": 1, "first_id": "u1", "second_id": "b1"},
        {"round_number": 1, "table": 2, "first_id": "b2", "second_id": "ghost"},
    ]
    state = load_state_from_dict(_snapshot(players, boards))
    simulated = simulate_remaining_matches(state, random.Random(1).random)
    assert simulated.pairings[1].outcome is None
    assert simulated.participant("b2").points == 0.0
