import json

import pytest

from swisschamp.cli import __main__ as cli
from swisschamp.storage import load_state


class ScriptedSession:
    """Stand-in for PromptSession that replays fixed answers."""

    def __init__(self, answers):
        self.answers = list(answers)

    def __call__(self, *args, **kwargs):
        return self

    def prompt(self, message):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def test_simulate_win_policy_scores_every_round(tmp_path, capsys):
    output = tmp_path / "sim.json"
    code = cli.main(
        [
            "simulate",
            "--players", "8",
            "--rounds", "3",
            "--seed", "7",
            "--policy", "win",
            "--output", str(output),
        ]
    )
    assert code == 0
    state = load_state(output)
    assert state.completed
    assert state.human.points == 3.0
    assert "Final position: #1" in capsys.readouterr().out


def test_simulate_same_seed_same_result(tmp_path):
    paths = [tmp_path / "a.json", tmp_path / "b.json"]
    for path in paths:
        cli.main(["simulate", "--players", "10", "--rounds", "4", "--seed", "3",
                  "--output", str(path)])
    a, b = (json.loads(p.read_text(encoding="utf-8")) for p in paths)
    assert a["participants"] == b["participants"]
    assert a["pairings"] == b["pairings"]


def test_standings_command_prints_leaderboard(tmp_path, capsys):
    output = tmp_path / "sim.json"
    cli.main(["simulate", "--players", "6", "--rounds", "2", "--seed", "1",
              "--name", "Tester", "--output", str(output)])
    capsys.readouterr()

    assert cli.main(["standings", "--file", str(output), "--limit", "6"]) == 0
    out = capsys.readouterr().out
    assert "Tester" in out
    assert "completed" in out


def test_standings_missing_file_fails(tmp_path, capsys):
    code = cli.main(["standings", "--file", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Error" in capsys.readouterr().out


def test_invalid_field_size_fails(capsys):
    assert cli.main(["simulate", "--players", "7"]) == 1


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "swisschamp-sim" in capsys.readouterr().out


def test_play_records_results_and_saves(tmp_path, monkeypatch):
    path = tmp_path / "play.json"
    session = ScriptedSession(["bogus", "standings", "win", "draw", "quit"])
    monkeypatch.setattr(cli, "PromptSession", session)

    code = cli.main(["play", "--players", "4", "--rounds", "3", "--seed", "2",
                     "--file", str(path)])
    assert code == 0
    state = load_state(path)
    assert state.current_round == 3
    assert state.human.points == 1.5
    assert not state.completed


def test_play_resumes_existing_snapshot(tmp_path, monkeypatch):
    path = tmp_path / "play.json"
    monkeypatch.setattr(cli, "PromptSession", ScriptedSession(["loss"]))
    cli.main(["play", "--players", "4", "--rounds", "2", "--seed", "2",
              "--file", str(path)])

    monkeypatch.setattr(cli, "PromptSession", ScriptedSession(["win"]))
    cli.main(["play", "--file", str(path)])

    state = load_state(path)
    assert state.completed
    assert state.human.points == 1.0


@pytest.mark.parametrize("policy", ["rating", "loss", "draw"])
def test_simulate_policies_complete(policy):
    assert cli.main(["simulate", "--players", "4", "--rounds", "2",
                     "--seed", "5", "--policy", policy]) == 0


def test_play_shows_black_when_human_moves_second(tmp_path, monkeypatch, capsys):
    path = tmp_path / "legacy.json"
    snapshot = {
        "seasonId": "season-legacy",
        "currentRound": 1,
        "totalRounds": 1,
        "userId": "u1",
        "players": [
            {"id": "u1", "name": "Me", "elo": 1000, "isUser": True, "opponents": ["b1"]},
            {"id": "b1", "name": "Bot", "elo": 900, "opponents": ["u1"]},
        ],
        "pairings": [{"round": 1, "table": 1, "whiteId": "b1", "blackId": "u1"}],
    }
    path.write_text(json.dumps(snapshot), encoding="utf-8")
    monkeypatch.setattr(cli, "PromptSession", ScriptedSession(["win"]))

    assert cli.main(["play", "--file", str(path)]) == 0
    assert "you play Black against" in capsys.readouterr().out
    state = load_state(path)
    assert state.completed
    assert state.pairings[0].outcome == "second-wins"
