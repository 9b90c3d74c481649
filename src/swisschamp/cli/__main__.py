"""Championship simulation CLI for Swiss Champ.

Run whole championships from the command line, play one interactively by
reporting the human's results round by round, or inspect a saved snapshot.
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

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swisschamp.constants import (
    DEFAULT_LEADERBOARD_SIZE,
    DEFAULT_TOTAL_PLAYERS,
    DEFAULT_TOTAL_ROUNDS,
    HUMAN_RESULTS,
    OUTCOME_DRAW,
    OUTCOME_FIRST_WINS,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
    SAVE_FILE_EXTENSION,
)
from swisschamp.exceptions import SwissChampException
from swisschamp.models import ChampionshipConfig, HumanProfile, TournamentState
from swisschamp.simulation.rating_model import simulate_outcome
from swisschamp.storage import load_state, save_state
from swisschamp.tournament.opponents import to_opponent_profile
from swisschamp.tournament.result_recorder import get_human_pairing_for_round
from swisschamp.tournament.round_manager import (
    advance_round,
    ensure_current_round_pairings,
    human_opponent_for_round,
    play_human_turn,
    start_championship,
)
from swisschamp.tournament.standings import (
    human_position,
    leaderboard,
    rounds_played,
)
from swisschamp.type_hints import HumanResult, RandomSource
from swisschamp.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

POLICY_RATING = "rating"
POLICIES = [POLICY_RATING, *HUMAN_RESULTS]
PLAY_COMMANDS = [*HUMAN_RESULTS, "standings", "quit"]
DEFAULT_SNAPSHOT_FILE = f"championship{SAVE_FILE_EXTENSION}"


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_standings(state: TournamentState, limit: int = DEFAULT_LEADERBOARD_SIZE) -> None:
    """Print the leaderboard, highlighting the human."""
    print(f"\n{Colors.BOLD}{'#':>3}  {'Name':28} {'Rating':>6} {'Pts':>5} {'Buch':>6}{Colors.ENDC}")
    for position, participant in enumerate(leaderboard(state, limit), start=1):
        line = (
            f"{position:>3}  {participant.glyph} {participant.name:26} "
            f"{participant.rating:>6} {participant.points:>5.1f} {participant.tiebreak:>6.1f}"
        )
        if participant.is_human:
            line = f"{Colors.OKGREEN}{line}{Colors.ENDC}"
        print(line)

    position = human_position(state)
    if position > limit:
        human = state.human
        print("  ...")
        print(
            f"{Colors.OKGREEN}{position:>3}  {human.name} "
            f"({human.points:.1f}){Colors.ENDC}"
        )
    print()


def print_progress(state: TournamentState) -> None:
    status = "completed" if state.completed else f"round {state.current_round}"
    print(
        f"{Colors.OKBLUE}Championship {state.season_id}: {status} "
        f"({rounds_played(state)}/{state.total_rounds} rounds played){Colors.ENDC}"
    )


def rating_policy_result(state: TournamentState, rng: RandomSource) -> HumanResult:
    """Draw the human's result from the rating model, as if the human were a bot."""
    opponent = human_opponent_for_round(state, state.current_round)
    outcome = simulate_outcome(state.human.rating, opponent.rating, rng)
    if outcome == OUTCOME_DRAW:
        return RESULT_DRAW
    return RESULT_WIN if outcome == OUTCOME_FIRST_WINS else RESULT_LOSS


def _make_rng(seed: Optional[int]) -> RandomSource:
    return random.Random(seed).random if seed is not None else random.random


def _new_championship(args: argparse.Namespace, rng: RandomSource) -> TournamentState:
    profile = HumanProfile(id="human", name=args.name, rating=args.rating)
    config = ChampionshipConfig(total_rounds=args.rounds, total_players=args.players)
    return start_championship(profile, config, rng)


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run a whole championship with the human's results drawn from a policy."""
    rng = _make_rng(args.seed)
    state = _new_championship(args, rng)

    while not state.completed:
        state = ensure_current_round_pairings(state)
        if args.policy == POLICY_RATING:
            result = rating_policy_result(state, rng)
        else:
            result = args.policy
        logger.debug("Round %s: human plays %s", state.current_round, result)
        state = advance_round(play_human_turn(state, result, rng))

    print_progress(state)
    print_standings(state, args.limit)
    print(f"{Colors.BOLD}Final position: #{human_position(state)}{Colors.ENDC}")

    if args.output:
        path = save_state(state, args.output)
        print(f"{Colors.OKGREEN}Championship saved to: {path}{Colors.ENDC}")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    """Print the standings stored in a snapshot file."""
    state = load_state(args.file)
    print_progress(state)
    print_standings(state, args.limit)
    return 0


def _print_current_board(state: TournamentState) -> None:
    pairing = get_human_pairing_for_round(state, state.current_round)
    colour = "White" if pairing.first_id == state.human_id else "Black"
    profile = to_opponent_profile(state.participant(pairing.opponent_of(state.human_id)))
    print(
        f"\n{Colors.BOLD}Round {state.current_round}/{state.total_rounds}{Colors.ENDC}: "
        f"you play {colour} against {profile.glyph} {profile.name} "
        f"(rating {profile.rating}, difficulty {profile.difficulty})"
    )


def run_play_command(args: argparse.Namespace) -> int:
    """Play a championship interactively, saving after every round."""
    path = Path(args.file)
    rng = _make_rng(args.seed)
    if path.exists() and not args.new:
        state = load_state(path)
        print(f"{Colors.OKCYAN}Resuming championship from {path}{Colors.ENDC}")
    else:
        state = _new_championship(args, rng)
        save_state(state, path)
    # a snapshot saved between a finished round and its advance resumes here
    state = advance_round(state)

    session = PromptSession(
        completer=WordCompleter(PLAY_COMMANDS),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while not state.completed:
        state = ensure_current_round_pairings(state)
        _print_current_board(state)
        try:
            user_input = session.prompt("result> ").strip().lower()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            break

        if user_input in ("quit", "exit", "q"):
            break
        if user_input == "standings":
            print_standings(state, args.limit)
            continue
        if user_input not in HUMAN_RESULTS:
            print(f"{Colors.FAIL}Enter one of: {', '.join(PLAY_COMMANDS)}{Colors.ENDC}")
            continue

        state = advance_round(play_human_turn(state, user_input, rng))
        save_state(state, path)
        human = state.human
        print(
            f"{Colors.OKGREEN}{human.name}: {human.points:.1f} points, "
            f"position #{human_position(state)}{Colors.ENDC}"
        )

    if state.completed:
        print(f"\n{Colors.BOLD}Championship finished!{Colors.ENDC}")
        print_standings(state, args.limit)
    print(f"Snapshot saved at {path}")
    return 0


def _add_new_championship_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=int, default=DEFAULT_TOTAL_PLAYERS)
    parser.add_argument("--rounds", type=int, default=DEFAULT_TOTAL_ROUNDS)
    parser.add_argument("--name", default="You")
    parser.add_argument("--rating", type=int, default=1000)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--limit", type=int, default=DEFAULT_LEADERBOARD_SIZE)


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swisschamp-sim",
        description="Swiss championship simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simulate a 40 player, 7 round championship
  swisschamp-sim simulate --seed 7

  # Play interactively, resuming from the snapshot if it exists
  swisschamp-sim play --file championship.json

  # Show a saved leaderboard
  swisschamp-sim standings --file championship.json --limit 20
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sim_parser = subparsers.add_parser("simulate", help="Simulate a whole championship")
    _add_new_championship_arguments(sim_parser)
    sim_parser.add_argument("--policy", choices=POLICIES, default=POLICY_RATING)
    sim_parser.add_argument("--output")
    sim_parser.set_defaults(func=run_simulate_command)

    play_parser = subparsers.add_parser("play", help="Play a championship interactively")
    _add_new_championship_arguments(play_parser)
    play_parser.add_argument("--file", default=DEFAULT_SNAPSHOT_FILE)
    play_parser.add_argument("--new", action="store_true", help="Ignore an existing snapshot")
    play_parser.set_defaults(func=run_play_command)

    st_parser = subparsers.add_parser("standings", help="Print a snapshot's standings")
    st_parser.add_argument("--file", required=True)
    st_parser.add_argument("--limit", type=int, default=DEFAULT_LEADERBOARD_SIZE)
    st_parser.set_defaults(func=run_standings_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for swisschamp-sim CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except SwissChampException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
