"""Command line interface for Station Pairing.

Works on tournaments stored as JSON files: validate a setup, generate or
preview its schedule, print the scheduling report, record results and show
standings. Running without arguments starts an interactive shell.
"""

# Station Pairing
# Copyright (C) 2025  Station Pairing developers
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
import json
import logging
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from stationpairing.constants import GAME_RESULTS
from stationpairing.exceptions import InvalidSetupException, StationPairingException
from stationpairing.models import load_tournament, save_tournament
from stationpairing.scheduling import (
    ScheduleReport,
    build_schedule,
    replay_schedule,
    validate_tournament_setup,
)
from stationpairing.tournament import ResultRecorder, calculate_standings
from stationpairing.utils import setup_logger

logger = setup_logger(__name__)


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


# Command definitions with their options
COMMANDS = {
    "validate": {
        "description": "Check that a tournament setup can be scheduled",
        "options": {"--json": "Print the validation result as JSON"},
    },
    "generate": {
        "description": "Generate the round schedule",
        "options": {
            "--seed": "Random seed for reproducible schedules",
            "--output": "Write the tournament here instead of over the input",
            "--preview": "Print the schedule without saving it",
        },
    },
    "report": {
        "description": "Print the scheduling report of the stored schedule",
        "options": {
            "--seed": "Report on a freshly generated schedule with this seed",
            "--json": "Print the report as JSON",
        },
    },
    "score": {
        "description": "Record the result of a game",
        "options": {},
    },
    "standings": {
        "description": "Show team standings",
        "options": {"--json": "Print standings as JSON"},
    },
}


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:12}{Colors.ENDC} - {info['description']}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        completions[cmd] = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
    completions["help"] = None
    completions["exit"] = None
    return NestedCompleter.from_nested_dict(completions)


# ========== Commands ==========


def run_validate_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    validation = validate_tournament_setup(tournament)

    if args.json:
        print(json.dumps(validation.to_dict(), indent=2))
        return 0 if validation.valid else 1

    summary = validation.summary
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print(
        f"  Teams: {summary['teams']}, players per team: {summary['playersPerTeam']}, "
        f"stations: {summary['totalStations']}, game types: {summary['gameTypes']}"
    )
    for error in validation.errors:
        print(f"  {Colors.FAIL}Error: {error}{Colors.ENDC}")
    for warning in validation.warnings:
        print(f"  {Colors.WARNING}Warning: {warning}{Colors.ENDC}")
    if validation.valid:
        print(f"  {Colors.OKGREEN}Setup is valid{Colors.ENDC}")
    return 0 if validation.valid else 1


def run_generate_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    result = build_schedule(tournament, seed=args.seed)

    if args.preview:
        print(json.dumps([r.to_dict() for r in result.rounds], indent=2))
        return 0

    tournament.schedule = result.rounds
    save_tournament(tournament, args.output or args.file)
    games = sum(len(r.games) for r in result.rounds)
    print(
        f"{Colors.OKGREEN}Generated {len(result.rounds)} rounds, {games} games "
        f"for {tournament.name}{Colors.ENDC}"
    )
    for warning in result.validation.warnings:
        print(f"  {Colors.WARNING}Warning: {warning}{Colors.ENDC}")
    return 0


def run_report_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    if tournament.schedule and args.seed is None:
        state = replay_schedule(tournament)
    else:
        # Nothing stored yet, or a seeded preview was asked for
        state = build_schedule(tournament, seed=args.seed).state
    report = ScheduleReport.from_state(state, tournament)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.summary_text())
    return 0


def run_score_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    game = ResultRecorder().record_result(tournament, args.game_id, args.result)
    save_tournament(tournament, args.file)
    print(f"{Colors.OKGREEN}{game.station_name}: {game.result}{Colors.ENDC}")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    standings = calculate_standings(tournament)

    if args.json:
        print(json.dumps([s.to_dict() for s in standings], indent=2))
        return 0

    print(f"\n{Colors.BOLD}{'#':>3}  {'Team':20} {'Pts':>5} {'W':>3} {'D':>3} {'L':>3} {'GP':>3}{Colors.ENDC}")
    for rank, s in enumerate(standings, start=1):
        print(
            f"{rank:>3}  {s.team_name:20} {s.points:>5g} {s.wins:>3} "
            f"{s.draws:>3} {s.losses:>3} {s.games_played:>3}"
        )
    return 0


# ========== Parsers ==========


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="stationpairing",
        description="Round scheduling for team party tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  stationpairing

  # Check a setup
  stationpairing validate tournament.json

  # Preview a reproducible schedule
  stationpairing generate tournament.json --seed 7 --preview
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    val_parser = subparsers.add_parser("validate", help=COMMANDS["validate"]["description"])
    val_parser.add_argument("file")
    val_parser.add_argument("--json", action="store_true")
    val_parser.set_defaults(func=run_validate_command)

    gen_parser = subparsers.add_parser("generate", help=COMMANDS["generate"]["description"])
    gen_parser.add_argument("file")
    gen_parser.add_argument("--seed", type=int)
    gen_parser.add_argument("--output")
    gen_parser.add_argument("--preview", action="store_true")
    gen_parser.set_defaults(func=run_generate_command)

    rep_parser = subparsers.add_parser("report", help=COMMANDS["report"]["description"])
    rep_parser.add_argument("file")
    rep_parser.add_argument(
        "--seed", type=int, help=COMMANDS["report"]["options"]["--seed"]
    )
    rep_parser.add_argument("--json", action="store_true")
    rep_parser.set_defaults(func=run_report_command)

    score_parser = subparsers.add_parser("score", help=COMMANDS["score"]["description"])
    score_parser.add_argument("file")
    score_parser.add_argument("game_id")
    score_parser.add_argument("result", choices=GAME_RESULTS)
    score_parser.set_defaults(func=run_score_command)

    st_parser = subparsers.add_parser("standings", help=COMMANDS["standings"]["description"])
    st_parser.add_argument("file")
    st_parser.add_argument("--json", action="store_true")
    st_parser.set_defaults(func=run_standings_command)

    int_parser = subparsers.add_parser("interactive", help="Start in interactive mode")
    int_parser.set_defaults(func=lambda args: run_interactive_mode())

    return parser


def execute(args: argparse.Namespace) -> int:
    """Run a parsed command, turning application errors into exit code 1."""
    try:
        return args.func(args)
    except InvalidSetupException as e:
        print(f"{Colors.FAIL}Cannot generate schedule:{Colors.ENDC}")
        for error in e.errors:
            print(f"  {Colors.FAIL}- {error}{Colors.ENDC}")
        return 1
    except StationPairingException as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    parser = create_main_parser()
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    print(f"Type {Colors.BOLD}help{Colors.ENDC} for commands, {Colors.BOLD}exit{Colors.ENDC} to leave")

    while True:
        try:
            user_input = session.prompt("stationpairing> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            break

        if not user_input:
            continue
        if user_input in ("exit", "quit", "q"):
            break
        if user_input in ("help", "?"):
            print_commands_list()
            continue

        try:
            args = parser.parse_args(shlex.split(user_input))
        except SystemExit:
            # argparse exits on bad input
            continue
        if getattr(args, "func", None) is None or args.command == "interactive":
            print_commands_list()
            continue
        execute(args)

    print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the stationpairing CLI."""
    argv = sys.argv[1:] if argv is None else argv
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("stationpairing").setLevel(logging.DEBUG)

    if args.interactive or not argv:
        return run_interactive_mode()

    if getattr(args, "func", None) is None:
        parser.print_help()
        return 0
    return execute(args)


if __name__ == "__main__":
    sys.exit(main())
