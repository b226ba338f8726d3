"""Command-line front end for the workout parser."""

import argparse
import asyncio
import json
import logging
import sys

from .config import config
from .core import WorkoutParser
from .database.connection import db_manager
from .database.dictionary import SqlMovementDictionary
from .movements import InMemoryMovementDictionary
from .parsing.schemas import IssueRecord, ParsedMovement, ParseResult


def format_movement(movement: ParsedMovement) -> str:
    parts = []
    if movement.reps is not None:
        parts.append(str(movement.reps))
    if movement.calories is not None:
        parts.append(str(movement.calorie_pair or f"{movement.calories} cal"))
    if movement.distance is not None:
        parts.append(str(movement.distance))
    if movement.duration_seconds is not None:
        parts.append(f"{movement.duration_seconds}s")
    parts.append(movement.display_name)
    if movement.load is not None:
        parts.append(f"@ {movement.load_pair or movement.load}")
    if movement.percentage is not None:
        parts.append(f"@ {movement.percentage.original_text}")
    if movement.height:
        parts.append(f"({movement.height})")
    if movement.rep_scheme is not None:
        parts.append(f"[{movement.rep_scheme}]")
    if movement.identity is None:
        parts.append("(unrecognized)")
    return " ".join(parts)


def format_issue(issue: IssueRecord) -> str:
    where = f"line {issue.line_number}: " if issue.line_number else ""
    text = f"{where}{issue.message}"
    if issue.similar_names:
        text += f" Did you mean: {', '.join(issue.similar_names)}?"
    elif issue.suggestion:
        text += f" {issue.suggestion}"
    return text


def format_result(result: ParseResult) -> str:
    """Human-readable summary of a parse."""
    workout = result.workout
    lines = []
    if workout.name:
        lines.append(f"Workout: {workout.name}")
    lines.append(f"Type: {workout.workout_type.label}")
    if workout.time_cap_seconds:
        minutes, seconds = divmod(workout.time_cap_seconds, 60)
        lines.append(f"Time cap: {minutes}:{seconds:02d}")
    if workout.round_count:
        lines.append(f"Rounds: {workout.round_count}")
    if workout.interval_seconds:
        lines.append(f"Interval: {workout.interval_seconds}s")
    if workout.rep_scheme:
        scheme = workout.rep_scheme
        lines.append(f"Rep scheme: {scheme} ({scheme.scheme_type.value}, {scheme.total_reps} reps)")

    if workout.movements:
        lines.append("Movements:")
        for movement in workout.movements:
            lines.append(f"  {movement.sequence_order}. {format_movement(movement)}")

    for issue in result.errors:
        lines.append(f"Error: {format_issue(issue)}")
    for issue in result.warnings:
        lines.append(f"Warning: {format_issue(issue)}")

    lines.append(f"Confidence: {result.confidence} ({result.confidence_level})")
    return "\n".join(lines)


class WodparseCLI:
    """Parses workouts from a file, stdin, or an interactive prompt."""

    def __init__(self, use_db: bool = False, as_json: bool = False) -> None:
        self._use_db = use_db
        self._as_json = as_json
        self._parser: WorkoutParser | None = None

    async def initialize(self) -> None:
        if self._use_db:
            await db_manager.initialize()
            dictionary = SqlMovementDictionary(db_manager)
        else:
            dictionary = InMemoryMovementDictionary()
        self._parser = WorkoutParser(dictionary)

    async def close(self) -> None:
        if self._use_db:
            await db_manager.close()

    def render(self, result: ParseResult) -> str:
        if self._as_json:
            return json.dumps(result.model_dump(mode="json"), indent=2)
        return format_result(result)

    async def parse_text(self, text: str) -> ParseResult:
        if self._parser is None:
            await self.initialize()
        return await self._parser.parse(text)

    def validate_text(self, text: str) -> list[IssueRecord]:
        parser = self._parser or WorkoutParser(InMemoryMovementDictionary())
        return parser.validate(text)

    async def run_interactive(self) -> None:
        print("wodparse - paste a workout, then an empty line to parse it.")
        print("Type 'help' for examples or 'exit' to quit.")
        print("-" * 50)

        buffer: list[str] = []
        while True:
            try:
                line = input("> " if not buffer else "... ")
            except (KeyboardInterrupt, EOFError):
                print("\nGoodbye!")
                break

            stripped = line.strip()
            if not buffer and stripped.lower() in ("exit", "quit", "bye"):
                print("Goodbye!")
                break
            if not buffer and stripped.lower() == "help":
                self._show_help()
                continue
            if stripped:
                buffer.append(line)
                continue
            if not buffer:
                continue

            try:
                result = await self.parse_text("\n".join(buffer))
                print(self.render(result))
            except Exception as e:
                print(f"Error: {e}")
            buffer = []
            print("-" * 50)

    def _show_help(self) -> None:
        print(
            "Examples:\n"
            "\n"
            "  Fran\n"
            "  21-15-9\n"
            "  Thrusters (95/65 lb)\n"
            "  Pull-ups\n"
            "\n"
            "  20 min AMRAP\n"
            "  5 Pull-ups\n"
            "  10 Push-ups\n"
            "  15 Air Squats\n"
            "\n"
            "  help  - show this message\n"
            "  exit  - quit"
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wodparse", description=__doc__)
    parser.add_argument("file", nargs="?", help="Workout text file, or '-' for stdin")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--validate", action="store_true", help="Only run the quick structural checks")
    parser.add_argument("--db", action="store_true", help="Resolve movements against the database")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    cli = WodparseCLI(use_db=args.db, as_json=args.json)
    if args.file is None and sys.stdin.isatty():
        await cli.initialize()
        try:
            await cli.run_interactive()
        finally:
            await cli.close()
        return 0

    if args.file in (None, "-"):
        text = sys.stdin.read()
    else:
        with open(args.file, encoding="utf-8") as fh:
            text = fh.read()

    if args.validate:
        issues = cli.validate_text(text)
        for issue in issues:
            print(f"Error: {format_issue(issue)}")
        if not issues:
            print("OK")
        return 1 if issues else 0

    await cli.initialize()
    try:
        result = await cli.parse_text(text)
    finally:
        await cli.close()
    print(cli.render(result))
    return 0 if result.success else 1


def main_sync() -> None:
    """Entry point for pyproject.toml console_scripts."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nGoodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main_sync()
