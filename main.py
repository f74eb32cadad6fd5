"""CLI entrypoint for the daily crossword generator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from daily_crossword.core.constants import DEFAULT_LANGUAGE, Difficulty
from daily_crossword.core.exceptions import CrosswordError, EmptyPoolError, InvalidDateError
from daily_crossword.data.word_tables import WordTables
from daily_crossword.engine.sequence import SEQUENCE_KINDS
from daily_crossword.io.daily import DailyCrosswordService, parse_date, resolve_difficulty
from daily_crossword.utils.logger import configure_logging, parse_level
from daily_crossword.utils.pretty import pretty_print_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the daily crossword for a language and difficulty",
    )
    parser.add_argument("--language", type=str, default=DEFAULT_LANGUAGE, help="Language code (falls back to en)")
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.NORMAL.value,
        help="Difficulty tier",
    )
    parser.add_argument("--date", type=str, default=None, help="Puzzle date (YYYY-MM-DD), defaults to today")
    parser.add_argument(
        "--words",
        type=str,
        default=None,
        metavar="FILE_OR_URL",
        help="JSON word tables {language: {category: [words]}} (defaults to the bundled tables)",
    )
    parser.add_argument(
        "--sequence",
        type=str,
        choices=sorted(SEQUENCE_KINDS),
        default="hash",
        help="Pseudo-random transform driving the layout",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--pretty", action="store_true", help="Also print the grid and clues to stderr")
    parser.add_argument("--serve", action="store_true", help="Serve /api/crossword over HTTP instead")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host for --serve")
    parser.add_argument("--port", type=int, default=5000, help="Port for --serve")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(parse_level(args.log_level))

    try:
        tables = WordTables.load(args.words)
    except CrosswordError as exc:
        parser.error(str(exc))

    if args.serve:
        from daily_crossword.io.web import create_app

        create_app(tables, sequence=args.sequence).run(host=args.host, port=args.port)
        return

    service = DailyCrosswordService(tables, sequence=args.sequence)
    try:
        payload = service.build(lang=args.language, difficulty=args.difficulty, day=args.date)
    except InvalidDateError as exc:
        parser.error(str(exc))

    if args.pretty:
        try:
            result = service.generate(
                args.language, resolve_difficulty(args.difficulty), parse_date(payload["date"])
            )
        except EmptyPoolError as exc:
            print(f"No crossword: {exc}", file=sys.stderr)
        else:
            pretty_print_result(
                result, label=f"Crossword #{payload['number']} ({payload['date']})", stream=sys.stderr
            )

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
