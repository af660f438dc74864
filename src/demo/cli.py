"""Demo CLI — демонстрация переключателей и поиск буквенной оценки.

Команды:
- switches: три паттерна булевых флагов (обычное поле, AtomicSwitch,
  булевые параметры) с выводом значений до/после каждой операции
- grade [SCORE] [--scale FILE]: буквенная оценка для балла; без SCORE
  балл читается со stdin

Все переключатели создаются внутри команды и передаются явно.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

import jsonschema
import pydantic

from src.grading.letter_grade import GradeLookup, parse_score
from src.switches.atomic_switch import AtomicSwitch
from src.switches.feature_params import query, send_message
from src.switches.plain_switch import PlainSwitch


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


@dataclass(frozen=True)
class DemoConfig:
    """Параметры демонстрации паттерна булевых параметров."""

    message: str = "Hello, World!"
    query_key: str = "user:1"


# =============================================================================
# SWITCHES DEMO
# =============================================================================


def run_switches_demo(config: DemoConfig = DemoConfig(), out: Optional[TextIO] = None) -> None:
    """Демонстрация трёх паттернов булевых флагов."""
    out = out or sys.stdout

    print("=== 1. Simple boolean flag ===", file=out)
    plain = PlainSwitch(name="demo-plain")
    plain.do_work(out)
    plain.enable()
    plain.do_work(out)
    plain.toggle()
    plain.do_work(out)

    print("\n=== 2. AtomicSwitch thread-safe switch ===", file=out)
    atomic = AtomicSwitch(name="demo-atomic")
    print(f"Initial state: {atomic.get()}", file=out)
    previous = atomic.set()
    print(f"Previous value before set(): {previous}, current value: {atomic.get()}", file=out)
    swapped = atomic.compare_and_set(True, False)
    print(f"CAS(true->false) succeeded: {swapped}, current value: {atomic.get()}", file=out)

    print("\n=== 3. Boolean method-parameter switch ===", file=out)
    send_message(config.message, debug_log=True, out=out)
    print(file=out)
    send_message(config.message, debug_log=False, out=out)
    print(file=out)
    print(f"use_cache=True  result: {query(config.query_key, use_cache=True, out=out)}", file=out)
    print(f"use_cache=False result: {query(config.query_key, use_cache=False, out=out)}", file=out)


# =============================================================================
# GRADE LOOKUP
# =============================================================================


def run_grade(
    score_text: Optional[str],
    scale_path: Optional[str] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Печать буквенной оценки. Возвращает код выхода."""
    out = out or sys.stdout
    err = err or sys.stderr

    try:
        lookup = GradeLookup.from_json_file(scale_path) if scale_path else GradeLookup()
    except (OSError, json.JSONDecodeError, jsonschema.ValidationError, pydantic.ValidationError) as e:
        print(f"error: invalid grade scale {scale_path}: {e}", file=err)
        return EXIT_USAGE

    try:
        if score_text is None:
            print("Enter score: ", end="", file=out)
            out.flush()
            # UnicodeDecodeError — подкласс ValueError
            score_text = sys.stdin.readline()
        score = parse_score(score_text)
    except ValueError as e:
        print(f"error: {e}", file=err)
        return EXIT_USAGE

    grade = lookup.lookup(score)
    logger.debug("score=%d grade=%s", score, grade.value)
    print(grade.value, file=out)
    return EXIT_OK


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boolswitch",
        description="Boolean switch patterns and letter grade lookup",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("switches", help="Run the boolean switch demonstrations")

    grade_parser = subparsers.add_parser("grade", help="Print the letter grade for a score")
    grade_parser.add_argument(
        "score",
        nargs="?",
        help="Integer score (read from stdin if omitted)",
    )
    grade_parser.add_argument(
        "--scale",
        default=None,
        help="Path to a grade scale JSON file (default: 90/80/70/60)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "switches":
        run_switches_demo()
        return EXIT_OK
    return run_grade(args.score, args.scale)
