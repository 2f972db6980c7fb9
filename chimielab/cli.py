"""Command-line front end: equation balancing, problems, elements and quizzes."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from chimielab.balance import solve_reaction
from chimielab.elements import element_info
from chimielab.problems import percent_concentration, solution_volume
from chimielab.quiz import Quiz, ResultStore, get_quiz, quiz_names

DEFAULT_DATABASE = "rezultate.db"
_UNANSWERED = {"", "-"}


def _print_text(text: str) -> None:
    print(text, end="" if text.endswith("\n") else "\n")


def _cmd_balance(args: argparse.Namespace) -> int:
    _print_text(solve_reaction(args.equation).report())
    return 0


def _cmd_percent(args: argparse.Namespace) -> int:
    _print_text(percent_concentration(args.solute_mass, args.solution_mass).text)
    return 0


def _cmd_volume(args: argparse.Namespace) -> int:
    _print_text(solution_volume(args.moles, args.molarity).text)
    return 0


def _cmd_element(args: argparse.Namespace) -> int:
    info = element_info(args.symbol)
    if info is None:
        raise ValueError(f"Nu există detalii pentru elementul {args.symbol}.")
    _print_text(info.describe())
    return 0


def _parse_answer(token: str) -> Optional[int]:
    """Turn a 1-based choice typed by the user into an index; '-' means none."""
    token = token.strip()
    if token in _UNANSWERED:
        return None
    try:
        choice = int(token)
    except ValueError:
        raise ValueError(f"răspuns invalid: {token!r}") from None
    if choice < 1:
        raise ValueError(f"răspuns invalid: {token!r}")
    return choice - 1


def _ask_answers(quiz: Quiz) -> list[Optional[int]]:
    answers: list[Optional[int]] = []
    for question in quiz.questions:
        print(question.text)
        for number, choice in enumerate(question.choices, start=1):
            print(f"  {number}. {choice}")
        answers.append(_parse_answer(input("Răspuns: ")))
    return answers


def _cmd_quiz(args: argparse.Namespace) -> int:
    quiz = get_quiz(args.name)
    print(quiz.title)
    if args.answers is None:
        answers = _ask_answers(quiz)
    else:
        answers = [_parse_answer(token) for token in args.answers.split(",")]
    grade = quiz.grade(answers)
    try:
        with ResultStore(args.db) as store:
            store.record(args.user, grade, quiz.name)
    except OSError as exc:
        print(f"Eroare BD: {exc}", file=sys.stderr)
    except Exception as exc:  # database errors must not hide the grade
        print(f"Eroare BD: {exc}", file=sys.stderr)
    print(f"Ai obținut nota: {grade}")
    return 0


def _cmd_catalog(args: argparse.Namespace) -> int:
    with ResultStore(args.db) as store:
        results = store.results(args.user)
    if not results:
        print("Nu există rezultate.")
        return 0
    for result in results:
        print(f"{result.timestamp}\t{result.user}\t{result.test}\tnota {result.grade}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chimielab", description="Chimie pentru clasa a 7-a."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    balance = commands.add_parser("balance", help="echilibrarea unei ecuații chimice")
    balance.add_argument("equation", help="de exemplu: 'H2 + O2 -> H2O'")
    balance.set_defaults(handler=_cmd_balance)

    percent = commands.add_parser("percent", help="concentrația procentuală")
    percent.add_argument("solute_mass", help="masa substanței dizolvate (g)")
    percent.add_argument("solution_mass", help="masa soluției (g)")
    percent.set_defaults(handler=_cmd_percent)

    volume = commands.add_parser("volume", help="volumul soluției")
    volume.add_argument("moles", help="număr de moli (mol)")
    volume.add_argument("molarity", help="concentrație molară (mol/L)")
    volume.set_defaults(handler=_cmd_volume)

    element = commands.add_parser("element", help="detaliile unui element")
    element.add_argument("symbol")
    element.set_defaults(handler=_cmd_element)

    quiz = commands.add_parser("quiz", help="rezolvă un test")
    quiz.add_argument("name", choices=quiz_names())
    quiz.add_argument("--user", required=True, help="numele utilizatorului")
    quiz.add_argument(
        "--answers",
        help="răspunsuri numerotate de la 1, separate prin virgulă; '-' pentru lipsă",
    )
    quiz.add_argument("--db", default=DEFAULT_DATABASE, help="baza de date cu rezultate")
    quiz.set_defaults(handler=_cmd_quiz)

    catalog = commands.add_parser("catalog", help="catalogul de note")
    catalog.add_argument("--user", help="doar rezultatele acestui utilizator")
    catalog.add_argument("--db", default=DEFAULT_DATABASE, help="baza de date cu rezultate")
    catalog.set_defaults(handler=_cmd_catalog)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (ValueError, KeyError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"Eroare: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())