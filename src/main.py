"""Command-line entry point for the Detective Quest mystery."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from detectivequest import (
    Case,
    CaseFileError,
    Discovery,
    GameSettings,
    InvestigationEngine,
    NavigationResult,
    Phase,
    Verdict,
    load_case_from_file,
    load_default_case,
)

_RULE = "=" * 40


class TranscriptLogger:
    """Structured writer that records investigation transcripts for debugging."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._turn = 0

    def log_player_input(self, text: str) -> None:
        """Record the player's latest command."""

        formatted = text if text else "(empty)"
        self._write(f"Player input: {formatted}")
        self._stream.flush()

    def log_discovery(self, discovery: Discovery) -> None:
        """Record the room the player is in, its clue and the offered moves."""

        self._turn += 1
        self._write("")
        self._write(f"=== Turn {self._turn} ===")
        self._write(f"Location: {discovery.location}")
        if discovery.clue is None:
            self._write("Clue: (none)")
        else:
            status = "new" if discovery.newly_found else "already collected"
            self._write(f"Clue: {discovery.clue} ({status})")
        self._write("Moves:")
        for move in discovery.moves:
            target = f" -> {move.target}" if move.target else ""
            self._write(f"  [{move.command}] {move.description}{target}")
        self._stream.flush()

    def log_verdict(self, verdict: Verdict, clues: Sequence[str]) -> None:
        """Record the collected clues and the final judgment."""

        self._write("")
        self._write("=== Judgment ===")
        self._write("Clues:")
        for clue in clues or ("(none)",):
            self._write(f"  {clue}")
        self._write(f"Accused: {verdict.accused}")
        self._write(f"Supporting clues: {verdict.match_count}")
        self._write(f"Solved: {'yes' if verdict.solved else 'no'}")
        self._stream.flush()

    def _write(self, text: str) -> None:
        self._stream.write(f"{text}\n")


def _print_banner(case: Case) -> None:
    print(_RULE)
    print(f"  {case.title}")
    if case.subtitle:
        print(f"  {case.subtitle}")
    print(_RULE)
    if case.introduction:
        print()
        for line in case.introduction:
            print(line)


def _print_discovery(discovery: Discovery) -> None:
    print(f"\n{_RULE}")
    print(f"You are in: {discovery.location}")
    if discovery.clue is None:
        print("No clue found here.")
    elif discovery.newly_found:
        print(f"CLUE FOUND: {discovery.clue}")
        print("The clue was added to your notebook!")
    else:
        print(f"Clue already in your notebook: {discovery.clue}")

    print("\nWhere do you want to go?")
    for move in discovery.moves:
        if move.target:
            print(f"  [{move.command}] {move.description} -> {move.target}")
        else:
            print(f"  [{move.command}] {move.description}")


def _print_verdict(verdict: Verdict) -> None:
    print(f"\n{_RULE}")
    print("     INVESTIGATION RESULT")
    print(_RULE)
    print(f"Accused: {verdict.accused}")
    print(f"Clues pointing to the suspect: {verdict.match_count}\n")
    if verdict.solved:
        print("*** CASE SOLVED! ***")
        print(f"Enough evidence! {verdict.accused} has been found guilty!")
        print("Congratulations, detective!")
    else:
        print("*** CASE NOT SOLVED! ***")
        print(f"Not enough evidence to charge {verdict.accused}.")
        print("The culprit got away... Try again!")


def _read_accusation() -> str:
    while True:
        accused = input("\nWho do you accuse? (type the full name): ").lstrip()
        if accused:
            return accused


def run_cli(
    engine: InvestigationEngine,
    case: Case,
    *,
    transcript_logger: TranscriptLogger | None = None,
) -> Verdict | None:
    """Drive the investigation using ``input``/``print``.

    Returns the verdict, or ``None`` when input closes before an accusation.
    """

    _print_banner(case)
    try:
        input("\n\nPress ENTER to begin the investigation...")
    except (EOFError, KeyboardInterrupt):
        print("\nInvestigation cancelled before it began.")
        return None

    while engine.phase is Phase.AT_LOCATION:
        discovery = engine.enter()
        _print_discovery(discovery)
        if transcript_logger is not None:
            transcript_logger.log_discovery(discovery)

        try:
            choice = input("Choice: ")
        except EOFError:
            print("\nInput closed. Leaving the mansion without an accusation.")
            return None
        except KeyboardInterrupt:
            print("\nInvestigation interrupted.")
            return None

        if transcript_logger is not None:
            transcript_logger.log_player_input(choice)

        outcome = engine.choose(choice)
        if outcome.result is NavigationResult.BLOCKED:
            side = "left" if outcome.command == "e" else "right"
            print(f"\nThere is no path to the {side}!")
        elif outcome.result is NavigationResult.IGNORED:
            print("\nUnknown option. Choose E, D or S.")

    clues = engine.ledger_clues()
    print(f"\n{_RULE}")
    print("       JUDGMENT PHASE")
    print(_RULE)
    print("\nClues collected during the investigation:")
    if clues:
        for clue in clues:
            print(f"  - {clue}")
    else:
        print("  (none)")

    print("\n\nAvailable suspects:")
    for number, suspect in enumerate(case.suspects, start=1):
        print(f"  {number}. {suspect}")

    try:
        accused = _read_accusation()
    except (EOFError, KeyboardInterrupt):
        print("\nNo accusation was made. The case remains open.")
        return None

    if transcript_logger is not None:
        transcript_logger.log_player_input(accused)

    verdict = engine.accuse(accused)
    _print_verdict(verdict)
    if transcript_logger is not None:
        transcript_logger.log_verdict(verdict, clues)

    print(f"\n{_RULE}")
    print(f"Thanks for playing {case.title}!")
    print(_RULE)
    return verdict


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return parsed


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Detective Quest mystery")
    parser.add_argument(
        "--case-path",
        type=Path,
        help=(
            "Path to a JSON case file. "
            "Defaults to DETECTIVEQUEST_CASE_PATH, then the bundled mansion case."
        ),
    )
    parser.add_argument(
        "--bucket-count",
        type=_positive_int,
        help=(
            "Number of buckets in the clue-to-suspect index. "
            "Overrides the case file and DETECTIVEQUEST_BUCKET_COUNT."
        ),
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Path to a transcript log capturing rooms, clues and player input.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser.parse_args(argv)


def _load_case(args: argparse.Namespace) -> Case:
    try:
        settings = GameSettings.from_env()
    except ValueError as exc:
        print(f"Invalid environment configuration: {exc}")
        raise SystemExit(2) from exc

    case_path = args.case_path if args.case_path is not None else settings.case_path
    bucket_count = (
        args.bucket_count if args.bucket_count is not None else settings.bucket_count
    )

    if case_path is None:
        return load_default_case(bucket_count=bucket_count)

    try:
        return load_case_from_file(case_path, bucket_count=bucket_count)
    except (CaseFileError, OSError) as exc:
        print(f"Failed to load case from '{case_path}': {exc}")
        raise SystemExit(2) from exc


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive investigation."""

    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_handle: TextIO | None = None
    try:
        case = _load_case(args)
        engine = InvestigationEngine.from_case(case)

        transcript_logger: TranscriptLogger | None = None
        if args.log_file is not None:
            args.log_file.parent.mkdir(parents=True, exist_ok=True)
            log_handle = args.log_file.open("a", encoding="utf-8")
            transcript_logger = TranscriptLogger(log_handle)

        run_cli(engine, case, transcript_logger=transcript_logger)
    except MemoryError as exc:
        print("Fatal error: could not allocate memory.", file=sys.stderr)
        raise SystemExit(1) from exc
    finally:
        if log_handle is not None:
            log_handle.close()


if __name__ == "__main__":
    main()
