"""Command-line interface: one-shot evaluation and an interactive keypad REPL."""

from __future__ import annotations

import argparse
import json
from typing import Any

from . import guard
from .config import ERROR_TEXT, VERSION
from .constants import CONSTANT_TABLE
from .logging_config import get_logger
from .session import Session
from .types import Success

logger = get_logger("cli")

# Keys of the calculator keypad, row by row
KEYPAD = (
    ("π", "K", "h", "c"),
    ("(", ")", "/"),
    ("7", "8", "9", "*"),
    ("4", "5", "6", "-"),
    ("1", "2", "3", "+"),
    ("0", ".", "^", "√"),
)

# Words a terminal user can type instead of the Unicode keys
KEY_ALIASES = {
    "sqrt": "√",
    "pi": "π",
}


def type_keys(session: Session, line: str) -> None:
    """Type a line into the session one key at a time.

    Whitespace is skipped (the keypad has no space key) and the aliases in
    KEY_ALIASES are typed as their Unicode key.
    """
    for word, key in KEY_ALIASES.items():
        line = line.replace(word, key)
    for ch in line:
        if ch.isspace():
            continue
        session.append(ch)


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running SciCalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .parser import normalize

        normalized = normalize("2(3+1)")
        if normalized == "2*(3+1)":
            print("[OK] Preprocessing works")
            checks_passed += 1
        else:
            print(f"[FAIL] Preprocessing failed: expected '2*(3+1)', got {normalized!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Preprocessing check failed: {e}")
        checks_failed += 1

    try:
        session = Session()
        type_keys(session, "√16")
        session.evaluate()
        if session.current_text() == "4.000000 x 10^0":
            print("[OK] Session evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Session check failed: {session.current_text()!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Session check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    try:
        print(res["display"])
    except UnicodeEncodeError:
        print(res["display"].encode("ascii", "replace").decode("ascii"))


def _render(session: Session) -> str:
    text = session.current_text()
    depth = guard.open_depth(text)
    if depth > 0:
        return f"{text}    [{depth} open]"
    return text


def print_help_text() -> None:
    """Print help text for REPL commands."""
    rows = "\n".join("  " + "  ".join(row) for row in KEYPAD)
    constants = "\n".join(
        f"  {definition.symbol} = {definition.expansion}" for definition in CONSTANT_TABLE
    )
    print(
        f"""SciCalc version {VERSION}

Type keys on one line; they are appended to the display.
  =        evaluate the display
  clear    clear the display
  back     delete the last key
  help     show this text
  quit     exit

Keypad:
{rows}

'pi' and 'sqrt' may be typed for π and √.

Constants:
{constants}"""
    )


def repl_loop() -> None:
    """Interactive keypad loop over a single session."""
    session = Session()
    print("SciCalc - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            return
        if raw in ("quit", "exit"):
            return
        if raw == "help":
            print_help_text()
            continue
        if raw == "clear":
            session.clear()
        elif raw == "back":
            session.backspace()
        elif raw == "=":
            session.evaluate()
        else:
            # A trailing '=' evaluates after typing the rest
            evaluate_after = raw.endswith("=")
            type_keys(session, raw[:-1] if evaluate_after else raw)
            if evaluate_after:
                session.evaluate()
        print(_render(session))


def _eval_once(expression: str) -> dict[str, Any]:
    session = Session()
    type_keys(session, expression)
    typed = session.current_text()
    session.evaluate()
    logger.debug(f"--eval typed {typed!r} from {expression!r}")
    res: dict[str, Any] = {
        "ok": isinstance(session.last_outcome, Success),
        "input": typed,
        "display": session.current_text(),
    }
    outcome = session.last_outcome
    if isinstance(outcome, Success):
        res["value"] = outcome.value
    elif outcome is not None:
        res["error"] = outcome.error
        res["error_code"] = outcome.code
    return res


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for SciCalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="scicalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Type one expression, evaluate it and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        res = _eval_once(args.eval_expr)
        print_result_pretty(res, output_format=args.format)
        return 0 if res["display"] != ERROR_TEXT else 1

    repl_loop()
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m scicalc_pkg.cli"""
    import sys

    sys.exit(main_entry())
