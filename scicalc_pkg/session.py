"""Editing session over a single input buffer.

A Session is what a keypad front end talks to: it appends keys, clears,
deletes the last key and evaluates the buffer in place. The buffer belongs
to the Session instance; two sessions never share state.
"""

from __future__ import annotations

from . import guard
from .config import ERROR_TEXT
from .evaluator import Evaluator, SympyEvaluator, run_evaluator
from .formatter import format_scientific
from .logging_config import get_logger
from .parser import normalize
from .types import EvaluationOutcome, Failure, Success

logger = get_logger("session")


class Session:
    """Owns the input buffer and runs the normalize -> evaluate -> format pipeline."""

    def __init__(self, evaluator: Evaluator | None = None):
        self.evaluator: Evaluator = evaluator if evaluator is not None else SympyEvaluator()
        self._buffer = ""
        self.last_outcome: EvaluationOutcome | None = None

    def append(self, ch: str) -> None:
        """Append one key; a ')' without an open '(' is silently dropped."""
        if not guard.accept(self._buffer, ch):
            logger.debug(f"Rejected {ch!r}: no open parenthesis in {self._buffer!r}")
            return
        self._buffer += ch

    def clear(self) -> None:
        self._buffer = ""

    def backspace(self) -> None:
        self._buffer = self._buffer[:-1]

    def evaluate(self) -> None:
        """Replace the buffer with the formatted result, or with "Error"."""
        normalized = normalize(self._buffer)
        outcome = run_evaluator(self.evaluator, normalized)
        if isinstance(outcome, Success):
            try:
                self._buffer = format_scientific(outcome.value)
            except (ValueError, ArithmeticError) as e:
                logger.exception(f"Could not format {outcome.value!r}")
                outcome = Failure(error=f"Could not format result: {e}", code="EVAL_ERROR")
        if not isinstance(outcome, Success):
            self._buffer = ERROR_TEXT
        self.last_outcome = outcome
        logger.debug(f"Evaluated {normalized!r} -> {self._buffer!r}")

    def current_text(self) -> str:
        return self._buffer

    def __repr__(self) -> str:
        return f"Session(text={self._buffer!r})"
