"""Arithmetic evaluator contract and its SymPy-backed implementation.

The preprocessing and formatting code only depend on the ``Evaluator``
protocol: anything with ``evaluate(expression) -> float`` that raises
``EvaluationFailure`` for invalid or undefined input can be plugged in.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Protocol, runtime_checkable

import sympy as sp
from sympy import parse_expr, postorder_traversal

from . import config
from .config import (
    ALLOWED_SYMPY_NAMES,
    CACHE_SIZE_EVAL,
    EVALUATOR_ALPHABET_REGEX,
    LEADING_ZERO_REGEX,
    SQRT_TOKEN_REGEX,
    TRANSFORMATIONS,
)
from .logging_config import get_logger
from .types import EvaluationFailure, EvaluationOutcome, Failure, Success

logger = get_logger("evaluator")


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, expression: str) -> float:
        """
        Evaluate a normalized expression over digits, '.', + - * / ^,
        parentheses and sqrt(...).
        Returns a finite real number.
        Raises EvaluationFailure for invalid syntax or non-finite results.
        """
        ...


def _check_input(expression: str) -> None:
    """Reject input outside the evaluator's alphabet before it reaches SymPy."""
    if not expression or expression.isspace():
        raise EvaluationFailure("Input cannot be empty", "EMPTY_INPUT")
    if len(expression) > config.MAX_INPUT_LENGTH:
        raise EvaluationFailure(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    if not EVALUATOR_ALPHABET_REGEX.match(SQRT_TOKEN_REGEX.sub("", expression)):
        raise EvaluationFailure(
            f"Unknown token in expression: {expression}", "UNKNOWN_TOKEN"
        )


def _to_float(expr: sp.Basic) -> float:
    """Numerically evaluate a parsed expression to a finite real float."""
    value = sp.N(expr, config.EVAL_PRECISION)
    if value.has(sp.nan, sp.zoo, sp.oo, -sp.oo):
        raise EvaluationFailure(f"Result is not finite: {value}", "NON_FINITE")
    if not value.is_number:
        raise EvaluationFailure(f"Expression is not numeric: {value}", "PARSE_ERROR")
    if value.is_real is not True:
        raise EvaluationFailure(f"Result is not a real number: {value}", "NOT_REAL")
    try:
        number = float(value)
    except (OverflowError, TypeError) as e:
        raise EvaluationFailure(f"Result cannot be represented: {e}", "NON_FINITE")
    if not math.isfinite(number):
        raise EvaluationFailure(f"Result is not finite: {value}", "NON_FINITE")
    return number


def _parse(expression: str, evaluate: bool) -> sp.Basic:
    return parse_expr(
        expression,
        local_dict=dict(ALLOWED_SYMPY_NAMES),
        transformations=TRANSFORMATIONS,
        evaluate=evaluate,
    )


def _check_power_sizes(tree: sp.Basic) -> None:
    """Reject powers too large or too small to compute exactly.

    ``tree`` is the unevaluated parse. Powers are approximated innermost
    first, so a tower such as 9^9^9^9 is rejected at 9^9^9 before its outer
    power is ever approximated.
    """
    bound = sp.Float(10) ** config.MAX_POWER_DIGITS
    for node in postorder_traversal(tree):
        if not isinstance(node, sp.Pow):
            continue
        magnitude = sp.N(sp.Abs(sp.N(node)))
        if not magnitude.is_Float or magnitude.is_zero:
            continue
        if magnitude > bound or magnitude < 1 / bound:
            raise EvaluationFailure(
                f"Power out of range (beyond 10^±{config.MAX_POWER_DIGITS}): {node}",
                "NON_FINITE",
            )


@lru_cache(maxsize=CACHE_SIZE_EVAL)
def _evaluate_cached(expression: str) -> float:
    try:
        tree = _parse(expression, evaluate=False)
    except Exception as e:
        # SyntaxError, TokenError (unbalanced parentheses), TypeError, ...
        logger.debug(f"Parse error for {expression!r}: {e}")
        raise EvaluationFailure(f"Could not parse expression: {expression}", "PARSE_ERROR")

    if not isinstance(tree, sp.Basic):
        raise EvaluationFailure(f"Expression is not numeric: {expression}", "PARSE_ERROR")

    try:
        _check_power_sizes(tree)
        return _to_float(_parse(expression, evaluate=True))
    except EvaluationFailure:
        raise
    except (ValueError, TypeError, ArithmeticError) as e:
        raise EvaluationFailure(f"Evaluation failed: {e}", "EVAL_ERROR")


class SympyEvaluator:
    """Evaluator backed by SymPy's parser and arbitrary precision arithmetic."""

    def evaluate(self, expression: str) -> float:
        _check_input(expression)
        # Python's tokenizer would split "05" into 0 and 5
        expression = LEADING_ZERO_REGEX.sub("", expression.strip())
        return _evaluate_cached(expression)


def clear_cache() -> None:
    """Clear the memoized evaluation results."""
    _evaluate_cached.cache_clear()


def run_evaluator(evaluator: Evaluator, expression: str) -> EvaluationOutcome:
    """Run any evaluator and turn its result or failure into an outcome.

    Never raises: unexpected exceptions from the evaluator, and values that
    are not real numbers, are logged and reported as a Failure.
    """
    try:
        value = float(evaluator.evaluate(expression))
    except EvaluationFailure as e:
        logger.info(f"Evaluation failed: {e.code} - {e.message}")
        return Failure(error=e.message, code=e.code)
    except Exception as e:
        logger.exception("Unexpected error in evaluator")
        return Failure(error=f"Evaluation failed: {e}", code="EVAL_ERROR")
    if not math.isfinite(value):
        return Failure(error=f"Result is not finite: {value}", code="NON_FINITE")
    return Success(value=value)
