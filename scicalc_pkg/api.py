"""Public API for SciCalc - returns structured objects without side effects."""

from __future__ import annotations

from .evaluator import Evaluator, SympyEvaluator, run_evaluator
from .formatter import format_scientific
from .parser import normalize
from .types import EvalResult, Success


def evaluate(expression: str, evaluator: Evaluator | None = None) -> EvalResult:
    """Evaluate keypad text in one shot.

    Args:
        expression: Keypad text (e.g., "2(3+1)", "√16", "2π")
        evaluator: Optional evaluator (default: SympyEvaluator)

    Returns:
        EvalResult with the display string, normalized text and numeric value

    Example:
        >>> from scicalc_pkg.api import evaluate
        >>> evaluate("2(3+1)").result
        '8.000000 x 10^0'
        >>> evaluate("(2+3").error_code
        'PARSE_ERROR'
    """
    normalized = normalize(expression)
    outcome = run_evaluator(evaluator or SympyEvaluator(), normalized)
    if isinstance(outcome, Success):
        try:
            display = format_scientific(outcome.value)
        except (ValueError, ArithmeticError) as e:
            return EvalResult(
                ok=False,
                normalized=normalized,
                error=f"Could not format result: {e}",
                error_code="EVAL_ERROR",
            )
        return EvalResult(
            ok=True,
            result=display,
            normalized=normalized,
            value=outcome.value,
        )
    return EvalResult(
        ok=False,
        normalized=normalized,
        error=outcome.error,
        error_code=outcome.code,
    )


def normalize_expression(expression: str) -> str:
    """Return the normalized form of keypad text without evaluating it.

    Example:
        >>> from scicalc_pkg.api import normalize_expression
        >>> normalize_expression("√16")
        'sqrt(16)'
    """
    return normalize(expression)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check whether keypad text evaluates, without formatting a result.

    Returns:
        Tuple of (is_valid, error_message)
    """
    outcome = run_evaluator(SympyEvaluator(), normalize(expression))
    if isinstance(outcome, Success):
        return True, None
    return False, outcome.error
