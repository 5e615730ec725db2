"""Type definitions, evaluation outcomes and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Evaluator produced a finite real number."""

    value: float


@dataclass(frozen=True)
class Failure:
    """Evaluator could not parse or compute the expression."""

    error: str
    code: str = "EVAL_ERROR"


EvaluationOutcome = Union[Success, Failure]


@dataclass
class EvalResult:
    """Result of evaluating a one-shot expression through the full pipeline."""

    ok: bool
    result: str | None = None
    normalized: str | None = None
    value: float | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.normalized is not None:
            result_dict["normalized"] = self.normalized
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.normalized is not None:
            parts.append(f"normalized={self.normalized!r}")
        return f"EvalResult({', '.join(parts)})"


class EvaluationFailure(Exception):
    """Raised when an expression cannot be parsed or has no finite real value."""

    def __init__(self, message: str, code: str = "EVAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
