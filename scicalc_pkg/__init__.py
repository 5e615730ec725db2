"""SciCalc package: keypad input normalization, evaluation and scientific display."""

__all__ = [
    "config",
    "constants",
    "guard",
    "parser",
    "evaluator",
    "formatter",
    "session",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "normalize_expression",
    "validate_expression",
]
