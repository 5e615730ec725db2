"""Centralized configuration for SciCalc.

This module defines:
- Input validation limits for the evaluator
- Numeric precision and display settings
- Cache sizes for evaluation memoization
- Allowed SymPy names and parser transformations
- Regex patterns for the rewrite pipeline

Numeric limits can be overridden via environment variables prefixed with
SCICALC_ (e.g. SCICALC_MANTISSA_DIGITS=4).
"""

import os
import re

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    standard_transformations,
)

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("scicalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("SCICALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Numeric evaluation
EVAL_PRECISION = int(
    os.getenv("SCICALC_EVAL_PRECISION", "15")
)  # significant digits passed to sympy.N

# Largest power of ten a single power subexpression may reach (in either
# direction) before it is computed exactly
MAX_POWER_DIGITS = int(os.getenv("SCICALC_MAX_POWER_DIGITS", "4000"))

# Cache configuration
CACHE_SIZE_EVAL = int(os.getenv("SCICALC_CACHE_SIZE_EVAL", "2048"))

# Display: digits after the decimal point of the mantissa
MANTISSA_DIGITS = int(os.getenv("SCICALC_MANTISSA_DIGITS", "6"))

# Literal shown in place of any failed evaluation
ERROR_TEXT = "Error"

ROOT_SYMBOL = "√"
OPERATOR_CHARS = "+-*/^()"

ALLOWED_SYMPY_NAMES = {
    "sqrt": sp.sqrt,
}

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

# Characters the evaluator accepts once "sqrt" tokens are removed
EVALUATOR_ALPHABET_REGEX = re.compile(r"^[0-9.+\-*/^()\s]*$")
SQRT_TOKEN_REGEX = re.compile(r"sqrt")

# Redundant leading zeros of an integer part ("05" -> "5", "0.5" untouched)
LEADING_ZERO_REGEX = re.compile(r"(?<![0-9.])0+(?=[0-9])")

# Implicit multiplication rules (ASCII digits and letters only)
DIGIT_PAREN_REGEX = re.compile(r"([0-9])(\()")
PAREN_DIGIT_REGEX = re.compile(r"(\))([0-9])")
DIGIT_LETTER_REGEX = re.compile(r"([0-9])([A-Za-z])")
LETTER_DIGIT_REGEX = re.compile(r"([A-Za-z])([0-9])")
PAREN_LETTER_REGEX = re.compile(r"(\))([A-Za-z])")

# Root symbol followed by a bare number or a group up to the first ')'
SQRT_UNICODE_REGEX = re.compile(r"√([0-9]+(?:\.[0-9]+)?|\([^)]+\))")
