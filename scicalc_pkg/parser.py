"""Input preprocessing module.

This module turns raw keypad text into a normalized expression string:
- Constant symbols are expanded into parenthesized expressions
- Implicit multiplication is made explicit (2( -> 2*(, )2 -> )*2, ...)
- The Unicode square root (√16, √(4+5)) is rewritten to sqrt(...)

Each rule is a single left-to-right pass over the output of the previous
rule. Rules are never repeated until nothing changes, so a '*' inserted by
one rule is not seen by the rules before it.
"""

from __future__ import annotations

from typing import Callable

from .config import (
    DIGIT_LETTER_REGEX,
    DIGIT_PAREN_REGEX,
    LETTER_DIGIT_REGEX,
    PAREN_DIGIT_REGEX,
    PAREN_LETTER_REGEX,
    SQRT_UNICODE_REGEX,
)
from .constants import CONSTANT_TABLE
from .logging_config import get_logger

logger = get_logger("parser")

RewriteRule = Callable[[str], str]


def expand_constants(text: str) -> str:
    """Replace every constant symbol with its parenthesized expansion."""
    for definition in CONSTANT_TABLE:
        text = text.replace(definition.symbol, f"({definition.expansion})")
    return text


def digit_before_paren(text: str) -> str:
    """2( -> 2*("""
    return DIGIT_PAREN_REGEX.sub(r"\1*\2", text)


def paren_before_digit(text: str) -> str:
    """)2 -> )*2"""
    return PAREN_DIGIT_REGEX.sub(r"\1*\2", text)


def digit_before_letter(text: str) -> str:
    """2x -> 2*x"""
    return DIGIT_LETTER_REGEX.sub(r"\1*\2", text)


def letter_before_digit(text: str) -> str:
    """x2 -> x*2"""
    return LETTER_DIGIT_REGEX.sub(r"\1*\2", text)


def paren_before_letter(text: str) -> str:
    """)x -> )*x"""
    return PAREN_LETTER_REGEX.sub(r"\1*\2", text)


def rewrite_sqrt(text: str) -> str:
    """√16 -> sqrt(16), √(4+5) -> sqrt((4+5)).

    The parenthesized form stops at the first ')', so a nested argument such
    as √(1+(2+3)) is cut at the inner closing parenthesis.
    """
    return SQRT_UNICODE_REGEX.sub(lambda m: f"sqrt({m.group(1)})", text)


REWRITE_RULES: tuple[RewriteRule, ...] = (
    expand_constants,
    digit_before_paren,
    paren_before_digit,
    digit_before_letter,
    letter_before_digit,
    paren_before_letter,
    rewrite_sqrt,
)


def normalize(raw: str) -> str:
    """Preprocess buffer text into an expression the evaluator can parse.

    Args:
        raw: Text as typed on the keypad (e.g. "2π", "√(4+5)K")

    Returns:
        Normalized expression string (e.g. "2*(3.14...)")
    """
    text = raw
    for rule in REWRITE_RULES:
        text = rule(text)
    logger.debug(f"Normalized {raw!r} -> {text!r}")
    return text
