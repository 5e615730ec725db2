"""Bracket guard for the live input buffer."""

from __future__ import annotations


def accept(buffer: str, char: str) -> bool:
    """Return True if ``char`` may be appended to ``buffer``.

    A closing parenthesis is only accepted while the buffer has strictly more
    '(' than ')'. Every other character is accepted.
    """
    if char != ")":
        return True
    return buffer.count("(") > buffer.count(")")


def open_depth(buffer: str) -> int:
    """Number of '(' still waiting for a matching ')'."""
    return buffer.count("(") - buffer.count(")")
