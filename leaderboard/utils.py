"""
Shared utilities for the tournament leaderboard.

This module provides common functions and regex patterns used across
multiple modules to avoid code duplication.
"""

import logging
import math
import re

from leaderboard.config import DATE_PREFIX, SCORE_DISPLAY_DECIMALS
from leaderboard.exceptions import InputTooLargeError

# --- Shared Regex Patterns for Leaderboard Parsing ---
# Ordinal prefix: "3. " or "3 " at the start of a line
ORDINAL_RE = re.compile(r"^\d+\.?\s*")

# Name/score boundary: whitespace followed by a digit or minus sign
BOUNDARY_RE = re.compile(r"\s(?=[-\d])")

# Date line: "Дата: Класика 04.02.25" (prefix is matched literally)
DATE_LINE_RE = re.compile(r"^\s*" + re.escape(DATE_PREFIX) + r"\s*(.*?)\s*$")

# Score tokens keep digits, separators and sign only
SCORE_STRIP_RE = re.compile(r"[^\d,.\-]")

# Operand of an explicit "-" token keeps digits and separators only
NEG_STRIP_RE = re.compile(r"[^\d,.]")

# Tokens worth tokenizing: at least one digit or a minus sign
SCORE_TOKEN_RE = re.compile(r"[\d\-]")


def strip_ordinal(line: str) -> str:
    """Remove a leading "N." / "N " ordinal prefix."""
    return ORDINAL_RE.sub("", line, count=1)


def strip_comment(line: str) -> str:
    """Drop a trailing "= ..." annotation."""
    return line.split("=", 1)[0]


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Formatting ---
def format_score(value: float, decimals: int = SCORE_DISPLAY_DECIMALS) -> str:
    """Display form of a score or total, e.g. 3.9999999999999996 -> "4.0"."""
    text = f"{value:.{decimals}f}"
    # "-0.0" reads as a typo on the board
    if float(text) == 0:
        text = f"{0:.{decimals}f}"
    return text


def format_number(value: float) -> str:
    """
    Shortest text that parses back to exactly the same float.

    Integral values drop the trailing ".0" so canonical text reads like
    hand-typed input ("1 0 1.4" rather than "1.0 0.0 1.4").
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


# --- Validation ---
def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in characters

    Raises:
        InputTooLargeError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise InputTooLargeError(
            f"Input too large: {len(text):,} characters. "
            f"Maximum allowed: {max_size:,} characters"
        )


__all__ = [
    # Logging
    'setup_logging',
    # Formatting
    'format_score',
    'format_number',
    # Validation
    'validate_input_size',
    # Leaderboard parsing
    'ORDINAL_RE',
    'BOUNDARY_RE',
    'DATE_LINE_RE',
    'SCORE_STRIP_RE',
    'NEG_STRIP_RE',
    'SCORE_TOKEN_RE',
    'strip_ordinal',
    'strip_comment',
]
