"""
Leaderboard Line Parser

Turns one free-form line of pasted text into a candidate PlayerRecord.
Lines are tolerated with ordinal prefixes ("3. "), trailing "= ..."
annotations, stray symbols around scores, comma decimal separators and
explicit "-" sign tokens ("- 1,5" reads as -1.5).

Usage:
    from leaderboard.ingestion.text_parser import parse_line
    record = parse_line("5. Жан 1,4 0 1,2 0 = коментар")
"""

import math

from leaderboard.config import NAME_CORRECTIONS, NAME_DECORATIONS
from leaderboard.exceptions import NumberFormatError
from leaderboard.models import PlayerRecord
from leaderboard.utils import (
    setup_logging,
    BOUNDARY_RE,
    DATE_LINE_RE,
    NEG_STRIP_RE,
    SCORE_STRIP_RE,
    SCORE_TOKEN_RE,
    strip_comment,
    strip_ordinal,
)

# --- Module Logger ---
logger = setup_logging(__name__)


def split_date_line(lines: list[str]) -> tuple[str | None, list[str]]:
    """
    Consume an optional leading "Дата: ..." line.

    Only the first non-blank line is inspected; a date line anywhere else
    is treated as an ordinary (and usually rejected) player line.

    Args:
        lines: Raw text lines

    Returns:
        Tuple of (date text or None, remaining lines)
    """
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        m_date = DATE_LINE_RE.match(line)
        if m_date:
            return m_date.group(1), lines[:i] + lines[i + 1:]
        break
    return None, list(lines)


def normalize_name(raw_name: str) -> tuple[str, str]:
    """
    Canonicalize a known misspelling, then attach the decorative symbol.

    Args:
        raw_name: Trimmed name as typed

    Returns:
        Tuple of (display name, canonical undecorated name)
    """
    corrected = NAME_CORRECTIONS.get(raw_name.lower(), raw_name)
    symbol = NAME_DECORATIONS.get(corrected.lower())
    if symbol:
        return f"{corrected} {symbol}", corrected
    return corrected, corrected


def _to_float(text: str, token: str) -> float:
    try:
        value = float(text.replace(",", "."))
    except ValueError as e:
        raise NumberFormatError(f"Cannot read score token {token!r}") from e
    if not math.isfinite(value):
        raise NumberFormatError(f"Score token {token!r} is out of range")
    return value


def parse_score_tokens(score_text: str) -> list[float]:
    """
    Read the score columns of one line, left to right.

    Args:
        score_text: Everything after the name/score boundary

    Returns:
        List of scores in column order

    Raises:
        NumberFormatError: If a token cannot be read as a number, or a
            lone "-" has no operand
    """
    # A lone "+" has no digit or minus, so the filter drops it
    tokens = [t for t in score_text.split() if SCORE_TOKEN_RE.search(t)]
    scores = []
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token == "-":
            if i + 1 >= len(tokens):
                raise NumberFormatError("Dangling '-' without a number after it")
            operand = tokens[i + 1]
            scores.append(-_to_float(NEG_STRIP_RE.sub("", operand), operand))
            i += 2
            continue

        scores.append(_to_float(SCORE_STRIP_RE.sub("", token), token))
        i += 1

    return scores


def parse_line(line: str) -> PlayerRecord | None:
    """
    Parse one pasted line into a candidate record.

    Args:
        line: One line of the leaderboard text (date line excluded)

    Returns:
        PlayerRecord without position, or None if the line has no name
        or no scores

    Raises:
        NumberFormatError: If a score token is malformed
    """
    text = strip_ordinal(line.strip())
    text = strip_comment(text).strip()

    m = BOUNDARY_RE.search(text)
    if m:
        raw_name = text[:m.start()].strip()
        score_text = text[m.end():]
    else:
        raw_name, score_text = text, ""

    if not raw_name:
        logger.debug(f"Rejected line without a name: {line!r}")
        return None

    scores = parse_score_tokens(score_text)
    if not scores:
        logger.debug(f"Rejected line without scores: {line!r}")
        return None

    display_name, base_name = normalize_name(raw_name)
    return PlayerRecord(name=display_name, scores=scores, base_name=base_name)


def parse_lines(lines: list[str]) -> list[PlayerRecord]:
    """Parse every non-blank line, keeping input order and dropping rejects."""
    candidates = []
    for line in lines:
        if not line.strip():
            continue
        record = parse_line(line)
        if record is not None:
            candidates.append(record)
    return candidates
