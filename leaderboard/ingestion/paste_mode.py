"""
Paste-Mode Standings Recompute

This module turns a whole pasted leaderboard text into ranked standings.
Every text change is a full recompute: either the whole pipeline succeeds
and replaces the standings, or it fails and the previous standings stay.

Usage:
    python -m leaderboard.ingestion.paste_mode

    Programmatic usage:
        from leaderboard.ingestion.paste_mode import BoardSession
        session = BoardSession()
        if not session.apply_text(text):
            print(session.last_error)
"""

import sys

from leaderboard.board import apply_edit, apply_header_edit, attach_discounts
from leaderboard.config import (
    DATE_PREFIX,
    DEFAULT_DATE,
    DEFAULT_FOOTNOTE,
    DEFAULT_TITLE,
    MAX_INPUT_SIZE,
    PARSE_ERROR_MESSAGE,
)
from leaderboard.exceptions import EmptyInputError, StandingsError
from leaderboard.ingestion.text_parser import parse_lines, split_date_line
from leaderboard.models import FieldRef, GameState, HeaderField, PlayerRecord
from leaderboard.standings.builder import build_standings
from leaderboard.utils import format_number, format_score, setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)


def parse_leaderboard_text(text: str) -> tuple[str | None, list[PlayerRecord]]:
    """
    Parse pasted leaderboard text into a date and candidate records.

    Args:
        text: Raw pasted text, optionally starting with a "Дата: ..." line

    Returns:
        Tuple of (date text or None, candidates in input order)

    Raises:
        InputTooLargeError: If the text exceeds MAX_INPUT_SIZE
        EmptyInputError: If no player lines remain or none of them parse
        NumberFormatError: If any score token is malformed
    """
    validate_input_size(text, MAX_INPUT_SIZE)

    date_found, lines = split_date_line(text.splitlines())
    lines = [line.strip() for line in lines if line.strip()]

    if not lines:
        raise EmptyInputError("No player lines found in text")

    candidates = parse_lines(lines)
    if not candidates:
        raise EmptyInputError(f"None of {len(lines)} lines is a player entry")

    return date_found, candidates


def serialize_standings(players: list[PlayerRecord], date: str | None = None) -> str:
    """
    Rebuild canonical input text from standings.

    Names are written undecorated and in canonical spelling, so parsing
    the result gives back the same scores and base names.
    """
    lines = []
    if date:
        lines.append(f"{DATE_PREFIX} {date}")
    for p in players:
        lines.append(" ".join([p.base_name, *(format_number(s) for s in p.scores)]))
    return "\n".join(lines)


def ingest_leaderboard_text(text: str) -> dict:
    """
    Main entry point for one recompute.

    Args:
        text: Raw pasted leaderboard text

    Returns:
        Dictionary with:
            - success: bool
            - date: date text from the "Дата:" line, or None
            - players: ranked PlayerRecord list (empty on failure)
            - rows: number of ranked players
            - error: None, or the generic parse error message
    """
    result = {
        'success': False,
        'date': None,
        'players': [],
        'rows': 0,
        'error': None,
    }

    try:
        date_found, candidates = parse_leaderboard_text(text)
        players = build_standings(candidates)
    except StandingsError as e:
        logger.warning(f"Recompute rejected: {e}")
        result['error'] = PARSE_ERROR_MESSAGE
        return result

    result['date'] = date_found
    result['players'] = attach_discounts(players)
    result['rows'] = len(players)
    result['success'] = True
    logger.info(f"Ranked {len(players)} players" + (f" for {date_found}" if date_found else ""))
    return result


class BoardSession:
    """
    Owner of the raw-text, standings and header snapshots.

    Every mutator is all-or-nothing: on failure it sets last_error and
    leaves all snapshots exactly as they were.
    """

    def __init__(self, title: str = DEFAULT_TITLE, date: str = DEFAULT_DATE,
                 footnote: str = DEFAULT_FOOTNOTE):
        self.text = ""
        self.players: list[PlayerRecord] = []
        self.state = GameState(title=title, date=date, footnote=footnote)
        self.last_error: str | None = None

    def apply_text(self, text: str) -> bool:
        """Recompute from text; returns False and keeps prior state on failure."""
        result = ingest_leaderboard_text(text)
        if not result['success']:
            self.last_error = result['error']
            return False

        self.text = text
        self.players = result['players']
        if result['date'] is not None:
            self.state = apply_header_edit(self.state, HeaderField.DATE, result['date'])
        self.last_error = None
        return True

    def edit_player(self, row: int, field: FieldRef, value: str) -> bool:
        """Apply one inline player edit; returns False and keeps state on failure."""
        try:
            self.players = apply_edit(self.players, row, field, value)
        except StandingsError as e:
            logger.warning(f"Edit rejected: {e}")
            self.last_error = str(e)
            return False
        self.last_error = None
        return True

    def edit_header(self, field: HeaderField, value: str) -> None:
        self.state = apply_header_edit(self.state, field, value)

    def canonical_text(self) -> str:
        return serialize_standings(self.players, self.state.date or None)


def main():
    """CLI interface: read pasted text from stdin and print the standings."""
    text = sys.stdin.read()

    result = ingest_leaderboard_text(text)
    if not result['success']:
        print(f"\nPARSE ERROR: {result['error']}")
        sys.exit(1)

    print("=" * 60)
    if result['date']:
        print(f"{DATE_PREFIX} {result['date']}")
    for p in result['players']:
        discount = f"  -{p.discount}" if p.discount else ""
        print(f"{p.position:>6}  {p.name:<24} {format_score(p.total):>6}{discount}")
    print("=" * 60)


if __name__ == "__main__":
    main()
