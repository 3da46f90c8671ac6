"""
Board-level operations on ranked standings.

Discounts are attached by rank after ranking, and inline edits from the
page are applied here as pure updates: every function returns new
objects and leaves its inputs untouched.
"""

from dataclasses import replace

from leaderboard.config import DISCOUNTS
from leaderboard.exceptions import EditError
from leaderboard.ingestion.text_parser import parse_score_tokens
from leaderboard.models import FieldKind, FieldRef, GameState, HeaderField, PlayerRecord
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def attach_discounts(players: list[PlayerRecord], discounts: tuple[str, ...] = DISCOUNTS) -> list[PlayerRecord]:
    """
    Attach next-game discounts to the first ranked entries.

    Discounts follow sorted index, not position labels, so a tie for
    first still gives the second tied player the second discount.
    """
    return [
        replace(p, discount=discounts[i] if i < len(discounts) else None)
        for i, p in enumerate(players)
    ]


def apply_edit(players: list[PlayerRecord], row: int, field: FieldRef, value: str) -> list[PlayerRecord]:
    """
    Replace one scalar of one player.

    Edits never re-rank: the board shows exactly what was typed until the
    next text change recomputes the standings.

    Args:
        players: Current standings
        row: 0-based index into players
        field: Which scalar to replace
        value: New text; blank keeps the current value

    Returns:
        New list of players with the edit applied

    Raises:
        EditError: If the row, score column or discount does not exist
        NumberFormatError: If a score edit is not a number
    """
    if not 0 <= row < len(players):
        raise EditError(f"No player at row {row}")

    player = players[row]
    value = value.strip()

    if field.kind is FieldKind.NAME:
        if value:
            updated = replace(player, name=value, base_name=value)
        else:
            updated = player
    elif field.kind is FieldKind.POSITION:
        updated = replace(player, position=value or player.position)
    elif field.kind is FieldKind.DISCOUNT:
        if player.discount is None:
            raise EditError(f"{player.name} has no discount to edit")
        updated = replace(player, discount=value.lstrip("-") or player.discount)
    else:
        if field.index >= len(player.scores):
            raise EditError(f"{player.name} has no {field.label}")
        scores = list(player.scores)
        if value:
            parsed = parse_score_tokens(value)
            if len(parsed) != 1:
                raise EditError(f"Expected one number for {field.label}, got {len(parsed)}")
            scores[field.index] = parsed[0]
        updated = replace(player, scores=scores)

    logger.debug(f"Edited {field.label} of row {row}")
    return players[:row] + [updated] + players[row + 1:]


def apply_header_edit(state: GameState, field: HeaderField, value: str) -> GameState:
    """Replace title, date or footnote; blank keeps the current text."""
    current = getattr(state, field.value)
    return replace(state, **{field.value: value.strip() or current})
