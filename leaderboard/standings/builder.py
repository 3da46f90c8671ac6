"""
Standings Builder

Ranks candidate records by total score and labels tie groups.

Pipeline:
- Pad every score vector with trailing zeros to the longest one
- Stable sort by total, descending (input order kept among ties)
- Group adjacent equal totals and label each group with its rank span,
  e.g. a 3-way tie starting at rank 2 is "2-4" for all three

Usage:
    from leaderboard.standings import build_standings
"""

import math
from dataclasses import replace

import pandas as pd

from leaderboard.config import TIE_TOLERANCE
from leaderboard.exceptions import EmptyInputError
from leaderboard.models import PlayerRecord
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def pad_scores(scores: list[float], length: int) -> list[float]:
    """Right-pad a score vector with 0.0 up to length."""
    return list(scores) + [0.0] * (length - len(scores))


def totals_equal(a: float, b: float, tolerance: float = TIE_TOLERANCE) -> bool:
    """Tie predicate shared by grouping and validation."""
    if tolerance <= 0:
        return a == b
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tolerance)


def group_ties(players: list[PlayerRecord], tolerance: float = TIE_TOLERANCE) -> list[list[PlayerRecord]]:
    """
    Split a sorted sequence into maximal runs of equal totals.

    Each player is compared with its predecessor, so with a positive
    tolerance a run can drift further than the tolerance end to end.
    """
    groups = []
    for player in players:
        if groups and totals_equal(groups[-1][-1].total, player.total, tolerance):
            groups[-1].append(player)
        else:
            groups.append([player])
    return groups


def format_position(start: int, size: int) -> str:
    """Position label for a group starting at 1-based rank start."""
    if size == 1:
        return str(start)
    return f"{start}-{start + size - 1}"


def build_standings(candidates: list[PlayerRecord], tolerance: float = TIE_TOLERANCE) -> list[PlayerRecord]:
    """
    Rank candidate records and assign tie-aware position labels.

    Args:
        candidates: Parsed records in input line order
        tolerance: Absolute distance under which totals tie (0 = exact)

    Returns:
        New PlayerRecord objects in ranked order; candidates are not modified

    Raises:
        EmptyInputError: If there are no candidates
    """
    if not candidates:
        raise EmptyInputError("No player lines to rank")

    max_len = max(len(p.scores) for p in candidates)
    padded = [replace(p, scores=pad_scores(p.scores, max_len), position=None) for p in candidates]

    # sorted() is stable, so equal totals keep input order
    ranked = sorted(padded, key=lambda p: p.total, reverse=True)

    rank = 1
    groups = group_ties(ranked, tolerance)
    for group in groups:
        label = format_position(rank, len(group))
        for player in group:
            player.position = label
        rank += len(group)

    tied = sum(1 for g in groups if len(g) > 1)
    logger.debug(f"Ranked {len(ranked)} players over {max_len} columns, {tied} tie groups")

    return ranked


def standings_to_dataframe(players: list[PlayerRecord]) -> pd.DataFrame:
    """
    Tabulate standings for display and export.

    Args:
        players: Ranked records (equal-length score vectors)

    Returns:
        DataFrame with columns: position, player_name, score_1..score_n,
        total, discount
    """
    n_cols = max((len(p.scores) for p in players), default=0)
    score_cols = [f"score_{i + 1}" for i in range(n_cols)]

    rows = []
    for p in players:
        row = {'position': p.position, 'player_name': p.name}
        row.update(zip(score_cols, pad_scores(p.scores, n_cols)))
        row['total'] = p.total
        row['discount'] = p.discount
        rows.append(row)

    return pd.DataFrame(rows, columns=['position', 'player_name', *score_cols, 'total', 'discount'])
