"""
Data models shared by the parser, the standings builder and the page.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class PlayerRecord:
    """One leaderboard row: display name, score columns and rank labels."""
    name: str
    scores: list[float] = field(default_factory=list)
    base_name: str = ""
    position: str | None = None
    discount: str | None = None

    def __post_init__(self):
        if not self.base_name:
            self.base_name = self.name

    @property
    def total(self) -> float:
        return sum(self.scores)


@dataclass
class GameState:
    """Header and footer text shown around the standings."""
    title: str = ""
    date: str = ""
    footnote: str = ""

    def __post_init__(self):
        self.title = self.title.strip()
        self.date = self.date.strip()
        self.footnote = self.footnote.strip()


class HeaderField(Enum):
    TITLE = "title"
    DATE = "date"
    FOOTNOTE = "footnote"


class FieldKind(Enum):
    NAME = "name"
    POSITION = "position"
    DISCOUNT = "discount"
    SCORE_AT = "score_at"


@dataclass(frozen=True)
class FieldRef:
    """
    Address of one editable scalar within a PlayerRecord.

    Only SCORE_AT carries an index (0-based score column).
    """
    kind: FieldKind
    index: int | None = None

    def __post_init__(self):
        if self.kind is FieldKind.SCORE_AT:
            if self.index is None or self.index < 0:
                raise ValueError("SCORE_AT requires a non-negative column index")
        elif self.index is not None:
            raise ValueError(f"{self.kind.value} does not take a column index")

    @classmethod
    def score_at(cls, index: int) -> "FieldRef":
        return cls(FieldKind.SCORE_AT, index)

    @property
    def label(self) -> str:
        if self.kind is FieldKind.SCORE_AT:
            return f"score {self.index + 1}"
        return self.kind.value


NAME = FieldRef(FieldKind.NAME)
POSITION = FieldRef(FieldKind.POSITION)
DISCOUNT = FieldRef(FieldKind.DISCOUNT)
