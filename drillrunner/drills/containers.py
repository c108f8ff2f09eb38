"""Container drills: fruit baskets, score tables, vectors and options."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from drillrunner.drills.errors import _parse_int

ICECREAM_LEFT = 5
ICECREAM_DEADLINE = 10
_GOALS_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five fruits in total."""
    return {"banana": 2, "mango": 4, "apple": 4}


class Fruit(enum.Enum):
    """Kinds of fruit that can go into the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, in place.

    Fruit already present is left untouched.
    """
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goal totals of one team."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def add(self, scored: int, conceded: int) -> None:
        """Add one match's goals, keeping each total within 0..=255."""
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _GOALS_MAX or conceded_total > _GOALS_MAX:
            raise OverflowError(f"goal total of {self.name} exceeds {_GOALS_MAX}")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines.

    Raises ValueError for a malformed line or goal count.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_int(fields[2], bits=8, signed=False)
        goals_2 = _parse_int(fields[3], bits=8, signed=False)
        for name, scored, conceded in ((team_1, goals_1, goals_2), (team_2, goals_2, goals_1)):
            scores.setdefault(name, Team(name)).add(scored, conceded)
    return scores


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None once eaten."""
    if time_of_day <= ICECREAM_DEADLINE:
        return ICECREAM_LEFT
    return None