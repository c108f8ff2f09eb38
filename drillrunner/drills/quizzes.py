"""Quiz drills: a string transformer and a report card."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Command(enum.Enum):
    """A transformation without arguments."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string ``count`` times."""

    count: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the card as one line of text."""
        grade = self.grade
        if isinstance(grade, float) and grade.is_integer():
            grade = int(grade)
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {grade}"