"""Worked solutions to the drills, grouped by theme."""

__all__ = [
    "basics",
    "containers",
    "errors",
    "iteration",
    "messages",
    "pointers",
    "quizzes",
    "shipping",
    "traits",
]