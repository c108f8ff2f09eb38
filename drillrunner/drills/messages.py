"""Message-processing drill: a state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to the given RGB triple."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Replace the current message text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask the state machine to stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """The current colour, position, message and quit flag."""

    color: tuple[int, int, int]
    position: Point
    quit: bool
    message: str

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                self.message = text
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")