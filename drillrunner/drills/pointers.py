"""Drills on shared and recursive data: cons lists, copy-on-write, threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None marks the end."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a cons list holding 1 and 2."""
    return Cons(1, Cons(2))


class Cow:
    """A sequence that is borrowed until it must be changed.

    Borrowed data is copied into an owned list on the first call to to_mut;
    owned data is changed in place.
    """

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self.data: Sequence[int] = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> MutableSequence[int]:
        """Return mutable data, copying borrowed data first."""
        if not self._owned:
            self.data = list(self.data)
            self._owned = True
        return self.data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only when a change is needed."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, per offset, the numbers n with n % workers == offset, in threads."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


class _Sender(Protocol):
    def put(self, item: int) -> None: ...


@dataclass
class Queue:
    """Values split into two halves, sent by two producers."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    send_interval: float = 1.0


def send_tx(queue: Queue, channel: _Sender) -> list[threading.Thread]:
    """Start two threads sending each half into the channel; return them."""

    def produce(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(queue.send_interval)

    threads = [
        threading.Thread(target=produce, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads