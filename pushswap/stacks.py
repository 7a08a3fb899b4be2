"""The two stacks of the puzzle and the eleven moves between them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Iterable, Iterator, TextIO


class Operation(str, Enum):
    """A move that can be applied to a pair of stacks."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


class Stack:
    """A sequence of integers ordered from top to bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def push(self, value: int) -> None:
        """Add a value below the current bottom."""
        self._items.append(value)

    def push_top(self, value: int) -> None:
        """Place a value on top."""
        self._items.appendleft(value)

    def pop_top(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap(self) -> bool:
        """Exchange the two top values; return whether anything moved."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True


class PushSwap:
    """Stacks ``a`` and ``b`` together with the log of moves applied to them.

    Every move that takes effect is recorded in ``operations`` and, when an
    output stream is given, written to it as one line.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.out = out
        self.operations: list[Operation] = []
        self._moves: dict[Operation, Callable[[], None]] = {
            Operation.PA: self.pa,
            Operation.PB: self.pb,
            Operation.SA: self.sa,
            Operation.SB: self.sb,
            Operation.SS: self.ss,
            Operation.RA: self.ra,
            Operation.RB: self.rb,
            Operation.RR: self.rr,
            Operation.RRA: self.rra,
            Operation.RRB: self.rrb,
            Operation.RRR: self.rrr,
        }

    def _emit(self, operation: Operation) -> None:
        self.operations.append(operation)
        if self.out is not None:
            self.out.write(f"{operation.value}\n")

    def apply(self, operation: Operation | str) -> None:
        """Apply a move given as an ``Operation`` or its name."""
        self._moves[Operation(operation)]()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.push_top(self.b.pop_top())
        self._emit(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.push_top(self.a.pop_top())
        self._emit(Operation.PB)

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        if self.a.swap():
            self._emit(Operation.SA)

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        if self.b.swap():
            self._emit(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.a.swap()
        self.b.swap()
        self._emit(Operation.SS)

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        if self.a.rotate():
            self._emit(Operation.RA)

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        if self.b.rotate():
            self._emit(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate()
        self.b.rotate()
        self._emit(Operation.RR)

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        if self.a.reverse_rotate():
            self._emit(Operation.RRA)

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        if self.b.reverse_rotate():
            self._emit(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit(Operation.RRR)