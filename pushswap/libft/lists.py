"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A chain of ``Node`` objects reached from ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` before the current head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` (and whatever follows it) after the last node."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def delete_one(self, node: Node, delete: Deleter = None) -> None:
        """Unlink ``node`` and hand its content to ``delete``.

        Raises ``ValueError`` when the node is not part of this list.
        """
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not in the list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        node.next = None
        if delete is not None:
            delete(node.content)

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result