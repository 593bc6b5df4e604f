"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from Node objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def delete_node(self, node: Node, delete: Deleter) -> None:
        """Unlink node from the list and pass its content to delete.

        Nothing happens when delete is None. Raises ValueError when node is
        not part of this list.
        """
        if delete is None:
            return
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not part of this list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        node.next = None
        delete(node.content)

    def clear(self, delete: Deleter) -> None:
        """Pass every content to delete, front to back, and empty the list.

        Nothing happens when delete is None.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            self.head = following
            delete(node.content)
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, front to back."""
        for node in self._nodes():
            f(node.content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> "LinkedList":
        """A new list of f applied to every content.

        If f raises, the contents already produced are passed to delete (when
        it is given) and the exception propagates.
        """
        if f is None:
            raise TypeError("map needs a function to apply")
        result = LinkedList()
        try:
            for node in self._nodes():
                result.push_back(f(node.content))
        except BaseException:
            if delete is not None:
                result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"