"""Singly-linked FIFO queue and LIFO stack of tokens.

Each container owns its nodes. Removing a token unlinks its node, so a
token that has moved on is no longer reachable from where it came from.
"""

from typing import Iterator, Optional

from .types import Token


class _Node:
    __slots__ = ("token", "next")

    def __init__(self, token: Token):
        self.token = token
        self.next: Optional["_Node"] = None


class TokenQueue:
    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, tokens=()):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for t in tokens:
            self.insert(t)

    def insert(self, token: Token) -> None:
        """Append a token at the tail."""
        node = _Node(token)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self) -> Optional[Token]:
        """Remove and return the head token, or None if the queue is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.token

    def clear(self) -> None:
        while self.remove() is not None:
            pass

    def __iter__(self) -> Iterator[Token]:
        node = self._head
        while node is not None:
            yield node.token
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"TokenQueue({list(self)!r})"


class TokenStack:
    __slots__ = ("_top", "_size")

    def __init__(self):
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, token: Token) -> None:
        node = _Node(token)
        node.next = self._top
        self._top = node
        self._size += 1

    def pop(self) -> Optional[Token]:
        """Pop and return the top token, or None if the stack is empty."""
        node = self._top
        if node is None:
            return None
        self._top = node.next
        node.next = None
        self._size -= 1
        return node.token

    def peek(self) -> Optional[Token]:
        return self._top.token if self._top is not None else None

    def clear(self) -> None:
        while self.pop() is not None:
            pass

    def __iter__(self) -> Iterator[Token]:
        # top to bottom
        node = self._top
        while node is not None:
            yield node.token
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"TokenStack({list(self)!r})"
