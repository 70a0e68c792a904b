"""A bounded stack and a queue built from two stacks."""

from __future__ import annotations


class MyStack:
    """Last-in first-out stack holding at most 100 integers."""

    CAPACITY = 100

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, x: int) -> None:
        if len(self._items) >= self.CAPACITY:
            raise IndexError("stack is full")
        self._items.append(x)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items


class MyQueue:
    """First-in first-out queue backed by two stacks."""

    def __init__(self) -> None:
        self._added: list[int] = []
        self._front: list[int] = []

    def _refill(self) -> None:
        if not self._front:
            while self._added:
                self._front.append(self._added.pop())

    def push(self, x: int) -> None:
        self._added.append(x)

    def pop(self) -> int:
        if self.empty():
            raise IndexError("pop from empty queue")
        self._refill()
        return self._front.pop()

    def peek(self) -> int:
        self._refill()
        if not self._front:
            raise IndexError("peek at empty queue")
        return self._front[-1]

    def empty(self) -> bool:
        return not self._front and not self._added