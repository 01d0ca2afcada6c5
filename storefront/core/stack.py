"""A minimal LIFO stack."""

from typing import Generic, TypeVar

from .errors import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()
