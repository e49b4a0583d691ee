"""Binary search tree of users ordered by username."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from socialnet.models import User


@dataclass
class _Node:
    user: User
    left: _Node | None = None
    right: _Node | None = None


class UserBST:
    """Users kept in username order. A username already present is ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, user: User) -> bool:
        """Add user; return False if the username is already in the tree."""
        if self._root is None:
            self._root = _Node(user)
            self._size += 1
            return True
        node = self._root
        while True:
            if user.username < node.user.username:
                if node.left is None:
                    node.left = _Node(user)
                    break
                node = node.left
            elif user.username > node.user.username:
                if node.right is None:
                    node.right = _Node(user)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def search(self, username: str) -> User | None:
        """Return the user with this username, or None."""
        node = self._root
        while node is not None:
            if username == node.user.username:
                return node.user
            node = node.left if username < node.user.username else node.right
        return None

    def in_order(self) -> Iterator[User]:
        """Yield the users in ascending username order."""
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.user
            node = node.right

    def render(self) -> str:
        """List every user with their city, or say the tree is empty."""
        if self._root is None:
            return "The tree is empty."
        return "\n".join(
            f"Username: {user.username}, City: {user.city}" for user in self.in_order()
        )

    def __iter__(self) -> Iterator[User]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self.search(username) is not None