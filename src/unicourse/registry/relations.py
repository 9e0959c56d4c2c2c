"""RelationIndex - Many-to-many relationship kept symmetric in both directions."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

L = TypeVar("L", bound=Hashable)
R = TypeVar("R", bound=Hashable)


class RelationIndex(Generic[L, R]):
    """Set of (left, right) pairs indexed from both sides.

    Both directions are updated together, so `rights_of(a)` contains `b`
    exactly when `lefts_of(b)` contains `a`. Listings keep insertion order.
    """

    def __init__(self) -> None:
        self._by_left: dict[L, dict[R, None]] = {}
        self._by_right: dict[R, dict[L, None]] = {}

    def add(self, left: L, right: R) -> bool:
        """Add a pair.

        Returns:
            False if the pair was already present, True otherwise.
        """
        if self.contains(left, right):
            return False
        self._by_left.setdefault(left, {})[right] = None
        self._by_right.setdefault(right, {})[left] = None
        return True

    def remove(self, left: L, right: R) -> bool:
        """Remove a pair.

        Returns:
            False if the pair was not present, True otherwise.
        """
        if not self.contains(left, right):
            return False
        del self._by_left[left][right]
        del self._by_right[right][left]
        return True

    def contains(self, left: L, right: R) -> bool:
        return right in self._by_left.get(left, {})

    def rights_of(self, left: L) -> list[R]:
        return list(self._by_left.get(left, {}))

    def lefts_of(self, right: R) -> list[L]:
        return list(self._by_right.get(right, {}))

    def count_rights(self, left: L) -> int:
        return len(self._by_left.get(left, {}))

    def count_lefts(self, right: R) -> int:
        return len(self._by_right.get(right, {}))

    def __len__(self) -> int:
        return sum(len(rights) for rights in self._by_left.values())
