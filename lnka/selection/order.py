"""Ordered selection bookkeeping.

Tracks which names are selected and the order they were selected in. A
name -> position index sits next to the ordered list so removal finds its
slot directly; every mutation keeps the two in lockstep.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SelectionOrder:
    """Selected names in first-selected to last-selected order."""

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._order: list[str] = []
        self._positions: dict[str, int] = {}
        for name in initial:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __bool__(self) -> bool:
        return bool(self._order)

    def names(self) -> list[str]:
        """Return a copy of the selection order."""
        return list(self._order)

    def add(self, name: str) -> bool:
        """Append ``name``; return ``False`` when it was already selected."""
        if name in self._positions:
            return False
        self._positions[name] = len(self._order)
        self._order.append(name)
        return True

    def discard(self, name: str) -> bool:
        """Remove ``name``; return ``False`` when it was not selected.

        Names after the removed slot move up by one, so their indexes shift too.
        """
        idx = self._positions.pop(name, None)
        if idx is None:
            return False
        del self._order[idx]
        for shifted in range(idx, len(self._order)):
            self._positions[self._order[shifted]] = shifted
        return True

    def toggle(self, name: str) -> bool:
        """Flip membership of ``name`` and return whether it is now selected."""
        if self.discard(name):
            return False
        self.add(name)
        return True
