"""
Opt-in selection of contributors taking part in search and export.
"""

from typing import Iterable, Iterator, List, Optional, Set


class SelectionSet:
    """Ordered subset of the available owner identifiers.

    Iteration follows the order of the available owners, so export text
    lists contributors in the same order they were loaded. Identifiers that
    are not available cannot be selected.
    """

    def __init__(self, available: Iterable[str], selected: Optional[Iterable[str]] = None):
        self._available: List[str] = list(dict.fromkeys(available))
        if selected is None:
            self._selected: Set[str] = set(self._available)
        else:
            self._selected = {owner for owner in selected if owner in self._available}

    @property
    def available(self) -> List[str]:
        return self._available.copy()

    def is_selected(self, owner: str) -> bool:
        return owner in self._selected

    def select(self, owner: str) -> bool:
        """Select `owner`. Returns False if it is not available."""
        if owner not in self._available:
            return False
        self._selected.add(owner)
        return True

    def deselect(self, owner: str) -> None:
        self._selected.discard(owner)

    def toggle(self, owner: str) -> bool:
        """Flip the selection state of `owner` and return the new state."""
        if owner in self._selected:
            self._selected.remove(owner)
            return False
        return self.select(owner)

    def select_all(self) -> None:
        self._selected = set(self._available)

    def select_none(self) -> None:
        self._selected = set()

    def invert(self) -> None:
        self._selected = {owner for owner in self._available if owner not in self._selected}

    def __contains__(self, owner: object) -> bool:
        return owner in self._selected

    def __iter__(self) -> Iterator[str]:
        return (owner for owner in self._available if owner in self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self)!r})"
