from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional


class SelectionSet:
    """
    Set of selected row identities.

    Membership is independent of the current filter and page: an id stays
    selected when its row scrolls off the page or is filtered out, until it
    is toggled off or the whole set is cleared after a delete.

    Backed by a dict so iteration follows selection order, which keeps the
    delete snapshot deterministic.
    """

    def __init__(self, ids: Optional[Iterable[str]] = None):
        self._ids: Dict[str, None] = dict.fromkeys(ids or ())

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return set(self._ids) == set(other._ids)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self._ids)!r})"

    def is_selected(self, row_id: str) -> bool:
        return row_id in self._ids

    def toggle_row(self, row_id: str) -> None:
        if row_id in self._ids:
            del self._ids[row_id]
        else:
            self._ids[row_id] = None

    def all_visible_selected(self, visible_ids: Iterable[str]) -> bool:
        """True only for a non-empty visible page whose ids are all selected."""
        visible = list(visible_ids)
        return len(visible) > 0 and all(row_id in self._ids for row_id in visible)

    def toggle_select_all_visible(self, visible_ids: Iterable[str]) -> None:
        """
        Header checkbox semantics, scoped to the visible page.

        If every visible id is selected, remove exactly those ids; otherwise
        add them. Ids outside the visible page are never touched.
        """
        visible = list(visible_ids)
        if self.all_visible_selected(visible):
            for row_id in visible:
                self._ids.pop(row_id, None)
        else:
            for row_id in visible:
                self._ids.setdefault(row_id, None)

    def selected_ids(self) -> List[str]:
        """Snapshot of the selection, in selection order."""
        return list(self._ids)

    def clear(self) -> None:
        self._ids.clear()
