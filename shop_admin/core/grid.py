from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from .columns import ColumnSpec
from .exceptions import DuplicateRowIdError
from .filtering import MatchFn, filter_rows
from .pagination import DEFAULT_PAGE_SIZE, PageState, paginate, total_pages
from .selection import SelectionSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class GridOptions(Generic[T]):
    """
    Construction parameters of a DataGrid.

    Fields:

    - columns: ordered column specs; drive display order and the default search scope
    - identity: row -> unique, stable id string
    - on_create: called by the Create action
    - on_delete_selected: called with the selection snapshot by Delete Selected
    - matches: overrides the default case-insensitive substring search
    - search_placeholder / title: display only
    - initial_page_size: seed page size
    - enable_pagination: when False the whole filtered set is visible
    """
    columns: Sequence[ColumnSpec]
    identity: Callable[[T], str]
    on_create: Optional[Callable[[], None]] = None
    on_delete_selected: Optional[Callable[[List[str]], None]] = None
    matches: Optional[MatchFn] = None
    search_placeholder: str = "Search..."
    title: str = "Data Table"
    initial_page_size: int = DEFAULT_PAGE_SIZE
    enable_pagination: bool = False


@dataclass
class GridState:
    """
    Serialisable engine state: search term, page pointer and selection.

    Dash callbacks are stateless on the server, so this round-trips through
    a dcc.Store between events.
    """
    term: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    selected: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "term": self.term,
            "page": self.page,
            "page_size": self.page_size,
            "selected": list(self.selected),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GridState:
        return cls(
            term=str(data.get("term") or ""),
            page=int(data.get("page", 1)),
            page_size=int(data.get("page_size", DEFAULT_PAGE_SIZE)),
            selected=[str(x) for x in data.get("selected", [])],
        )


class DataGrid(Generic[T]):
    """
    Client-side data grid: search filter, optional pagination and
    multi-select over a caller-owned dataset.

    The dataset is never mutated. Create/delete are only forwarded to the
    caller through `GridOptions.on_create` / `on_delete_selected`; removing
    rows is the caller's job, followed by `set_rows`.
    """

    def __init__(
        self,
        rows: Sequence[T],
        options: GridOptions[T],
        state: Optional[GridState] = None,
    ):
        self.options = options
        self._rows: Sequence[T] = rows
        self._check_unique_ids(rows)

        state = state or GridState(page_size=options.initial_page_size)
        self._term = state.term
        self._pages = PageState(page=state.page, page_size=state.page_size)
        self._selection = SelectionSet(state.selected)

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    @property
    def rows(self) -> Sequence[T]:
        return self._rows

    def set_rows(self, rows: Sequence[T]) -> None:
        """Swap in the caller's updated dataset. Selection and paging are kept."""
        self._check_unique_ids(rows)
        self._rows = rows

    def _check_unique_ids(self, rows: Sequence[T]) -> None:
        seen = set()
        for row in rows:
            row_id = self.options.identity(row)
            if row_id in seen:
                logger.error(
                    "Duplicate row identity in grid dataset",
                    extra={"grid_title": self.options.title, "row_id": row_id},
                )
                raise DuplicateRowIdError(row_id)
            seen.add(row_id)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def term(self) -> str:
        return self._term

    @property
    def page(self) -> int:
        return self._pages.page

    @property
    def page_size(self) -> int:
        return self._pages.page_size

    def filtered_rows(self) -> Sequence[T]:
        return filter_rows(self._rows, self._term, self.options.matches, self.options.columns)

    def visible_rows(self) -> Sequence[T]:
        return paginate(
            self.filtered_rows(),
            self._pages.page,
            self._pages.page_size,
            self.options.enable_pagination,
        )

    def visible_ids(self) -> List[str]:
        return [self.options.identity(row) for row in self.visible_rows()]

    @property
    def total_pages(self) -> int:
        if not self.options.enable_pagination:
            return 1
        return total_pages(len(self.filtered_rows()), self._pages.page_size)

    # ------------------------------------------------------------------
    # Filter + paging transitions
    # ------------------------------------------------------------------

    def set_search(self, term: str) -> None:
        # page pointer unchanged; only a page-size change resets it
        self._term = term or ""

    def previous_page(self) -> None:
        self._pages.previous_page()

    def next_page(self) -> None:
        self._pages.next_page(self.total_pages)

    def set_page_size(self, page_size: int) -> None:
        self._pages.set_page_size(page_size)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def is_selected(self, row_id: str) -> bool:
        return self._selection.is_selected(row_id)

    def toggle_row(self, row_id: str) -> None:
        self._selection.toggle_row(row_id)

    @property
    def all_visible_selected(self) -> bool:
        return self._selection.all_visible_selected(self.visible_ids())

    def toggle_select_all(self) -> None:
        self._selection.toggle_select_all_visible(self.visible_ids())

    def selected_ids(self) -> List[str]:
        return self._selection.selected_ids()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def create(self) -> None:
        if self.options.on_create is not None:
            self.options.on_create()

    def delete_selected(self) -> bool:
        """
        Hand the selection snapshot to the caller's delete handler, then clear it.

        Returns True when the handler was invoked.
        """
        if self.options.on_delete_selected is None or len(self._selection) == 0:
            return False

        snapshot = self._selection.selected_ids()
        logger.info(
            "Deleting selected rows",
            extra={"grid_title": self.options.title, "n_selected": len(snapshot)},
        )
        self.options.on_delete_selected(snapshot)
        self._selection.clear()
        return True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> GridState:
        return GridState(
            term=self._term,
            page=self._pages.page,
            page_size=self._pages.page_size,
            selected=self._selection.selected_ids(),
        )
