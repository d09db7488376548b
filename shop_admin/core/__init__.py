"""
Core domain layer: the data-grid engine (filter, pagination, selection,
actions) and the exceptions shared by the rest of the app
"""

from .columns import ColumnSpec
from .grid import DataGrid, GridOptions, GridState
from .pagination import PageState
from .selection import SelectionSet

__all__ = ["ColumnSpec", "DataGrid", "GridOptions", "GridState", "PageState", "SelectionSet"]
