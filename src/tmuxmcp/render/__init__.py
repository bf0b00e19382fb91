"""Text rendering for tmux listings."""

from .table import align_columns, marker_cells, pluralize, truncate

__all__ = ["align_columns", "marker_cells", "pluralize", "truncate"]
