"""Plain-text table rendering

Sessions, windows and panes are rendered as rows of cells, aligned into
columns separated by two spaces. Rows may have different lengths.
"""

from tmuxmcp import config

ELLIPSIS = "..."
COLUMN_SEP = "  "


def truncate(text: str, max_chars: int) -> str:
    """Shorten text to at most max_chars characters.

    Lengths count characters, not bytes, so multi-byte glyphs are never split.

    Args:
        text: Text to shorten
        max_chars: Maximum length of the result

    Returns:
        text unchanged if it fits, otherwise its first max_chars - 3
        characters followed by "...". For max_chars < 4 the prefix is empty.
    """
    if len(text) <= max_chars:
        return text
    keep = max(max_chars - len(ELLIPSIS), 0)
    return text[:keep] + ELLIPSIS


def align_columns(rows: list[list[str]]) -> list[str]:
    """Align rows of cells into columns.

    Every cell except the last one of its row is padded to the widest cell
    of its column; the last cell is never padded so lines carry no trailing
    whitespace. Column widths only consider rows that have that column.

    Args:
        rows: Table rows, possibly ragged

    Returns:
        One rendered line per row
    """
    widths: list[int] = []
    for row in rows:
        for i, cell in enumerate(row):
            if i == len(widths):
                widths.append(len(cell))
            elif len(cell) > widths[i]:
                widths[i] = len(cell)

    lines = []
    for row in rows:
        if not row:
            lines.append("")
            continue
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append(COLUMN_SEP.join(cells))
    return lines


def pluralize(count: int, noun: str) -> str:
    """"1 window", "3 windows", "0 windows"."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def marker_cells(active: bool, current: bool) -> list[str]:
    """Trailing marker cells for an active and/or current row.

    A current row that is not active keeps an empty placeholder in the
    active column so the current marker lines up with other rows.
    """
    cells = []
    if active or current:
        cells.append(config.ACTIVE_MARKER if active else "")
    if current:
        cells.append(config.CURRENT_MARKER)
    return cells
