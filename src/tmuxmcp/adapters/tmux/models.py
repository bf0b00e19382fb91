"""Typed rows parsed from tmux list-* output.

Each format below is tab-delimited; tab avoids conflicts with colons and dots
in names, paths and titles. Parsing is lenient on purpose so that drift in
tmux's output across versions degrades a listing instead of breaking it:
- lines with fewer fields than the format declares are skipped
- numeric fields that fail to parse become 0
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

_FIELD_SEP = "\t"

SESSION_FORMAT = _FIELD_SEP.join([
    "#{session_name}", "#{session_windows}", "#{session_attached}", "#{session_created}",
])

WINDOW_FORMAT = _FIELD_SEP.join([
    "#{session_name}", "#{window_index}", "#{window_name}", "#{window_panes}", "#{window_active}",
])

# The first four fields (target, title, WxH, active) are the pane metadata line
PANE_FORMAT = _FIELD_SEP.join([
    "#{session_name}:#{window_index}.#{pane_index}", "#{pane_title}",
    "#{pane_width}x#{pane_height}", "#{?pane_active,active,}",
    "#{pane_current_command}", "#{pane_id}",
])

SESSION_FIELDS = 4
WINDOW_FIELDS = 5
PANE_FIELDS = 6
PANE_METADATA_FIELDS = 4

T = TypeVar("T")


def parse_int(value: str, default: int = 0) -> int:
    """Parse an integer field, falling back to default on any failure."""
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return default


def parse_flag(value: str) -> bool:
    """tmux flags are "1"/"0"; counts (e.g. session_attached) are truthy when > 0."""
    return parse_int(value) > 0


@dataclass
class SessionRow:
    name: str
    windows: int
    attached: bool
    created: int = 0

    @classmethod
    def from_fields(cls, fields: list[str]) -> "SessionRow":
        return cls(
            name=fields[0],
            windows=parse_int(fields[1]),
            attached=parse_flag(fields[2]),
            created=parse_int(fields[3]),
        )

    @property
    def state(self) -> str:
        return "attached" if self.attached else "detached"


@dataclass
class WindowRow:
    session: str
    index: int
    name: str
    panes: int
    active: bool

    @classmethod
    def from_fields(cls, fields: list[str]) -> "WindowRow":
        return cls(
            session=fields[0],
            index=parse_int(fields[1]),
            name=fields[2],
            panes=parse_int(fields[3]),
            active=parse_flag(fields[4]),
        )

    @property
    def target(self) -> str:
        """Fully-qualified window target, e.g. "API:5"."""
        return f"{self.session}:{self.index}"


@dataclass
class PaneInfo:
    """One pane of a window.

    Attributes:
        session: Session name
        window_index: Index of the containing window
        index: Pane index within the window
        title: Pane title
        width, height: Size in cells
        active: Whether this is the window's active pane
        command: Current foreground command
        pane_id: Stable tmux pane id (e.g. "%47")
        metadata: Target, title, size and active flag as tmux printed them
    """

    session: str
    window_index: int
    index: int
    title: str
    width: int
    height: int
    active: bool
    command: str
    pane_id: str
    metadata: str = ""

    @classmethod
    def from_fields(cls, fields: list[str]) -> "PaneInfo":
        session, _, window_pane = fields[0].rpartition(":")
        window, _, pane = window_pane.partition(".")
        width, _, height = fields[2].partition("x")
        return cls(
            session=session,
            window_index=parse_int(window),
            index=parse_int(pane),
            title=fields[1],
            width=parse_int(width),
            height=parse_int(height),
            active=fields[3] == "active",
            command=fields[4],
            pane_id=fields[5],
            metadata=_FIELD_SEP.join(fields[:PANE_METADATA_FIELDS]),
        )

    @property
    def target(self) -> str:
        """Fully-qualified pane target, e.g. "API:5.1"."""
        return f"{self.session}:{self.window_index}.{self.index}"

    @property
    def dimensions(self) -> str:
        return f"{self.width}x{self.height}"


def parse_rows(output: str, min_fields: int, build: Callable[[list[str]], T]) -> list[T]:
    """Split tmux output into typed rows.

    Args:
        output: Raw stdout of a tmux list-* command
        min_fields: Lines with fewer tab-separated fields are skipped
        build: Row constructor taking the split fields

    Returns:
        Parsed rows in output order
    """
    rows = []
    for line in output.splitlines():
        if not line:
            continue
        fields = line.split(_FIELD_SEP)
        if len(fields) < min_fields:
            logger.debug(f"Skipping malformed tmux line ({len(fields)}/{min_fields} fields): {line!r}")
            continue
        rows.append(build(fields))
    return rows


def parse_sessions(output: str) -> list[SessionRow]:
    return parse_rows(output, SESSION_FIELDS, SessionRow.from_fields)


def parse_windows(output: str) -> list[WindowRow]:
    return parse_rows(output, WINDOW_FIELDS, WindowRow.from_fields)


def parse_panes(output: str) -> list[PaneInfo]:
    return parse_rows(output, PANE_FIELDS, PaneInfo.from_fields)
