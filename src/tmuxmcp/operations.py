"""tmux query operations

Each operation composes target resolution, tmux queries and table rendering
into one finished string. Errors never escape an operation: whatever goes
wrong is returned as text in place of the result.

Nested listings (verbose mode, window contents) query tmux one item at a time
and in order, since each query depends on the previous one's output. A failure
while expanding one item is shown in that item's place and the rest of the
listing continues.
"""

from tmuxmcp import config
from tmuxmcp.adapters.tmux import PaneInfo, SessionRow, TmuxClient, WindowRow
from tmuxmcp.adapters.tmux.models import parse_int
from tmuxmcp.core.context import AmbientContext
from tmuxmcp.core.targets import AMBIENT_WINDOW_FORMAT, TargetScope, resolve_target
from tmuxmcp.errors import TmuxCommandError, TmuxMcpError
from tmuxmcp.models import (
    GetPaneContentsRequest,
    GetWindowContentsRequest,
    ListSessionsRequest,
    ListWindowsRequest,
)
from tmuxmcp.render import align_columns, marker_cells, pluralize, truncate
from tmuxmcp.telemetry import get_logger

logger = get_logger(__name__)

INDENT = "  "

NOT_IN_TMUX = f"Not running inside tmux ({config.PANE_ENV_VAR} not set)"

CURRENT_SESSION_FORMAT = "#{session_name}\t#{window_index}\t#{window_name}"
CURRENT_WINDOW_FORMAT = "#{session_name}:#{window_index}\t#{window_name}\t#{window_panes}"


class TmuxOperations:
    """The six read-only operations exposed to agents.

    Args:
        client: tmux query client
        context: Ambient context; its pane id drives "current" markers and
            default targets
    """

    def __init__(self, client: TmuxClient, context: AmbientContext):
        self._client = client
        self._context = context

    @property
    def context(self) -> AmbientContext:
        return self._context

    # === Listings ===

    async def list_sessions(self, request: ListSessionsRequest | None = None) -> str:
        """List sessions, optionally as a session -> window -> pane tree."""
        request = request or ListSessionsRequest()
        logger.info(f"Listing sessions{' (verbose)' if request.verbose else ''}")

        try:
            sessions = await self._client.list_sessions()
        except TmuxMcpError as e:
            return str(e)

        headers = align_columns([self._session_cells(s) for s in sessions])
        if not request.verbose or not sessions:
            return "\n".join(headers)

        current_window = await self._current_window_target()
        lines = []
        for header, session in zip(headers, sessions):
            lines.append(header)
            lines.extend(await self._session_tree(session, current_window))
        return "\n".join(lines)

    async def list_windows(self, request: ListWindowsRequest | None = None) -> str:
        """List windows of one or all sessions, marking the current one."""
        request = request or ListWindowsRequest()
        logger.info(
            f"Listing windows (session={request.session or '*'}"
            f"{', verbose' if request.verbose else ''})"
        )

        try:
            windows = await self._client.list_windows(request.session)
        except TmuxMcpError as e:
            return str(e)

        current_window = await self._current_window_target()
        window_lines = align_columns(
            [self._window_cells(w, w.target, current_window) for w in windows]
        )
        if not request.verbose:
            return "\n".join(window_lines)

        lines = []
        for line, window in zip(window_lines, windows):
            lines.append(line)
            lines.extend(await self._pane_block(window, depth=1))
        return "\n".join(lines)

    # === Current context ===

    async def get_current_session(self) -> str:
        """Describe the session this server runs in."""
        if not self._context.inside_tmux:
            return NOT_IN_TMUX

        try:
            info = await self._client.display_message(self._context.pane_id, CURRENT_SESSION_FORMAT)
        except TmuxMcpError as e:
            return str(e)

        fields = info.split("\t")
        if len(fields) < 3:
            return info
        session, window_index, window_name = fields[:3]
        return f"Current session: {session} (window {window_index}: {window_name})"

    async def get_current_window(self) -> str:
        """Describe the window this server runs in."""
        if not self._context.inside_tmux:
            return NOT_IN_TMUX

        try:
            info = await self._client.display_message(self._context.pane_id, CURRENT_WINDOW_FORMAT)
        except TmuxMcpError as e:
            return str(e)

        fields = info.split("\t")
        if len(fields) < 3:
            return info
        target, window_name, panes = fields[:3]
        return f"Current window: {target} {window_name} ({pluralize(parse_int(panes), 'pane')})"

    # === Contents ===

    async def get_pane_contents(self, request: GetPaneContentsRequest | None = None) -> str:
        """Capture one pane, including scrollback."""
        request = request or GetPaneContentsRequest()

        try:
            target = await resolve_target(
                request.target, self._context, self._client.display_message, TargetScope.PANE
            )
        except TmuxMcpError as e:
            logger.warning(f"Cannot resolve pane target {request.target!r}: {e}")
            return str(e)

        logger.info(f"Capturing pane {target} ({request.scroll_back_lines} lines of scrollback)")
        return await self._capture(target, request.scroll_back_lines)

    async def get_window_contents(self, request: GetWindowContentsRequest | None = None) -> str:
        """Capture every pane of a window, one headed block per pane."""
        request = request or GetWindowContentsRequest()

        try:
            target = await resolve_target(
                request.target, self._context, self._client.display_message, TargetScope.WINDOW
            )
            panes = await self._client.list_panes(target)
        except TmuxMcpError as e:
            logger.warning(f"Cannot list panes of window {request.target!r}: {e}")
            return str(e)

        if not panes:
            logger.warning(f"list-panes returned no usable rows for window {target}")
            return f"No panes found in window {target}"

        logger.info(f"Capturing {len(panes)} panes of window {target}")
        parts = []
        for pane in panes:
            parts.append(f"=== Pane {pane.target} ({pane.metadata}) ===\n")
            parts.append(await self._capture(pane.target, request.scroll_back_lines))
            parts.append("\n")
        return "".join(parts)

    # === Helpers ===

    async def _capture(self, target: str, scroll_back: int) -> str:
        """Capture a pane; a failure becomes an inline error line."""
        try:
            return await self._client.capture_pane(target, scroll_back)
        except TmuxCommandError as e:
            return f"Error capturing {target}: {str(e).rstrip()}\n"

    async def _current_window_target(self) -> str | None:
        """The ambient "session:window", or None if it cannot be determined."""
        if not self._context.inside_tmux:
            return None
        try:
            return await self._client.display_message(self._context.pane_id, AMBIENT_WINDOW_FORMAT)
        except TmuxCommandError:
            logger.debug("Could not resolve current window; listing without marker")
            return None

    async def _session_tree(self, session: SessionRow, current_window: str | None) -> list[str]:
        """Window lines of a session, each followed by its pane block."""
        try:
            windows = await self._client.list_windows(session.name)
        except TmuxCommandError as e:
            return [INDENT + str(e).rstrip()]

        window_lines = align_columns(
            [self._window_cells(w, f"{w.index}:", current_window) for w in windows]
        )
        lines = []
        for line, window in zip(window_lines, windows):
            lines.append(INDENT + line)
            lines.extend(await self._pane_block(window, depth=2))
        return lines

    async def _pane_block(self, window: WindowRow, depth: int) -> list[str]:
        """Pane lines of one window, aligned among themselves only."""
        prefix = INDENT * depth
        try:
            panes = await self._client.list_panes(window.target)
        except TmuxCommandError as e:
            return [prefix + str(e).rstrip()]
        return [prefix + line for line in align_columns([self._pane_cells(p) for p in panes])]

    def _session_cells(self, session: SessionRow) -> list[str]:
        return [
            truncate(session.name, config.SESSION_NAME_MAX_CHARS),
            f"({session.state})",
            pluralize(session.windows, "window"),
        ]

    def _window_cells(self, window: WindowRow, label: str, current_window: str | None) -> list[str]:
        return [
            label,
            truncate(window.name, config.WINDOW_NAME_MAX_CHARS),
            pluralize(window.panes, "pane"),
            *marker_cells(window.active, window.target == current_window),
        ]

    def _pane_cells(self, pane: PaneInfo) -> list[str]:
        return [
            f"{pane.index}:",
            pane.dimensions,
            truncate(pane.command, config.COMMAND_MAX_CHARS),
            *marker_cells(pane.active, pane.pane_id == self._context.pane_id),
        ]
