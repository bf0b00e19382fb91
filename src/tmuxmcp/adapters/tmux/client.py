"""Tmux client for subprocess-based tmux interaction."""

import asyncio
import logging

from tmuxmcp import config
from tmuxmcp.adapters.base import CommandRunner
from tmuxmcp.errors import TmuxCommandError
from tmuxmcp.telemetry import metrics

from .models import (
    PANE_FORMAT,
    SESSION_FORMAT,
    WINDOW_FORMAT,
    PaneInfo,
    SessionRow,
    WindowRow,
    parse_panes,
    parse_sessions,
    parse_windows,
)

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """CommandRunner that spawns the tmux binary.

    Each call starts one process, pipes stdout/stderr and waits for it to
    exit. There is no timeout; tmux is assumed to answer quickly.
    """

    def __init__(self, binary: str = "tmux", socket_path: str | None = None):
        """Initialize SubprocessRunner.

        Args:
            binary: tmux executable name or path
            socket_path: Optional tmux socket path. If None, uses default socket.
        """
        self._binary = binary
        self._socket_path = socket_path

    def command(self, *args: str) -> list[str]:
        """Full argv for a tmux invocation."""
        cmd = [self._binary]
        if self._socket_path:
            cmd.extend(["-S", self._socket_path])
        cmd.extend(args)
        return cmd

    async def __call__(self, *args: str) -> str:
        """Execute a tmux command.

        Args:
            *args: Command arguments (e.g., "list-windows", "-a", "-F", "...")

        Returns:
            Command stdout, decoded as UTF-8 with invalid bytes replaced.

        Raises:
            TmuxCommandError: "Failed to run tmux: ..." if the process cannot be
                spawned, "tmux error: <stderr>" on a non-zero exit status.
        """
        cmd = self.command(*args)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            raise TmuxCommandError(f"Failed to run tmux: {e}") from e

        if proc.returncode != 0:
            raise TmuxCommandError(f"tmux error: {stderr.decode('utf-8', errors='replace')}")

        return stdout.decode("utf-8", errors="replace")


class TmuxClient:
    """Client for querying tmux.

    Provides async methods for:
    - Listing sessions, windows and panes
    - Expanding format strings against a pane (display-message)
    - Capturing pane content with scrollback

    Every method issues exactly one tmux invocation. Failures surface as
    TmuxCommandError.
    """

    def __init__(self, runner: CommandRunner | None = None, socket_path: str | None = None):
        """Initialize TmuxClient.

        Args:
            runner: Command runner. Defaults to a SubprocessRunner for config.TMUX_BINARY.
            socket_path: Optional tmux socket path, used by the default runner.
        """
        self._socket_path = socket_path
        self._runner = runner or SubprocessRunner(config.TMUX_BINARY, socket_path)

    async def run(self, *args: str) -> str:
        """Execute a tmux command through the runner.

        Args:
            *args: Command arguments

        Returns:
            Command stdout

        Raises:
            TmuxCommandError: If the command could not be run or failed
        """
        subcommand = args[0] if args else ""
        metrics.inc("tmux.commands", {"subcommand": subcommand})
        try:
            return await self._runner(*args)
        except TmuxCommandError as e:
            metrics.inc("tmux.errors", {"subcommand": subcommand})
            logger.warning(f"tmux {subcommand} failed: {str(e).strip()}")
            raise

    async def display_message(self, target: str, fmt: str) -> str:
        """Expand a format string in the context of a target.

        Args:
            target: Pane/window target or pane id (e.g., "%47")
            fmt: tmux format (e.g., "#{session_name}:#{window_index}")

        Returns:
            The expansion with surrounding whitespace stripped.
        """
        output = await self.run("display-message", "-t", target, "-p", fmt)
        return output.strip()

    async def list_sessions(self) -> list[SessionRow]:
        """List all tmux sessions.

        Returns:
            SessionRow per session, in tmux order. Malformed lines are skipped.
        """
        output = await self.run("list-sessions", "-F", SESSION_FORMAT)
        return parse_sessions(output)

    async def list_windows(self, session: str | None = None) -> list[WindowRow]:
        """List windows of one session, or of all sessions.

        Args:
            session: Session name to filter by. If None, lists all windows.

        Returns:
            WindowRow per window, in tmux order.
        """
        if session is not None:
            output = await self.run("list-windows", "-t", f"{session}:", "-F", WINDOW_FORMAT)
        else:
            output = await self.run("list-windows", "-a", "-F", WINDOW_FORMAT)
        return parse_windows(output)

    async def list_panes(self, target: str) -> list[PaneInfo]:
        """List panes of a window.

        Args:
            target: Window target (e.g., "API:5")

        Returns:
            PaneInfo per pane, in pane index order.
        """
        output = await self.run("list-panes", "-t", target, "-F", PANE_FORMAT)
        return parse_panes(output)

    async def capture_pane(self, target: str, scroll_back: int) -> str:
        """Capture content from a pane.

        Args:
            target: Pane target (e.g., "API:5.1")
            scroll_back: Lines of history to include; 0 captures the visible area only.

        Returns:
            Pane content string
        """
        # -p: print to stdout
        # -J: join wrapped lines
        # -S: start line (negative = into history)
        start_line = f"-{scroll_back}" if scroll_back > 0 else "0"
        return await self.run("capture-pane", "-p", "-J", "-t", target, "-S", start_line)
