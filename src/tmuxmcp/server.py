"""tmuxmcp MCP server - exposes tmux topology and pane contents over stdio"""

import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from mcp.server.fastmcp import Context, FastMCP

from tmuxmcp import config
from tmuxmcp.adapters.tmux import TmuxClient
from tmuxmcp.core.context import AmbientContext
from tmuxmcp.models import (
    GetPaneContentsRequest,
    GetWindowContentsRequest,
    ListSessionsRequest,
    ListWindowsRequest,
)
from tmuxmcp.operations import TmuxOperations
from tmuxmcp.telemetry import configure_logging, get_logger, metrics

logger = get_logger(__name__)


def build_operations(context: AmbientContext | None = None) -> TmuxOperations:
    """Wire the client and ambient context into TmuxOperations."""
    if context is None:
        context = AmbientContext.from_env()
    client = TmuxClient(socket_path=config.TMUX_SOCKET_PATH)
    return TmuxOperations(client, context)


@asynccontextmanager
async def tmux_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Set up logging and the operations shared by every request.

    Args:
        server: The FastMCP server instance

    Yields:
        Lifespan context with the TmuxOperations instance
    """
    configure_logging(config.LOG_LEVEL)
    operations = build_operations()
    if operations.context.inside_tmux:
        logger.info(f"Starting tmux MCP server in pane {operations.context.pane_id}")
    else:
        logger.info(f"Starting tmux MCP server outside tmux ({config.PANE_ENV_VAR} not set)")

    try:
        yield {"operations": operations}
    finally:
        logger.debug(f"tmux usage: {metrics.summary()}")
        logger.info("tmux MCP server stopped")


mcp = FastMCP(
    name=config.SERVER_NAME,
    instructions=config.SERVER_INSTRUCTIONS,
    lifespan=tmux_lifespan,
)


def _operations(ctx: Context) -> TmuxOperations:
    return ctx.request_context.lifespan_context["operations"]


@mcp.tool()
async def list_sessions(ctx: Context, request: ListSessionsRequest | None = None) -> str:
    """List all tmux sessions with their state and window count.

    With verbose, also lists every window and pane of each session.
    """
    return await _operations(ctx).list_sessions(request)


@mcp.tool()
async def list_windows(ctx: Context, request: ListWindowsRequest | None = None) -> str:
    """List tmux windows. Optionally filter by session name.

    The window this server runs in is marked "<-- current".
    """
    return await _operations(ctx).list_windows(request)


@mcp.tool()
async def get_current_session(ctx: Context) -> str:
    """Get the current tmux session name and window that this MCP server is running in."""
    return await _operations(ctx).get_current_session()


@mcp.tool()
async def get_current_window(ctx: Context) -> str:
    """Get the current tmux window index and name that this MCP server is running in."""
    return await _operations(ctx).get_current_window()


@mcp.tool()
async def get_pane_contents(ctx: Context, request: GetPaneContentsRequest | None = None) -> str:
    """Get the contents of one tmux pane, including scrollback history.

    If target is omitted, reads the pane this server runs in.
    """
    return await _operations(ctx).get_pane_contents(request)


@mcp.tool()
async def get_window_contents(ctx: Context, request: GetWindowContentsRequest | None = None) -> str:
    """Get the contents of every pane in a tmux window, including scrollback history.

    If target is omitted, defaults to the current window.
    """
    return await _operations(ctx).get_window_contents(request)


def main():
    """Run the MCP server on stdio."""
    try:
        mcp.run()
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)


if __name__ == "__main__":
    main()
