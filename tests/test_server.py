"""Tests for the MCP server wiring"""

import logging
import re
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tmuxmcp import server
from tmuxmcp.core.context import AmbientContext
from tmuxmcp.models import GetPaneContentsRequest, ListWindowsRequest
from tmuxmcp.operations import TmuxOperations
from tmuxmcp.telemetry import metrics


def make_ctx(operations) -> MagicMock:
    ctx = MagicMock()
    ctx.request_context.lifespan_context = {"operations": operations}
    return ctx


class TestTools:
    """Tool registration and delegation"""

    @pytest.mark.asyncio
    async def test_registers_six_tools(self):
        tools = await server.mcp.list_tools()
        assert {tool.name for tool in tools} == {
            "list_sessions",
            "list_windows",
            "get_current_session",
            "get_current_window",
            "get_pane_contents",
            "get_window_contents",
        }

    @pytest.mark.asyncio
    async def test_list_windows_delegates(self):
        operations = MagicMock()
        operations.list_windows = AsyncMock(return_value="API:0  editor  1 pane")
        request = ListWindowsRequest(session="API")

        result = await server.list_windows(make_ctx(operations), request)

        assert result == "API:0  editor  1 pane"
        operations.list_windows.assert_awaited_once_with(request)

    @pytest.mark.asyncio
    async def test_get_pane_contents_delegates(self):
        operations = MagicMock()
        operations.get_pane_contents = AsyncMock(return_value="content\n")

        result = await server.get_pane_contents(make_ctx(operations), GetPaneContentsRequest(target="API:0.1"))

        assert result == "content\n"

    @pytest.mark.asyncio
    async def test_current_session_delegates(self):
        operations = MagicMock()
        operations.get_current_session = AsyncMock(return_value="Current session: API (window 0: editor)")

        assert await server.get_current_session(make_ctx(operations)) == "Current session: API (window 0: editor)"


class TestLifespan:
    """Startup wiring"""

    def test_build_operations_with_context(self):
        operations = server.build_operations(AmbientContext(pane_id="%4"))
        assert isinstance(operations, TmuxOperations)
        assert operations.context.pane_id == "%4"

    @pytest.mark.asyncio
    async def test_lifespan_reads_ambient_pane(self, monkeypatch):
        monkeypatch.setenv("TMUX_PANE", "%9")

        with patch("tmuxmcp.server.configure_logging") as mock_logging:
            async with server.tmux_lifespan(server.mcp) as state:
                operations = state["operations"]

        mock_logging.assert_called_once()
        assert operations.context.pane_id == "%9"

    @pytest.mark.asyncio
    async def test_lifespan_outside_tmux(self, monkeypatch):
        monkeypatch.delenv("TMUX_PANE", raising=False)

        with patch("tmuxmcp.server.configure_logging"):
            async with server.tmux_lifespan(server.mcp) as state:
                assert state["operations"].context.inside_tmux is False

    @pytest.mark.asyncio
    async def test_shutdown_logs_tmux_usage(self, monkeypatch, caplog):
        monkeypatch.delenv("TMUX_PANE", raising=False)
        caplog.set_level(logging.DEBUG, logger="tmuxmcp.server")

        with patch("tmuxmcp.server.configure_logging"):
            async with server.tmux_lifespan(server.mcp):
                metrics.inc("tmux.commands", {"subcommand": "list-sessions"})
                metrics.inc("tmux.errors", {"subcommand": "list-sessions"})

        assert (
            "tmux usage: tmux.commands{subcommand=list-sessions}=1, tmux.errors{subcommand=list-sessions}=1"
            in caplog.messages
        )
        assert caplog.messages[-1] == "tmux MCP server stopped"


class TestPackaging:
    """Dependency declarations"""

    def test_mcp_pinned_below_2(self):
        """FastMCP lives at mcp.server.fastmcp only in the 1.x line"""
        pyproject = (Path(__file__).parent.parent / "pyproject.toml").read_text()
        pin = re.search(r'"mcp([^"]*)"', pyproject)
        assert pin is not None
        assert "<2" in pin.group(1)
