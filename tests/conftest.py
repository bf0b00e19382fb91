"""Pytest configuration and shared tmux doubles"""

import pytest

from tmuxmcp.adapters.tmux import TmuxClient
from tmuxmcp.errors import TmuxCommandError
from tmuxmcp.telemetry import metrics


class FakeTmux:
    """CommandRunner double answering by longest matching argument prefix.

    Usage:
        tmux = FakeTmux()
        tmux.on("list-sessions", output="API\\t3\\t1\\t0\\n")
        tmux.on("capture-pane", "-p", "-J", "-t", "API:0.1", error="tmux error: boom\\n")
    """

    def __init__(self):
        self.responses: dict[tuple[str, ...], str | TmuxCommandError] = {}
        self.calls: list[tuple[str, ...]] = []

    def on(self, *prefix: str, output: str = "", error: str | None = None) -> None:
        self.responses[prefix] = TmuxCommandError(error) if error is not None else output

    def calls_to(self, subcommand: str) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] == subcommand]

    async def __call__(self, *args: str) -> str:
        self.calls.append(args)
        for prefix in sorted(self.responses, key=len, reverse=True):
            if args[: len(prefix)] == prefix:
                response = self.responses[prefix]
                if isinstance(response, TmuxCommandError):
                    raise response
                return response
        raise TmuxCommandError(f"tmux error: unexpected command {args}\n")


@pytest.fixture
def fake_tmux():
    return FakeTmux()


@pytest.fixture
def client(fake_tmux):
    return TmuxClient(runner=fake_tmux)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Keep the global metrics instance isolated between tests"""
    metrics.reset()
    yield
    metrics.reset()
