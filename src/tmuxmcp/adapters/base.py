"""Command runner interface

Everything that talks to tmux goes through a CommandRunner, so the query layer
can be exercised against a substitute without a tmux binary.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Run one tmux invocation.

    Usage:
        output = await runner("list-sessions", "-F", "#{session_name}")

    Implementations return decoded stdout and raise TmuxCommandError with the
    text to show the caller when the command cannot be run or fails.
    """

    async def __call__(self, *args: str) -> str: ...
