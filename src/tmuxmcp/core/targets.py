"""Target resolution

Turns a partially-qualified tmux target into a fully-qualified one, using the
ambient pane to fill in whatever the caller left out.

Accepted shapes:
- "1"        bare index
- "5.1"      window.pane
- "API:5"    session:window
- "API:5.1"  session:window.pane

A bare index means a pane for pane-level operations and a window for
window-level operations; callers say which with TargetScope.
"""

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from tmuxmcp import config
from tmuxmcp.core.context import AmbientContext
from tmuxmcp.errors import NotInTmuxError, TargetError

logger = logging.getLogger(__name__)

SESSION_SEP = ":"
PANE_SEP = "."

# Formats expanded against the ambient pane
AMBIENT_SESSION_FORMAT = "#{session_name}"
AMBIENT_WINDOW_FORMAT = "#{session_name}:#{window_index}"
AMBIENT_PANE_FORMAT = "#{session_name}:#{window_index}.#{pane_index}"

# (pane_id, format) -> expanded format, e.g. TmuxClient.display_message
AmbientQuery = Callable[[str, str], Awaitable[str]]


class TargetScope(Enum):
    """What a target must ultimately name."""

    PANE = "pane"
    WINDOW = "window"


def is_fully_qualified(target: str) -> bool:
    """True if target carries its own session prefix."""
    return SESSION_SEP in target


def has_pane(target: str) -> bool:
    """True if a session-qualified target names a pane ("API:5.1")."""
    _, _, window_part = target.partition(SESSION_SEP)
    return PANE_SEP in window_part


async def query_ambient(
    context: AmbientContext, query: AmbientQuery, fmt: str, reason: str
) -> str:
    """Expand fmt in the context of the ambient pane.

    Args:
        context: Ambient context
        query: Capability that asks tmux to expand a format for a pane
        fmt: tmux format string
        reason: Start of the error message when there is no ambient pane

    Raises:
        NotInTmuxError: If the server is not running inside a pane
    """
    if context.pane_id is None:
        raise NotInTmuxError(f"{reason} and not running inside tmux ({config.PANE_ENV_VAR} not set)")
    return await query(context.pane_id, fmt)


async def resolve_target(
    raw: str | None,
    context: AmbientContext,
    query: AmbientQuery,
    scope: TargetScope,
) -> str:
    """Resolve a raw target to session:window[.pane].

    Args:
        raw: Target as given by the caller; None or blank means "no target"
        context: Ambient context
        query: Ambient lookup capability
        scope: PANE if the operation needs a single pane, WINDOW otherwise

    Returns:
        Fully-qualified target

    Raises:
        TargetError: PANE scope got a session-qualified target without a pane
        NotInTmuxError: An ambient lookup was needed without an ambient pane
    """
    target = (raw or "").strip()

    if not target:
        if scope is TargetScope.PANE:
            resolved = await query_ambient(context, query, AMBIENT_PANE_FORMAT, "No target specified")
        else:
            resolved = await query_ambient(context, query, AMBIENT_WINDOW_FORMAT, "No target specified")
        logger.debug(f"Defaulted {scope.value} target to {resolved}")
        return resolved

    if is_fully_qualified(target):
        if scope is TargetScope.PANE and not has_pane(target):
            raise TargetError(
                f"Target '{target}' does not name a pane: expected session:window.pane "
                f"(e.g. 'API:5.1'); use get_window_contents to read a whole window"
            )
        return target

    reason = f"Target '{target}' has no session prefix"

    if scope is TargetScope.WINDOW or PANE_SEP in target:
        session = await query_ambient(context, query, AMBIENT_SESSION_FORMAT, reason)
        resolved = f"{session}{SESSION_SEP}{target}"
    else:
        window = await query_ambient(context, query, AMBIENT_WINDOW_FORMAT, reason)
        resolved = f"{window}{PANE_SEP}{target}"

    logger.debug(f"Resolved {scope.value} target {target!r} -> {resolved}")
    return resolved
