"""Ambient context - the pane this server process runs in."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tmuxmcp import config


@dataclass(frozen=True)
class AmbientContext:
    """Context captured once at startup and passed to every operation.

    Attributes:
        pane_id: tmux pane id (e.g. "%47") of the pane the server runs in,
            or None when the server was not started inside tmux.
    """

    pane_id: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AmbientContext":
        """Build the context from $TMUX_PANE.

        Args:
            environ: Environment mapping, defaults to os.environ

        Returns:
            AmbientContext; an unset or empty variable gives pane_id=None
        """
        if environ is None:
            environ = os.environ
        return cls(pane_id=environ.get(config.PANE_ENV_VAR) or None)

    @property
    def inside_tmux(self) -> bool:
        return self.pane_id is not None
