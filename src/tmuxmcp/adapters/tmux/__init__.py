"""Tmux query layer."""

from .client import SubprocessRunner, TmuxClient
from .models import PaneInfo, SessionRow, WindowRow

__all__ = ["PaneInfo", "SessionRow", "SubprocessRunner", "TmuxClient", "WindowRow"]
