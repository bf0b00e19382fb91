"""Request records for the tmux operations."""

from pydantic import BaseModel, Field

from tmuxmcp import config

_TARGET_HELP = (
    "Target in tmux format: \"session:window.pane\" (e.g. \"API:5.1\"). "
    "The session may be omitted (\"5.1\") to use the current session."
)


class ListSessionsRequest(BaseModel):
    """Parameters for list_sessions"""

    verbose: bool = Field(
        default=False,
        description="Also list every window of each session and every pane of each window.",
    )


class ListWindowsRequest(BaseModel):
    """Parameters for list_windows"""

    session: str | None = Field(
        default=None,
        description="Optional session name to filter by. If omitted, lists windows from all sessions.",
    )
    verbose: bool = Field(default=False, description="Also list the panes of each window.")


class GetPaneContentsRequest(BaseModel):
    """Parameters for get_pane_contents"""

    target: str | None = Field(
        default=None,
        description=(
            _TARGET_HELP + " A bare number (\"1\") is a pane index in the current window. "
            "If omitted, reads the pane this server runs in."
        ),
    )
    scroll_back_lines: int = Field(
        default=config.DEFAULT_SCROLL_BACK_LINES,
        ge=0,
        description="Number of lines of scrollback history to include. 0 means visible area only.",
    )


class GetWindowContentsRequest(BaseModel):
    """Parameters for get_window_contents"""

    target: str | None = Field(
        default=None,
        description=(
            "Window in tmux format: \"session:window\" (e.g. \"API:5\"). A bare number "
            "(\"5\") is a window index in the current session. If omitted, defaults "
            "to the current window."
        ),
    )
    scroll_back_lines: int = Field(
        default=config.DEFAULT_SCROLL_BACK_LINES,
        ge=0,
        description="Number of lines of scrollback history to include per pane. 0 means visible area only.",
    )
