"""tmuxmcp configuration

Settings are grouped as:
- Environment: where the ambient pane comes from
- tmux: binary and socket used for every invocation
- Capture: scrollback defaults
- Display: truncation limits for rendered tables
- Logging
- Server: MCP server identity
"""

import os

# === Environment ===
PANE_ENV_VAR = "TMUX_PANE"  # set by tmux in every pane, e.g. "%47"

# === tmux ===
TMUX_BINARY = os.environ.get("TMUXMCP_TMUX_BINARY", "tmux")
TMUX_SOCKET_PATH = os.environ.get("TMUXMCP_SOCKET") or None  # passed as -S when set

# === Capture ===
DEFAULT_SCROLL_BACK_LINES = 1000  # 0 = visible area only

# === Display ===
SESSION_NAME_MAX_CHARS = 30
WINDOW_NAME_MAX_CHARS = 30
COMMAND_MAX_CHARS = 40
CURRENT_MARKER = "<-- current"
ACTIVE_MARKER = "(active)"

# === Logging ===
LOG_LEVEL = os.environ.get("TMUXMCP_LOG_LEVEL", "INFO")

# === Server ===
SERVER_NAME = "tmux"
SERVER_INSTRUCTIONS = (
    "MCP server for interacting with tmux sessions, windows, and panes. "
    "Use list_sessions to discover sessions, list_windows to see windows, "
    "get_pane_contents to read one pane and get_window_contents to read every "
    "pane of a window, including scrollback history."
)
