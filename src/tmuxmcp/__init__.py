"""tmuxmcp - tmux sessions, windows and panes for MCP agents."""

__version__ = "0.1.0"
