"""tmuxmcp exceptions.

These are raised inside the package and converted to plain text at the
operation boundary (see operations.TmuxOperations); callers of an operation
only ever see a string.
"""


class TmuxMcpError(Exception):
    """Base exception; str(error) is the text returned to the caller."""

    pass


class TmuxCommandError(TmuxMcpError):
    """tmux could not be spawned or exited with a non-zero status."""

    pass


class TargetError(TmuxMcpError):
    """A target string is malformed for the operation it was passed to."""

    pass


class NotInTmuxError(TmuxMcpError):
    """An ambient lookup was needed but the server is not running inside a pane."""

    pass
