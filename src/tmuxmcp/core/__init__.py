"""Core: ambient context and target resolution."""

from .context import AmbientContext
from .targets import TargetScope, resolve_target

__all__ = ["AmbientContext", "TargetScope", "resolve_target"]
