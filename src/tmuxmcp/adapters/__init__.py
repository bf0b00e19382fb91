"""Terminal adapters."""

from .base import CommandRunner

__all__ = ["CommandRunner"]
