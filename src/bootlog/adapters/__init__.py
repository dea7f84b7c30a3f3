"""Adapters connecting the sink pipeline to Rich and the stdlib logging facade."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .stdlib_bridge import SinkHandler, attach_to_root, detach_from_root

__all__ = ["RichConsoleAdapter", "SinkHandler", "attach_to_root", "detach_from_root"]
