"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable, Optional

name = "bootlog"
title = "Process bootstrap with a write-once, Rich-rendered logging sink"
version = "1.0.0"
author = "bootlog maintainers"
shell_command = "bootlog"


def print_info(writer: Optional[Callable[[str], None]] = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Each emitted chunk ends with a newline so callers may join them directly;
    without a ``writer`` the banner goes to stdout.
    """

    if writer is None:

        def writer(text: str) -> None:
            print(text, end="")

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")


__all__ = ["author", "name", "print_info", "shell_command", "title", "version"]
