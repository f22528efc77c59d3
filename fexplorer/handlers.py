"""Running shell commands typed into the command box."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class HandlerMsg:
    """Result of one command: its trimmed input, its output, or the error it raised."""

    input: str
    msg: str = ""
    err: Exception | None = None


def handle_cmd(command: str) -> HandlerMsg:
    """Run a command through `sh -c` and capture its standard output."""
    command = command.strip()
    if not command:
        return HandlerMsg(input=command)
    try:
        result = subprocess.run(
            ["sh", "-c", command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        return HandlerMsg(input=command, err=exc)
    return HandlerMsg(
        input=command, msg=result.stdout.decode("utf-8", errors="replace")
    )