"""Directory listings split into sub-directories, plain files and executables."""

from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass, field
from enum import Enum

log = logging.getLogger(__name__)

CACHE_TIMEOUT = 5.0

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class TreeError(Exception):
    """Raised when a directory cannot be listed."""


class EntryKind(Enum):
    """The three groups a listing is split into."""

    DIR = "dir"
    FILE = "file"
    EXEC = "exec"


@dataclass(frozen=True)
class _Style:
    color: str
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def render(self, text: str) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        codes.append(f"38;5;{self.color}")
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


_STYLES = {
    (EntryKind.DIR, False): _Style("12", bold=True),
    (EntryKind.DIR, True): _Style("12", bold=True, underline=True),
    (EntryKind.FILE, False): _Style("110"),
    (EntryKind.FILE, True): _Style("110", bold=True, underline=True),
    (EntryKind.EXEC, False): _Style("46", italic=True),
    (EntryKind.EXEC, True): _Style("46", italic=True, underline=True),
}

_BORDER_TEXT = _Style("12")


def render_entry(kind: EntryKind, name: str, selected: bool) -> str:
    """Colour a listing entry; the selected one is underlined."""
    return _STYLES[(kind, bool(selected))].render(name)


def _visible_width(text: str) -> str:
    return len(_ANSI.sub("", text))


def render_border(text: str) -> str:
    """Draw a rounded border around text with one blank line of top padding."""
    lines = text.split("\n")
    width = max(_visible_width(line) for line in lines)
    inner = width + 4
    out = ["╭" + "─" * inner + "╮", "│" + " " * inner + "│"]
    for line in lines:
        padded = line + " " * (width - _visible_width(line))
        out.append("│  " + _BORDER_TEXT.render(padded) + "  │")
    out.append("╰" + "─" * inner + "╯")
    return "\n".join(out)


def is_executable(path: str) -> bool:
    """True if any execute bit is set on the entry itself (links are not followed)."""
    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        log.error("%s", exc)
        return False
    return bool(mode & 0o111)


def _split_listing(path: str) -> tuple[list[str], list[str], list[str]]:
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    dirs: list[str] = []
    files: list[str] = []
    execs: list[str] = []
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            dirs.append(entry.name)
        elif is_executable(os.path.join(path, entry.name)):
            execs.append(entry.name)
        else:
            files.append(entry.name)
    return dirs, files, execs


def _join(*parts: str) -> str:
    joined = "/".join(p for p in parts if p)
    return os.path.normpath(joined) if joined else ""


@dataclass
class FileView:
    """One directory's entries, each group sorted by name."""

    name: str
    dirs: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    execs: list[str] = field(default_factory=list)

    def type_break(self) -> tuple[int, int, int]:
        """Indices where the dir, file and exec groups end in the combined list."""
        d = len(self.dirs)
        f = d + len(self.files)
        return d, f, f + len(self.execs)

    def expand(self, name: str) -> FileView:
        """List the sub-directory `name` of this view as an absolute path."""
        if not name:
            raise TreeError("Empty directory name provided")
        sub = _join(self.name, name)
        if not os.path.isabs(sub):
            try:
                current = os.getcwd()
            except OSError as exc:
                log.error("%s", exc)
                raise TreeError(f"Error getting current directory: {exc}") from exc
            sub = _join(current, sub)
        sub = os.path.normpath(sub)
        try:
            dirs, files, execs = _split_listing(sub)
        except OSError as exc:
            log.error("%s", exc)
            raise TreeError(f"Error reading directory {name}: {exc}") from exc
        return FileView(name=sub, dirs=dirs, files=files, execs=execs)


_cache: dict[str, tuple[FileView, float]] = {}


def clear_cache() -> None:
    """Forget every cached view."""
    _cache.clear()


def new_file_view(path: str) -> FileView:
    """List a directory, reusing a listing made less than five seconds ago."""
    cached = _cache.get(path)
    if cached is not None and time.monotonic() - cached[1] < CACHE_TIMEOUT:
        return cached[0]

    if not path:
        log.error("Empty path provided")
        raise TreeError("Empty path provided")

    path = os.path.normpath(path)
    try:
        os.stat(path)
    except OSError as exc:
        log.error("%s", exc)
        raise TreeError(f"Path not accessible: {exc}") from exc
    try:
        dirs, files, execs = _split_listing(path)
    except OSError as exc:
        log.error("%s", exc)
        raise TreeError(f"Error reading directory: {exc}") from exc

    view = FileView(name=path, dirs=dirs, files=files, execs=execs)
    _cache[path] = (view, time.monotonic())
    return view


def new_path(path: str) -> FileView:
    """List a directory without caching; it must hold at least one sub-directory."""
    try:
        dirs, files, execs = _split_listing(path)
    except OSError as exc:
        log.error("%s", exc)
        raise TreeError(str(exc)) from exc
    if not dirs:
        log.error("Failed to get directories: No directories found in root")
        raise TreeError("No directories found in root")
    return FileView(name="", dirs=dirs, files=files, execs=execs)