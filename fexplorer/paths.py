"""Directory browser pane: a cursor over a tree of expanded directory listings."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field

from fexplorer.tree import EntryKind, FileView, TreeError, new_file_view, render_border, render_entry

QUIT = "quit"
"""Returned by :meth:`Viewer.update` when the program should exit."""

MAX_FILE_SIZE = 10 * 1024 * 1024
TEMP_DIR = "/tmp"

_INSTRUCTIONS = (
    "use arrow keys to navigate\n"
    "use enter to open a directory\n"
    "use left/ESC to go back\n"
    "use Ctrl+C to exit.\n"
)


def _join(base: str, name: str) -> str:
    return os.path.normpath(os.path.join(base, name))


@dataclass(eq=False)
class FileViewNode:
    """A visited directory together with the sub-directories opened from it."""

    view: FileView
    name: str
    parent: FileViewNode | None = field(default=None, repr=False)
    children: list[FileViewNode] = field(default_factory=list, repr=False)


@dataclass(frozen=True)
class PortalMsg:
    """Asks the output pane to show a file: the path of a copy, or the error met."""

    content: str = ""
    err: Exception | None = None

    def __str__(self) -> str:
        return self.content


class Viewer:
    """Keyboard-driven browser over the directory tree rooted at `root`."""

    def __init__(self, root: str = "/") -> None:
        view = new_file_view(root)
        node = FileViewNode(view=view, name=view.name)
        self.cursor = 0
        self.root = node
        self.current = node

    def item_count(self) -> int:
        """Number of entries in the current directory."""
        view = self.current.view
        return len(view.dirs) + len(view.files) + len(view.execs)

    def update(self, key: str) -> PortalMsg | str | None:
        """Handle one key; returns a PortalMsg, QUIT, or None."""
        if key == "up":
            if self.cursor > 0:
                self.cursor -= 1
        elif key == "down":
            count = self.item_count()
            if count > 0 and self.cursor < count - 1:
                self.cursor += 1
        elif key == "enter":
            return self._open()
        elif key in ("left", "esc"):
            if self.current.parent is None:
                return QUIT
            self.current = self.current.parent
            self.cursor = 0
        elif key == "ctrl+c":
            return QUIT
        return None

    def _open(self) -> PortalMsg | None:
        view = self.current.view
        if self.cursor >= self.item_count():
            return None
        if self.cursor < len(view.dirs):
            self._enter_dir(view.dirs[self.cursor])
            return None
        file_index = self.cursor - len(view.dirs)
        if file_index < len(view.files):
            return self._copy_file(_join(self.current.name, view.files[file_index]))
        return None

    def _enter_dir(self, dir_name: str) -> None:
        target = _join(self.current.name, dir_name)
        try:
            new_view = new_file_view(target)
        except TreeError:
            return
        existing = next((c for c in self.current.children if c.name == target), None)
        if existing is None:
            existing = FileViewNode(view=new_view, name=target, parent=self.current)
            self.current.children.append(existing)
        self.current = existing
        self.cursor = 0

    @staticmethod
    def _copy_file(file_path: str) -> PortalMsg:
        try:
            size = os.stat(file_path).st_size
        except OSError as exc:
            return PortalMsg(err=exc)
        if size > MAX_FILE_SIZE:
            return PortalMsg(
                err=ValueError(
                    f"file too large ({size} bytes), maximum allowed is {MAX_FILE_SIZE} bytes"
                )
            )
        try:
            with open(file_path, "rb") as src:
                content = src.read()
            with tempfile.NamedTemporaryFile(
                dir=TEMP_DIR, prefix="explorer-", suffix=".txt", delete=False
            ) as dst:
                dst.write(content)
        except OSError as exc:
            return PortalMsg(err=exc)
        return PortalMsg(content=dst.name)

    def view(self) -> str:
        """Render the current listing inside a bordered box."""
        view = self.current.view
        groups = (
            (EntryKind.DIR, "|--", view.dirs),
            (EntryKind.FILE, "|-", view.files),
            (EntryKind.EXEC, "|-", view.execs),
        )
        lines = []
        index = 0
        for kind, prefix, names in groups:
            for name in names:
                lines.append(prefix + render_entry(kind, name, index == self.cursor) + "\n")
                index += 1
        return render_border(_INSTRUCTIONS + "\n\n" + "".join(lines))