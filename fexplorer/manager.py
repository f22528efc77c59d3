"""Top-level screen: directory browser on the left, command output and input on the right."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field

from fexplorer.handlers import HandlerMsg, handle_cmd
from fexplorer.paths import QUIT, PortalMsg, Viewer

INPUT_MODE = 0
VIEWER_MODE = 1

_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_IN_USE_COLOR = "\x1b[38;5;13m"
_RESET = "\x1b[0m"
_DIM = "\x1b[2m"


def _width(text: str) -> int:
    return len(_ANSI.sub("", text))


def _box(text: str, padding: int = 1, margin_left: int = 2) -> str:
    """Draw a plain border around text, with padding inside and a left margin."""
    lines = text.split("\n")
    width = max(_width(line) for line in lines)
    inner = width + 2 * padding
    margin = " " * margin_left
    blank = "│" + " " * inner + "│"
    out = ["┌" + "─" * inner + "┐"]
    out.extend([blank] * padding)
    for line in lines:
        fill = " " * (width - _width(line))
        out.append("│" + " " * padding + line + fill + " " * padding + "│")
    out.extend([blank] * padding)
    out.append("└" + "─" * inner + "┘")
    return "\n".join(margin + line for line in out)


def _join_horizontal(left: str, right: str) -> str:
    """Place two blocks side by side, aligned at the top."""
    left_lines = left.split("\n")
    right_lines = right.split("\n")
    width = max(_width(line) for line in left_lines)
    height = max(len(left_lines), len(right_lines))
    left_lines += [""] * (height - len(left_lines))
    right_lines += [""] * (height - len(right_lines))
    return "\n".join(
        lft + " " * (width - _width(lft)) + rgt for lft, rgt in zip(left_lines, right_lines)
    )


class Viewport:
    """A scrollable window of `height` lines over some text."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.y_offset = 0
        self._lines: list[str] = [""]

    def set_content(self, content: str) -> None:
        """Replace the text; jump to the bottom if the offset now lies past the end."""
        self._lines = content.split("\n")
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()
        self._clamp()

    def total_line_count(self) -> int:
        """Number of lines in the content."""
        return len(self._lines)

    def _max_offset(self) -> int:
        return max(0, self.total_line_count() - self.height)

    def _clamp(self) -> None:
        self.y_offset = min(max(self.y_offset, 0), self._max_offset())

    def scroll(self, delta: int) -> None:
        """Move the window by `delta` lines, staying within the content."""
        self.y_offset += delta
        self._clamp()

    def goto_top(self) -> None:
        """Show the first lines."""
        self.y_offset = 0

    def goto_bottom(self) -> None:
        """Show the last lines."""
        self.y_offset = self._max_offset()

    def view(self) -> str:
        """The lines currently inside the window."""
        return "\n".join(self._lines[self.y_offset : self.y_offset + self.height])


@dataclass
class TextInput:
    """A one-line text field that takes keys while focused."""

    placeholder: str = ""
    char_limit: int = 0
    width: int = 0
    value: str = ""
    focused: bool = field(default=False)

    def __init__(self, placeholder: str = "", char_limit: int = 0, width: int = 0) -> None:
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.value = ""
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def handle_key(self, key: str) -> None:
        """Insert a printable character or apply backspace; ignored while blurred."""
        if not self.focused:
            return
        if key == "backspace":
            self.value = self.value[:-1]
        elif key == "space":
            self._insert(" ")
        elif len(key) == 1 and key.isprintable():
            self._insert(key)

    def _insert(self, char: str) -> None:
        if self.char_limit > 0 and len(self.value) >= self.char_limit:
            return
        self.value += char

    def reset(self) -> None:
        """Clear the field."""
        self.value = ""

    def view(self) -> str:
        """The prompt followed by the value, or the placeholder when empty."""
        if not self.value:
            return "> " + _DIM + self.placeholder + _RESET
        shown = self.value[-self.width :] if self.width > 0 else self.value
        return "> " + shown


class Manager:
    """Switches keys between the command box and the directory browser."""

    def __init__(self, viewer: Viewer | None = None) -> None:
        self.selection = INPUT_MODE
        self.viewer = viewer if viewer is not None else Viewer()
        self.input = TextInput(placeholder="Enter command...", char_limit=256, width=80)
        self.input.focus()
        self.portal = Viewport(width=83, height=20)

    def _scroll_key(self, key: str) -> bool:
        if key == "pgup":
            self.portal.scroll(-self.portal.height)
        elif key == "pgdown":
            self.portal.scroll(self.portal.height)
        elif key == "home":
            self.portal.goto_top()
        elif key == "end":
            self.portal.goto_bottom()
        else:
            return False
        return True

    def handle_key(self, key: str) -> HandlerMsg | PortalMsg | str | None:
        """Handle one key; returns a message to feed to handle_message, QUIT, or None."""
        if key == "ctrl+c":
            return QUIT
        if self._scroll_key(key):
            return None
        if self.selection == INPUT_MODE:
            return self._input_key(key)
        if key == "right":
            self.selection = INPUT_MODE
            self.input.focus()
            return None
        return self.viewer.update(key)

    def _input_key(self, key: str) -> HandlerMsg | None:
        if key == "left":
            self.selection = VIEWER_MODE
            self.input.blur()
            return None
        if key == "enter" and self.input.value:
            command = self.input.value
            self.portal.set_content(self.portal.view() + "\n> " + command)
            result = handle_cmd(command)
            self.input.reset()
            return result
        if key == "up":
            self.portal.scroll(-1)
        elif key == "down":
            self.portal.scroll(1)
        else:
            self.input.handle_key(key)
        return None

    def handle_message(self, msg: HandlerMsg | PortalMsg) -> None:
        """Show a command's result or a file's content in the output pane."""
        if self.selection == INPUT_MODE and isinstance(msg, HandlerMsg):
            current = self.portal.view() + "\n"
            if msg.err is not None:
                self.portal.set_content(current + "Error: " + str(msg.err))
            else:
                self.portal.set_content(current + msg.msg)
            self.portal.goto_bottom()
        elif self.selection == VIEWER_MODE and isinstance(msg, PortalMsg):
            if msg.err is not None:
                self.portal.set_content("Error: " + str(msg.err))
            else:
                try:
                    with open(str(msg), "rb") as fh:
                        data = fh.read()
                except OSError as exc:
                    self.portal.set_content("Error reading file: " + str(exc))
                else:
                    self.portal.set_content(data.decode("utf-8", errors="replace"))

    def view(self) -> str:
        """Render the whole screen."""
        lines = self.viewer.view().split("\n")
        if self.selection == VIEWER_MODE:
            lines = [_IN_USE_COLOR + line + _RESET for line in lines]
        left = "\n".join(line + " " for line in lines)
        portal = _box(self.portal.view() + "\n")
        command = _box(self.input.view())
        return _join_horizontal(left, portal + "\n" + command)


_KEY_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_PGUP": "pgup",
    "KEY_PGDOWN": "pgdown",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "backspace",
}


def _key_name(key) -> str:
    if key.is_sequence:
        return _KEY_NAMES.get(key.name, "")
    text = str(key)
    if text == "\x03":
        return "ctrl+c"
    if text in ("\r", "\n"):
        return "enter"
    if text in ("\x7f", "\x08"):
        return "backspace"
    if text == " ":
        return "space"
    return text


def main(argv: list[str] | None = None) -> int:
    """Run the explorer full-screen in the terminal."""
    import blessed

    parser = argparse.ArgumentParser(prog="fexplorer", description="Terminal file explorer.")
    parser.add_argument("root", nargs="?", default="/", help="directory to start in")
    args = parser.parse_args(argv)

    manager = Manager(Viewer(args.root))
    term = blessed.Terminal()
    with term.fullscreen(), term.raw(), term.hidden_cursor():
        while True:
            print(term.home + term.clear + manager.view().replace("\n", "\r\n"), end="", flush=True)
            key = _key_name(term.inkey())
            if not key:
                continue
            result = manager.handle_key(key)
            if result == QUIT:
                break
            if isinstance(result, (HandlerMsg, PortalMsg)):
                manager.handle_message(result)
    return 0