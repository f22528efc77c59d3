# fexplorer

A small file explorer that runs full-screen in the terminal. The screen has
three parts:

- **Tree pane** (left): the entries of the current directory. Directories come
  first, then plain files, then executables (entries with any execute bit set),
  each group sorted by name and drawn in its own colour. The entry under the
  cursor is underlined. The pane turns magenta while it has the focus.
- **Output pane** (top right): shows the contents of a file opened from the
  tree, or the commands you run followed by their output.
- **Command prompt** (bottom right): type a shell command and press Enter. It
  runs through `sh -c` and its standard output is added to the output pane.
  If the command fails, an `Error: ...` line is shown instead.

## Installation

```
pip install .
```

## Usage

```
fexplorer [root]
```

`root` is the directory to start in; it defaults to `/`. The program starts
with the command prompt focused.

### Keys

Anywhere:

| Key         | Action                                    |
|-------------|-------------------------------------------|
| PgUp / PgDn | scroll the output pane by one page        |
| Home / End  | jump to the top or bottom of the output   |
| Ctrl+C      | quit                                      |

At the command prompt:

| Key         | Action                                    |
|-------------|-------------------------------------------|
| Enter       | run the command                           |
| Backspace   | delete the last character                 |
| Up / Down   | scroll the output pane by one line        |
| Left        | move focus to the tree pane               |

The prompt holds at most 256 characters.

In the tree pane:

| Key         | Action                                                  |
|-------------|---------------------------------------------------------|
| Up / Down   | move the cursor                                         |
| Enter       | open a directory, or show a plain file in the output pane |
| Left / Esc  | go back to the parent directory (quits at the start directory) |
| Right       | move focus back to the command prompt                   |

Opening a plain file copies it to a temporary file `explorer-*.txt` in `/tmp`
and shows that copy, decoded as UTF-8. Files larger than 10 MB are not shown;
an error is shown in their place. Pressing Enter on an executable does nothing.
Directory listings are cached for five seconds.

## Using it as a library

`fexplorer.tree` lists directories:

```python
from fexplorer.tree import TreeError, new_file_view

try:
    view = new_file_view("/usr")
except TreeError as exc:
    print("cannot list:", exc)
else:
    print(view.dirs, view.files, view.execs)
    dirs_end, files_end, total = view.type_break()
    sub = view.expand("bin")   # a FileView of /usr/bin
```

`new_path(path)` lists a directory without caching and raises `TreeError` if
it holds no sub-directory; `clear_cache()` drops cached listings;
`is_executable(path)` checks the execute bits without following links.

`fexplorer.handlers` runs commands:

```python
from fexplorer.handlers import handle_cmd

msg = handle_cmd("echo hello")
print(msg.msg)   # "hello\n"
print(msg.err)   # None, or the exception for a failing command
```

`fexplorer.paths.Viewer` is the tree pane on its own: `update(key)` takes key
names such as `"up"`, `"down"`, `"enter"`, `"left"` and returns a `PortalMsg`,
the string `QUIT`, or `None`; `view()` renders it. `fexplorer.manager.Manager`
combines it with the output pane and the prompt.

## Limits

The program needs a POSIX system: commands run through `sh`, and file previews
are written to `/tmp`. Only standard output of a command is shown; standard
error is not. There is no editing, copying, moving or deleting of files from
the tree pane.

## Running the tests

```
pip install ".[test]"
pytest
```