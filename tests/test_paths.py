import os

import pytest

from fexplorer.paths import MAX_FILE_SIZE, QUIT, PortalMsg, Viewer
from fexplorer.tree import EntryKind, TreeError, clear_cache, render_entry


@pytest.fixture
def root(tmp_path):
    clear_cache()
    (tmp_path / "alpha").mkdir()
    (tmp_path / "beta").mkdir()
    (tmp_path / "notes.txt").write_text("hello notes")
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    yield str(tmp_path)
    clear_cache()


def test_item_count(root):
    viewer = Viewer(root)
    assert viewer.item_count() == 4
    assert viewer.cursor == 0


def test_cursor_clamps(root):
    viewer = Viewer(root)
    viewer.update("up")
    assert viewer.cursor == 0
    for _ in range(10):
        viewer.update("down")
    assert viewer.cursor == viewer.item_count() - 1
    viewer.update("up")
    assert viewer.cursor == viewer.item_count() - 2


def test_enter_directory(root):
    viewer = Viewer(root)
    viewer.update("down")
    assert viewer.update("enter") is None
    assert viewer.current.name == os.path.join(root, "beta")
    assert viewer.current.parent is viewer.root
    assert viewer.root.children == [viewer.current]
    assert viewer.cursor == 0


def test_reenter_reuses_child(root):
    viewer = Viewer(root)
    viewer.update("enter")
    first = viewer.current
    assert viewer.update("left") is None
    assert viewer.current is viewer.root
    viewer.update("enter")
    assert viewer.current is first
    assert len(viewer.root.children) == 1


def test_empty_directory(root):
    viewer = Viewer(root)
    viewer.update("enter")
    assert viewer.item_count() == 0
    assert viewer.update("enter") is None
    viewer.update("down")
    assert viewer.cursor == 0


def test_quit_keys(root):
    viewer = Viewer(root)
    assert viewer.update("left") == QUIT
    assert viewer.update("esc") == QUIT
    viewer.update("enter")
    assert viewer.update("ctrl+c") == QUIT


def test_unknown_key(root):
    viewer = Viewer(root)
    assert viewer.update("x") is None
    assert viewer.cursor == 0


def test_open_file_copies_to_temp(root):
    viewer = Viewer(root)
    viewer.update("down")
    viewer.update("down")
    msg = viewer.update("enter")
    assert isinstance(msg, PortalMsg)
    assert msg.err is None
    try:
        assert os.path.basename(msg.content).startswith("explorer-")
        assert msg.content.endswith(".txt")
        with open(msg.content) as fh:
            assert fh.read() == "hello notes"
        assert str(msg) == msg.content
    finally:
        os.remove(msg.content)


def test_open_executable_does_nothing(root):
    viewer = Viewer(root)
    for _ in range(3):
        viewer.update("down")
    assert viewer.update("enter") is None
    assert viewer.current is viewer.root


def test_open_missing_file(root):
    viewer = Viewer(root)
    os.remove(os.path.join(root, "notes.txt"))
    viewer.update("down")
    viewer.update("down")
    msg = viewer.update("enter")
    assert isinstance(msg.err, FileNotFoundError)
    assert msg.content == ""


def test_open_too_large_file(tmp_path):
    clear_cache()
    big = tmp_path / "big.log"
    with open(big, "wb") as fh:
        fh.truncate(MAX_FILE_SIZE + 1)
    viewer = Viewer(str(tmp_path))
    msg = viewer.update("enter")
    assert msg.content == ""
    assert "file too large" in str(msg.err)
    clear_cache()


def test_missing_root_raises(tmp_path):
    clear_cache()
    with pytest.raises(TreeError):
        Viewer(str(tmp_path / "missing"))


def test_view_marks_selection(root):
    viewer = Viewer(root)
    text = viewer.view()
    assert "use arrow keys to navigate" in text
    assert "|--" + render_entry(EntryKind.DIR, "alpha", True) in text
    assert "|--" + render_entry(EntryKind.DIR, "beta", False) in text
    assert "|-" + render_entry(EntryKind.FILE, "notes.txt", False) in text
    assert "|-" + render_entry(EntryKind.EXEC, "run.sh", False) in text
    viewer.update("down")
    viewer.update("down")
    viewer.update("down")
    text = viewer.view()
    assert "|-" + render_entry(EntryKind.EXEC, "run.sh", True) in text
    assert "|--" + render_entry(EntryKind.DIR, "alpha", False) in text


def test_portal_msg_defaults():
    msg = PortalMsg(content="path")
    assert str(msg) == "path"
    assert msg.err is None