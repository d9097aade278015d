"""Test loading and saving files."""

import os
import stat
import tempfile

import pytest

from rawedit.editor import Editor
from rawedit.persistence import load_lines, save_lines


def test_save_then_load_round_trip(tmp_path):
    """Saving N lines and loading them back gives the same N lines."""
    lines = ["fn main() {", "    let x = 1;", "", "  trailing  ", "}"]
    path = tmp_path / "round.rs"
    save_lines(str(path), lines)
    assert load_lines(str(path)) == lines


def test_save_writes_one_newline_per_line(tmp_path):
    path = tmp_path / "out.txt"
    save_lines(str(path), ["a", "", "b"])
    assert path.read_bytes() == b"a\n\nb\n"


def test_save_single_empty_line(tmp_path):
    path = tmp_path / "empty.txt"
    save_lines(str(path), [""])
    assert path.read_bytes() == b"\n"
    assert load_lines(str(path)) == [""]


def test_load_strips_newlines(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"one\ntwo\r\nthree")
    assert load_lines(str(path)) == ["one", "two", "three"]


def test_load_keeps_lone_carriage_return(tmp_path):
    path = tmp_path / "cr.txt"
    path.write_bytes(b"a\rb\n")
    assert load_lines(str(path)) == ["a\rb"]


def test_trailing_carriage_return_does_not_survive_reload(tmp_path):
    """A line ending in CR is saved as-is but reads back as CRLF."""
    path = tmp_path / "trailing.txt"
    save_lines(str(path), ["abc\r", "x"])
    assert path.read_bytes() == b"abc\r\nx\n"
    assert load_lines(str(path)) == ["abc", "x"]

    # Without the newline the CR is part of the text
    path.write_bytes(b"abc\r")
    assert load_lines(str(path)) == ["abc\r"]


def test_load_empty_file_gives_one_line(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert load_lines(str(path)) == [""]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_lines(str(tmp_path / "nope.txt"))


def test_load_invalid_utf8_raises_oserror(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(OSError):
        load_lines(str(path))


def test_save_preserves_permissions(tmp_path):
    """Replacing the file keeps its mode bits."""
    path = tmp_path / "perm.txt"
    path.write_text("old\n")
    os.chmod(path, 0o640)
    save_lines(str(path), ["new"])
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640
    assert path.read_text() == "new\n"


def test_save_leaves_no_temp_files(tmp_path):
    path = tmp_path / "clean.txt"
    save_lines(str(path), ["x"])
    assert os.listdir(tmp_path) == ["clean.txt"]


def test_editor_load_sets_file_association(editor, tmp_path):
    path = tmp_path / "abc.txt"
    path.write_text("a\nb\nc\n")
    editor.load_file(str(path))
    assert editor.buffer.lines == ["a", "b", "c"]
    assert editor.filename == str(path)
    assert editor.modified is False


def test_editor_load_missing_file_propagates(editor, tmp_path):
    with pytest.raises(OSError):
        editor.load_file(str(tmp_path / "missing.txt"))
    assert editor.filename is None


def test_editor_save_file_creates_file(editor):
    """save_file writes the buffer and records the file name."""
    editor.buffer.replace_lines(["First line", "Second line", "Third line"])
    editor.modified = True

    with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False) as f:
        temp_filename = f.name

    try:
        assert editor.save_file(temp_filename) is True
        with open(temp_filename, 'r', encoding='utf-8') as f:
            assert f.read() == "First line\nSecond line\nThird line\n"
        assert editor.filename == temp_filename
        assert editor.modified is False
    finally:
        if os.path.exists(temp_filename):
            os.remove(temp_filename)


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0,
                    reason="root ignores directory permissions")
def test_editor_save_failure_keeps_buffer_and_file(editor, tmp_path):
    """A failed save reports an error and changes nothing."""
    read_only_dir = tmp_path / "ro"
    read_only_dir.mkdir()
    target = read_only_dir / "test.txt"
    target.write_text("original\n")
    os.chmod(read_only_dir, 0o555)

    try:
        editor.buffer.replace_lines(["New content that won't be saved"])
        editor.modified = True
        assert editor.save_file(str(target)) is False
        assert "Permission denied" in editor.status_message
        assert editor.buffer.lines == ["New content that won't be saved"]
        assert editor.modified is True
        assert target.read_text() == "original\n"
    finally:
        os.chmod(read_only_dir, 0o755)


def test_editor_save_failure_on_missing_directory(editor, tmp_path):
    target = tmp_path / "no_such_dir" / "file.txt"
    assert editor.save_file(str(target)) is False
    assert editor.status_message == f"Error: Cannot save to {target}"
    assert editor.filename is None


def test_editor_save_no_space(editor, tmp_path, monkeypatch):
    import errno
    from rawedit import editor as editor_module

    def full_disk(filename, lines):
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(editor_module, "save_lines", full_disk)
    assert editor.save_file(str(tmp_path / "x.txt")) is False
    assert editor.status_message == "Error: No space left on device"


def test_editor_save_permission_denied(editor, tmp_path, monkeypatch):
    """PermissionError is reported without touching buffer or file."""
    from rawedit import editor as editor_module

    target = tmp_path / "locked.txt"
    target.write_text("original\n")

    def denied(filename, lines):
        raise PermissionError(13, "Permission denied", filename)

    monkeypatch.setattr(editor_module, "save_lines", denied)
    editor.buffer.replace_lines(["unsaved"])
    editor.modified = True
    assert editor.save_file(str(target)) is False
    assert editor.status_message == f"Error: Permission denied saving {target}"
    assert editor.buffer.lines == ["unsaved"]
    assert editor.modified is True
    assert editor.filename is None
    assert target.read_text() == "original\n"
