import os

import pytest

from note_store import InvalidNoteName, NoteIoError, NoteNotFound, NoteStore


@pytest.fixture
def store(tmp_path):
    return NoteStore(str(tmp_path))


def test_list_is_sorted_and_skips_dirs_and_dotfiles(store, tmp_path):
    for name in ["zeta", "alpha", "Mid", ".hidden"]:
        (tmp_path / name).write_text("")
    (tmp_path / "subdir").mkdir()
    assert store.list() == ["Mid", "alpha", "zeta"]


def test_list_shows_hidden_when_asked(tmp_path):
    (tmp_path / ".hidden").write_text("")
    assert NoteStore(str(tmp_path), show_hidden=True).list() == [".hidden"]


def test_list_of_missing_dir_raises_io_error(tmp_path):
    with pytest.raises(NoteIoError):
        NoteStore(str(tmp_path / "missing")).list()


def test_read_missing_raises_not_found(store):
    with pytest.raises(NoteNotFound):
        store.read("nope")


def test_write_creates_then_truncates(store, tmp_path):
    store.write("note", ["first", "second"])
    assert (tmp_path / "note").read_text() == "first\nsecond"
    store.write("note", ["x"])
    assert (tmp_path / "note").read_text() == "x"
    assert store.read("note") == "x"


def test_create_is_idempotent(store, tmp_path):
    assert store.create("fresh") is True
    assert (tmp_path / "fresh").read_text() == ""
    (tmp_path / "fresh").write_text("keep me")
    assert store.create("fresh") is False
    assert (tmp_path / "fresh").read_text() == "keep me"


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", os.path.join("..", "x"), "nul\0"])
def test_invalid_names_are_rejected(store, name):
    with pytest.raises(InvalidNoteName):
        store.create(name)


def test_undecodable_bytes_survive_round_trip(store, tmp_path):
    raw = b"caf\xe9\nline two"
    (tmp_path / "latin").write_bytes(raw)
    content = store.read("latin")
    store.write("latin", content.split("\n"))
    assert (tmp_path / "latin").read_bytes() == raw


def test_ensure_dir_creates_nested_directory(tmp_path):
    target = tmp_path / "a" / "b"
    NoteStore(str(target)).ensure_dir()
    assert target.is_dir()


def test_delete_removes_note(store, tmp_path):
    store.create("gone")
    store.delete("gone")
    assert not (tmp_path / "gone").exists()
    with pytest.raises(NoteNotFound):
        store.delete("gone")
