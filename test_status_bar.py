from app_state import AppState
from prompt_bar import PromptBar
from status_bar import render_status
from test_editor_pane import DummyWin
from text_buffer import TextBuffer


def test_status_shows_mode_file_and_position():
    state = AppState("/notes", buffer=TextBuffer(["ab", "cd"]), current_file="todo")
    state.cursor.move_to(1, 1, state.buffer)
    state.modified = True
    text = render_status(state, 60, now=0)
    assert text.startswith(" EDIT | todo [+] | Ln 2, Col 2 | 2 lines")
    assert len(text) == 60


def test_untitled_and_mode_labels():
    state = AppState("/notes")
    state.modes.enter_select_file()
    state.modes.toggle_help()
    assert render_status(state, 40, now=0).startswith(" OPEN:HELP | [untitled]")


def test_live_message_wins_until_it_expires():
    state = AppState("/notes")
    state.set_status("Saved todo", 3)
    now = state.status_msg_until - 1
    assert render_status(state, 30, now=now).strip() == "Saved todo"
    assert "EDIT" in render_status(state, 30, now=state.status_msg_until + 1)


def test_prompt_bar_shows_pending_name_and_owns_cursor():
    state = AppState("/notes")
    state.modes.enter_create_note()
    for ch in "groceries":
        state.modes.append_to_name(ch)

    win = DummyWin(1, 40)
    assert PromptBar().draw(win, state) is True
    assert win.text_at(0) == "New note: groceries"
    assert win.cursor == (0, len("New note: groceries"))


def test_prompt_bar_hint_in_normal_mode():
    win = DummyWin(1, 80)
    assert PromptBar().draw(win, AppState("/notes")) is False
    assert "Save ^S" in win.text_at(0)
