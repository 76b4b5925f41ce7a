import curses
from curses import ascii

from prawn.modes import Command, Insert, Normal
from prawn.ui import input as ui_input


def press(context, *keys):
    for key in keys:
        if isinstance(key, str):
            for ch in key:
                ui_input.handle_key(context, ord(ch))
        else:
            ui_input.handle_key(context, key)


def test_starts_in_normal_mode(make_context):
    assert isinstance(make_context(["abc"]).mode, Normal)


def test_i_enters_insert_and_escape_leaves(make_context):
    context = make_context(["abc"])
    press(context, "i")
    assert isinstance(context.mode, Insert)
    press(context, ascii.ESC)
    assert isinstance(context.mode, Normal)


def test_insert_key_enters_insert_mode(make_context):
    context = make_context(["abc"])
    press(context, curses.KEY_IC)
    assert isinstance(context.mode, Insert)


def test_normal_mode_ignores_printable_keys(make_context):
    context = make_context(["abc"])
    press(context, "xyz")
    assert context.buffer.lines == ["abc"]
    assert not context.buffer.modified


def test_typing_in_insert_mode(make_context):
    context = make_context(["ac"])
    press(context, curses.KEY_RIGHT, "i", "b")
    assert context.buffer.lines == ["abc"]
    assert context.cursor.col == 2
    assert context.cursor.preferred_x == 2
    assert context.buffer.modified


def test_append_at_end_of_row(make_context):
    context = make_context(["ab"])
    press(context, "i", curses.KEY_END, "cd")
    assert context.buffer.lines == ["abcd"]
    assert context.cursor.col == 4


def test_leaving_insert_clamps_to_last_character(make_context):
    context = make_context(["ab"])
    press(context, "i", curses.KEY_END)
    assert context.cursor.col == 2
    press(context, ascii.ESC)
    assert context.cursor.col == 1


def test_insert_ignores_control_bytes(make_context):
    context = make_context(["ab"])
    press(context, "i", ascii.CR, 0x01, ascii.TAB)
    assert context.buffer.lines == ["ab"]


def test_backspace_removes_previous_character(make_context):
    context = make_context(["abc"])
    press(context, "i", curses.KEY_END, curses.KEY_BACKSPACE)
    assert context.buffer.lines == ["ab"]
    assert context.cursor.col == 2


def test_backspace_at_column_zero_is_noop(make_context):
    context = make_context(["abc", "de"])
    press(context, curses.KEY_DOWN, "i", curses.KEY_BACKSPACE)
    assert context.buffer.lines == ["abc", "de"]
    assert (context.cursor.row, context.cursor.col) == (1, 0)


def test_delete_removes_character_under_cursor(make_context):
    context = make_context(["abc"])
    press(context, curses.KEY_RIGHT, curses.KEY_DC)
    assert context.buffer.lines == ["ac"]
    assert context.cursor.col == 1


def test_delete_last_character_in_normal_mode_clamps(make_context):
    context = make_context(["abc"])
    press(context, curses.KEY_END, curses.KEY_DC)
    assert context.buffer.lines == ["ab"]
    assert context.cursor.col == 1


def test_delete_on_empty_row_is_noop(make_context):
    context = make_context([""])
    press(context, curses.KEY_DC, curses.KEY_BACKSPACE)
    assert context.buffer.lines == [""]
    assert not context.buffer.modified


def test_backspace_in_normal_mode(make_context):
    context = make_context(["abc"])
    press(context, curses.KEY_END, curses.KEY_BACKSPACE)
    assert context.buffer.lines == ["ac"]
    assert context.cursor.col == 1


def test_colon_enters_command_mode_with_empty_line(make_context):
    context = make_context(["abc"])
    context.status_message = "old"
    press(context, ":")
    assert isinstance(context.mode, Command)
    assert context.mode.line == ""
    assert context.mode.index == 0
    assert context.status_message == ""


def test_command_line_editing(make_context):
    context = make_context(["abc"])
    press(context, ":", "wq", curses.KEY_LEFT, "x")
    assert context.mode.line == "wxq"
    assert context.mode.index == 2
    press(context, curses.KEY_BACKSPACE)
    assert context.mode.line == "wq"
    press(context, curses.KEY_HOME, curses.KEY_DC)
    assert context.mode.line == "q"
    press(context, curses.KEY_END)
    assert context.mode.index == 1


def test_command_mode_navigation_leaves_document_cursor(make_context):
    context = make_context(["abc", "de"])
    press(context, ":", curses.KEY_DOWN, curses.KEY_NPAGE, "q")
    assert (context.cursor.row, context.cursor.col) == (0, 0)
    assert context.mode.line == "q"


def test_escape_cancels_command(make_context):
    context = make_context(["abc"])
    press(context, ":", "q", ascii.ESC)
    assert isinstance(context.mode, Normal)
    assert not context.exit_flag
    press(context, ":")
    assert context.mode.line == ""


def test_quit_command_ends_session(make_context):
    context = make_context(["abc"])
    press(context, ":q", ascii.CR)
    assert context.exit_flag


def test_unknown_command_is_ignored(make_context):
    context = make_context(["abc"])
    press(context, ":nope", ascii.CR)
    assert isinstance(context.mode, Normal)
    assert not context.exit_flag
    assert context.status_message == ""


def test_write_command_saves_once(make_context, monkeypatch):
    calls = []

    def fake_save(path, lines):
        calls.append((path, lines))
        return 7

    monkeypatch.setattr("prawn.buffer.save_rows", fake_save)
    context = make_context(["abc", "de"], filename="doc.txt")
    press(context, ":w", ascii.NL)

    assert calls == [("doc.txt", ["abc", "de"])]
    assert isinstance(context.mode, Normal)
    assert not context.exit_flag
    press(context, ":")
    assert context.mode.line == ""


def test_arrows_in_insert_mode_reach_past_end(make_context):
    context = make_context(["abc", "de"])
    press(context, "i", curses.KEY_RIGHT, curses.KEY_RIGHT, curses.KEY_RIGHT)
    assert context.cursor.col == 3
    press(context, curses.KEY_DOWN)
    assert context.cursor.col == 2


def test_modified_arrow_in_insert_mode_moves_without_typing(make_context):
    context = make_context(["abc"])
    context.terminal.feed(b"i\x1b[1;5Cx\x1b[15~\x1b")
    while context.terminal.input:
        ui_input.handle_key(context, context.decoder.read_key())
    assert context.buffer.lines == ["axbc"]
    assert isinstance(context.mode, Normal)
