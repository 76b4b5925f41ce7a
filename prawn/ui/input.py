"""
Input handling for Prawn text editor.

Processes key events for each mode (normal, insert, command) and updates the
context accordingly. Navigation keys move the document cursor in Normal and
Insert mode and the command-line index in Command mode.
"""
import curses
from curses import ascii

from prawn import commands
from prawn.modes import Command, Insert, Normal

ENTER_KEYS = (ascii.CR, ascii.NL, curses.KEY_ENTER)

CURSOR_MOVES = {
    curses.KEY_LEFT: "move_left",
    curses.KEY_RIGHT: "move_right",
    curses.KEY_UP: "move_up",
    curses.KEY_DOWN: "move_down",
    curses.KEY_HOME: "move_home",
    curses.KEY_END: "move_end",
    curses.KEY_PPAGE: "page_up",
    curses.KEY_NPAGE: "page_down",
}

COMMAND_LINE_MOVES = {
    curses.KEY_LEFT: "move_left",
    curses.KEY_RIGHT: "move_right",
    curses.KEY_HOME: "move_home",
    curses.KEY_END: "move_end",
}

def handle_navigation(context, key: int) -> bool:
    """Move the cursor (or command-line index) for a navigation key. Returns True if handled."""
    if isinstance(context.mode, Command):
        method = COMMAND_LINE_MOVES.get(key)
        if method is None:
            return key in CURSOR_MOVES
        getattr(context.mode, method)()
        return True

    method = CURSOR_MOVES.get(key)
    if method is None:
        return False
    getattr(context.cursor, method)(insert=isinstance(context.mode, Insert))
    return True

def delete_before_cursor(context) -> None:
    """Backspace: remove the character left of the cursor on the current row."""
    cursor = context.cursor
    insert = isinstance(context.mode, Insert)
    if cursor.col > 0 and context.buffer.delete_char(cursor.row, cursor.col - 1):
        cursor.move_left(insert)
    cursor.clamp(insert)

def delete_at_cursor(context) -> None:
    """Delete: remove the character under the cursor on the current row."""
    context.buffer.delete_char(context.cursor.row, context.cursor.col)
    context.cursor.clamp(isinstance(context.mode, Insert))

def handle_normal_mode(context, key: int):
    """Handle a key press in normal mode."""
    # ESC clears any leftover message
    if key == ascii.ESC:
        context.status_message = ""
        return

    if key in (ord('i'), curses.KEY_IC):
        context.set_mode(Insert())
        context.log_command("i: insert")
        return

    if key == ord(':'):
        context.set_mode(Command())
        return

    if key == curses.KEY_BACKSPACE:
        delete_before_cursor(context)
        return

    if key == curses.KEY_DC:
        delete_at_cursor(context)
        return

    handle_navigation(context, key)

def handle_insert_mode(context, key: int):
    """Handle a key press in insert mode."""
    # ESC -> normal mode
    if key == ascii.ESC:
        context.set_mode(Normal())
        return

    if key == curses.KEY_BACKSPACE:
        delete_before_cursor(context)
        return

    if key == curses.KEY_DC:
        delete_at_cursor(context)
        return

    if handle_navigation(context, key):
        return

    # Insert a printable character
    if 0 <= key < 256 and ascii.isprint(key):
        cursor = context.cursor
        if context.buffer.insert_char(cursor.row, cursor.col, chr(key)):
            cursor.move_right(insert=True)

def handle_command_mode(context, key: int):
    """Handle a key press in command (:) mode."""
    mode = context.mode
    if key == ascii.ESC:
        context.set_mode(Normal())
        return

    if key in ENTER_KEYS:
        cmd = mode.line
        context.set_mode(Normal())
        commands.process_command(context, cmd)
        return

    if key == curses.KEY_BACKSPACE:
        mode.backspace()
    elif key == curses.KEY_DC:
        mode.delete()
    elif handle_navigation(context, key):
        pass
    elif 0 <= key < 256 and ascii.isprint(key):
        mode.insert(chr(key))

HANDLERS = {
    Normal.name: handle_normal_mode,
    Insert.name: handle_insert_mode,
    Command.name: handle_command_mode,
}

def handle_key(context, key: int):
    """Route a key to the handler of the current mode."""
    HANDLERS[context.mode.name](context, key)
