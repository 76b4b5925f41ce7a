"""
prawn/ui/screen.py

Builds one complete frame per cycle as a single string of ANSI escape
sequences and writes it in one go, so the terminal never shows a half-drawn
screen. Colors come from the current theme as 24-bit SGR sequences.
"""
from wcwidth import wcwidth, wcswidth

from prawn.modes import Command

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
ERASE_LINE = "\x1b[K"
RESET = "\x1b[0m"
CRLF = "\r\n"

EMPTY_ROW_MARKER = "~"
NO_NAME = "[No Name]"
COMMAND_PROMPT = ": "

def move_cursor(y: int, x: int) -> str:
    return f"\x1b[{y};{x}H"

def fg(rgb) -> str:
    return "\x1b[38;2;{};{};{}m".format(*rgb)

def bg(rgb) -> str:
    return "\x1b[48;2;{};{};{}m".format(*rgb)

def display_char(ch: str) -> str:
    """Show every character in exactly one column."""
    if ch == "\t":
        return " "
    if wcwidth(ch) != 1:
        return "?"
    return ch

def display_text(text: str) -> str:
    return "".join(display_char(ch) for ch in text)

def fit(text: str, width: int) -> str:
    """Cut or pad text to exactly `width` terminal columns."""
    out = []
    used = 0
    for ch in text:
        w = wcwidth(ch)
        if w < 0:
            ch, w = "?", 1
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * (width - used)

def text_width(text: str) -> int:
    visual_width = wcswidth(text)
    return len(text) if visual_width < 0 else visual_width

def draw_rows(context) -> list:
    """One string per text row: gutter, visible slice of the row, erase to end of line."""
    vp = context.viewport
    theme = context.theme
    rows = context.buffer.rows
    number_width = vp.gutter_width - 1
    current = context.cursor.row
    parts = []
    for y in range(vp.text_rows):
        index = vp.row_offset + y
        if index < len(rows):
            if index == current:
                gutter = fg(theme["fg"]) + bg(theme["sel"])
            else:
                gutter = fg(theme["accent"]) + bg(theme["bg"])
            number = f"{index + 1:>{number_width - 1}} "
            text = rows[index].slice(vp.col_offset, vp.col_offset + vp.text_cols)
            parts.append(gutter + number[:vp.screen_cols]
                         + fg(theme["fg"]) + bg(theme["bg"]) + display_text(text))
        else:
            parts.append(fg(theme["accent"]) + bg(theme["bg"]) + EMPTY_ROW_MARKER)
        parts.append(ERASE_LINE + RESET + CRLF)
    return parts

def draw_status_bar(context) -> str:
    """
    The last screen row. In command mode it is the command line itself;
    otherwise a colored mode segment, the file name, the status message and
    the cursor position flush right.
    """
    theme = context.theme
    width = context.viewport.screen_cols
    mode = context.mode

    if isinstance(mode, Command):
        line = fit(COMMAND_PROMPT + display_text(mode.line), width)
        return fg(theme["fg"]) + bg(theme["bg"]) + line + RESET

    buf = context.buffer
    mode_text = f" {mode.name.upper()} "
    dirty_mark = "*" if buf.modified else ""
    file_text = f" {buf.filename or NO_NAME}{dirty_mark} "
    if context.status_message:
        file_text += f" {context.status_message} "
    position = f" {context.cursor.row + 1}:{context.cursor.col + 1} "

    mode_text = fit(mode_text, min(len(mode_text), width))
    rest = max(width - len(mode_text), 0)
    if text_width(file_text) + len(position) <= rest:
        info = fit(file_text, rest - len(position)) + position
    else:
        info = fit(file_text, rest)
    return (fg(theme["bg"]) + bg(theme["accent"]) + mode_text
            + fg(theme["highlight"]) + bg(theme["sel"]) + info + RESET)

def cursor_position(context):
    """Where the terminal cursor goes at the end of the frame."""
    mode = context.mode
    vp = context.viewport
    if isinstance(mode, Command):
        x = len(COMMAND_PROMPT) + 1 + mode.index
        return vp.screen_rows, max(min(x, vp.screen_cols), 1)
    return context.cursor.screen_y, context.cursor.screen_x

def build_frame(context) -> str:
    """Compose the whole screen: rows, status line, cursor placement."""
    parts = [HIDE_CURSOR, CURSOR_HOME]
    parts.extend(draw_rows(context))
    parts.append(draw_status_bar(context))
    parts.append(move_cursor(*cursor_position(context)))
    parts.append(SHOW_CURSOR)
    return "".join(parts)

def display(context):
    """Re-draw the entire screen with a single write."""
    context.terminal.write(build_frame(context))
