"""
Terminal access for the Prawn text editor.

Raw mode setup and teardown, window size, the cursor position query and the
low-level byte reads and writes the rest of the editor is built on.
"""
import contextlib
import os
import select
import shutil
import sys
import termios
import tty

# ANSI/VT100 control sequences
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
QUERY_CURSOR = "\x1b[6n"

# How long to wait for the rest of an escape sequence after a lone ESC.
ESC_WAIT = 0.05
# A cursor position report is never longer than this.
MAX_REPORT_LEN = 32

class TerminalError(OSError):
    """The terminal could not be configured, read or written."""

def enter_raw_mode(fd: int):
    """
    Put the terminal on `fd` into raw mode and return its previous attributes.
    Disables echo, line buffering, signal keys and output post-processing;
    reads return as soon as a single byte is available.
    """
    try:
        previous = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        mode[tty.IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK
                             | termios.ISTRIP | termios.IXON)
        mode[tty.OFLAG] &= ~termios.OPOST
        mode[tty.CFLAG] |= termios.CS8
        mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        mode[tty.CC][termios.VMIN] = 1
        mode[tty.CC][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
    except termios.error as e:
        raise TerminalError(f"cannot enter raw mode: {e}") from e
    return previous

def restore_mode(fd: int, previous) -> None:
    """Restore the attributes saved by enter_raw_mode()."""
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, previous)
    except termios.error as e:
        raise TerminalError(f"cannot restore terminal mode: {e}") from e

@contextlib.contextmanager
def raw_mode(fd: int):
    """Hold the terminal in raw mode for the duration of the block, even on error."""
    previous = enter_raw_mode(fd)
    try:
        yield previous
    finally:
        restore_mode(fd, previous)

def parse_cursor_report(reply: bytes):
    """
    Parse a cursor position report of the form ESC [ row ; col R.
    Returns (row, col), or None if the reply is malformed or truncated.
    """
    start = reply.find(b"\x1b[")
    end = reply.find(b"R", start + 2) if start != -1 else -1
    if start == -1 or end == -1:
        return None
    fields = reply[start + 2:end].split(b";")
    if len(fields) != 2 or not all(field.isdigit() for field in fields):
        return None
    row, col = int(fields[0]), int(fields[1])
    if row < 1 or col < 1:
        return None
    return row, col


class Terminal:
    """Byte-level access to the controlling terminal."""
    def __init__(self, stdin_fd: int = None, stdout_fd: int = None):
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        # Keystrokes read ahead of a cursor position report.
        self.pending = bytearray()

    def read_byte(self) -> int:
        """Block until one byte arrives. Raises TerminalError when input is closed."""
        if self.pending:
            return self.pending.pop(0)
        return self._read_input()

    def _read_input(self) -> int:
        data = os.read(self.stdin_fd, 1)
        if not data:
            raise TerminalError("end of terminal input")
        return data[0]

    def has_pending_input(self, timeout: float = ESC_WAIT) -> bool:
        """True if a byte can be read within `timeout` seconds."""
        if self.pending:
            return True
        ready, _, _ = select.select([self.stdin_fd], [], [], timeout)
        return bool(ready)

    def write(self, data: str) -> None:
        """Write data with a single write call, continuing only after a partial write."""
        view = memoryview(data.encode("utf-8", "replace"))
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def get_window_size(self):
        """Return (rows, cols) of the terminal window."""
        size = shutil.get_terminal_size(fallback=(80, 24))
        return size.lines, size.columns

    def query_cursor_position(self):
        """
        Ask the terminal where its cursor is. Returns (row, col), 1-indexed,
        or None if the reply could not be understood. Read errors propagate.

        Keys typed before the reply arrives are kept for read_byte().
        """
        self.write(QUERY_CURSOR)
        reply = bytearray()
        while len(reply) < MAX_REPORT_LEN:
            byte = self._read_input()
            if byte == 0x1B:
                # Anything before this ESC was typed, not reported.
                self.pending += reply
                reply = bytearray()
            reply.append(byte)
            if byte == ord("R") and reply.startswith(b"\x1b["):
                break
        else:
            if not reply.startswith(b"\x1b["):
                self.pending += reply
            return None
        return parse_cursor_report(bytes(reply))

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)
