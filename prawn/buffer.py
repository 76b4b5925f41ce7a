"""
Buffer module for Prawn text editor.

Defines the Row and Buffer classes that hold the document text, plus the
functions that read a document from disk and write it back.
A Buffer knows nothing about the screen, the cursor or the editing mode.
"""

ENCODING = "utf-8"
ERRORS = "surrogateescape"

class Row:
    """A single mutable line of text. Edits outside [0, len] are ignored."""
    def __init__(self, text: str = ""):
        self.chars = list(text)

    def __len__(self):
        return len(self.chars)

    def __repr__(self):
        return f"Row({self.text!r})"

    def __eq__(self, other):
        if isinstance(other, Row):
            return self.chars == other.chars
        return NotImplemented

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def insert(self, at: int, ch: str) -> bool:
        """Insert a character before index `at`; at == len appends."""
        if not 0 <= at <= len(self.chars):
            return False
        self.chars.insert(at, ch)
        return True

    def remove(self, at: int) -> bool:
        """Remove the character at index `at`."""
        if not 0 <= at < len(self.chars):
            return False
        del self.chars[at]
        return True

    def append(self, ch: str) -> None:
        self.chars.append(ch)

    def pop(self):
        """Remove and return the last character, or None on an empty row."""
        if not self.chars:
            return None
        return self.chars.pop()

    def slice(self, start: int, end: int) -> str:
        return "".join(self.chars[start:end])


class Buffer:
    """Represents the document being edited: an ordered list of Rows."""
    def __init__(self, filename: str = None, lines=None):
        self.filename = filename  # Path to file or None for an unsaved document
        self.rows = [Row(line) for line in lines] if lines else []
        # An empty document still has one empty row.
        if not self.rows:
            self.rows = [Row()]
        self.modified = False
        # True when the file did not exist yet when the buffer was opened
        self.is_new = False

    @classmethod
    def from_file(cls, filename: str):
        """
        Build a buffer from a file. A file that does not exist yet gives an
        empty buffer carrying that name; other read errors propagate.
        """
        try:
            lines = load_rows(filename)
        except FileNotFoundError:
            lines = None
        buf = cls(filename, lines)
        buf.is_new = lines is None
        return buf

    def __len__(self):
        return len(self.rows)

    @property
    def lines(self):
        return [row.text for row in self.rows]

    def insert_char(self, line: int, col: int, ch: str) -> bool:
        if not 0 <= line < len(self.rows):
            return False
        changed = self.rows[line].insert(col, ch)
        self.modified = self.modified or changed
        return changed

    def delete_char(self, line: int, col: int) -> bool:
        """Delete the character at (line, col). No row merging."""
        if not 0 <= line < len(self.rows):
            return False
        changed = self.rows[line].remove(col)
        self.modified = self.modified or changed
        return changed

    def save_to_file(self, filename: str = None) -> int:
        """
        Write the buffer to `filename` (default: self.filename) and return the
        number of bytes written. Raises ValueError when no file name is known
        and OSError when the write fails.
        """
        target = filename or self.filename
        if not target:
            raise ValueError("no file name")
        written = save_rows(target, self.lines)
        self.filename = target
        self.modified = False
        return written


def split_rows(content: str):
    """One row per newline-delimited line; a trailing newline yields a final empty row."""
    return content.split("\n")

def join_rows(lines) -> str:
    """Every row followed by a newline, leaving out a final empty row."""
    lines = list(lines)
    if lines and lines[-1] == "":
        lines = lines[:-1]
    return "".join(line + "\n" for line in lines)

def load_rows(path: str):
    """Read a file and return its lines."""
    with open(path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
        return split_rows(f.read())

def save_rows(path: str, lines) -> int:
    """Write lines to a file, returning the number of bytes written."""
    data = join_rows(lines).encode(ENCODING, ERRORS)
    with open(path, 'wb') as f:
        f.write(data)
    return len(data)
