"""
Screen geometry for Prawn.

The Viewport tracks the terminal size, the gutter reserved for line numbers
and the scroll offsets that decide which part of the buffer is on screen.
Screen coordinates are 1-indexed like the terminal's own; the first text
column is `gutter_width`, so buffer column c sits at screen column
gutter_width + c - col_offset.
"""
from prawn import logger

# Rows at the bottom of the screen that are not used for text.
STATUS_ROWS = 1

def gutter_width_for(line_count: int) -> int:
    """Digits of the largest line number, one separating space, then the text column."""
    return len(str(max(line_count, 1))) + 2


class Viewport:
    def __init__(self, terminal, line_count: int):
        self.terminal = terminal
        self.screen_rows = 0
        self.screen_cols = 0
        self.row_offset = 0
        self.col_offset = 0
        self.gutter_width = gutter_width_for(line_count)
        # Last cursor position the terminal reported, or None if unusable.
        self.reported_position = None

    @property
    def text_rows(self) -> int:
        """Screen rows available to the document."""
        return max(self.screen_rows - STATUS_ROWS, 1)

    @property
    def text_cols(self) -> int:
        """Screen columns available to the document, right of the gutter."""
        return max(self.screen_cols - self.gutter_width + 1, 1)

    def resize_if_changed(self) -> bool:
        """
        Re-read the terminal size. When it changed, re-query the cursor position
        as well and keep the reply in reported_position. The editor cursor keeps
        its own buffer position.
        """
        rows, cols = self.terminal.get_window_size()
        if (rows, cols) == (self.screen_rows, self.screen_cols):
            return False
        logger.log(f"resize: {self.screen_cols}x{self.screen_rows} -> {cols}x{rows}")
        self.screen_rows, self.screen_cols = rows, cols
        self.reported_position = self.terminal.query_cursor_position()
        if self.reported_position is None:
            logger.log("resize: malformed cursor position report")
        else:
            logger.log(f"resize: terminal cursor at {self.reported_position}")
        return True

    def scroll_to_include(self, row: int, col: int) -> None:
        """Move the offsets by the smallest amount that brings (row, col) on screen."""
        if row < self.row_offset:
            self.row_offset = row
        elif row >= self.row_offset + self.text_rows:
            self.row_offset = row - self.text_rows + 1

        if col < self.col_offset:
            self.col_offset = col
        elif col >= self.col_offset + self.text_cols:
            self.col_offset = col - self.text_cols + 1

    def to_screen(self, row: int, col: int):
        """Buffer (row, col) to screen (y, x)."""
        return row - self.row_offset + 1, col - self.col_offset + self.gutter_width

    def to_buffer(self, screen_y: int, screen_x: int):
        """Screen (y, x) to buffer (row, col)."""
        return self.row_offset + screen_y - 1, self.col_offset + screen_x - self.gutter_width
