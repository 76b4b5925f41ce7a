"""
Cursor model for Prawn.

The cursor lives in screen coordinates (screen_x, screen_y) on top of the
viewport's offsets; its buffer position is always derived from the two.
Moves are expressed in buffer coordinates and placed back through the
viewport, which scrolls when the target is off screen.

Insert mode lets the cursor sit one column past the last character; every
other mode stops on the last character.
"""

class Cursor:
    def __init__(self, buffer, viewport):
        self.buffer = buffer
        self.viewport = viewport
        self.screen_y = 1
        self.screen_x = viewport.gutter_width
        # Sticky column (buffer column) restored by vertical moves.
        self.preferred_x = 0
        # Latched by End, cleared by any horizontal move.
        self.at_end_of_line = False

    @property
    def row(self) -> int:
        return self.viewport.to_buffer(self.screen_y, self.screen_x)[0]

    @property
    def col(self) -> int:
        return self.viewport.to_buffer(self.screen_y, self.screen_x)[1]

    def right_limit(self, row: int = None, insert: bool = False) -> int:
        """Largest column the cursor may occupy on `row` (default: current row)."""
        length = len(self.buffer.rows[self.row if row is None else row])
        if insert:
            return length
        return max(length - 1, 0)

    def place(self, row: int, col: int) -> None:
        """Put the cursor on buffer (row, col), scrolling the viewport as needed."""
        self.viewport.scroll_to_include(row, col)
        self.screen_y, self.screen_x = self.viewport.to_screen(row, col)

    def _horizontal(self, col: int) -> None:
        self.place(self.row, col)
        self.preferred_x = col
        self.at_end_of_line = False

    def _settle_column(self, row: int, insert: bool) -> None:
        """Pick the column on `row` after a vertical move (sticky column)."""
        limit = self.right_limit(row, insert)
        if len(self.buffer.rows[row]) < self.viewport.col_offset:
            self.viewport.col_offset = limit
            self.place(row, limit)
        elif not self.at_end_of_line and self.preferred_x <= limit:
            self.place(row, self.preferred_x)
        else:
            self.place(row, limit)

    def move_left(self, insert: bool = False) -> None:
        self._horizontal(max(self.col - 1, 0))

    def move_right(self, insert: bool = False) -> None:
        self._horizontal(min(self.col + 1, self.right_limit(insert=insert)))

    def move_up(self, insert: bool = False) -> None:
        if self.row > 0:
            self._settle_column(self.row - 1, insert)

    def move_down(self, insert: bool = False) -> None:
        if self.row < len(self.buffer) - 1:
            self._settle_column(self.row + 1, insert)

    def move_home(self, insert: bool = False) -> None:
        self.viewport.col_offset = 0
        self._horizontal(0)

    def move_end(self, insert: bool = False) -> None:
        limit = self.right_limit(insert=insert)
        self.place(self.row, limit)
        self.preferred_x = limit
        self.at_end_of_line = True

    def page_up(self, insert: bool = False) -> None:
        step = self.viewport.text_rows
        target = max(self.row - step, 0)
        self.viewport.row_offset = max(self.viewport.row_offset - step, 0)
        self._settle_column(target, insert)

    def page_down(self, insert: bool = False) -> None:
        step = self.viewport.text_rows
        last = len(self.buffer) - 1
        target = min(self.row + step, last)
        self.viewport.row_offset = min(self.viewport.row_offset + step,
                                       max(len(self.buffer) - step, 0))
        self._settle_column(target, insert)

    def clamp(self, insert: bool = False) -> None:
        """Pull the cursor back inside the document and the mode's right limit."""
        row = min(max(self.row, 0), len(self.buffer) - 1)
        col = min(max(self.col, 0), self.right_limit(row, insert))
        self.place(row, col)

    def resync(self, insert: bool = False) -> None:
        """
        Fit the cursor back into a resized text area. The buffer position is
        kept; the viewport scrolls to it instead.
        """
        self.clamp(insert)
