"""
Editing modes for Prawn.

A mode is one of Normal, Insert or Command. Command carries the command line
being typed, so that state only exists while the editor is in Command mode.
"""
from dataclasses import dataclass, field
from typing import ClassVar, List


@dataclass(frozen=True)
class Normal:
    name: ClassVar[str] = "normal"


@dataclass(frozen=True)
class Insert:
    name: ClassVar[str] = "insert"


@dataclass
class Command:
    """Command-line mode with its own text and edit index."""
    name: ClassVar[str] = "command"
    text: List[str] = field(default_factory=list)
    index: int = 0

    @property
    def line(self) -> str:
        return "".join(self.text)

    def insert(self, ch: str) -> None:
        self.text.insert(self.index, ch)
        self.index += 1

    def backspace(self) -> None:
        """Remove the character before the edit index."""
        if self.index > 0:
            del self.text[self.index - 1]
            self.index -= 1

    def delete(self) -> None:
        """Remove the character at the edit index."""
        if self.index < len(self.text):
            del self.text[self.index]

    def move_left(self) -> None:
        self.index = max(self.index - 1, 0)

    def move_right(self) -> None:
        self.index = min(self.index + 1, len(self.text))

    def move_home(self) -> None:
        self.index = 0

    def move_end(self) -> None:
        self.index = len(self.text)
