import pytest

from prawn import buffer
from prawn.__main__ import EditorContext
from prawn.terminal import TerminalError


class FakeTerminal:
    """Scripted stand-in for prawn.terminal.Terminal."""
    def __init__(self, keys=b"", size=(24, 80), report=(1, 1)):
        self.input = bytearray(keys)
        self.size = size
        self.report = report
        self.output = []
        self.queries = 0

    def feed(self, data: bytes):
        self.input.extend(data)

    def read_byte(self):
        if not self.input:
            raise TerminalError("end of terminal input")
        return self.input.pop(0)

    def has_pending_input(self, timeout=None):
        return bool(self.input)

    def write(self, data):
        self.output.append(data)

    def get_window_size(self):
        return self.size

    def query_cursor_position(self):
        self.queries += 1
        return self.report

    def clear_screen(self):
        self.output.append("\x1b[2J\x1b[H")


@pytest.fixture
def make_context():
    """Build an EditorContext over the given lines, sized and ready to draw."""
    def factory(lines, size=(24, 80), filename=None):
        term = FakeTerminal(size=size)
        context = EditorContext(term, buffer.Buffer(filename, lines))
        context.prepare_frame()
        return context
    return factory


@pytest.fixture(autouse=True)
def quiet_log(tmp_path, monkeypatch):
    monkeypatch.setattr("prawn.logger.LOG_FILE_PATH", str(tmp_path / "prawn.log"))
