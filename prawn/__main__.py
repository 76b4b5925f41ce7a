"""
Main entry point and editor context for the Prawn text editor.
"""
import argparse
import sys

from prawn import buffer, config, logger, themes, terminal
from prawn.modes import Command, Insert, Normal
from prawn.ui import input as ui_input, screen
from prawn.ui.cursor import Cursor
from prawn.ui.keys import KeyDecoder
from prawn.ui.viewport import Viewport

__version__ = "0.4.0"

class EditorContext:
    """
    Holds the state of one editing session: the terminal, the buffer, the
    viewport and cursor, the current mode and the status line.
    """
    def __init__(self, term, buf: buffer.Buffer, theme: str = themes.DEFAULT_THEME,
                 available_themes: dict = None, config_path: str = None):
        self.terminal = term
        self.buffer = buf
        self.viewport = Viewport(term, len(buf))
        self.cursor = Cursor(buf, self.viewport)
        self.decoder = KeyDecoder(term)

        # Editor modes: Normal, Insert, Command
        self.mode = Normal()
        self.status_message = ""

        # Known themes: theme_name -> dict of color definitions
        self.available_themes = available_themes or themes.get_builtin_themes()
        self.current_theme = themes.DEFAULT_THEME
        self.theme = themes.resolve_theme(self.available_themes[themes.DEFAULT_THEME])
        self.apply_theme(theme)
        # Where `:theme` persists its choice; None keeps it for this session only
        self.config_path = config_path

        # Running flag
        self.exit_flag = False

    def log_command(self, msg: str):
        """Log a command or action to the debug log file."""
        logger.log(msg)

    def apply_theme(self, theme_name: str) -> bool:
        """Switch to a known theme. Returns False if the name is unknown."""
        if theme_name not in self.available_themes:
            return False
        self.current_theme = theme_name
        self.theme = themes.resolve_theme(self.available_themes[theme_name])
        return True

    def set_mode(self, mode):
        """Enter a new mode, keeping the cursor valid for it."""
        if isinstance(mode, Command):
            self.status_message = ""
        self.mode = mode
        if not isinstance(mode, Command):
            self.cursor.clamp(insert=isinstance(mode, Insert))

    def graceful_exit(self):
        logger.log("Editor exited.")
        self.exit_flag = True

    def prepare_frame(self):
        """Pick up terminal resizes before drawing."""
        if self.viewport.resize_if_changed():
            self.cursor.resync(insert=isinstance(self.mode, Insert))

    def step(self):
        """One turn of the loop: draw, wait for a key, act on it."""
        self.prepare_frame()
        screen.display(self)
        key = self.decoder.read_key()
        ui_input.handle_key(self, key)

    def run(self):
        self.terminal.clear_screen()
        try:
            while not self.exit_flag:
                self.step()
        finally:
            self.terminal.clear_screen()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="prawn", description="Prawn - a small modal text editor")
    parser.add_argument("file", nargs="?", help="File to edit")
    parser.add_argument("--theme", help="Color theme to use for this session")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    settings = config.load_config()
    logger.set_log_file(settings["log"])
    logger.log("Editor started.")

    if args.file:
        try:
            buf = buffer.Buffer.from_file(args.file)
        except OSError as e:
            print(f"prawn: cannot open {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        buf = buffer.Buffer()

    available = themes.load_all_themes(config.THEMES_DIR)
    theme_name = args.theme or settings["theme"]
    term = terminal.Terminal()
    try:
        with terminal.raw_mode(term.stdin_fd):
            context = EditorContext(term, buf, theme_name, available, config.CONFIG_PATH)
            if context.current_theme != theme_name:
                logger.log(f"theme: unknown theme {theme_name}, using {context.current_theme}")
            if buf.is_new:
                context.status_message = "new file"
            context.run()
    except OSError as e:
        logger.log(f"fatal: {e}")
        print(f"prawn: {e}", file=sys.stderr)
        return 1
    return 0

def run():
    """Console script entry point."""
    sys.exit(main())

if __name__ == "__main__":
    run()
