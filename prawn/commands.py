"""
Command parsing and execution for Prawn text editor.

This module handles the text typed in command-line (':') mode and dispatches
it to the matching action on the editor context. Commands are matched exactly
as typed; anything not in the table is ignored.
"""
from prawn import config, logger

def write_buffer(context, filename: str = None) -> bool:
    """Save the buffer, reporting the outcome in the status line. Returns success."""
    buf = context.buffer
    try:
        num_bytes = buf.save_to_file(filename)
    except ValueError:
        context.status_message = "no file name (use :w <file>)"
        return False
    except OSError as e:
        context.status_message = f"error saving file: {e}"
        logger.log(f"w: error saving {filename or buf.filename}: {e}")
        return False
    context.status_message = f'"{buf.filename}" {len(buf)}L {num_bytes}B written'
    context.log_command(f"w: write {buf.filename} ({num_bytes} bytes)")
    return True

def cmd_quit(context, arg):
    context.log_command("q: quit")
    context.graceful_exit()

def cmd_write(context, arg):
    write_buffer(context, arg or None)

def cmd_write_quit(context, arg):
    if write_buffer(context):
        context.graceful_exit()

def cmd_theme(context, arg):
    if not context.apply_theme(arg):
        context.status_message = f"unknown theme: {arg}"
        return
    context.status_message = f"theme: {arg}"
    context.log_command(f"theme: {arg}")
    if context.config_path:
        try:
            config.save_setting("theme", arg, context.config_path)
        except OSError as e:
            logger.log(f"theme: could not save config: {e}")

# Commands taking no argument
COMMANDS = {
    "q": cmd_quit,
    "quit": cmd_quit,
    "w": cmd_write,
    "write": cmd_write,
    "wq": cmd_write_quit,
}

# Commands followed by a space and an argument
ARG_COMMANDS = {
    "w": cmd_write,
    "theme": cmd_theme,
}

def process_command(context, command: str) -> bool:
    """
    Execute a command-line string. Returns True if it matched a command,
    False if it was ignored.
    """
    handler = COMMANDS.get(command)
    arg = None
    if handler is None and " " in command:
        name, arg = command.split(" ", 1)
        handler = ARG_COMMANDS.get(name) if arg else None
    if handler is None:
        return False
    handler(context, arg)
    return True
