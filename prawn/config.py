"""
Configuration for the Prawn text editor.

Settings live in ~/prawn/config/prawn.conf as one ``key=value`` pair per line.
Lines starting with '#' are comments.
"""
import os

CONFIG_DIR = os.path.expanduser("~/prawn/config")
CONFIG_PATH = os.path.join(CONFIG_DIR, "prawn.conf")
THEMES_DIR = os.path.join(CONFIG_DIR, "themes")

DEFAULTS = {
    "theme": "boring",
    "log": os.path.expanduser("~/prawn/prawn.log"),
}

def parse_config(text: str) -> dict:
    """Parse ``key=value`` lines into a dict, ignoring blanks, comments and junk."""
    settings = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            settings[key] = value.strip()
    return settings

def load_config(path: str = None) -> dict:
    """
    Load settings from the config file, layered over DEFAULTS.
    A missing or unreadable file simply yields the defaults.
    """
    settings = dict(DEFAULTS)
    config_path = path or CONFIG_PATH
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            settings.update(parse_config(f.read()))
    except OSError:
        pass
    return settings

def save_setting(key: str, value: str, path: str = None) -> None:
    """
    Persist a single setting, keeping every other line of the file intact.
    Creates directories if necessary. Raises OSError if the file cannot be written.
    """
    config_path = path or CONFIG_PATH
    lines = []
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        pass

    replaced = False
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("#") or "=" not in stripped:
            continue
        if stripped.split("=", 1)[0].strip() == key:
            lines[i] = f"{key}={value}"
            replaced = True
    if not replaced:
        lines.append(f"{key}={value}")

    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(config_path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n")
