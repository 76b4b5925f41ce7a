"""
themes.py

Holds the built-in Prawn themes in a Python dictionary form.
Any .py file in the user's themes directory that defines `theme_name` and
`theme_data` is also picked up.
"""
import importlib.util
import os

from prawn import logger

DEFAULT_THEME = "boring"

def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their color definitions.
    These are the default themes: boring, shrimp, catpuccin.
    """
    return {
        "boring": {
            "bg": (40, 42, 54),
            "fg": (248, 248, 242),
            "sel": (68, 71, 90),
            "accent": (98, 114, 164),
            "highlight": (139, 233, 253),
        },
        "shrimp": {
            "bg": (30, 30, 30),
            "fg": (250, 240, 230),
            "sel": (80, 60, 50),
            "accent": (255, 165, 125),
            "highlight": (255, 200, 170),
        },
        "catpuccin": {
            "bg": (30, 30, 46),
            "fg": (205, 214, 244),
            "sel": (69, 71, 90),
            "accent": (137, 180, 250),
            "highlight": (245, 194, 231),
        },
    }

def load_user_themes(themes_dir: str) -> dict:
    """
    Import every .py file in themes_dir and collect the themes they define.
    A theme file that fails to import is logged and skipped.
    """
    found = {}
    if not os.path.isdir(themes_dir):
        return found

    for fname in sorted(os.listdir(themes_dir)):
        if not fname.endswith(".py") or fname == "__init__.py":
            continue

        full_path = os.path.join(themes_dir, fname)
        spec = importlib.util.spec_from_file_location("prawn_user_theme", full_path)
        if not spec or not spec.loader:
            continue

        mod = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(mod)
        except Exception as e:
            logger.log(f"theme: could not load {full_path}: {e}")
            continue
        name = getattr(mod, "theme_name", None)
        data = getattr(mod, "theme_data", None)
        if isinstance(name, str) and isinstance(data, dict):
            found[name] = data
    return found

def load_all_themes(themes_dir: str = None) -> dict:
    """Built-in themes, overlaid with the user's themes when a directory is given."""
    themes = get_builtin_themes()
    if themes_dir:
        themes.update(load_user_themes(themes_dir))
    return themes

def resolve_theme(data: dict) -> dict:
    """Fill any color the theme leaves out from the default theme."""
    colors = dict(get_builtin_themes()[DEFAULT_THEME])
    for key, value in data.items():
        if key in colors and len(value) == 3:
            colors[key] = tuple(int(c) for c in value)
    return colors
