"""CLI helpers for circulation.

Wiring and error translation for commands, URL sanitization for display,
stderr message emitters with emoji fallbacks, and JSON rendering of views.
"""

from .app import load_container, run_command
from .db_url import sanitize_url
from .messages import error, success, warn
from .output import echo_json

__all__ = [
    "echo_json",
    "error",
    "load_container",
    "run_command",
    "sanitize_url",
    "success",
    "warn",
]
