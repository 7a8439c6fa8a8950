"""
xSteal — Configuration & Constants.

Environment overrides, history sizing, display colors and user-facing text
live here.  Metric definitions and weights live in
``steal_engine.core.metrics`` so each variant is expressed as data.
"""
import os

# ── Paths ──────────────────────────────────────
_APP_DIR = os.path.dirname(os.path.abspath(__file__))
LOGO_PATH = os.path.join(_APP_DIR, "logo.png")


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_choice(name, choices, default):
    """Lower-cased env value if it is one of ``choices``, else ``default``."""
    raw = (os.environ.get(name) or "").strip().lower()
    return raw if raw in choices else default


VARIANT_LABELS = {
    "standard": "Standard (3 metrics)",
    "extended": "Extended (5 metrics)",
}

# ── Engine ─────────────────────────────────────
HISTORY_SIZE = max(1, _env_int("XSTEAL_HISTORY_SIZE", 10))
DEFAULT_VARIANT = _env_choice("XSTEAL_DEFAULT_VARIANT", VARIANT_LABELS, "standard")
LOG_LEVEL = os.environ.get("XSTEAL_LOG_LEVEL", "INFO").upper()

# ── Display ────────────────────────────────────
NAVY = "#002D72"
RED = "#CC0000"
CREAM = "#F4F1E9"
GRID = "#cccccc"
TOKEN_Y_RANGE = (-1.0, 1.0)
