"""
PocketCalc Configuration Settings
"""
import logging
import os

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 560
FORMULA_FONT = ("Consolas", 18)
RESULT_FONT = ("Consolas", 36, "bold")
BUTTON_FONT = ("Segoe UI", 16)
ACTION_FONT = ("Segoe UI", 13, "bold")

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft slate background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # pressed / inset variant
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # result line
    "formula_fg":   "#6E8090",   # formula line
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",   # teal-green accent
    "action_bg":    "#2E8B57",   # Delete / Answer row
    "action_fg":    "#FFFFFF",
    "error_fg":     "#B03A2E",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # soft green glow
    "formula_fg":   "#4E6070",
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "action_bg":    "#2D8A58",
    "action_fg":    "#FFFFFF",
    "error_fg":     "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Settings file for UI preferences (theme only; no calculation history is kept)
SETTINGS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.json")

# ── Calculator alphabet ────────────────────────────────────────────────────────

DIGITS = "0123456789"
DECIMAL_POINT = "."
PERCENT_LABEL = "%"

# Canonical operators stored in the expression buffer
ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"
OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

# Button / keyboard labels accepted for each operator
OPERATOR_ALIASES = {
    "X": MULTIPLY,
    "x": MULTIPLY,
    "*": MULTIPLY,
    "/": DIVIDE,
    "−": SUBTRACT,   # U+2212 minus sign
}

DELETE_LABELS = ("Delete", "DEL", "⌫", "CE")
EVALUATE_LABELS = ("Answer", "=")
CLEAR_LABELS = ("C", "AC", "Clear")

# Button grid (top to bottom), same arrangement as the handheld layout
ACTION_ROW = ("Delete", "Answer")
BUTTON_ROWS = [
    ("1", "2", "3", "/"),
    ("4", "5", "6", "-"),
    ("7", "8", "9", "X"),
    (".", "0", "%", "+"),
]

# Results are rounded to this many fractional digits before trimming
MAX_FRACTION_DIGITS = 10

# Shown in place of a committed result when evaluation fails
ERROR_TEXT = "Error"

# Web Portal settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
START_WEB_PORTAL = os.environ.get("POCKETCALC_WEB", "0") == "1"
# How often the window redraws while the web portal shares its calculator
DISPLAY_POLL_MS = 300

# Logging
LOG_LEVEL = os.environ.get("POCKETCALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None):
    """Install a basic stream handler for the entry-point scripts."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
