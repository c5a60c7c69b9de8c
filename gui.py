"""
GUI for PocketCalc
Tkinter front end: renders the two display lines and forwards button labels
"""
import json
import logging
import tkinter as tk

import config
from calculator import Calculator

logger = logging.getLogger(__name__)

# Keyboard characters that map straight onto a button label
_CHAR_LABELS = {
    '*': 'X',
    '/': '/',
    '+': '+',
    '-': '-',
    '.': '.',
    '%': '%',
    '=': 'Answer',
    '\r': 'Answer',
    '\n': 'Answer',
}

_KEYSYM_LABELS = {
    'BackSpace': 'Delete',
    'Delete': 'Delete',
    'Escape': 'C',
    'Return': 'Answer',
    'KP_Enter': 'Answer',
}


def key_to_label(char, keysym=""):
    """Map a key event (char, keysym) to a button label, or None"""
    if char and char in config.DIGITS:
        return char
    if char in _CHAR_LABELS:
        return _CHAR_LABELS[char]
    return _KEYSYM_LABELS.get(keysym)


def load_settings(path=config.SETTINGS_FILE):
    try:
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, ValueError):
        return {}


def save_settings(data, path=config.SETTINGS_FILE):
    """Merge data into the settings file; returns False if it can't be written"""
    existing = load_settings(path)
    existing.update(data)
    try:
        with open(path, "w") as f:
            json.dump(existing, f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    return True


class PocketCalcGUI:
    def __init__(self, root, calculator=None, poll_ms=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.calculator = calculator or Calculator()

        # ── Theme state (load before any widget is created) ───────────────
        settings = load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.refresh_display()

        # Redraw periodically when another thread (the web portal) shares the calculator
        self.poll_ms = poll_ms
        if poll_ms:
            self.root.after(poll_ms, self._poll)

    def _poll(self):
        self.refresh_display()
        self.root.after(self.poll_ms, self._poll)

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and rebuild the widgets"""
        self.dark_mode = not self.dark_mode
        save_settings({"dark_mode": self.dark_mode})
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.refresh_display()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "action":
            bg, fg, abg = T["action_bg"], T["action_fg"], T["bg_dark"]
            font = config.ACTION_FONT
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
            font = config.BUTTON_FONT
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
            font = config.BUTTON_FONT
        return tk.Button(
            parent, text=text, command=command, font=font,
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T

        header = tk.Frame(self.root, bg=T["bg"])
        header.pack(fill=tk.X, padx=6, pady=(6, 0))
        tk.Label(header, text=config.APP_NAME, font=config.ACTION_FONT,
                 bg=T["bg"], fg=T["operator_fg"]).pack(side=tk.LEFT)
        tk.Button(header, text="☾", command=self._toggle_dark_mode,
                  relief=tk.FLAT, bd=0, bg=T["bg"], fg=T["btn_fg"],
                  activebackground=T["bg_dark"]).pack(side=tk.RIGHT)

        # Display area
        display_frame = tk.Frame(self.root, bg=T["display_bg"])
        display_frame.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)

        self.formula_label = tk.Label(
            display_frame, text="0", font=config.FORMULA_FONT,
            bg=T["display_bg"], fg=T["formula_fg"], anchor=tk.E, padx=12
        )
        self.formula_label.pack(side=tk.TOP, fill=tk.X, pady=(12, 0))

        self.result_label = tk.Label(
            display_frame, text="0", font=config.RESULT_FONT,
            bg=T["display_bg"], fg=T["display_fg"], anchor=tk.E, padx=12
        )
        self.result_label.pack(side=tk.BOTTOM, fill=tk.X, pady=(0, 12))

        # Keypad
        pad = tk.Frame(self.root, bg=T["bg"])
        pad.pack(fill=tk.BOTH, expand=True, padx=6, pady=(0, 6))

        for col, label in enumerate(config.ACTION_ROW):
            btn = self._neu_btn(pad, label, command=lambda l=label: self.on_button(l), kind="action")
            btn.grid(row=0, column=col * 2, columnspan=2, sticky="nsew", padx=2, pady=2)

        for r, row in enumerate(config.BUTTON_ROWS, start=1):
            for c, label in enumerate(row):
                is_op = label in config.OPERATOR_ALIASES or label in config.OPERATORS or label == config.PERCENT_LABEL
                btn = self._neu_btn(pad, label, command=lambda l=label: self.on_button(l),
                                    kind="operator" if is_op else "normal")
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)

        for c in range(4):
            pad.grid_columnconfigure(c, weight=1)
        for r in range(len(config.BUTTON_ROWS) + 1):
            pad.grid_rowconfigure(r, weight=1)

    def on_button(self, label):
        """Forward a button label to the calculator"""
        self.calculator.press(label)
        self.refresh_display()

    def on_key_press(self, event):
        """Handle keyboard input"""
        label = key_to_label(event.char, event.keysym)
        if label is not None:
            self.on_button(label)

    def refresh_display(self):
        """Redraw both display lines from the calculator state"""
        state = self.calculator.get_state()
        result = state['result']
        self.formula_label.config(text=state['formula'])
        fg = self.T["error_fg"] if result == config.ERROR_TEXT else self.T["display_fg"]
        self.result_label.config(text=result, fg=fg)
