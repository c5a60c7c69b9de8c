"""
PocketCalc
Main application entry point
"""
import logging
import threading
import tkinter as tk

import api
import config
from gui import PocketCalcGUI

logger = logging.getLogger(__name__)


def start_web_portal(host=config.WEB_HOST, port=config.WEB_PORT):
    """Serve the JSON API from a daemon thread.

    The portal drives api.session, the same calculator the window shows,
    so presses from a phone appear on the desktop display.
    """
    thread = threading.Thread(
        target=api.run_server, args=(host, port), name="web-portal", daemon=True
    )
    thread.start()
    logger.info("Web portal listening on http://%s:%s/api", host, port)
    return thread


def main():
    config.setup_logging()

    poll_ms = None
    if config.START_WEB_PORTAL:
        start_web_portal()
        poll_ms = config.DISPLAY_POLL_MS

    root = tk.Tk()
    PocketCalcGUI(root, api.session, poll_ms=poll_ms)
    root.mainloop()


if __name__ == "__main__":
    main()
