"""
main.py - Application entry point for the password generator.

This is the orchestrator. It:
1. Configures logging
2. Creates the session store (one per run, never saved)
3. Creates the main window and hands it the store
4. Rebuilds the window when the theme changes, keeping the same store
5. Owns the clipboard guard, so only closing the app wipes a pending copy early
"""

import logging
import os
import sys
from typing import Optional

import customtkinter as ctk

from core.session import SessionStore
from gui.clipboard import ClipboardGuard
from gui.main_window import MainWindow
from gui.theme import get_colors, get_mode


APP_VERSION = "1.0.0"
LOG_LEVEL_ENV = "PASSWORD_FORGE_LOG_LEVEL"

logger = logging.getLogger(__name__)


class PasswordForgeApp(ctk.CTk):
    """Main application window."""

    def __init__(self, store: Optional[SessionStore] = None):
        super().__init__()

        # Window setup
        self.title("Password Forge")
        self.geometry("960x640")
        self.minsize(820, 560)
        self.configure(fg_color=get_colors()["bg_primary"])

        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.store = store or SessionStore()
        self.clipboard_guard = ClipboardGuard(self)
        self.current_frame = None

        self._show_main()
        logger.info("Password Forge %s started", APP_VERSION)

    def _show_main(self):
        """(Re)build the main view around the session store."""
        generator_state = None
        if self.current_frame:
            generator_state = self.current_frame.generator.snapshot()
            self.current_frame.teardown()
            self.current_frame.destroy()

        self.configure(fg_color=get_colors()["bg_primary"])
        self.current_frame = MainWindow(
            parent=self,
            store=self.store,
            clipboard=self.clipboard_guard,
            on_theme_change=self._show_main,
            generator_state=generator_state,
        )
        self.current_frame.pack(fill="both", expand=True)

    def _on_close(self):
        if self.current_frame:
            self.current_frame.teardown()
        self.clipboard_guard.clear_pending()
        logger.info("Closing; %d entries discarded", len(self.store))
        self.destroy()


def configure_logging():
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    ctk.set_appearance_mode(get_mode())

    try:
        app = PasswordForgeApp()
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
