"""
clipboard.py - Clipboard copy with a delayed wipe.

Owned by the application window rather than the main view, so a pending
wipe survives the view being rebuilt (e.g. on a theme change). Only
clear_pending() wipes early, and the app calls it on close.
"""

import logging
import tkinter as tk


logger = logging.getLogger(__name__)

CLIPBOARD_CLEAR_MS = 15000


class ClipboardGuard:
    """
    Args:
        root: The Tk root window; all clipboard calls and timers go through it
        clear_after_ms: Delay before a copied value is wiped
    """

    def __init__(self, root, clear_after_ms: int = CLIPBOARD_CLEAR_MS):
        self.root = root
        self.clear_after_ms = clear_after_ms
        self.clear_job = None

    @property
    def pending(self) -> bool:
        return self.clear_job is not None

    def copy(self, text: str):
        """
        Put text on the clipboard and (re)schedule the wipe.

        Raises:
            tkinter.TclError: If the clipboard is unavailable. Nothing is scheduled then.
        """
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        self.root.update()

        if self.clear_job:
            self.root.after_cancel(self.clear_job)
        self.clear_job = self.root.after(self.clear_after_ms, self.clear)

    def clear(self):
        self.clear_job = None
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append("")
            self.root.update()
        except tk.TclError as e:
            logger.debug("Clipboard clear failed: %s", e)

    def clear_pending(self):
        """Wipe now if a copy is still waiting to be wiped."""
        if self.clear_job:
            self.root.after_cancel(self.clear_job)
            self.clear()
