"""
main_window.py - Generator on the left, saved passwords and stats on the right.

Features:
- Generate, score and save in one click
- One-click copy with clipboard auto-clear
- Delete entries from the session list
- Dark/light mode toggle
- Keyboard shortcuts (Ctrl+G generate, Escape clear the site field)
"""

import logging
import tkinter as tk
from typing import Callable, Optional

import customtkinter as ctk

from core.session import PasswordEntry, SessionStore
from gui.clipboard import ClipboardGuard
from gui.dialogs import NoticeDialog
from gui.generator import GeneratorPanel, GeneratorState
from gui.theme import get_colors, get_mode, get_style_color, toggle_mode


logger = logging.getLogger(__name__)

COPY_FEEDBACK_MS = 1000
SHORTCUTS = ("<Control-g>", "<Escape>")


class MainWindow(ctk.CTkFrame):
    """Generator panel, saved list and stats for one session."""

    def __init__(
        self,
        parent: ctk.CTk,
        store: SessionStore,
        clipboard: ClipboardGuard,
        on_theme_change: Optional[Callable] = None,
        generator_state: Optional[GeneratorState] = None,
    ):
        C = get_colors()
        super().__init__(parent, fg_color=C["bg_primary"])
        self.store = store
        self.clipboard = clipboard
        self.on_theme_change = on_theme_change
        self.copy_feedback_job = None
        self._copied_btn = None

        self._build_ui()
        if generator_state:
            self.generator.restore(generator_state)
        self._refresh_entries()
        self._bind_shortcuts()

    def _bind_shortcuts(self):
        top = self.winfo_toplevel()
        top.bind("<Control-g>", lambda e: self.generator.generate())
        top.bind("<Escape>", lambda e: self.generator.clear_label())

    def _build_ui(self):
        C = get_colors()

        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        # ==========================================
        # HEADER
        # ==========================================
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, columnspan=2, sticky="ew", padx=28, pady=(20, 12))

        ctk.CTkLabel(
            header, text="Password Generator",
            font=ctk.CTkFont(size=22, weight="bold"),
            text_color=C["text_primary"],
        ).pack(side="left")

        self.theme_btn = ctk.CTkButton(
            header,
            text="☀  Light Mode" if get_mode() == "dark" else "🌙  Dark Mode",
            font=ctk.CTkFont(size=12),
            height=34, width=130,
            fg_color="transparent",
            hover_color=C["bg_hover"],
            text_color=C["text_secondary"],
            corner_radius=8,
            command=self._toggle_theme,
        )
        self.theme_btn.pack(side="right")

        # ==========================================
        # GENERATOR (left)
        # ==========================================
        self.generator = GeneratorPanel(self, on_generated=self._save_generated)
        self.generator.grid(row=1, column=0, sticky="nsew", padx=(28, 14), pady=(0, 20))

        # ==========================================
        # SAVED LIST + STATS (right)
        # ==========================================
        content = ctk.CTkFrame(self, fg_color="transparent")
        content.grid(row=1, column=1, sticky="nsew", padx=(14, 28), pady=(0, 20))
        content.grid_columnconfigure(0, weight=1)
        content.grid_rowconfigure(2, weight=1)

        # -- Stats --
        stats_frame = ctk.CTkFrame(content, fg_color="transparent")
        stats_frame.grid(row=0, column=0, sticky="ew", pady=(0, 12))
        stats_frame.grid_columnconfigure((0, 1, 2), weight=1)

        self.total_label = self._add_stat(stats_frame, 0, "Total")
        self.strong_label = self._add_stat(stats_frame, 1, "Strong")
        self.avg_length_label = self._add_stat(stats_frame, 2, "Avg. length")

        ctk.CTkLabel(
            content, text="SAVED PASSWORDS",
            font=ctk.CTkFont(size=10, weight="bold"),
            text_color=C["text_muted"], anchor="w",
        ).grid(row=1, column=0, sticky="ew", pady=(0, 6))

        self.list_frame = ctk.CTkScrollableFrame(
            content, fg_color="transparent",
            scrollbar_button_color=C["border"],
            scrollbar_button_hover_color=C["bg_hover"],
        )
        self.list_frame.grid(row=2, column=0, sticky="nsew")
        self.list_frame.grid_columnconfigure(0, weight=1)

    def _add_stat(self, parent, column: int, caption: str) -> ctk.CTkLabel:
        C = get_colors()
        tile = ctk.CTkFrame(
            parent, fg_color=C["bg_card"],
            corner_radius=10, border_width=1,
            border_color=C["border_subtle"],
        )
        tile.grid(row=0, column=column, sticky="ew", padx=(0 if column == 0 else 6, 0))

        value = ctk.CTkLabel(
            tile, text="0",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=C["text_primary"],
        )
        value.pack(pady=(10, 0))

        ctk.CTkLabel(
            tile, text=caption,
            font=ctk.CTkFont(size=11),
            text_color=C["text_secondary"],
        ).pack(pady=(0, 10))
        return value

    # ------------------------------------------------------------------
    # Entry List
    # ------------------------------------------------------------------

    def _refresh_entries(self):
        for widget in self.list_frame.winfo_children():
            widget.destroy()

        entries = self.store.list()
        if not entries:
            self._show_empty_state()
        for i, entry in enumerate(entries):
            self._create_entry_card(entry, i)

        self._refresh_stats()

    def _refresh_stats(self):
        stats = self.store.stats()
        self.total_label.configure(text=str(stats.total))
        self.strong_label.configure(text=str(stats.strong_or_better))
        self.avg_length_label.configure(text=str(stats.average_length))

    def _show_empty_state(self):
        C = get_colors()
        ctk.CTkLabel(
            self.list_frame, text="No saved passwords",
            font=ctk.CTkFont(size=13),
            text_color=C["text_secondary"], justify="center",
        ).grid(row=0, column=0, pady=40)

    def _create_entry_card(self, entry: PasswordEntry, index: int):
        C = get_colors()
        accent = get_style_color(entry.strength.style_tag)

        card = ctk.CTkFrame(
            self.list_frame, fg_color=C["bg_card"],
            corner_radius=12, border_width=1,
            border_color=C["border_subtle"],
        )
        card.grid(row=index, column=0, sticky="ew", pady=(0, 6))
        card.grid_columnconfigure(1, weight=1)

        # -- Strength stripe --
        ctk.CTkFrame(
            card, width=4, corner_radius=2, fg_color=accent,
        ).grid(row=0, column=0, rowspan=2, sticky="ns", padx=(10, 10), pady=12)

        # -- Info --
        ctk.CTkLabel(
            card, text=entry.label,
            font=ctk.CTkFont(size=14, weight="bold"),
            text_color=C["text_primary"], anchor="w",
        ).grid(row=0, column=1, sticky="sw", pady=(12, 0))

        details = ctk.CTkFrame(card, fg_color="transparent")
        details.grid(row=1, column=1, sticky="nw", pady=(0, 12))

        ctk.CTkLabel(
            details,
            text=f"Created {entry.created_at}  •  Strength: {entry.strength.score}/100",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"], anchor="w",
        ).pack(side="left")

        ctk.CTkLabel(
            details, text="●",
            font=ctk.CTkFont(size=10),
            text_color=accent,
        ).pack(side="left", padx=(6, 0))

        # -- Action Buttons --
        btn_frame = ctk.CTkFrame(card, fg_color="transparent")
        btn_frame.grid(row=0, column=2, rowspan=2, padx=(8, 14), pady=12)

        copy_btn = ctk.CTkButton(
            btn_frame, text="Copy",
            font=ctk.CTkFont(size=11, weight="bold"),
            width=64, height=30,
            fg_color=C["copy_btn"],
            hover_color=C["copy_btn_hover"],
            text_color="#ffffff",
            corner_radius=8,
            command=lambda e=entry: self._copy_password(e, copy_btn),
        )
        copy_btn.pack(side="left", padx=(0, 6))

        ctk.CTkButton(
            btn_frame, text="Delete",
            font=ctk.CTkFont(size=11, weight="bold"),
            width=64, height=30,
            fg_color=C["delete_btn"],
            hover_color=C["delete_btn_hover"],
            text_color="#ffffff",
            corner_radius=8,
            command=lambda e=entry: self._delete_entry(e),
        ).pack(side="left")

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def _copy_password(self, entry: PasswordEntry, btn: ctk.CTkButton):
        C = get_colors()
        try:
            self.clipboard.copy(entry.value)
        except tk.TclError as e:
            logger.warning("Clipboard copy failed for entry %d: %s", entry.id, e)
            NoticeDialog(
                self, "Copy failed",
                "Could not copy automatically. Please copy the password manually.",
                level="warning",
            )
            return

        if self.copy_feedback_job:
            self.after_cancel(self.copy_feedback_job)
            self._reset_copy_button(self._copied_btn)
        self._copied_btn = btn
        btn.configure(text="Copied!", fg_color=C["success"])
        self.copy_feedback_job = self.after(COPY_FEEDBACK_MS, lambda: self._reset_copy_button(btn))

    def _reset_copy_button(self, btn: ctk.CTkButton):
        self.copy_feedback_job = None
        # The card may have been rebuilt or deleted in the meantime
        if btn.winfo_exists():
            btn.configure(text="Copy", fg_color=get_colors()["copy_btn"])

    # ------------------------------------------------------------------
    # Session Operations
    # ------------------------------------------------------------------

    def _save_generated(self, label: str, password: str):
        self.store.append(label, password)
        self._refresh_entries()

    def _delete_entry(self, entry: PasswordEntry):
        self.store.remove(entry.id)
        self._refresh_entries()

    # ------------------------------------------------------------------
    # Theme Toggle
    # ------------------------------------------------------------------

    def _toggle_theme(self):
        new_mode = toggle_mode()
        ctk.set_appearance_mode(new_mode)
        if self.on_theme_change:
            # Rebuild after this click handler returns
            self.winfo_toplevel().after_idle(self.on_theme_change)

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def teardown(self):
        """Cancel this view's timers and release its shortcuts. The clipboard is left alone."""
        if self.copy_feedback_job:
            self.after_cancel(self.copy_feedback_job)
            self.copy_feedback_job = None

        top = self.winfo_toplevel()
        for shortcut in SHORTCUTS:
            top.unbind(shortcut)
