"""
dialogs.py - Small modal dialogs shared by the generator and the saved list.
"""

import customtkinter as ctk

from gui.theme import get_colors


class NoticeDialog(ctk.CTkToplevel):
    """
    Modal message with a single OK button.

    Used for the blocking "select at least one character type" error and
    for the non-fatal clipboard advisory.
    """

    def __init__(self, parent, title: str, message: str, level: str = "error"):
        super().__init__(parent)
        C = get_colors()

        self.title(title)
        self.geometry("380x190")
        self.configure(fg_color=C["bg_primary"])
        self.resizable(False, False)
        self.transient(parent)
        self.grab_set()

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=24, pady=20)

        ctk.CTkLabel(
            container, text=title,
            font=ctk.CTkFont(size=16, weight="bold"),
            text_color=C.get(level, C["text_primary"]),
        ).pack(pady=(0, 8))

        ctk.CTkLabel(
            container, text=message,
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"], justify="center",
            wraplength=320,
        ).pack(pady=(0, 16))

        ctk.CTkButton(
            container, text="OK", font=ctk.CTkFont(size=13, weight="bold"),
            height=38, fg_color=C["accent"],
            hover_color=C["accent_hover"],
            corner_radius=10,
            command=self.destroy,
        ).pack(fill="x")

        self.bind("<Return>", lambda e: self.destroy())
        self.bind("<Escape>", lambda e: self.destroy())
