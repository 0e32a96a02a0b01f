"""
generator.py - Password generator panel.

Holds the option widgets (length slider, character type checkboxes, site
label), the Generate button and the strength meter for the last password.
The panel does not store anything itself: every successful generation is
handed to `on_generated(label, password)` and the owner decides what to do
with it.
"""

import logging
from dataclasses import dataclass
from typing import Callable

import customtkinter as ctk

from core.password_gen import InvalidOptions, generate_password
from core.strength import score
from gui.dialogs import NoticeDialog
from gui.theme import get_colors, get_style_color


logger = logging.getLogger(__name__)

# Length slider range (the generator itself accepts any length >= 1)
MIN_LENGTH = 4
MAX_LENGTH = 64
DEFAULT_LENGTH = 12

GENERATE_LABEL = "Generate password"
FEEDBACK_MS = 2000


@dataclass(frozen=True)
class GeneratorState:
    """Form contents carried over when the panel is rebuilt."""

    label: str = ""
    length: int = DEFAULT_LENGTH
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True
    last_password: str = ""


class GeneratorPanel(ctk.CTkFrame):
    """
    Options card plus Generate button.

    Args:
        parent: Parent widget
        on_generated: Called with (label, password) after each successful generation
    """

    def __init__(self, parent, on_generated: Callable[[str, str], None]):
        super().__init__(parent, fg_color="transparent")
        self.on_generated = on_generated
        self.generated_password = ""
        self._feedback_job = None
        self._strength_shown = False

        self._build_ui()

    def _build_ui(self):
        C = get_colors()

        # --- Options Card ---
        options_card = ctk.CTkFrame(
            self,
            fg_color=C["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=C["border"],
        )
        options_card.pack(fill="x", pady=(0, 16))

        inner = ctk.CTkFrame(options_card, fg_color="transparent")
        inner.pack(padx=16, pady=16, fill="x")

        # Site label
        ctk.CTkLabel(
            inner, text="Website",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"], anchor="w",
        ).pack(fill="x", pady=(0, 4))

        self.label_entry = ctk.CTkEntry(
            inner, placeholder_text="e.g. github.com",
            font=ctk.CTkFont(size=13), height=38,
            fg_color=C["bg_input"], border_color=C["border"],
            text_color=C["text_primary"], corner_radius=10,
        )
        self.label_entry.pack(fill="x", pady=(0, 14))

        # Length slider
        length_row = ctk.CTkFrame(inner, fg_color="transparent")
        length_row.pack(fill="x", pady=(0, 6))

        ctk.CTkLabel(
            length_row,
            text="Length",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"],
        ).pack(side="left")

        self.length_value_label = ctk.CTkLabel(
            length_row,
            text=str(DEFAULT_LENGTH),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=C["text_primary"],
        )
        self.length_value_label.pack(side="right")

        self.length_slider = ctk.CTkSlider(
            inner,
            from_=MIN_LENGTH,
            to=MAX_LENGTH,
            number_of_steps=MAX_LENGTH - MIN_LENGTH,
            fg_color=C["border"],
            progress_color=C["accent"],
            button_color=C["accent"],
            button_hover_color=C["accent_hover"],
            command=self._on_length_change,
        )
        self.length_slider.set(DEFAULT_LENGTH)
        self.length_slider.pack(fill="x", pady=(0, 12))

        # Checkboxes, all on by default
        self.use_upper = self._add_checkbox(inner, "Uppercase (A-Z)")
        self.use_lower = self._add_checkbox(inner, "Lowercase (a-z)")
        self.use_digits = self._add_checkbox(inner, "Digits (0-9)")
        self.use_symbols = self._add_checkbox(inner, "Symbols (!@#$%...)")

        # --- Generate Button ---
        self.generate_btn = ctk.CTkButton(
            self,
            text=GENERATE_LABEL,
            font=ctk.CTkFont(size=14, weight="bold"),
            height=44,
            fg_color=C["accent"],
            hover_color=C["accent_hover"],
            corner_radius=10,
            command=self.generate,
        )
        self.generate_btn.pack(fill="x", pady=(0, 12))

        # --- Output + Strength ---
        self.output_label = ctk.CTkLabel(
            self,
            text="Your password will appear here",
            font=ctk.CTkFont(family="Courier", size=14),
            text_color=C["text_muted"],
            wraplength=320,
        )
        self.output_label.pack(fill="x", pady=(0, 8))

        self.strength_bar = ctk.CTkProgressBar(
            self,
            height=6,
            corner_radius=3,
            fg_color=C["border"],
            progress_color=C["text_muted"],
        )
        self.strength_bar.set(0)

        self.strength_label = ctk.CTkLabel(
            self,
            text="",
            font=ctk.CTkFont(size=11),
            text_color=C["text_muted"],
            anchor="w",
        )

    def _add_checkbox(self, parent, text: str) -> ctk.CTkCheckBox:
        C = get_colors()
        box = ctk.CTkCheckBox(
            parent,
            text=text,
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"],
            fg_color=C["accent"],
            hover_color=C["accent_hover"],
        )
        box.select()
        box.pack(anchor="w", pady=2)
        return box

    # ------------------------------------------------------------------
    # Event Handlers
    # ------------------------------------------------------------------

    def _on_length_change(self, value):
        self.length_value_label.configure(text=str(round(value)))

    def clear_label(self):
        self.label_entry.delete(0, "end")

    def snapshot(self) -> GeneratorState:
        return GeneratorState(
            label=self.label_entry.get(),
            length=round(self.length_slider.get()),
            use_uppercase=bool(self.use_upper.get()),
            use_lowercase=bool(self.use_lower.get()),
            use_digits=bool(self.use_digits.get()),
            use_symbols=bool(self.use_symbols.get()),
            last_password=self.generated_password,
        )

    def restore(self, state: GeneratorState):
        self.clear_label()
        if state.label:
            self.label_entry.insert(0, state.label)

        self.length_slider.set(state.length)
        self._on_length_change(state.length)

        boxes = (
            (self.use_upper, state.use_uppercase),
            (self.use_lower, state.use_lowercase),
            (self.use_digits, state.use_digits),
            (self.use_symbols, state.use_symbols),
        )
        for box, on in boxes:
            if on:
                box.select()
            else:
                box.deselect()

        if state.last_password:
            self.generated_password = state.last_password
            self._show_strength(state.last_password)

    def generate(self, *args):
        """Generate with the current settings, show its strength and pass it on."""
        try:
            self.generated_password = generate_password(
                length=round(self.length_slider.get()),
                use_uppercase=bool(self.use_upper.get()),
                use_lowercase=bool(self.use_lower.get()),
                use_digits=bool(self.use_digits.get()),
                use_symbols=bool(self.use_symbols.get()),
            )
        except InvalidOptions as e:
            logger.info("Generation rejected: %s", e)
            NoticeDialog(self, "No character type", str(e))
            return

        self._show_strength(self.generated_password)
        self.on_generated(self.label_entry.get(), self.generated_password)
        self._flash_generate_button()

    def _show_strength(self, password: str):
        C = get_colors()
        result = score(password)
        color = get_style_color(result.style_tag)

        self.output_label.configure(text=password, text_color=C["text_primary"])

        if not self._strength_shown:
            self.strength_bar.pack(fill="x", pady=(0, 2))
            self.strength_label.pack(fill="x")
            self._strength_shown = True

        self.strength_bar.set(result.score / 100)
        self.strength_bar.configure(progress_color=color)
        self.strength_label.configure(
            text=f"Strength: {result.level.value} ({result.score}/100)",
            text_color=color,
        )

    def _flash_generate_button(self):
        C = get_colors()
        self.generate_btn.configure(text="Generated and saved!", fg_color=C["success"])

        if self._feedback_job:
            self.after_cancel(self._feedback_job)
        self._feedback_job = self.after(FEEDBACK_MS, self._reset_generate_button)

    def _reset_generate_button(self):
        C = get_colors()
        self._feedback_job = None
        self.generate_btn.configure(text=GENERATE_LABEL, fg_color=C["accent"])

    def destroy(self):
        if self._feedback_job:
            self.after_cancel(self._feedback_job)
            self._feedback_job = None
        super().destroy()
