"""
theme.py - Centralized theme system with dark/light mode support.

All colors live here so every widget stays visually consistent. The core
only hands out opaque StyleTag values; get_style_color() is where a tag
becomes an actual color.
"""

from core.strength import StyleTag


# Current mode: "dark" or "light"
_current_mode = "dark"

DARK = {
    # Backgrounds
    "bg_primary": "#0f1117",
    "bg_card": "#1c2333",
    "bg_input": "#232b3e",
    "bg_hover": "#2a3346",

    # Accent
    "accent": "#4f8ff7",
    "accent_hover": "#3a7ae0",

    # Status
    "success": "#3fb950",
    "error": "#f85149",
    "warning": "#d29922",

    # Text
    "text_primary": "#e6edf3",
    "text_secondary": "#8b949e",
    "text_muted": "#484f58",

    # Borders
    "border": "#30363d",
    "border_subtle": "#21262d",

    # Strength accents
    "strength_danger": "#f85149",
    "strength_warning": "#d29922",
    "strength_info": "#4f8ff7",
    "strength_success": "#3fb950",

    # Buttons
    "copy_btn": "#238636",
    "copy_btn_hover": "#2ea043",
    "delete_btn": "#da3633",
    "delete_btn_hover": "#f85149",
}

LIGHT = {
    # Backgrounds
    "bg_primary": "#ffffff",
    "bg_card": "#ffffff",
    "bg_input": "#f6f8fa",
    "bg_hover": "#eaeef2",

    # Accent
    "accent": "#0969da",
    "accent_hover": "#0550ae",

    # Status
    "success": "#1a7f37",
    "error": "#cf222e",
    "warning": "#9a6700",

    # Text
    "text_primary": "#1f2328",
    "text_secondary": "#656d76",
    "text_muted": "#8c959f",

    # Borders
    "border": "#d0d7de",
    "border_subtle": "#e1e4e8",

    # Strength accents
    "strength_danger": "#cf222e",
    "strength_warning": "#9a6700",
    "strength_info": "#0969da",
    "strength_success": "#1a7f37",

    # Buttons
    "copy_btn": "#1a7f37",
    "copy_btn_hover": "#116329",
    "delete_btn": "#cf222e",
    "delete_btn_hover": "#a40e26",
}


def get_colors() -> dict:
    """Get the current theme's color palette."""
    return DARK if _current_mode == "dark" else LIGHT


def get_mode() -> str:
    """Get the current theme mode."""
    return _current_mode


def set_mode(mode: str):
    """Set the theme mode ('dark' or 'light')."""
    global _current_mode
    if mode not in ("dark", "light"):
        raise ValueError(f"Unknown theme mode: {mode!r}")
    _current_mode = mode


def toggle_mode() -> str:
    """Toggle between dark and light mode. Returns the new mode."""
    global _current_mode
    _current_mode = "light" if _current_mode == "dark" else "dark"
    return _current_mode


def get_style_color(tag: StyleTag) -> str:
    """Get the accent color for a strength style tag."""
    colors = get_colors()
    return colors.get(f"strength_{tag.value}", colors["text_muted"])
