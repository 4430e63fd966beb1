"""Color palette for the exam windows."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the exam windows."""

    TEXT_PRIMARY = "#000000"          # Black
    BACKGROUND_PRIMARY = "#FFFFFF"    # White
    BORDER_PRIMARY = "#D1D1D1"        # Gray

    # Countdown label
    COUNTDOWN = "#D13438"             # Red

    BUTTON_PRIMARY_BG = "#0078D4"     # Blue
    BUTTON_SECONDARY_BG = "#F5F5F5"   # WhiteSmoke
    BUTTON_HOVER_BG = "#E8E8E8"       # Light Gray

    # Missed-word animation backdrop
    FLOATING_BACKGROUND = "#000000"
