"""Styling module for the WordExam windows."""

from .color_palette import ColorPalette
from .styles import Styles

__all__ = ["ColorPalette", "Styles"]
