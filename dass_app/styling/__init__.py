"""Styling module for the DASS-21 client."""

from .color_palette import BadgeColors, ColorPalette, Theme, ThemeColors

__all__ = ["BadgeColors", "ColorPalette", "Theme", "ThemeColors"]
