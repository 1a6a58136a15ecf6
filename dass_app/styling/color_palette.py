"""Color palette for the DASS-21 client supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


@dataclass(frozen=True)
class BadgeColors:
    """Background/foreground pair for a severity badge."""
    background: ThemeColors
    foreground: ThemeColors


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1F2937",      # Slate 800
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B7280",      # Gray 500
        dark="#AAAAAA"        # Light Gray
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F3F4F6",      # Gray 100
        dark="#2D2D2D"        # Slightly lighter dark
    )

    # Accent colors
    ACCENT_PRIMARY = ThemeColors(
        light="#4F46E5",      # Indigo
        dark="#818CF8"        # Lighter Indigo
    )

    # Status colors
    ERROR = ThemeColors(
        light="#DC2626",      # Red
        dark="#FF6B6B"        # Light Red
    )

    ERROR_BACKGROUND = ThemeColors(
        light="#FEF2F2",
        dark="#3B1D1D"
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray
        dark="#555555"        # Dark Gray
    )

    BORDER_SELECTED = ThemeColors(
        light="#6366F1",      # Indigo 500
        dark="#A5B4FC"        # Indigo 300
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#4F46E5",      # Indigo
        dark="#818CF8"        # Lighter Indigo
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F9FAFB",
        dark="#3A3A3A"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E5E7EB",
        dark="#505050"
    )

    # Subscale progress bars
    BAR_TRACK = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    BAR_DEPRESSION = ThemeColors(light="#6366F1", dark="#818CF8")   # Indigo
    BAR_ANXIETY = ThemeColors(light="#14B8A6", dark="#2DD4BF")      # Teal
    BAR_STRESS = ThemeColors(light="#F59E0B", dark="#FBBF24")       # Amber

    # Severity badges
    SEVERITY_NORMAL = BadgeColors(
        background=ThemeColors(light="#D1FAE5", dark="#064E3B"),    # Emerald
        foreground=ThemeColors(light="#047857", dark="#A7F3D0"),
    )
    SEVERITY_MILD = BadgeColors(
        background=ThemeColors(light="#FEF9C3", dark="#713F12"),    # Yellow
        foreground=ThemeColors(light="#A16207", dark="#FEF08A"),
    )
    SEVERITY_MODERATE = BadgeColors(
        background=ThemeColors(light="#FFEDD5", dark="#7C2D12"),    # Orange
        foreground=ThemeColors(light="#C2410C", dark="#FED7AA"),
    )
    SEVERITY_SEVERE = BadgeColors(
        background=ThemeColors(light="#FEE2E2", dark="#7F1D1D"),    # Red
        foreground=ThemeColors(light="#B91C1C", dark="#FECACA"),
    )
    SEVERITY_EXTREMELY_SEVERE = BadgeColors(
        background=ThemeColors(light="#FFE4E6", dark="#881337"),    # Rose
        foreground=ThemeColors(light="#BE123C", dark="#FECDD3"),
    )
    SEVERITY_UNKNOWN = BadgeColors(
        background=ThemeColors(light="#F3F4F6", dark="#3A3A3A"),    # Neutral gray
        foreground=ThemeColors(light="#374151", dark="#E5E7EB"),
    )
