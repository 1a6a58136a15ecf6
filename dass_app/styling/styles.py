"""Centralized styles and font definitions for the application."""

from .color_palette import BadgeColors, ColorPalette, Theme, ThemeColors

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 10) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}pt;
            }}
            QScrollArea, QScrollArea > QWidget > QWidget {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QPushButton#primaryButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton#primaryButton:disabled {{
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QLineEdit:focus {{
                border: 1px solid {ColorPalette.BORDER_SELECTED.get(theme)};
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
            QRadioButton:checked {{
                color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                font-weight: bold;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-size: 9pt;"

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"color: {ColorPalette.ERROR.get(theme)};"
            f" background-color: {ColorPalette.ERROR_BACKGROUND.get(theme)};"
            f" border: 1px solid {ColorPalette.ERROR.get(theme)};"
            " border-radius: 4px; padding: 8px;"
        )

    @staticmethod
    def get_badge_style(badge: BadgeColors, theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {badge.background.get(theme)};"
            f" color: {badge.foreground.get(theme)};"
            " border-radius: 4px; padding: 2px 8px; font-weight: 600;"
        )

    @staticmethod
    def get_progress_bar_style(bar_color: ThemeColors, theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QProgressBar {{
                background-color: {ColorPalette.BAR_TRACK.get(theme)};
                border: none;
                border-radius: 4px;
                max-height: 12px;
            }}
            QProgressBar::chunk {{
                background-color: {bar_color.get(theme)};
                border-radius: 4px;
            }}
        """
