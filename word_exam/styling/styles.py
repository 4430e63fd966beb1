"""Centralized styles and font definitions for the exam windows."""

from .color_palette import ColorPalette


class Styles:
    """Helper class to generate Qt stylesheets for the exam windows."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Microsoft YaHei', 'Segoe UI', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
            }}
            QPushButton:default {{
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG};
            }}
            QLineEdit {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 4px;
            }}
            QRadioButton {{
                font-size: 14pt;
                padding: 2px;
            }}
        """

    @staticmethod
    def get_heading_style() -> str:
        return "font-size: 18pt; font-weight: bold;"

    @staticmethod
    def get_question_style() -> str:
        return "font-size: 16pt;"

    @staticmethod
    def get_countdown_style() -> str:
        return f"font-size: 16pt; font-weight: bold; color: {ColorPalette.COUNTDOWN};"

    @staticmethod
    def get_floating_panel_style() -> str:
        return f"background-color: {ColorPalette.FLOATING_BACKGROUND};"

    @staticmethod
    def get_version_label_style() -> str:
        return "padding: 5px 10px 5px 5px;"
