"""
Styling constants and theme configuration for the simulator UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (axes, drawing surface)
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Dimmed text (axis labels, etc.)
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Chart grid lines
SCENE_GRID_COLOR = "#2A2A2A"  # Drawing surface grid

# Accent colors
ACCENT_BLUE = "#6FA8FF"       # Primary accent (buttons, speed readout)
ACCENT_RED = "#FF6B6B"        # Speed trace, Clear button
ACCENT_YELLOW = "#FFD93D"     # Reset button
ACCENT_GREEN = "#6BCB77"      # Start button

# Scene colors
PATH_COLOR = TEXT_COLOR
CAR_BODY_COLOR = ACCENT_RED
CAR_WHEEL_COLOR = "#000000"

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QTableWidget {{
        background-color: {BG_COLOR_LIGHT};
        color: {TEXT_COLOR};
        gridline-color: {BORDER_COLOR};
        border: 1px solid {BORDER_COLOR};
    }}
    QTableWidget::item {{
        padding: 4px;
    }}
    QHeaderView::section {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
        padding: 4px;
        border: 1px solid {BORDER_COLOR};
        font-weight: bold;
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
    QPushButton:disabled {{
        background-color: {BORDER_COLOR};
        color: {TEXT_COLOR_DIM};
    }}
"""

# =============================================================================
# Control Buttons
# =============================================================================

# Command name -> button color
BUTTON_COLORS = {
    "Start": ACCENT_GREEN,
    "Reset": ACCENT_YELLOW,
    "Clear": ACCENT_RED,
    "Accelerate": ACCENT_BLUE,
    "Brake": "#7A6FFF",
}

SPEED_READOUT_STYLE = f"font-size: 28pt; font-weight: bold; color: {ACCENT_BLUE};"
