"""Sky/slate theme constants for the Dash app."""

# Slate neutrals
WHITE = "#FFFFFF"
GRID = "#EEF2F6"       # axis grid
AXIS_LINE = "#E2E8F0"  # axis lines / borders
SLATE_400 = "#94A3B8"  # muted text, modebar
SLATE_500 = "#64748B"  # tick labels
SLATE_700 = "#334155"  # body text

# Accents
SKY = "#0EA5E9"

FONT_STACK = '"Inter", "Helvetica Neue", Arial, sans-serif'

PLOT_HEIGHT = 500
CONTENT_WIDTH = "1152px"
