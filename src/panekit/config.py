"""Global constants and default settings."""

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "panekit"

BACKGROUND = (18, 18, 24)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
