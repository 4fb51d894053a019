class TerminalError(Exception):
    """Raised by a display surface when a terminal command fails."""
