class QuitRequested(Exception):
    """Raised by the domain when the player asks to leave the game."""
