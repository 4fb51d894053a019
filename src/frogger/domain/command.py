from enum import Enum


class Command(Enum):
    NONE = "none"  # ignored key, non-key event or failed read
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
