"""Enums for Todoist MCP."""

from enum import Enum


class Color(str, Enum):
    """Named colours accepted by Todoist for projects and labels."""

    BERRY_RED = "berry_red"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    OLIVE_GREEN = "olive_green"
    LIME_GREEN = "lime_green"
    GREEN = "green"
    MINT_GREEN = "mint_green"
    TEAL = "teal"
    SKY_BLUE = "sky_blue"
    LIGHT_BLUE = "light_blue"
    BLUE = "blue"
    GRAPE = "grape"
    VIOLET = "violet"
    LAVENDER = "lavender"
    MAGENTA = "magenta"
    SALMON = "salmon"
    CHARCOAL = "charcoal"
    GREY = "grey"
    TAUPE = "taupe"


class DurationUnit(str, Enum):
    """Unit for a task duration amount."""

    MINUTE = "minute"
    DAY = "day"


class ViewStyle(str, Enum):
    """Project layout."""

    LIST = "list"
    BOARD = "board"


class Priority(int, Enum):
    """Task priority levels (API values, 4 is the most urgent)."""

    NORMAL = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4
