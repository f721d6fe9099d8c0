from enum import Enum, auto


class Color(Enum):
    """Closed set of basic colors. Carries no RGB payload."""

    RED = auto()
    GREEN = auto()
    BLUE = auto()
