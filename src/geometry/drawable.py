from typing import Protocol, runtime_checkable


@runtime_checkable
class Drawable(Protocol):
    """Anything exposing a no-argument ``draw()``.

    Structural: a type opts in just by defining ``draw``, no base class needed.
    """

    def draw(self) -> None: ...
