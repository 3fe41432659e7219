"""KeyboardBuilder port -- abstracts reply & inline keyboard markup construction."""

from typing import Any, Dict, Protocol, runtime_checkable

from ..grid import ButtonGrid


@runtime_checkable
class KeyboardBuilder(Protocol):
    """Turns button grids into markup objects for the messaging platform."""

    def build_inline_keyboard(self, keyboard: ButtonGrid[Dict[str, Any]]) -> Any:
        """Build inline keyboard markup from a grid of inline button dicts."""
        ...

    def build_reply_keyboard(self, keyboard: ButtonGrid[Dict[str, Any]]) -> Any:
        """Build reply keyboard markup from a grid of keyboard button dicts."""
        ...
