"""Domain port protocols for decoupling keyboards from the messaging platform."""

from .keyboard_builder import KeyboardBuilder

__all__ = ["KeyboardBuilder"]
