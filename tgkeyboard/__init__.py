"""Telegram keyboard builders backed by a reshapeable button grid."""

from .bot.inline_keyboard import InlineKeyboard
from .bot.keyboard import Keyboard
from .domain.grid import ButtonGrid, reflow, transpose

__version__ = "0.1.0"

__all__ = ["ButtonGrid", "InlineKeyboard", "Keyboard", "reflow", "transpose"]
