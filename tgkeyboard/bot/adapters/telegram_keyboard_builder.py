"""TelegramKeyboardBuilder -- implements KeyboardBuilder port for Telegram."""

from typing import Any, Dict

from telegram import InlineKeyboardMarkup, ReplyKeyboardMarkup

from ...domain.grid import ButtonGrid
from ...domain.ports.keyboard_builder import KeyboardBuilder
from .telegram_keyboards import inline_keyboard_markup, reply_keyboard_markup


class TelegramKeyboardBuilder(KeyboardBuilder):
    """Builds Telegram-specific keyboard markup from button grids."""

    def build_inline_keyboard(
        self, keyboard: ButtonGrid[Dict[str, Any]]
    ) -> InlineKeyboardMarkup:
        """Build an InlineKeyboardMarkup from a grid of inline button dicts."""
        return inline_keyboard_markup(keyboard)

    def build_reply_keyboard(
        self, keyboard: ButtonGrid[Dict[str, Any]]
    ) -> ReplyKeyboardMarkup:
        """Build a ReplyKeyboardMarkup from a grid of keyboard button dicts."""
        return reply_keyboard_markup(keyboard)
