"""Telegram keyboard adapters.

Converts the plain button dicts held by :class:`Keyboard` and
:class:`InlineKeyboard` into python-telegram-bot markup objects.
"""

import logging
from typing import Any, Dict, List, Optional

from telegram import (
    CallbackGame,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    KeyboardButtonPollType,
    KeyboardButtonRequestChat,
    KeyboardButtonRequestUsers,
    LoginUrl,
    ReplyKeyboardMarkup,
    SwitchInlineQueryChosenChat,
    WebAppInfo,
)

from ...core.config import get_settings
from ...domain.errors import InvalidButton
from ...domain.grid import ButtonGrid

logger = logging.getLogger(__name__)

ButtonData = Dict[str, Any]


def _non_empty_rows(keyboard: ButtonGrid[ButtonData]) -> List[List[ButtonData]]:
    # Telegram rejects markup with empty rows, e.g. from a trailing row()
    return [row for row in keyboard.build() if row]


def _button_text(button: ButtonData) -> str:
    if not isinstance(button, dict) or "text" not in button:
        raise InvalidButton(button)
    return button["text"]


def keyboard_button(button: ButtonData) -> KeyboardButton:
    """Convert one reply keyboard button dict to a KeyboardButton."""
    text = _button_text(button)
    kwargs: Dict[str, Any] = {}

    if button.get("request_contact"):
        kwargs["request_contact"] = True
    if button.get("request_location"):
        kwargs["request_location"] = True
    if "request_poll" in button:
        kwargs["request_poll"] = KeyboardButtonPollType(**button["request_poll"])
    if "web_app" in button:
        kwargs["web_app"] = WebAppInfo(**button["web_app"])
    if "request_users" in button:
        kwargs["request_users"] = KeyboardButtonRequestUsers(**button["request_users"])
    if "request_chat" in button:
        kwargs["request_chat"] = KeyboardButtonRequestChat(**button["request_chat"])

    return KeyboardButton(text=text, **kwargs)


def inline_keyboard_button(button: ButtonData) -> InlineKeyboardButton:
    """Convert one inline button dict to an InlineKeyboardButton."""
    text = _button_text(button)
    kwargs: Dict[str, Any] = {}

    for field in (
        "url",
        "callback_data",
        "switch_inline_query",
        "switch_inline_query_current_chat",
        "pay",
    ):
        if field in button:
            kwargs[field] = button[field]
    if "web_app" in button:
        kwargs["web_app"] = WebAppInfo(**button["web_app"])
    if "login_url" in button:
        kwargs["login_url"] = LoginUrl(**button["login_url"])
    if "switch_inline_query_chosen_chat" in button:
        kwargs["switch_inline_query_chosen_chat"] = SwitchInlineQueryChosenChat(
            **button["switch_inline_query_chosen_chat"]
        )
    if "callback_game" in button:
        kwargs["callback_game"] = CallbackGame()

    return InlineKeyboardButton(text=text, **kwargs)


def reply_keyboard_markup(keyboard: ButtonGrid[ButtonData]) -> ReplyKeyboardMarkup:
    """Convert a reply keyboard builder to ReplyKeyboardMarkup.

    Options the builder left unset (``None``) fall back to the configured
    ``keyboard_resize_default`` / ``keyboard_one_time_default``. The other
    options are simply omitted.

    Args:
        keyboard: A :class:`Keyboard`, or any grid of keyboard button dicts.

    Returns:
        ReplyKeyboardMarkup.
    """
    settings = get_settings()

    def option(name: str, default: Optional[Any] = None) -> Any:
        value = getattr(keyboard, name, None)
        return default if value is None else value

    tg_rows = [
        [keyboard_button(button) for button in row] for row in _non_empty_rows(keyboard)
    ]
    logger.debug("Building reply keyboard with %d rows", len(tg_rows))

    return ReplyKeyboardMarkup(
        tg_rows,
        resize_keyboard=option("resize_keyboard", settings.keyboard_resize_default),
        one_time_keyboard=option(
            "one_time_keyboard", settings.keyboard_one_time_default
        ),
        selective=option("selective"),
        input_field_placeholder=option("input_field_placeholder"),
        is_persistent=option("is_persistent"),
    )


def inline_keyboard_markup(keyboard: ButtonGrid[ButtonData]) -> InlineKeyboardMarkup:
    """Convert an inline keyboard builder to InlineKeyboardMarkup.

    Args:
        keyboard: An :class:`InlineKeyboard`, or any grid of inline button dicts.

    Returns:
        InlineKeyboardMarkup.
    """
    tg_rows = [
        [inline_keyboard_button(button) for button in row]
        for row in _non_empty_rows(keyboard)
    ]
    logger.debug("Building inline keyboard with %d rows", len(tg_rows))
    return InlineKeyboardMarkup(tg_rows)
