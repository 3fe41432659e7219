"""Fluent builder for Telegram inline keyboards.

Buttons are plain dicts shaped like Bot API ``InlineKeyboardButton`` objects.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from ..domain.grid import ButtonGrid

InlineButtonData = Dict[str, Any]


class InlineKeyboard(ButtonGrid[InlineButtonData]):
    """Inline keyboard builder.

    Inline keyboards have no options, and :meth:`from_` copies cells as-is.

        keyboard = (
            InlineKeyboard()
            .text("Yes", "answer:yes").text("No", "answer:no")
            .row()
            .url("Docs", "https://core.telegram.org/bots")
        )
    """

    def __init__(
        self, rows: Optional[Iterable[Iterable[InlineButtonData]]] = None
    ) -> None:
        super().__init__(rows)

    @property
    def inline_keyboard(self) -> List[List[InlineButtonData]]:
        return self.rows

    def url(self, text: str, url: str) -> "InlineKeyboard":
        return self.add(self.url_button(text, url))

    @staticmethod
    def url_button(text: str, url: str) -> InlineButtonData:
        """Button that opens ``url``."""
        return {"text": text, "url": url}

    def text(self, text: str, data: Optional[str] = None) -> "InlineKeyboard":
        return self.add(self.text_button(text, data))

    @staticmethod
    def text_button(text: str, data: Optional[str] = None) -> InlineButtonData:
        """Callback button. ``data`` defaults to the button text."""
        return {"text": text, "callback_data": text if data is None else data}

    def web_app(self, text: str, url: str) -> "InlineKeyboard":
        return self.add(self.web_app_button(text, url))

    @staticmethod
    def web_app_button(text: str, url: str) -> InlineButtonData:
        """Button that launches a Web App. Private chats only."""
        return {"text": text, "web_app": {"url": url}}

    def login(
        self, text: str, login_url: Union[str, Dict[str, Any]]
    ) -> "InlineKeyboard":
        return self.add(self.login_button(text, login_url))

    @staticmethod
    def login_button(
        text: str, login_url: Union[str, Dict[str, Any]]
    ) -> InlineButtonData:
        """Button that authorizes the user through Telegram Login.

        Args:
            text: Button label
            login_url: Either the URL itself or a full ``LoginUrl`` dict
        """
        if isinstance(login_url, str):
            login_url = {"url": login_url}
        return {"text": text, "login_url": login_url}

    def switch_inline(self, text: str, query: str = "") -> "InlineKeyboard":
        return self.add(self.switch_inline_button(text, query))

    @staticmethod
    def switch_inline_button(text: str, query: str = "") -> InlineButtonData:
        """Button that lets the user pick a chat and starts an inline query."""
        return {"text": text, "switch_inline_query": query}

    def switch_inline_current(self, text: str, query: str = "") -> "InlineKeyboard":
        return self.add(self.switch_inline_current_button(text, query))

    @staticmethod
    def switch_inline_current_button(text: str, query: str = "") -> InlineButtonData:
        """Button that starts an inline query in the current chat."""
        return {"text": text, "switch_inline_query_current_chat": query}

    def switch_inline_chosen(
        self, text: str, query: Optional[Dict[str, Any]] = None
    ) -> "InlineKeyboard":
        return self.add(self.switch_inline_chosen_button(text, query))

    @staticmethod
    def switch_inline_chosen_button(
        text: str, query: Optional[Dict[str, Any]] = None
    ) -> InlineButtonData:
        """Button that starts an inline query in a chat of the given kinds.

        ``query`` is a ``SwitchInlineQueryChosenChat`` dict such as
        ``{"query": "x", "allow_user_chats": True}``.
        """
        return {"text": text, "switch_inline_query_chosen_chat": dict(query or {})}

    def game(self, text: str) -> "InlineKeyboard":
        return self.add(self.game_button(text))

    @staticmethod
    def game_button(text: str) -> InlineButtonData:
        # Must be the first button in the first row
        return {"text": text, "callback_game": {}}

    def pay(self, text: str) -> "InlineKeyboard":
        return self.add(self.pay_button(text))

    @staticmethod
    def pay_button(text: str) -> InlineButtonData:
        # Must be the first button in the first row
        return {"text": text, "pay": True}
