"""Fluent builder for Telegram custom (reply) keyboards.

Buttons are plain dicts shaped like Bot API ``KeyboardButton`` objects, so the
finished grid can be sent as JSON directly or converted with
:mod:`tgkeyboard.bot.adapters.telegram_keyboards`.

    keyboard = Keyboard().text("A").text("B").row().text("C").resized()
    keyboard.build()  # [[{"text": "A"}, {"text": "B"}], [{"text": "C"}]]
"""

from typing import Any, Dict, Iterable, List, Optional

from ..domain.grid import ButtonGrid

KeyboardButtonData = Dict[str, Any]


class Keyboard(ButtonGrid[KeyboardButtonData]):
    """Reply keyboard builder with the Bot API keyboard options.

    Options left unset stay ``None`` and are omitted from the markup.
    A ``str`` cell in :meth:`from_` input becomes a text button.
    """

    def __init__(
        self, rows: Optional[Iterable[Iterable[KeyboardButtonData]]] = None
    ) -> None:
        super().__init__(rows)
        self.is_persistent: Optional[bool] = None
        self.selective: Optional[bool] = None
        self.one_time_keyboard: Optional[bool] = None
        self.resize_keyboard: Optional[bool] = None
        self.input_field_placeholder: Optional[str] = None

    @property
    def keyboard(self) -> List[List[KeyboardButtonData]]:
        return self.rows

    def _copy_options(self, clone: ButtonGrid[KeyboardButtonData]) -> None:
        clone.is_persistent = self.is_persistent
        clone.selective = self.selective
        clone.one_time_keyboard = self.one_time_keyboard
        clone.resize_keyboard = self.resize_keyboard
        clone.input_field_placeholder = self.input_field_placeholder

    @staticmethod
    def _to_button(cell: Any) -> Any:
        return Keyboard.text_button(cell) if isinstance(cell, str) else cell

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def persistent(self, is_enabled: bool = True) -> "Keyboard":
        """Keep the keyboard shown when the regular keyboard is hidden."""
        self.is_persistent = is_enabled
        return self

    def selected(self, is_enabled: bool = True) -> "Keyboard":
        """Show the keyboard only to users mentioned in the message."""
        self.selective = is_enabled
        return self

    def one_time(self, is_enabled: bool = True) -> "Keyboard":
        """Hide the keyboard after a button is pressed."""
        self.one_time_keyboard = is_enabled
        return self

    def resized(self, is_enabled: bool = True) -> "Keyboard":
        """Let clients shrink the keyboard to fit its buttons."""
        self.resize_keyboard = is_enabled
        return self

    def placeholder(self, value: str) -> "Keyboard":
        """Set the input field placeholder shown while the keyboard is active."""
        self.input_field_placeholder = value
        return self

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------

    def text(self, text: str) -> "Keyboard":
        return self.add(self.text_button(text))

    @staticmethod
    def text_button(text: str) -> KeyboardButtonData:
        """Button that sends its text as a message when pressed."""
        return {"text": text}

    def request_users(self, text: str, request_id: int, **options: Any) -> "Keyboard":
        return self.add(self.request_users_button(text, request_id, **options))

    @staticmethod
    def request_users_button(
        text: str, request_id: int, **options: Any
    ) -> KeyboardButtonData:
        """Button that opens a user picker and shares the chosen users.

        Extra keyword arguments (``user_is_bot``, ``max_quantity``, ...) are
        passed through into the ``request_users`` object.
        """
        return {"text": text, "request_users": {"request_id": request_id, **options}}

    def request_chat(
        self,
        text: str,
        request_id: int,
        chat_is_channel: bool = False,
        **options: Any,
    ) -> "Keyboard":
        return self.add(
            self.request_chat_button(text, request_id, chat_is_channel, **options)
        )

    @staticmethod
    def request_chat_button(
        text: str,
        request_id: int,
        chat_is_channel: bool = False,
        **options: Any,
    ) -> KeyboardButtonData:
        """Button that opens a chat picker and shares the chosen chat."""
        return {
            "text": text,
            "request_chat": {
                "request_id": request_id,
                "chat_is_channel": chat_is_channel,
                **options,
            },
        }

    def request_contact(self, text: str) -> "Keyboard":
        return self.add(self.request_contact_button(text))

    @staticmethod
    def request_contact_button(text: str) -> KeyboardButtonData:
        """Button that shares the user's phone number. Private chats only."""
        return {"text": text, "request_contact": True}

    def request_location(self, text: str) -> "Keyboard":
        return self.add(self.request_location_button(text))

    @staticmethod
    def request_location_button(text: str) -> KeyboardButtonData:
        """Button that shares the user's location. Private chats only."""
        return {"text": text, "request_location": True}

    def request_poll(self, text: str, poll_type: Optional[str] = None) -> "Keyboard":
        return self.add(self.request_poll_button(text, poll_type))

    @staticmethod
    def request_poll_button(
        text: str, poll_type: Optional[str] = None
    ) -> KeyboardButtonData:
        """Button that asks the user to create a poll.

        Args:
            text: Button label
            poll_type: ``"quiz"`` or ``"regular"``; any type when omitted
        """
        request_poll: Dict[str, Any] = {}
        if poll_type is not None:
            request_poll["type"] = poll_type
        return {"text": text, "request_poll": request_poll}

    def web_app(self, text: str, url: str) -> "Keyboard":
        return self.add(self.web_app_button(text, url))

    @staticmethod
    def web_app_button(text: str, url: str) -> KeyboardButtonData:
        """Button that launches a Web App at ``url``."""
        return {"text": text, "web_app": {"url": url}}
