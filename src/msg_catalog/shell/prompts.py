"""Line-oriented prompting helpers for the text menu."""

from __future__ import annotations

from collections.abc import Callable

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class EndOfInput(Exception):
    """Raised when the input stream is exhausted mid-session."""


class Prompter:
    """Read answers through ``reader`` and report problems through ``writer``."""

    def __init__(self, reader: Reader, writer: Writer) -> None:
        self._reader = reader
        self._writer = writer

    def say(self, text: str) -> None:
        self._writer(text)

    def ask(self, prompt: str) -> str:
        """Return the raw answer to ``prompt``."""
        try:
            return self._reader(prompt)
        except EOFError as exc:
            raise EndOfInput from exc

    def ask_int(self, prompt: str) -> int | None:
        """Return the answer parsed as an integer, or ``None`` if it is not one."""
        raw = self.ask(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def ask_choice(self, prompt: str, low: int, high: int) -> int:
        """Keep asking until the answer is an integer between ``low`` and ``high``."""
        while True:
            choice = self.ask_int(prompt)
            if choice is None:
                self.say(f"Invalid input! Please enter a number between {low}-{high}.")
            elif not low <= choice <= high:
                self.say(f"Choice must be between {low}-{high}!")
            else:
                return choice

    def ask_text(self, prompt: str, field_name: str) -> str:
        """Keep asking until the answer is not blank; return it trimmed."""
        while True:
            answer = self.ask(prompt)
            if answer.strip():
                return answer.strip()
            self.say(f"{field_name} cannot be blank!\nPlease try again!")


__all__ = ["EndOfInput", "Prompter", "Reader", "Writer"]
