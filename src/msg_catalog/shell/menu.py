"""Interactive text menu driving the message catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..catalog import MessageCatalog, parse_keywords
from ..core.config import ShellSettings
from ..core.errors import CatalogError
from ..core.models import File, MessageKind, Priority, ReactionType, require_text
from ..messages import BoardMessage, EmailMessage, Message
from .prompts import EndOfInput, Prompter, Reader, Writer

LOGGER = logging.getLogger(__name__)

MAIN_MENU = """####  MESSAGES SYSTEM MENU  ####
(1) Add new message.
(2) Delete a message.
(3) Print all messages.
(4) Search messages by words.
(5) Print all digital messages.
(6) Print all message previews.
(7) Exit."""

ADD_MENU = """####  ADD NEW MESSAGE  ####
(1) Board Message.
(2) Email Message.
(3) Reaction."""

EXIT_CHOICE = 7

_PRIORITIES = {1: Priority.URGENT, 2: Priority.REGULAR, 3: Priority.SPECIAL}
_REACTIONS = {
    1: ReactionType.LIKE,
    2: ReactionType.DISLIKE,
    3: ReactionType.LAUGH,
    4: ReactionType.LOVE,
}


def _render(message: Message) -> str:
    return f"Message Type: {message.message_type}\n{message}"


class MenuShell:
    """Menu loop that turns typed answers into catalog operations.

    The shell holds no state besides the catalog it drives. Domain errors are
    reported to the user and the offending step is asked again.
    """

    def __init__(
        self,
        catalog: MessageCatalog,
        settings: ShellSettings | None = None,
        *,
        reader: Reader = input,
        writer: Writer = print,
    ) -> None:
        self._catalog = catalog
        self._settings = settings or ShellSettings()
        self._prompt = Prompter(reader, writer)

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        try:
            while True:
                self._prompt.say(MAIN_MENU)
                choice = self._prompt.ask_choice(
                    "Please enter your choice: ", 1, EXIT_CHOICE
                )
                if choice == EXIT_CHOICE:
                    self._prompt.say("Exiting program...")
                    return
                self.dispatch(choice)
        except EndOfInput:
            LOGGER.debug("Input exhausted; leaving menu loop")

    def dispatch(self, choice: int) -> None:
        """Run the menu action numbered ``choice``."""
        actions = {
            1: self.add_message,
            2: self.delete_message,
            3: self.print_all,
            4: self.search,
            5: self.print_digital,
            6: self.print_previews,
        }
        actions[choice]()

    # Adding ------------------------------------------------------------------
    def add_message(self) -> None:
        self._prompt.say(ADD_MENU)
        choice = self._prompt.ask_choice("Please enter your choice: ", 1, 3)
        if choice == 1:
            self._catalog.add(self.add_board_message())
        elif choice == 2:
            self._catalog.add(self.add_email_message())
        else:
            self.add_reaction_message()

    def _ask_message_data(self) -> tuple[str, str]:
        self._prompt.say("#### GET MESSAGE DATA ####")
        sender = self._prompt.ask_text("Please enter the sender name: ", "Sender name")
        content = self._prompt.ask_text(
            "Please enter the message content: ", "Message content"
        )
        return sender, content

    def add_board_message(self) -> BoardMessage:
        self._prompt.say("####  ADD BOARD MESSAGE  ####")
        sender, content = self._ask_message_data()
        choice = self._prompt.ask_choice(
            "Priority:\n(1) Urgent\n(2) Regular\n(3) Special\n"
            "Please enter the priority: ",
            1,
            3,
        )
        return self._catalog.build_board(sender, content, _PRIORITIES[choice])

    def add_email_message(self) -> EmailMessage:
        self._prompt.say("####  ADD EMAIL MESSAGE  ####")
        sender, content = self._ask_message_data()
        while True:
            try:
                subject = require_text(
                    self._prompt.ask("Please enter a subject: "), "Subject"
                )
                break
            except CatalogError as exc:
                self._prompt.say(f"{exc}\nPlease try again!")

        attachments: list[File] = []
        wants_files = self._prompt.ask_choice(
            "Would you like to add attachments?:\n(1) Yes\n(2) No\n"
            "Please enter your choice: ",
            1,
            2,
        )
        if wants_files == 1:
            count = self._prompt.ask_choice(
                "How many attachments? ", 1, self._settings.max_attachments
            )
            attachments = [self._ask_file() for _ in range(count)]
        return self._catalog.build_email(sender, content, subject, attachments)

    def _ask_file(self) -> File:
        self._prompt.say("#### ADD FILE TO EMAIL ####")
        while True:
            name = self._prompt.ask("Enter File name: ")
            file_type = self._prompt.ask("Enter File Type: ")
            try:
                return File(name, file_type)
            except CatalogError as exc:
                self._prompt.say(f"{exc}\nPlease try again!")

    def add_reaction_message(self) -> None:
        self._prompt.say("#### ADD REACTION MESSAGE ####")
        if not self._catalog.boards():
            self._prompt.say("There are no board messages to react on.")
            return
        self.print_boards()
        board_id = self._ask_board_id()
        sender, content = self._ask_message_data()
        choice = self._prompt.ask_choice(
            "Enter reaction type (1: LIKE, 2: DISLIKE, 3: LAUGH, 4: LOVE): ", 1, 4
        )
        try:
            reaction = self._catalog.build_reaction(sender, content, _REACTIONS[choice])
            self._catalog.attach_reaction(board_id, reaction)
        except CatalogError as exc:
            self._prompt.say(f"{exc}\nPlease try again!")
            return
        self._prompt.say("Reaction added successfully.")

    def _ask_board_id(self) -> int:
        known = {board.id for board in self._catalog.boards()}
        while True:
            raw = self._prompt.ask(
                "Please enter the message Id you want to react on (or 'L' to list again): "
            ).strip()
            if raw.upper() == "L":
                self.print_boards()
                continue
            try:
                board_id = int(raw)
            except ValueError:
                self._prompt.say("Invalid input! Please enter a numeric Id.")
                continue
            if board_id in known:
                return board_id
            self._prompt.say(
                f"No board message found with Id {board_id}. Please try again."
            )

    # Deleting ----------------------------------------------------------------
    def delete_message(self) -> None:
        self._prompt.say("#### DELETE MESSAGE ####")
        if not self._catalog:
            self._prompt.say("No messages to delete.")
            return
        self.print_all()
        while True:
            message_id = self._prompt.ask_int(
                "Please enter the message Id you want to delete: "
            )
            if message_id is None:
                self._prompt.say("Invalid input! Please enter a valid numeric Id.")
            elif self._catalog.delete(message_id):
                self._prompt.say("Message deleted successfully.")
                return
            else:
                self._prompt.say("Invalid message Id. Please try again.")

    # Reporting ---------------------------------------------------------------
    def _print_messages(self, header: str, messages: Iterable[Message]) -> None:
        self._prompt.say(header)
        if not self._catalog:
            self._prompt.say("No messages to display.")
            return
        for message in messages:
            self._prompt.say(_render(message))

    def print_all(self) -> None:
        self._print_messages("#### PRINT ALL MESSAGES ####", self._catalog.all())

    def print_boards(self) -> None:
        self._print_messages(
            "#### PRINT BOARD MESSAGES ####", self._catalog.filter(MessageKind.BOARD)
        )

    def print_digital(self) -> None:
        self._print_messages(
            "#### PRINT DIGITAL MESSAGES ####",
            self._catalog.filter(MessageKind.DIGITAL),
        )

    def print_previews(self) -> None:
        self._prompt.say("#### PRINT PREVIEWS ####")
        if not self._catalog:
            self._prompt.say("No messages to display.")
            return
        for preview in self._catalog.previews():
            self._prompt.say(preview)

    def search(self) -> None:
        self._prompt.say("#### SEARCH MESSAGES BY WORDS ####")
        separator = self._settings.keyword_separator
        line = self._prompt.ask(f"Enter word(s) separated by '{separator}': ")
        words = parse_keywords(line, separator)
        if not words:
            self._prompt.say("No valid words provided.")
            return
        result = self._catalog.search(words)
        self._prompt.say(
            f"Number of messages containing any of [{', '.join(words)}]: {result.count}"
        )


__all__ = ["MenuShell"]
