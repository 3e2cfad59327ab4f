"""Tests for the interactive text menu."""

from __future__ import annotations

from collections.abc import Iterable

from msg_catalog.catalog import MessageCatalog
from msg_catalog.core.config import ShellSettings
from msg_catalog.core.models import File, Priority, ReactionType
from msg_catalog.messages import BoardMessage, EmailMessage
from msg_catalog.shell import MenuShell


class ScriptedConsole:
    """Feed canned answers to the shell and record everything it prints."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


def _run(
    catalog: MessageCatalog, answers: Iterable[str], settings: ShellSettings | None = None
) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    MenuShell(catalog, settings, reader=console.read, writer=console.write).run()
    return console


def test_exit_choice_stops_the_loop(catalog: MessageCatalog) -> None:
    console = _run(catalog, ["7", "3"])

    assert console.lines[-1] == "Exiting program..."
    assert len(console.prompts) == 1


def test_invalid_menu_input_is_asked_again(catalog: MessageCatalog) -> None:
    console = _run(catalog, ["abc", "9", "7"])

    assert "Invalid input! Please enter a number between 1-7." in console.lines
    assert "Choice must be between 1-7!" in console.lines
    assert console.lines[-1] == "Exiting program..."


def test_end_of_input_leaves_quietly(catalog: MessageCatalog) -> None:
    console = _run(catalog, [])

    assert "Exiting program..." not in console.lines


def test_add_board_message_retries_blank_sender(catalog: MessageCatalog) -> None:
    _run(catalog, ["1", "1", "  ", "Alice", "Meeting at 10 AM", "5", "1", "7"])

    (board,) = catalog.all()
    assert isinstance(board, BoardMessage)
    assert board.sender == "Alice"
    assert board.priority is Priority.URGENT


def test_add_email_with_attachments(catalog: MessageCatalog) -> None:
    answers = [
        "1", "2",
        "Sam", "Look at this",
        " ", "Pictures",
        "1", "2",
        "", "jpg", "Image1", "jpg",
        "Notes", "txt",
        "7",
    ]
    console = _run(catalog, answers)

    (email,) = catalog.all()
    assert isinstance(email, EmailMessage)
    assert email.subject == "Pictures"
    assert email.attachments == [File("Image1", "jpg"), File("Notes", "txt")]
    assert "Subject cannot be null or blank\nPlease try again!" in console.lines
    assert "File name cannot be null or blank\nPlease try again!" in console.lines


def test_attachment_count_is_bounded_by_settings(catalog: MessageCatalog) -> None:
    answers = ["1", "2", "Sam", "Body", "Subject", "1", "3", "1", "a", "b", "7"]
    console = _run(catalog, answers, ShellSettings(max_attachments=2))

    assert "Choice must be between 1-2!" in console.lines
    (email,) = catalog.all()
    assert isinstance(email, EmailMessage)
    assert email.attachments == [File("a", "b")]


def test_add_reaction_without_boards(catalog: MessageCatalog) -> None:
    console = _run(catalog, ["1", "3", "7"])

    assert "There are no board messages to react on." in console.lines
    assert len(catalog) == 0


def test_add_reaction_attaches_to_chosen_board(catalog: MessageCatalog) -> None:
    board = catalog.add(catalog.build_board("Alice", "Meeting at 10 AM", Priority.URGENT))
    email = catalog.add(catalog.build_email("Sam", "Body", "Subject"))
    answers = [
        "1", "3",
        "x", str(email.id), "L", str(board.id),
        "Shay", "Count me in",
        "2",
        "7",
    ]
    console = _run(catalog, answers)

    assert isinstance(board, BoardMessage)
    (reaction,) = board.reactions
    assert reaction.reaction_type is ReactionType.DISLIKE
    assert reaction.content == "Count me in"
    assert len(catalog) == 2
    assert "Invalid input! Please enter a numeric Id." in console.lines
    assert f"No board message found with Id {email.id}. Please try again." in console.lines
    assert "Reaction added successfully." in console.lines


def test_delete_message_retries_unknown_id(catalog: MessageCatalog) -> None:
    board = catalog.add(catalog.build_board("Alice", "Meeting", Priority.URGENT))
    console = _run(catalog, ["2", "999", str(board.id), "7"])

    assert len(catalog) == 0
    assert "Invalid message Id. Please try again." in console.lines
    assert "Message deleted successfully." in console.lines


def test_delete_on_empty_catalog(catalog: MessageCatalog) -> None:
    console = _run(catalog, ["2", "7"])

    assert "No messages to delete." in console.lines


def test_search_reports_match_count(catalog: MessageCatalog) -> None:
    catalog.add(catalog.build_board("Alice", "Meeting at 10 AM", Priority.URGENT))
    catalog.add(catalog.build_board("Bob", "Weekly report", Priority.REGULAR))
    console = _run(catalog, ["4", "meeting, report ,", "4", " , ", "7"])

    assert "Number of messages containing any of [meeting, report]: 2" in console.lines
    assert "No valid words provided." in console.lines


def test_print_all_digital_and_previews(catalog: MessageCatalog) -> None:
    catalog.add(catalog.build_board("Alice", "Meeting at 10 AM", Priority.URGENT))
    email = catalog.add(catalog.build_email("Sam", "Body", "Amazing Picture"))
    console = _run(catalog, ["3", "5", "6", "7"])

    assert any(line.startswith("Message Type: Board\nPriority:URGENT") for line in console.lines)
    digital_start = console.lines.index("#### PRINT DIGITAL MESSAGES ####")
    assert console.lines[digital_start + 1] == f"Message Type: Email\n{email}"
    assert "[Board] Alice: Meeting at 10 A..." in console.lines
    assert "[Email] Subject: Amazing Picture | From: Sam" in console.lines


def test_reports_on_empty_catalog(catalog: MessageCatalog) -> None:
    console = _run(catalog, ["3", "6", "7"])

    assert console.lines.count("No messages to display.") == 2
