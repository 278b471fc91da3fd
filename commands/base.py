"""Abstract base class and result types for address book commands."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from addressbook.model import AddressBook, Index
from addressbook.person import Person


MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "%d persons listed!"


class CommandError(Exception):
    """Raised when a command cannot be carried out; no state is changed."""


class InvalidIndexError(CommandError):
    """Raised when an index does not resolve within the displayed contacts."""

    def __init__(self, message: str = MESSAGE_INVALID_PERSON_DISPLAYED_INDEX) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a command runs."""

    feedback_to_user: str

    def __str__(self) -> str:
        return self.feedback_to_user


class Command(ABC):
    """Abstract base class for commands run against an address book.
    
    Extend this class to implement new commands; each one runs to
    completion before the next is accepted.
    """

    COMMAND_WORD = ""

    @abstractmethod
    def execute(self, model: AddressBook) -> CommandResult:
        """Run the command.

        Args:
            model: The address book to read from and update.

        Returns:
            The feedback for the user.

        Raises:
            CommandError: If the command cannot be carried out.
        """
        pass


def resolve_displayed_person(model: AddressBook, index: Index) -> Person:
    """Look up a contact by its position in the displayed list.

    Raises:
        InvalidIndexError: If the index is outside the displayed list.
    """
    displayed = model.get_filtered_person_list()
    if index.zero_based >= len(displayed):
        raise InvalidIndexError()
    return displayed[index.zero_based]
