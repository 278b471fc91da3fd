"""Contacts, their edits and the address book that holds them."""

from .model import PREDICATE_SHOW_ALL_PERSONS, AddressBook, Index, PersonNotFoundError
from .person import EditPersonDescriptor, Person
from .storage import load_address_book, save_address_book

__all__ = [
    "PREDICATE_SHOW_ALL_PERSONS",
    "AddressBook",
    "EditPersonDescriptor",
    "Index",
    "Person",
    "PersonNotFoundError",
    "load_address_book",
    "save_address_book",
]
