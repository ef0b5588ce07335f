"""Reservations of lodgings made by guests."""

from dataclasses import dataclass

MAX_NOTE_LENGTH = 1000


@dataclass
class Reservation:
    """A booking of a lodging; its note is cut to ``MAX_NOTE_LENGTH`` characters."""

    code: str = ""
    entry_date: str = ""
    duration: int = 0
    lodging_code: str = ""
    guest_document: str = ""
    payment_method: str = " "
    payment_date: str = ""
    amount: float = 0.0
    note: str = ""

    def __setattr__(self, name, value):
        if name == "note":
            value = value.split("\0", 1)[0][:MAX_NOTE_LENGTH]
        super().__setattr__(name, value)