"""Lodgings offered by hosts, with their list of amenities."""

import string
from dataclasses import InitVar, dataclass, field
from enum import Enum

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class LodgingKind(str, Enum):
    """The kind of a lodging, stored as a single letter."""

    HOUSE = "C"
    APARTMENT = "A"


@dataclass
class Lodging:
    """A lodging with its location, price and amenities.

    ``amenities_text`` is a comma separated list that is parsed into
    ``amenities`` when the lodging is created.
    """

    code: str = ""
    name: str = ""
    host_document: str = ""
    department: str = ""
    municipality: str = ""
    kind: LodgingKind = LodgingKind.HOUSE
    address: str = ""
    price: float = 0.0
    amenities_text: InitVar[str] = ""
    amenities: list = field(default_factory=list, init=False)

    def __post_init__(self, amenities_text: str) -> None:
        try:
            self.kind = LodgingKind(self.kind)
        except ValueError:
            raise ValueError(
                "invalid lodging kind; use 'C' (house) or 'A' (apartment)"
            ) from None
        if self.price < 0:
            raise ValueError("price cannot be negative")
        self.parse_amenities(amenities_text)

    def add_amenity(self, amenity: str) -> None:
        """Append an amenity as given."""
        self.amenities.append(amenity)

    def amenity(self, index: int) -> str:
        """Return the amenity at ``index``; negative indices are rejected."""
        if not 0 <= index < len(self.amenities):
            raise IndexError("invalid amenity index")
        return self.amenities[index]

    def parse_amenities(self, text: str) -> None:
        """Add every non-empty, space-trimmed, lower-cased item of a comma list."""
        for item in text.split(","):
            item = item.strip(" ").translate(_ASCII_LOWER)
            if item:
                self.add_amenity(item)