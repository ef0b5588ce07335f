"""Hosts and guests, the two kinds of user accounts."""

from dataclasses import dataclass


def _check_profile(seniority: int, rating: float) -> None:
    if seniority < 0:
        raise ValueError("seniority cannot be negative")
    if not 0.0 <= rating <= 5.0:
        raise ValueError("rating must be between 0.0 and 5.0")


@dataclass(frozen=True)
class Host:
    """A host who offers lodgings."""

    code: str
    document: str
    password: str
    seniority: int
    rating: float

    def __post_init__(self) -> None:
        if not (self.code and self.document and self.password):
            raise ValueError("host data cannot be empty")
        _check_profile(self.seniority, self.rating)


@dataclass(frozen=True)
class Guest:
    """A guest who books lodgings."""

    document: str
    password: str
    seniority: int
    rating: float

    def __post_init__(self) -> None:
        if not (self.document and self.password):
            raise ValueError("guest data cannot be empty")
        _check_profile(self.seniority, self.rating)