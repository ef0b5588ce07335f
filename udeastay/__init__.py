"""Lodging booking records: hosts, guests, lodgings and reservations."""

__version__ = "0.1.0"

__all__ = ["lodging", "people", "reservation", "storage", "system"]