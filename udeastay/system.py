"""The booking system: loaded data and user authentication."""

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO

from .lodging import Lodging
from .people import Guest, Host
from .reservation import Reservation
from .storage import (
    data_file,
    load_guests,
    load_hosts,
    load_lodgings,
    load_reservations,
)

HOST_ROLE = "Anfitrion"
GUEST_ROLE = "Huesped"


@dataclass
class System:
    """Holds every loaded record; systems compare equal by document."""

    document: str = ""
    hosts: List[Host] = field(default_factory=list, compare=False)
    guests: List[Guest] = field(default_factory=list, compare=False)
    lodgings: List[Lodging] = field(default_factory=list, compare=False)
    reservations: List[Reservation] = field(default_factory=list, compare=False)

    def load_data(self, directory=".", out: Optional[TextIO] = None) -> None:
        """Load the four data files found in ``directory``."""
        self.hosts = load_hosts(data_file(directory, "Anfitriones.txt"), out)
        self.guests = load_guests(data_file(directory, "Huespedes.txt"), out)
        self.lodgings = load_lodgings(data_file(directory, "Alojamientos.txt"), out)
        self.reservations = load_reservations(
            data_file(directory, "Reservaciones.txt"), out
        )

    def authenticate(self, document: str, password: str) -> Optional[str]:
        """Return the role of the matching user, hosts first, or None."""
        if any(h.document == document and h.password == password for h in self.hosts):
            return HOST_ROLE
        if any(g.document == document and g.password == password for g in self.guests):
            return GUEST_ROLE
        return None

    def clear(self) -> None:
        """Drop every loaded record."""
        self.hosts = []
        self.guests = []
        self.lodgings = []
        self.reservations = []


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Load the data files and ask for a user's credentials."""
    parser = argparse.ArgumentParser(prog="udeastay", description="Authenticate a user.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)

    system = System()
    system.load_data(args.data_dir)

    tokens = _tokens(sys.stdin)
    print("Sistema de Autenticacion")
    print("Usuario: ", end="", flush=True)
    document = next(tokens, "")
    print("Clave: ", end="", flush=True)
    secret = next(tokens, "")

    role = system.authenticate(document, secret)
    if role is not None:
        print(f"\nBienvenido {role}!")
    else:
        print("\nCredenciales incorrectas")
    return 0


if __name__ == "__main__":
    sys.exit(main())