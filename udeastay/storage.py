"""Loading of hosts, guests, lodgings and reservations from pipe separated files."""

import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .lodging import Lodging
from .people import Guest, Host
from .reservation import Reservation

_SEPARATOR = "-" * 34
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_PAYMENT_METHODS = ("TC", "PSE")


def _read_lines(path) -> List[str]:
    """Return the lines of a file without their newline characters."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        lines = handle.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def count_lines(path) -> int:
    """Return the number of lines in ``path``, or 0 if it cannot be opened."""
    try:
        return len(_read_lines(path))
    except OSError:
        return 0


def _fields(line: str, count: int) -> List[str]:
    parts = line.split("|", count - 1)
    return parts + [""] * (count - len(parts))


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def _records(path) -> List[str]:
    if count_lines(path) == 0:
        return []
    return _read_lines(path)


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def load_hosts(path="Anfitriones.txt", out: Optional[TextIO] = None) -> List[Host]:
    """Load hosts from ``code|document|password|seniority|rating`` lines."""
    lines = _records(path)
    if not lines:
        return []
    out = _stream(out)
    print("=== DATOS DE ANFITRIONES CARGADOS ===", file=out)
    hosts = []
    for number, line in enumerate(lines, start=1):
        code, document, secret, seniority_text, rating_text = _fields(line, 5)
        seniority = _parse_int(seniority_text)
        rating = _parse_float(rating_text)
        hosts.append(Host(code, document, secret, seniority, rating))
        print(f"Anfitrion #{number}:", file=out)
        print(f"  - Codigo: {code}", file=out)
        print(f"  - Documento: {document}", file=out)
        print(f"  - Clave: {secret}", file=out)
        print(f"  - Antiguedad: {seniority}", file=out)
        print(f"  - Puntuacion: {rating:g}", file=out)
        print(_SEPARATOR, file=out)
    return hosts


def load_guests(path="Huespedes.txt", out: Optional[TextIO] = None) -> List[Guest]:
    """Load guests from ``document|password|seniority|rating`` lines."""
    lines = _records(path)
    if not lines:
        return []
    out = _stream(out)
    print("=== DATOS DE HUESPEDES CARGADOS ===", file=out)
    guests = []
    for number, line in enumerate(lines, start=1):
        document, secret, seniority_text, rating_text = _fields(line, 4)
        seniority = _parse_int(seniority_text)
        rating = _parse_float(rating_text)
        guests.append(Guest(document, secret, seniority, rating))
        print(f"Huesped #{number}:", file=out)
        print(f"  - Documento: {document}", file=out)
        print(f"  - Clave: {secret}", file=out)
        print(f"  - Antiguedad: {seniority}", file=out)
        print(f"  - Puntuacion: {rating:g}", file=out)
        print(_SEPARATOR, file=out)
    return guests


def load_lodgings(path="Alojamientos.txt", out: Optional[TextIO] = None) -> List[Lodging]:
    """Load lodgings from nine pipe separated fields per line."""
    lines = _records(path)
    if not lines:
        return []
    out = _stream(out)
    print("=== DATOS DE ALOJAMIENTOS CARGADOS ===", file=out)
    lodgings = []
    for number, line in enumerate(lines, start=1):
        (code, name, document, department, municipality,
         kind_text, address, price_text, amenities) = _fields(line, 9)
        kind = kind_text if kind_text in ("A", "C") else "\0"
        price = _parse_float(price_text)
        lodging = Lodging(code, name, document, department, municipality,
                          kind, address, price, amenities)
        lodgings.append(lodging)
        print(f"Alojamiento #{number}:", file=out)
        print(f"  - Codigo: {code}", file=out)
        print(f"  - Nombre: {name}", file=out)
        print(f"  - Documento anfitrion: {document}", file=out)
        print(f"  - Departamento: {department}", file=out)
        print(f"  - Municipio: {municipality}", file=out)
        print(f"  - Tipo: {lodging.kind.value}", file=out)
        print(f"  - Direccion: {address}", file=out)
        print(f"  - Precio: {price:g}", file=out)
        print(f"  - Amenidades: {amenities}", file=out)
        print(_SEPARATOR, file=out)
    return lodgings


def load_reservations(path="Reservaciones.txt",
                      out: Optional[TextIO] = None) -> List[Reservation]:
    """Load reservations from nine pipe separated fields per line.

    The payment method ``TC`` or ``PSE`` is stored as its first letter;
    anything else is stored as ``"\\0"``.
    """
    lines = _records(path)
    if not lines:
        return []
    out = _stream(out)
    print("=== DATOS DE RESERVACION CARGADOS ===", file=out)
    reservations = []
    for number, line in enumerate(lines, start=1):
        (code, entry_date, duration_text, lodging_code, document,
         method_text, payment_date, amount_text, note) = _fields(line, 9)
        method = method_text[0] if method_text in _PAYMENT_METHODS else "\0"
        duration = _parse_int(duration_text)
        amount = _parse_float(amount_text)
        reservations.append(Reservation(code, entry_date, duration, lodging_code,
                                        document, method, payment_date, amount, note))
        print(f"Reservacion #{number}:", file=out)
        print(f"  - Codigo: {code}", file=out)
        print(f"  - Fecha entrada: {entry_date}", file=out)
        print(f"  - Duracion estadia: {duration}", file=out)
        print(f"  - Codigo alojamiento: {lodging_code}", file=out)
        print(f"  - Documento huesped: {document}", file=out)
        print(f"  - Metodo: {method_text}", file=out)
        print(f"  - Fecha pago: {payment_date}", file=out)
        print(f"  - Monto: {amount:.0f}", file=out)
        print(f"  - Anotacion: {note}", file=out)
        print(_SEPARATOR, file=out)
    return reservations


def data_file(directory, name: str) -> Path:
    """Return the path of a data file inside ``directory``."""
    return Path(directory) / name