# udeastay

A small lodging booking system. It keeps hosts, guests, lodgings and
reservations, loads them from plain pipe-separated text files, and lets a
host or a guest log in with their document number and password.

## Installation

```
pip install .
```

## Data files

The data lives in four text files, one record per line, fields separated
by `|`:

| File                | Fields                                                                                              |
|---------------------|-----------------------------------------------------------------------------------------------------|
| `Anfitriones.txt`   | code, document, password, seniority, rating (0.0 to 5.0)                                            |
| `Huespedes.txt`     | document, password, seniority, rating (0.0 to 5.0)                                                  |
| `Alojamientos.txt`  | code, name, host document, department, municipality, kind (`C` house / `A` apartment), address, price, amenities |
| `Reservaciones.txt` | code, entry date, duration, lodging code, guest document, payment method, payment date, amount, note |

Amenities are a comma-separated list; surrounding spaces are dropped, each
name is stored in lower case, and empty items are skipped. A reservation's
payment method is stored as `"T"` for `TC`, `"P"` for `PSE`, and `"\0"`
for anything else. Reservation notes are cut at the first NUL character
and to at most 1000 characters. A file that is missing or empty yields no
records.

Example host line:

```
H001|1001|password|24|4.5
```

## Command line

```
udeastay [--data-dir DIR]
```

It loads the four data files from `DIR` (the current directory by
default), prints every record it loaded, then reads a user (document
number) and a password from standard input. When they match a host it
prints `Bienvenido Anfitrion!`, when they match a guest
`Bienvenido Huesped!`, and otherwise `Credenciales incorrectas`. Hosts
are checked before guests.

## Library use

- `udeastay.lodging` — `Lodging` and `LodgingKind` (`HOUSE` = `"C"`,
  `APARTMENT` = `"A"`). Amenities are added with `Lodging.add_amenity`,
  read back with `Lodging.amenity(index)` (an out-of-range or negative
  index raises `IndexError`), and parsed from a comma-separated string
  with `Lodging.parse_amenities`.
- `udeastay.people` — `Host` and `Guest`, frozen and validated on
  creation.
- `udeastay.reservation` — `Reservation` and `MAX_NOTE_LENGTH`.
- `udeastay.storage` — `count_lines(path)` and
  `load_hosts`, `load_guests`, `load_lodgings`, `load_reservations`,
  each taking a `path` (defaulting to the file name above) and an `out`
  stream for the listing (standard output by default), and returning a
  list of records. `data_file(directory, name)` joins a directory and a
  file name.
- `udeastay.system` — `System` ties it together: `System.load_data`
  reads all four files from a directory, `System.authenticate(document,
  password)` returns `"Anfitrion"`, `"Huesped"` or `None`, and
  `System.clear` drops everything loaded. Two systems compare equal when
  their `document` is the same.

Invalid records raise `ValueError`: an unknown lodging kind, a negative
price or seniority, a rating outside 0.0 to 5.0, empty host or guest
fields, or a numeric field that does not start with a number.

## What it does not do

Records are only read: nothing is written back to the data files, and
there are no commands to create, search or change reservations or
lodgings after login.

## Tests

```
pip install .[test]
pytest
```