import io

import pytest

from udeastay.people import Guest, Host
from udeastay.system import System, main


def _system():
    password = "password"
    return System(
        "admin",
        hosts=[Host("H1", "1001", password, 1, 4.0), Host("H2", "3003", password, 1, 4.0)],
        guests=[Guest("2002", password, 1, 3.0), Guest("3003", password, 1, 3.0)],
    )


def test_authenticate_host():
    assert _system().authenticate("1001", "password") == "Anfitrion"


def test_authenticate_guest():
    assert _system().authenticate("2002", "password") == "Huesped"


def test_host_checked_before_guest():
    assert _system().authenticate("3003", "password") == "Anfitrion"


@pytest.mark.parametrize("document, secret", [("1001", "secret"), ("9999", "password"), ("", "")])
def test_authenticate_fails(document, secret):
    assert _system().authenticate(document, secret) is None


def test_equality_by_document():
    assert _system() == System("admin")
    assert not (_system() == System("other"))


def test_clear():
    system = _system()
    system.clear()
    assert system.hosts == [] and system.guests == []
    assert system.authenticate("1001", "password") is None


def _data_dir(tmp_path):
    (tmp_path / "Anfitriones.txt").write_text("H1|1001|password|3|4.5\n", encoding="utf-8")
    (tmp_path / "Huespedes.txt").write_text("2002|password|2|3.5\n", encoding="utf-8")
    (tmp_path / "Alojamientos.txt").write_text(
        "L1|Casa|1001|Antioquia|Medellin|A|Calle 1|100|wifi\n", encoding="utf-8"
    )
    (tmp_path / "Reservaciones.txt").write_text(
        "R1|2025-01-10|3|L1|2002|TC|2025-01-01|300|\n", encoding="utf-8"
    )
    return tmp_path


def test_load_data(tmp_path):
    system = System()
    out = io.StringIO()
    system.load_data(_data_dir(tmp_path), out)
    assert len(system.hosts) == 1
    assert len(system.guests) == 1
    assert system.lodgings[0].code == "L1"
    assert system.reservations[0].lodging_code == "L1"
    assert system.authenticate("2002", "password") == "Huesped"
    assert "=== DATOS DE RESERVACION CARGADOS ===" in out.getvalue()


def test_load_data_empty_directory(tmp_path):
    system = System()
    out = io.StringIO()
    system.load_data(tmp_path, out)
    assert system.hosts == [] and system.reservations == []
    assert out.getvalue() == ""


def test_main_welcomes_host(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1001\npassword\n"))
    assert main(["--data-dir", str(_data_dir(tmp_path))]) == 0
    assert capsys.readouterr().out.endswith("\nBienvenido Anfitrion!\n")


def test_main_tokens_on_one_line(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2002 password\n"))
    main(["--data-dir", str(_data_dir(tmp_path))])
    assert capsys.readouterr().out.endswith("\nBienvenido Huesped!\n")


def test_main_rejects_bad_credentials(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1001\nsecret\n"))
    main(["--data-dir", str(_data_dir(tmp_path))])
    output = capsys.readouterr().out
    assert "Sistema de Autenticacion" in output
    assert output.endswith("\nCredenciales incorrectas\n")


def test_main_empty_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main(["--data-dir", str(_data_dir(tmp_path))])
    assert capsys.readouterr().out.endswith("\nCredenciales incorrectas\n")