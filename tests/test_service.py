import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from guidedweapons.service import (
    Service,
    fetch_table,
    map_weapon,
    parse_table,
    parse_weapons,
)
from guidedweapons.types import Weapon, weapon_fields


def _full_table():
    return [[spec.csv, f"{spec.attr}-1", f"{spec.attr}-2"] for spec in weapon_fields()]


class _Store:
    def __init__(self, weapons=None):
        self.inserted = None
        self.updated = None
        self.categories = []
        self.weapons = weapons or []

    def insert(self, weapons):
        self.inserted = weapons

    def update(self, weapons):
        self.updated = weapons

    def provide(self, category):
        self.categories.append(category)
        return self.weapons


def test_parse_table_basic():
    assert parse_table("a,b\n1,2\n") == [["a", "b"], ["1", "2"]]


def test_parse_table_quoted_field():
    assert parse_table('x,"y, z"\n') == [["x", "y, z"]]


def test_parse_table_skips_blank_lines():
    assert parse_table("a,b\n\n1,2\r\n") == [["a", "b"], ["1", "2"]]


def test_parse_table_rejects_ragged_rows():
    with pytest.raises(ValueError, match="wrong number of fields"):
        parse_table("a,b\n1,2,3\n")


def test_map_weapon_reads_every_field():
    data = _full_table()
    first = map_weapon(data, 1)
    second = map_weapon(data, 2)
    for spec in weapon_fields():
        assert getattr(first, spec.attr) == f"{spec.attr}-1"
        assert getattr(second, spec.attr) == f"{spec.attr}-2"


def test_map_weapon_trims_headers():
    data = [[f"  {row[0]}  ", row[1]] for row in _full_table()]
    weapon = map_weapon(data, 1)
    assert weapon.name == "name-1"
    assert weapon.additional_notes == "additional_notes-1"


def test_map_weapon_missing_header_gives_none():
    assert map_weapon([["Name", "AIM-9B"]], 1) is None


def test_map_weapon_skips_short_rows():
    data = _full_table()
    data = [row if row[0] != "Calibre" else ["Calibre"] for row in data]
    weapon = map_weapon(data, 1)
    assert weapon.caliber == ""
    assert weapon.mass == "mass-1"


def test_parse_weapons_one_per_column():
    weapons = parse_weapons(_full_table())
    assert [w.name for w in weapons] == ["name-1", "name-2"]


def test_parse_weapons_drops_unmappable_columns():
    assert parse_weapons([["Name", "A", "B"]]) == []


def test_parse_weapons_empty_table():
    with pytest.raises(ValueError):
        parse_weapons([])


def test_insert_weapons_fetches_and_inserts():
    calls = []

    def fetch(url, timeout):
        calls.append((url, timeout))
        return _full_table()

    store = _Store()
    service = Service(store, store, store, table_url="http://localhost/table.csv", fetch=fetch, timeout=2.5)
    service.insert_weapons()
    assert calls == [("http://localhost/table.csv", 2.5)]
    assert [w.name for w in store.inserted] == ["name-1", "name-2"]


def test_update_weapons_hands_weapons_to_updater():
    store = _Store()
    service = Service(store, store, store, table_url="http://localhost/t", fetch=lambda url, timeout: _full_table())
    service.update_weapons()
    assert [w.mass for w in store.updated] == ["mass-1", "mass-2"]
    assert store.inserted is None


def test_insert_without_url_fails():
    store = _Store()
    with pytest.raises(ValueError):
        Service(store, store, store).insert_weapons()
    assert store.inserted is None


def test_fetch_error_propagates():
    def fetch(url, timeout):
        raise OSError("unreachable")

    store = _Store()
    service = Service(store, store, store, table_url="http://localhost/t", fetch=fetch)
    with pytest.raises(OSError, match="unreachable"):
        service.insert_weapons()
    assert store.inserted is None


def test_get_weapons_and_by_category():
    weapon = Weapon(name="R-73")
    store = _Store([weapon])
    service = Service(store, store, store)
    assert service.get_weapons() == [weapon]
    assert service.get_weapons_by_category("IR") == [weapon]
    assert store.categories == ["", "IR"]


def test_fetch_table_over_http():
    body = "Name,AIM-9B\nMass,75.3\n".encode("utf-8")

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.send_response(200)
            self.send_header("Content-Type", "text/csv; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        port = httpd.server_address[1]
        rows = fetch_table(f"http://127.0.0.1:{port}/table.csv", 5)
    finally:
        httpd.shutdown()
        httpd.server_close()
    assert rows == [["Name", "AIM-9B"], ["Mass", "75.3"]]