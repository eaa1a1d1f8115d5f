"""Fetching the weapons table and handing its records to storage."""

from __future__ import annotations

import csv
import io
import logging
import urllib.request
from typing import Callable, Protocol, Sequence

from .types import Weapon, weapon_fields

DEFAULT_TIMEOUT = 1.0

Table = list[list[str]]


class WeaponsInserter(Protocol):
    def insert(self, weapons: list[Weapon]) -> None: ...


class WeaponsUpdater(Protocol):
    def update(self, weapons: list[Weapon]) -> None: ...


class WeaponsProvider(Protocol):
    def provide(self, category: str) -> list[Weapon]: ...


def parse_table(text: str) -> Table:
    """Parse CSV text into rows, skipping blank lines.

    Every record must have as many fields as the first one.
    """
    rows: Table = []
    width: int | None = None
    reader = csv.reader(io.StringIO(text, newline=""))
    try:
        for record in reader:
            if not record:
                continue
            if width is None:
                width = len(record)
            elif len(record) != width:
                raise ValueError(f"record on line {reader.line_num}: wrong number of fields")
            rows.append(record)
    except csv.Error as exc:
        raise ValueError(f"malformed CSV on line {reader.line_num}: {exc}") from exc
    return rows


def fetch_table(url: str, timeout: float = DEFAULT_TIMEOUT) -> Table:
    """Download the CSV document at ``url`` and parse it."""
    request = urllib.request.Request(url, method="GET")
    with urllib.request.urlopen(request, timeout=timeout) as response:
        charset = response.headers.get_content_charset() or "utf-8"
        text = response.read().decode(charset)
    return parse_table(text)


def map_weapon(data: Sequence[Sequence[str]], weapon_idx: int) -> Weapon | None:
    """Build the weapon held in column ``weapon_idx`` of a table.

    Each field is read from the first row whose header contains the field's
    table name. Returns ``None`` when some field has no such row.
    """
    headers = [row[0].strip() if row else "" for row in data]
    values: dict[str, str] = {}
    for spec in weapon_fields():
        row_idx = next((i for i, header in enumerate(headers) if spec.csv in header), None)
        if row_idx is None:
            return None
        row = data[row_idx]
        if len(row) < 2:
            continue
        values[spec.attr] = row[weapon_idx]
    return Weapon(**values)


def parse_weapons(data: Sequence[Sequence[str]]) -> list[Weapon]:
    """Return one weapon for every column after the header column."""
    if not data or not data[0]:
        raise ValueError("empty table")
    mapped = (map_weapon(data, idx) for idx in range(1, len(data[0])))
    return [weapon for weapon in mapped if weapon is not None]


class Service:
    """Moves weapons from the published table into storage and back out."""

    def __init__(
        self,
        inserter: WeaponsInserter,
        updater: WeaponsUpdater,
        provider: WeaponsProvider,
        log: logging.Logger | None = None,
        table_url: str | None = None,
        fetch: Callable[[str, float], Table] = fetch_table,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.inserter = inserter
        self.updater = updater
        self.provider = provider
        self.log = log if log is not None else logging.getLogger(__name__)
        self.table_url = table_url
        self._fetch = fetch
        self.timeout = timeout

    def _load(self) -> list[Weapon]:
        if not self.table_url:
            raise ValueError("no table URL configured")
        data = self._fetch(self.table_url, self.timeout)
        return parse_weapons(data)

    def insert_weapons(self) -> None:
        """Fetch the table and insert every weapon in it."""
        weapons = self._load()
        self.inserter.insert(weapons)
        self.log.debug("weapons inserted", extra={"count": len(weapons)})

    def update_weapons(self) -> None:
        """Fetch the table and replace the stored copy of every weapon in it."""
        weapons = self._load()
        self.updater.update(weapons)
        self.log.debug("weapons updated", extra={"count": len(weapons)})

    def get_weapons(self) -> list[Weapon]:
        """Return every stored weapon."""
        return self.provider.provide("")

    def get_weapons_by_category(self, category: str) -> list[Weapon]:
        """Return the stored weapons of one category."""
        return self.provider.provide(category)