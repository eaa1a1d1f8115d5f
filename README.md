# guidedweapons

A small HTTP service for guided weapon statistics. It downloads a weapons
table published as CSV, turns each column of the table into a weapon record,
stores the records in MongoDB and serves them back as JSON.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Configuration

By default the command reads `config.yaml` from the current directory:

```yaml
env: local            # "local" logs at debug level, "production" at info level
server:
  port: ":8080"       # [host]:port to listen on
  read_timeout: 5s
  write_timeout: 5s
  idle_timeout: 60s
mongodb:
  username: user
  password: password
  host: localhost
  port: "27017"
  db_name: weapons
  coll_name: guided
```

`env` must be `local` or `production`; any other value is an error.
Timeouts take duration strings such as `500ms`, `5s` or `1m30s`
(`guidedweapons.config.parse_duration`). Of the three, only `read_timeout`
is applied, as the per-connection socket timeout; `write_timeout` and
`idle_timeout` are read but not used. The username and password are escaped
before they go into the MongoDB connection URI
(`guidedweapons.storage.client_uri`).

## Running

```
guidedweapons [--config PATH] [--table-url URL]
```

- `--config` – configuration file, `config.yaml` by default.
- `--table-url` – URL of the CSV export of the weapons table. Defaults to the
  `GUIDEDWEAPONS_TABLE_URL` environment variable. No URL is built in.

The command loads the configuration, connects to MongoDB (checking it with a
ping), and starts the HTTP server. It stops on Ctrl-C or SIGTERM and closes the
database connection on the way out. It exits with status 1 if the
configuration cannot be read, the database cannot be reached, or the server
fails. Logs are written to standard output as JSON lines.

## HTTP interface

There is one path, `/weapons`:

- `GET /weapons` – `200` with `{"weapons": [...]}`, every stored weapon as a
  JSON object. Optional fields that are empty are left out.
- `POST /weapons` – downloads the table, parses it and inserts every weapon.
  Returns `200` with a `null` body, or `400` with `{"error": "..."}` on
  failure (including when no table URL was given).

Other paths get `404`, other methods `405`, both with an `{"error": ...}` body.

## Using it from Python

```python
from guidedweapons.service import parse_table, parse_weapons

with open("weapons.csv", encoding="utf-8") as fh:
    rows = parse_table(fh.read())

for weapon in parse_weapons(rows):
    print(weapon.to_dict()["name"])
```

- `guidedweapons.service.parse_table` parses CSV text into rows, skipping blank
  lines and raising `ValueError` when records differ in length.
- `parse_weapons` makes one `Weapon` per column after the first; `map_weapon`
  builds one column's weapon and returns `None` when a field has no row whose
  label contains the field's table name.
- `guidedweapons.types.weapon_fields()` lists every field of `Weapon` with its
  table row label and JSON key.
- `guidedweapons.service.Service` ties a table URL to a storage object;
  `guidedweapons.storage.connect(config)` returns a `MongoStorage`, which can
  be used as a context manager.

## What it does not do

- The HTTP server has no route for filtering by category or for updating
  records. `Service.get_weapons_by_category` and `Service.update_weapons`
  (which replaces stored weapons by name) exist but are only reachable from
  Python.
- Categories are matched against the `guidance_type` value only.
- Inserting twice stores the weapons twice; there is no de-duplication on
  `POST /weapons`.