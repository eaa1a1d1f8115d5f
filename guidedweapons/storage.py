"""Weapon storage in a MongoDB collection."""

from __future__ import annotations

from typing import Any, Iterable, Mapping
from urllib.parse import quote_plus

from pymongo import MongoClient

from .config import Config
from .types import Weapon, weapon_fields

CONNECT_TIMEOUT_MS = 5_000
SERVER_SELECTION_TIMEOUT_MS = 10_000
CATEGORY_KEY = "guidance_type"


def client_uri(config: Config) -> str:
    """Return the connection URI for the configured server and credentials."""
    mongo = config.mongodb
    return (
        f"mongodb://{quote_plus(mongo.username)}:{quote_plus(mongo.password)}"
        f"@{mongo.host}:{mongo.port}"
    )


def _weapon_from_document(document: Mapping[str, Any]) -> Weapon:
    by_key = {spec.json: spec.attr for spec in weapon_fields()}
    values = {by_key[key]: str(value) for key, value in document.items() if key in by_key}
    return Weapon(**values)


class MongoStorage:
    """Stores weapons as documents keyed by their JSON names."""

    def __init__(self, client: Any, collection: Any) -> None:
        self.client = client
        self.collection = collection

    def __enter__(self) -> "MongoStorage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def insert(self, weapons: Iterable[Weapon]) -> None:
        """Insert every weapon as a new document."""
        documents = [weapon.to_dict() for weapon in weapons]
        if documents:
            self.collection.insert_many(documents)

    def update(self, weapons: Iterable[Weapon]) -> None:
        """Replace the stored document of each weapon by name, adding it if absent."""
        for weapon in weapons:
            self.collection.replace_one({"name": weapon.name}, weapon.to_dict(), upsert=True)

    def provide(self, category: str) -> list[Weapon]:
        """Return the weapons whose guidance type is ``category``, or all when it is empty."""
        query = {CATEGORY_KEY: category} if category else {}
        return [_weapon_from_document(doc) for doc in self.collection.find(query, {"_id": 0})]

    def close(self) -> None:
        """Disconnect from the server."""
        self.client.close()


def connect(config: Config) -> MongoStorage:
    """Connect to the configured server, check it answers, and open the collection."""
    client = MongoClient(
        client_uri(config),
        connectTimeoutMS=CONNECT_TIMEOUT_MS,
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    collection = client[config.mongodb.db_name][config.mongodb.coll_name]
    return MongoStorage(client, collection)