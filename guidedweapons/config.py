"""Application configuration read from a YAML file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from fractions import Fraction
from pathlib import Path
from typing import Any, Mapping

import yaml

_UNITS_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_UNIT_RE = "ns|us|µs|μs|ms|s|m|h"
_PART = rf"(\d+\.?\d*|\.\d+)({_UNIT_RE})"
_DURATION_RE = re.compile(rf"([+-]?)((?:{_PART})+)")
_PART_RE = re.compile(_PART)
_MAX_NS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"1.5h"`` or ``"1m30s"``."""
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        if text in ("0", "+0", "-0"):
            return timedelta(0)
        raise ValueError(f"invalid duration {text!r}")
    sign, body = match.groups()
    total = sum(
        (Fraction(number) * _UNITS_NS[unit] for number, unit in _PART_RE.findall(body)),
        Fraction(0),
    )
    if total > _MAX_NS:
        raise ValueError(f"invalid duration {text!r}")
    if sign == "-":
        total = -total
    return timedelta(microseconds=float(total / 1000))


def _duration(value: Any) -> timedelta:
    if value is None:
        return timedelta(0)
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid duration {value!r}")
    if isinstance(value, int):
        return timedelta(microseconds=value / 1000)
    if isinstance(value, str):
        return parse_duration(value)
    raise ValueError(f"invalid duration {value!r}")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"expected a scalar value, got {value!r}")


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"section {key!r} must be a mapping")
    return value


@dataclass
class ServerConfig:
    """HTTP server settings."""

    port: str = ""
    read_timeout: timedelta = field(default_factory=timedelta)
    write_timeout: timedelta = field(default_factory=timedelta)
    idle_timeout: timedelta = field(default_factory=timedelta)


@dataclass
class MongoConfig:
    """MongoDB connection settings."""

    username: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    db_name: str = ""
    coll_name: str = ""


@dataclass
class Config:
    """Whole application configuration."""

    env: str = ""
    server: ServerConfig = field(default_factory=ServerConfig)
    mongodb: MongoConfig = field(default_factory=MongoConfig)


def config_from_mapping(data: Mapping[str, Any] | None) -> Config:
    """Build a :class:`Config` from a parsed YAML document."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError("configuration must be a mapping")
    server = _section(data, "server")
    mongo = _section(data, "mongodb")
    return Config(
        env=_text(data.get("env")),
        server=ServerConfig(
            port=_text(server.get("port")),
            read_timeout=_duration(server.get("read_timeout")),
            write_timeout=_duration(server.get("write_timeout")),
            idle_timeout=_duration(server.get("idle_timeout")),
        ),
        mongodb=MongoConfig(
            username=_text(mongo.get("username")),
            password=_text(mongo.get("password")),
            host=_text(mongo.get("host")),
            port=_text(mongo.get("port")),
            db_name=_text(mongo.get("db_name")),
            coll_name=_text(mongo.get("coll_name")),
        ),
    )


def load(path: str | Path = "config.yaml") -> Config:
    """Read the configuration file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return config_from_mapping(data)