from datetime import timedelta

import pytest

from guidedweapons.config import (
    Config,
    MongoConfig,
    ServerConfig,
    config_from_mapping,
    load,
    parse_duration,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5s", timedelta(seconds=5)),
        ("300ms", timedelta(milliseconds=300)),
        ("1m30s", timedelta(minutes=1, seconds=30)),
        ("1.5h", timedelta(hours=1, minutes=30)),
        ("-2s", timedelta(seconds=-2)),
        ("0", timedelta(0)),
        ("10us", timedelta(microseconds=10)),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "5", "5x", "s", "1s 2s", "abc"])
def test_parse_duration_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_config_from_mapping_full():
    password = "password"
    cfg = config_from_mapping(
        {
            "env": "local",
            "server": {
                "port": ":8080",
                "read_timeout": "5s",
                "write_timeout": "10s",
                "idle_timeout": "1m",
            },
            "mongodb": {
                "username": "user",
                "password": password,
                "host": "localhost",
                "port": 27017,
                "db_name": "weapons",
                "coll_name": "missiles",
            },
        }
    )
    assert cfg == Config(
        env="local",
        server=ServerConfig(
            port=":8080",
            read_timeout=timedelta(seconds=5),
            write_timeout=timedelta(seconds=10),
            idle_timeout=timedelta(minutes=1),
        ),
        mongodb=MongoConfig(
            username="user",
            password=password,
            host="localhost",
            port="27017",
            db_name="weapons",
            coll_name="missiles",
        ),
    )


def test_config_from_mapping_defaults():
    assert config_from_mapping({}) == Config()
    assert config_from_mapping(None) == Config()


def test_config_rejects_bad_section():
    with pytest.raises(ValueError):
        config_from_mapping({"server": "oops"})


def test_config_rejects_bad_duration():
    with pytest.raises(ValueError):
        config_from_mapping({"server": {"read_timeout": "soon"}})


def test_load_reads_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "env: production\n"
        "server:\n"
        "  port: ':3000'\n"
        "  read_timeout: 4s\n"
        "mongodb:\n"
        "  host: localhost\n",
        encoding="utf-8",
    )
    cfg = load(path)
    assert cfg.env == "production"
    assert cfg.server.port == ":3000"
    assert cfg.server.read_timeout == timedelta(seconds=4)
    assert cfg.server.idle_timeout == timedelta(0)
    assert cfg.mongodb.host == "localhost"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "absent.yaml")