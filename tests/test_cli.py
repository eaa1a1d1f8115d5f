import json
from unittest.mock import patch

from pymongo.errors import ConnectionFailure

from guidedweapons.cli import main


def _write_config(tmp_path, env):
    path = tmp_path / "config.yaml"
    path.write_text(
        f"env: {env}\n"
        "server:\n"
        "  port: \"127.0.0.1:0\"\n"
        "mongodb:\n"
        "  username: user\n"
        "  password: password\n"
        "  host: localhost\n"
        "  port: \"27017\"\n"
        "  db_name: wt\n"
        "  coll_name: weapons\n",
        encoding="utf-8",
    )
    return path


def test_missing_config_file(tmp_path, capsys):
    missing = tmp_path / "missing.yaml"
    assert main(["--config", str(missing)]) == 1
    assert "missing.yaml" in capsys.readouterr().err


def test_unknown_environment(tmp_path, capsys):
    path = _write_config(tmp_path, "staging")
    assert main(["--config", str(path)]) == 1
    assert "staging" in capsys.readouterr().err


def test_storage_failure_is_logged(tmp_path, capsys):
    path = _write_config(tmp_path, "production")
    with patch("guidedweapons.storage.MongoClient") as mongo_client:
        mongo_client.return_value.admin.command.side_effect = ConnectionFailure("boom")
        assert main(["--config", str(path)]) == 1
    last = capsys.readouterr().out.strip().splitlines()[-1]
    entry = json.loads(last)
    assert entry["msg"] == "failed to init storage"
    assert entry["error"] == "boom"
    assert entry["level"] == "ERROR"