import json
from pathlib import Path

from brickset import config
from brickset.domain.models import LegoSet
from brickset.orchestrator import available_queries
from scripts import generate_data


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.data_file is None
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert config.resolve_data_file(settings) == config.DEFAULT_DATA_FILE


def test_settings_read_environment(monkeypatch, tmp_path: Path):
    data_file = tmp_path / "catalog.json"
    monkeypatch.setenv("BRICKSET_DATA_FILE", str(data_file))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.data_file == data_file
    assert settings.log_level == "DEBUG"
    assert config.resolve_data_file() == data_file


def test_available_queries_contains_known_entries():
    names = available_queries()
    assert "sum_of_pieces" in names
    assert isinstance(names, list)


def test_generate_data_writes_valid_catalog(tmp_path: Path):
    json_path = tmp_path / "brickset.json"
    sets = generate_data._generate_sets(25, seed=123)
    generate_data._write_json(json_path, sets)

    rows = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(rows) == 25
    records = [LegoSet.model_validate(row) for row in rows]
    assert len({record.number for record in records}) == 25


def test_generate_data_is_deterministic():
    assert generate_data._generate_sets(10, seed=7) == generate_data._generate_sets(10, seed=7)
