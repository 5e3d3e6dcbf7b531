"""
Pytest configuration for the Brickset catalog queries.

Provides fixtures for:
- Building LegoSet records with sensible defaults
- Writing catalog JSON files to a temporary directory
- Isolating cached settings from the caller's environment
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

import pytest

from brickset.config import get_settings
from brickset.domain.models import LegoSet


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop environment overrides and the cached Settings around every test.
    """
    for var in ("BRICKSET_DATA_FILE", "LOG_LEVEL", "LOG_JSON", "APP_ENV"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_set() -> Callable[..., LegoSet]:
    """
    Factory for LegoSet records; only override what the test cares about.
    """
    counter = {"n": 0}

    def _make(**overrides: Any) -> LegoSet:
        counter["n"] += 1
        fields: Dict[str, Any] = {
            "number": f"{1000 + counter['n']}-1",
            "name": f"Set {counter['n']}",
            "theme": "City",
            "pieces": 250,
        }
        fields.update(overrides)
        return LegoSet(**fields)

    return _make


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[[Any], Path]:
    """
    Write a JSON payload (list of dicts, or raw text) and return its path.
    """

    def _write(payload: Any, name: str = "brickset.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog_rows() -> List[Dict[str, Any]]:
    """A small catalog in Brickset's camelCase JSON shape."""
    return [
        {
            "number": "60351-1",
            "name": "Rocket Launch Center",
            "theme": "City",
            "subtheme": "Space",
            "packagingType": "Box",
            "tags": ["Rocket", "Space"],
            "pieces": 1010,
        },
        {
            "number": "30654-1",
            "name": "X-Wing Starfighter",
            "theme": "Star Wars",
            "subtheme": "Microfighters",
            "packagingType": "Polybag",
            "tags": ["Microscale"],
            "pieces": 87,
        },
        {
            "number": "4990-1",
            "name": "Rock Raiders HQ",
            "theme": "Rock Raiders",
            "subtheme": None,
            "packagingType": "Box",
            "tags": None,
            "pieces": 413,
        },
    ]
