"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path

from lincol.utils.logging import logger

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "documents"


@pytest.fixture
def example_json_path():
    """Path to the JSON fixture document."""
    return FIXTURES_DIR / "example.json"


@pytest.fixture
def example_yaml_path():
    """Path to the YAML fixture document (same data as the JSON one)."""
    return FIXTURES_DIR / "example.yml"


@pytest.fixture
def example_json(example_json_path):
    return example_json_path.read_text(encoding="utf-8")


@pytest.fixture
def example_yaml(example_yaml_path):
    return example_yaml_path.read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def clean_lincol_env(monkeypatch):
    """Keep LINCOL_* settings from the developer's shell out of the tests."""
    monkeypatch.delenv("LINCOL_FORMAT", raising=False)
    monkeypatch.delenv("LINCOL_DUPLICATE_KEYS", raising=False)


@pytest.fixture
def write_document(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def lincol_logs():
    """Enable lincol's log records for one test; the library keeps them disabled."""
    logger.enable("lincol")
    yield logger
    logger.disable("lincol")
