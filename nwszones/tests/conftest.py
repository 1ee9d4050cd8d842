"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_zones_payload(count: int, state: str = "CO") -> dict:
    """Build a zone collection with `count` features in server order."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "id": f"{state}Z{i:03d}",
                    "name": f"Zone {i}",
                },
            }
            for i in range(1, count + 1)
        ],
    }


class ScriptedConsole:
    """Feeds scripted answers to prompts and records everything shown."""

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-noaa.example.com"},
        "default_region": "ny",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_console():
    """Factory for ScriptedConsole instances."""
    return ScriptedConsole


@pytest.fixture
def zones_payload():
    """Factory for synthetic zone collections."""
    return make_zones_payload


@pytest.fixture
def co_zones() -> dict:
    return load_fixture("zones_co.json")


@pytest.fixture
def coz039_forecast() -> dict:
    return load_fixture("forecast_coz039.json")


@pytest.fixture
def narrative_forecast() -> dict:
    return load_fixture("forecast_narrative.json")
