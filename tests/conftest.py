"""
Pytest configuration and shared fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sun_page_html(fixtures_dir):
    """Load a sample sunrise/sunset page."""
    return (fixtures_dir / "sun_2020.html").read_text(encoding="utf-8")


@pytest.fixture
def config_file(tmp_path):
    """Write a minimal valid configuration and return its path."""
    config = {
        "environment": "test",
        "processing": {"timezone": "Europe/Brussels"},
        "scraper": {
            "from_year": 2019,
            "to_year": 2020,
            "output_dir": str(tmp_path / "sun"),
        },
        "analysis": {
            "database_path": str(tmp_path / "analysis.sqlite3"),
            "report_dir": str(tmp_path / "reports"),
        },
        "logging": {"level": "DEBUG", "file": str(tmp_path / "logs" / "test.log")},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test touching files or SQLite"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
