"""Shared pytest configuration and fixtures for all tests."""

import json
import sqlite3
from pathlib import Path

import pytest

from vaultnav.api.config.NavConfig import NavConfig

_MARKERS = ("unit", "wikilink", "index", "resolver", "picker", "media", "config", "navigate", "vault", "cli")


def pytest_configure(config):
    for marker in _MARKERS:
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid vaultnav configuration dict for testing.

    Uses the in-process sqlite index backend and the non-interactive picker,
    so no external program is needed.
    """
    return {
        "vault": {
            "base_dir": "~/_vault",
        },
        "index": {
            "type": "sqlite",
        },
        "picker": {
            "mode": "first",
        },
    }


def minimal_nav_config(base_dir: Path | str = "~/_vault") -> NavConfig:
    config = minimal_config_dict()
    config["vault"]["base_dir"] = str(base_dir)
    return NavConfig(**config)


# =============================================================================
# Index Helpers
# =============================================================================

SAMPLE_FILES = {
    1: "notes/My Note.md",
    2: "notes/Other.md",
    3: "imgs/a.png",
    4: "daily/2024-01-01.md",
    5: "archive/My Note.md",
}

# (file_id, backlink_id, backlink text): file_id links to backlink_id
SAMPLE_BACKLINKS = [
    (2, 1, "My Note"),
    (4, 1, "My Note"),
    (2, 3, "imgs/a.png"),
    (2, 1, "Twin"),
    (4, 5, "Twin"),
    (4, 2, "It's here"),
]

SAMPLE_TAGS = {1: "project", 2: "idea"}

# (file_id, tag_id)
SAMPLE_FILE_TAGS = [(1, 1), (2, 1), (4, 2)]


def build_index(
    path: Path,
    files: dict[int, str] = SAMPLE_FILES,
    backlinks: list[tuple[int, int, str]] = SAMPLE_BACKLINKS,
    tags: dict[int, str] = SAMPLE_TAGS,
    file_tags: list[tuple[int, int]] = SAMPLE_FILE_TAGS,
) -> Path:
    """Write an index database with the tables the queries expect."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(
            """
            CREATE TABLE files (id INTEGER PRIMARY KEY, path TEXT);
            CREATE TABLE tags (id INTEGER PRIMARY KEY, tag TEXT);
            CREATE TABLE file_tags (file_id INTEGER, tag_id INTEGER);
            CREATE TABLE backlinks (file_id INTEGER, backlink_id INTEGER, backlink TEXT);
            """
        )
        conn.executemany("INSERT INTO files (id, path) VALUES (?, ?)", files.items())
        conn.executemany("INSERT INTO tags (id, tag) VALUES (?, ?)", tags.items())
        conn.executemany("INSERT INTO file_tags (file_id, tag_id) VALUES (?, ?)", file_tags)
        conn.executemany("INSERT INTO backlinks (file_id, backlink_id, backlink) VALUES (?, ?, ?)", backlinks)
        conn.commit()
    finally:
        conn.close()
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault directory."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def index_db(vault_dir: Path) -> Path:
    """Sample index at the default location inside the vault."""
    return build_index(vault_dir / "markdown_data.db")


@pytest.fixture
def vaultnav_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict, vault_dir: Path) -> Path:
    """Set up VAULTNAV_HOME with a config pointing at ``vault_dir``.

    Returns:
        Path to the vaultnav home directory
    """
    home = tmp_path / ".vaultnav"
    home.mkdir()
    monkeypatch.setenv("VAULTNAV_HOME", str(home))
    minimal_config_dict["vault"]["base_dir"] = str(vault_dir)
    (home / "config.json").write_text(json.dumps(minimal_config_dict))
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
