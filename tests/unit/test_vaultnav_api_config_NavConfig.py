"""Unit tests for NavConfig and the section models."""

import json

import pytest

from tests.unit.conftest import minimal_config_dict
from vaultnav.api.config.NavConfig import NavConfig
from vaultnav.api.index.IndexConfig import IndexConfig
from vaultnav.api.media.MediaConfig import MediaConfig
from vaultnav.api.picker.PickerConfig import PickerConfig
from vaultnav.api.vault.VaultConfig import VaultConfig

pytestmark = pytest.mark.config


class TestSectionDefaults:
    def test_vault_root_has_trailing_separator(self, tmp_path):
        assert VaultConfig(base_dir=str(tmp_path)).root == f"{tmp_path}/"
        assert VaultConfig(base_dir=f"{tmp_path}/").root == f"{tmp_path}/"

    def test_vault_base_dir_expands_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert VaultConfig(base_dir="~/notes").base_dir == str(tmp_path / "notes")

    def test_vault_base_dir_required(self):
        with pytest.raises(ValueError, match="vault.base_dir is required"):
            VaultConfig(base_dir="  ")

    def test_index_defaults(self):
        config = IndexConfig()
        assert (config.type, config.file_name, config.binary) == ("cli", "markdown_data.db", "sqlite3")

    def test_index_type_checked(self):
        with pytest.raises(ValueError, match="Unsupported index type"):
            IndexConfig(type="mongo")

    def test_media_defaults(self):
        config = MediaConfig()
        assert config.viewer == ["timg"]
        assert config.player == ["vlc", "-I", "rc"]
        assert config.search_binary == "rg"

    def test_media_command_required(self):
        with pytest.raises(ValueError):
            MediaConfig(player=[])

    def test_picker_mode(self):
        assert PickerConfig().mode == "auto"
        with pytest.raises(ValueError):
            PickerConfig(mode="fzf")

    def test_unknown_keys_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            VaultConfig(base_dir=str(tmp_path), colour="blue")


class TestNavConfig:
    def test_index_path_inside_vault(self, tmp_path):
        config = NavConfig(vault={"base_dir": str(tmp_path)})
        assert config.index_path == f"{tmp_path}/markdown_data.db"

    def test_home_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VAULTNAV_HOME", str(tmp_path))
        assert NavConfig.get_home_dir() == tmp_path.resolve()
        assert NavConfig.get_config_path() == tmp_path.resolve() / "config.json"

    def test_load(self, vaultnav_home, vault_dir):
        config = NavConfig.load()
        assert config.vault.base_dir == str(vault_dir)
        assert config.index.type == "sqlite"
        assert config.picker.mode == "first"
        assert config.debug is False

    def test_load_missing_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VAULTNAV_HOME", str(tmp_path))
        with pytest.raises(ValueError, match="Configuration file not found at"):
            NavConfig.load()

    def test_load_invalid_json(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VAULTNAV_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError, match="Invalid JSON in config file"):
            NavConfig.load()

    def test_load_validation_error_names_field(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VAULTNAV_HOME", str(tmp_path))
        config = minimal_config_dict()
        config["index"]["type"] = "bogus"
        (tmp_path / "config.json").write_text(json.dumps(config))
        with pytest.raises(ValueError, match="Configuration validation error: index.type"):
            NavConfig.load()

    def test_save_round_trip(self, vaultnav_home):
        config = NavConfig.load()
        config.debug = True
        config.save()
        assert NavConfig.load().debug is True
        assert not (vaultnav_home / "config.json.tmp").exists()

    def test_to_dict_sections(self, tmp_path):
        config = NavConfig(vault={"base_dir": str(tmp_path)})
        assert list(config.to_dict()) == ["vault", "index", "media", "picker", "debug"]
