"""Unit tests for daily note helpers and cmd_daily."""

from datetime import date

import pytest

from tests.unit.conftest import run_cmd
from vaultnav.api.vault.cmd_daily import cmd_daily
from vaultnav.api.vault.daily_note_path import daily_note_path
from vaultnav.api.vault.shift_date import shift_date
from vaultnav.api.vault.VaultConfig import VaultConfig

pytestmark = pytest.mark.vault


class TestShiftDate:
    @pytest.mark.parametrize(
        ("day", "days", "expected"),
        [
            ("2024-01-15", 0, "2024-01-15"),
            ("2024-01-15", 1, "2024-01-16"),
            ("2024-01-01", -1, "2023-12-31"),
            ("2024-02-28", 1, "2024-02-29"),
            ("2023-02-28", 1, "2023-03-01"),
        ],
    )
    def test_shift(self, day, days, expected):
        assert shift_date(day, days) == expected

    def test_bad_date(self):
        with pytest.raises(ValueError):
            shift_date("15/01/2024", 1)


class TestDailyNotePath:
    def test_default_folder(self, tmp_path):
        config = VaultConfig(base_dir=str(tmp_path))
        assert daily_note_path(config, "2024-01-15") == f"{tmp_path}/Every day info/2024-01-15.md"

    def test_custom_folder(self, tmp_path):
        config = VaultConfig(base_dir=str(tmp_path), daily_dir="journal/")
        assert daily_note_path(config, "2024-01-15") == f"{tmp_path}/journal/2024-01-15.md"

    def test_vault_root_folder(self, tmp_path):
        config = VaultConfig(base_dir=str(tmp_path), daily_dir="")
        assert daily_note_path(config, "2024-01-15") == f"{tmp_path}/2024-01-15.md"


class TestCmdDaily:
    def test_today(self, vaultnav_home, vault_dir):
        result = run_cmd(cmd_daily)
        today = date.today().strftime("%Y-%m-%d")
        assert result.success
        assert result.output["date"] == today
        assert result.output["path"] == f"{vault_dir}/Every day info/{today}.md"
        assert result.output["exists"] is False

    def test_yesterday_of_given_date(self, vaultnav_home, vault_dir):
        folder = vault_dir / "Every day info"
        folder.mkdir()
        (folder / "2023-12-31.md").write_text("# New year's eve\n")

        result = run_cmd(cmd_daily, -1, "2024-01-01")
        assert result.success
        assert result.output["date"] == "2023-12-31"
        assert result.output["exists"] is True

    def test_bad_date(self, vaultnav_home):
        result = run_cmd(cmd_daily, 0, "tomorrow")
        assert not result.success
        assert result.output["errors"]
