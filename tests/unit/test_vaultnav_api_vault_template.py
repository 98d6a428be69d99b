"""Unit tests for template helpers and cmd_template."""

import json
from datetime import datetime

import pytest

from tests.unit.conftest import run_cmd
from vaultnav.api.vault.apply_template import apply_template
from vaultnav.api.vault.cmd_template import cmd_template
from vaultnav.api.vault.render_template import render_template
from vaultnav.api.vault.strip_frontmatter_lines import strip_frontmatter_lines

pytestmark = pytest.mark.vault

TEMPLATE = "---\ncreated: {{date}} {{time}}\ntitle: {{title}}\n---\n"
NOW = datetime(2024, 1, 15, 9, 30, 5)


class TestRenderTemplate:
    def test_placeholders_replaced(self):
        assert render_template(TEMPLATE, "2024-01-15", "09:30:05", "Idea") == (
            "---\ncreated: 2024-01-15 09:30:05\ntitle: Idea\n---\n"
        )

    def test_every_occurrence_replaced(self):
        assert render_template("{{title}}/{{title}}", "d", "t", "x") == "x/x"

    def test_values_are_literal(self):
        assert render_template("{{title}}", "d", "t", r"a\1$b") == r"a\1$b"


class TestStripFrontmatterLines:
    def test_leading_block_removed(self):
        assert strip_frontmatter_lines(["---", "a: 1", "---", "body", "", "more"]) == ["body", "", "more"]

    def test_leading_blank_lines_removed(self):
        assert strip_frontmatter_lines(["", "  ", "body", "", "end"]) == ["body", "", "end"]

    def test_later_rule_is_content(self):
        assert strip_frontmatter_lines(["body", "---", "after"]) == ["body", "---", "after"]

    def test_unterminated_block(self):
        assert strip_frontmatter_lines(["---", "a: 1"]) == []


class TestApplyTemplate:
    def test_prepended_without_blank_lines(self):
        out = apply_template(TEMPLATE, "# Idea\n\nText\n", "Idea", now=NOW)
        assert out == "---\ncreated: 2024-01-15 09:30:05\ntitle: Idea\n---\n# Idea\nText\n"

    def test_empty_note(self):
        out = apply_template("{{title}}\n", "", "Idea", now=NOW)
        assert out == "Idea\n"

    def test_replace_frontmatter(self):
        note = "---\nold: yes\n---\nBody\n"
        out = apply_template(TEMPLATE, note, "Idea", now=NOW, replace_frontmatter=True)
        assert "old: yes" not in out
        assert out.endswith("---\nBody\n")

    def test_existing_frontmatter_kept_by_default(self):
        out = apply_template(TEMPLATE, "---\nold: yes\n---\nBody\n", "Idea", now=NOW)
        assert "old: yes" in out


class TestCmdTemplate:
    @pytest.fixture
    def template_home(self, vaultnav_home, vault_dir):
        templates = vault_dir / "Templates"
        templates.mkdir()
        (templates / "Yaml-Template.md").write_text(TEMPLATE)
        config_path = vaultnav_home / "config.json"
        config = json.loads(config_path.read_text())
        config["vault"]["template_dir"] = str(templates)
        config_path.write_text(json.dumps(config))
        return templates

    def test_writes_note(self, template_home, vault_dir):
        note = vault_dir / "Idea.md"
        note.write_text("Body\n")

        result = run_cmd(cmd_template, str(note))

        assert result.success
        assert result.output["written"] is True
        assert result.output["title"] == "Idea"
        assert result.output["template"] == str(template_home / "Yaml-Template.md")
        text = note.read_text()
        assert text.startswith("---\ncreated: ")
        assert "title: Idea\n---\nBody\n" in text

    def test_creates_missing_note(self, template_home, vault_dir):
        note = vault_dir / "new" / "Fresh.md"
        result = run_cmd(cmd_template, str(note))
        assert result.success
        assert "title: Fresh" in note.read_text()

    def test_no_template_dir(self, vaultnav_home, vault_dir):
        result = run_cmd(cmd_template, str(vault_dir / "Idea.md"))
        assert not result.success
        assert "vault.template_dir is not configured" in result.output["errors"]

    def test_missing_template_file(self, template_home, vault_dir):
        (template_home / "Yaml-Template.md").unlink()
        result = run_cmd(cmd_template, str(vault_dir / "Idea.md"))
        assert not result.success
        assert "Could not open file" in result.output["errors"][0]
        assert not (vault_dir / "Idea.md").exists()
