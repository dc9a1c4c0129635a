"""Tests for CLI commands."""

import json
from pathlib import Path

from click.testing import CliRunner
from navstage.cli import cli

CONFIG = """
[docs]
source_dir = "docs"

[[navigation.top]]
id = "guides"
label = "Guides"

[sidebar]
guides = [
  { type = "category", label = "Guides", items = ["intro", { type = "doc", id = "setup", label = "Custom Setup" }] },
]
"""


def _write_project(tmp_path: Path, config: str = CONFIG) -> Path:
    """Write a config file and a small content tree."""
    guides = tmp_path / "docs" / "guides"
    guides.mkdir(parents=True)
    (guides / "intro.md").write_text("---\ntitle: Introduction\n---\nWelcome.")
    (guides / "api.md").write_text("# API Overview")
    config_file = tmp_path / "navstage.toml"
    config_file.write_text(config)
    return config_file


class TestResolveCommand:
    """Tests for the resolve command."""

    def test__valid_sidebar__prints_json(self, tmp_path: Path) -> None:
        """Print the resolved sidebar as JSON."""
        config_file = _write_project(tmp_path)

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-c", str(config_file)])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "guides": [
                {
                    "type": "category",
                    "label": "Guides",
                    "items": [
                        {"type": "doc", "id": "intro", "label": "Introduction", "categoryLabel": "Guides"},
                        {"type": "doc", "id": "setup", "label": "Custom Setup", "categoryLabel": "Guides"},
                    ],
                },
            ],
        }

    def test__group_option__prints_single_group(self, tmp_path: Path) -> None:
        """Print only the requested group's items."""
        config_file = _write_project(tmp_path)

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-c", str(config_file), "--group", "guides"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["label"] == "Guides"

    def test__unknown_group__fails(self, tmp_path: Path) -> None:
        """Fail for a group not in the configuration."""
        config_file = _write_project(tmp_path)

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-c", str(config_file), "-g", "blog"])

        assert result.exit_code == 1
        assert "sidebar group not found: blog" in result.output

    def test__missing_doc__fails_with_group_and_id(self, tmp_path: Path) -> None:
        """Exit non-zero and name the offending doc."""
        config_file = _write_project(
            tmp_path,
            '[sidebar]\nguides = ["intro", "nope"]\n',
        )

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "No file found for doc guides/nope" in result.output

    def test__invalid_config__fails(self, tmp_path: Path) -> None:
        """Report configuration errors."""
        config_file = _write_project(tmp_path, '[sidebar]\nguides = "intro"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "sidebar.guides must be a list" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test__consistent_sidebar__succeeds(self, tmp_path: Path) -> None:
        """Report every group as resolved."""
        config_file = _write_project(tmp_path)

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "✓ guides (1 items)" in result.output
        assert "Sidebar is consistent." in result.output

    def test__orphaned_group__warns(self, tmp_path: Path) -> None:
        """Warn about orphaned groups without failing."""
        config_file = _write_project(tmp_path, CONFIG + 'api = ["api"]\n')
        (tmp_path / "docs" / "api").mkdir()
        (tmp_path / "docs" / "api" / "api.md").write_text("# API")

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert 'Warning: Sidebar ID ["api"] not found in top navigation.' in result.output
        assert "Following IDs are available: guides" in result.output

    def test__strict__turns_orphans_into_errors(self, tmp_path: Path) -> None:
        """Fail on orphaned groups with --strict."""
        config_file = _write_project(tmp_path, CONFIG + 'api = ["api"]\n')
        (tmp_path / "docs" / "api").mkdir()
        (tmp_path / "docs" / "api" / "api.md").write_text("# API")

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file), "--strict"])

        assert result.exit_code == 1
        assert 'Error: Sidebar ID ["api"]' in result.output

    def test__broken_group__fails(self, tmp_path: Path) -> None:
        """Fail and name the broken group."""
        config_file = _write_project(tmp_path, '[sidebar]\nguides = ["missing"]\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "✗ guides: No file found for doc guides/missing" in result.output

    def test__no_sidebar__succeeds(self, tmp_path: Path) -> None:
        """Succeed when nothing is configured."""
        config_file = _write_project(tmp_path, "")

        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "No sidebar configured" in result.output
