"""
Unit tests for the 'init' command.
"""

from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from edgebundle.cli.commands.initialize import init
from edgebundle.config import BundleConfig, load_config


class TestInitCommand:
    """Test the init command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def mock_cwd(self, tmp_path):
        """Mock current working directory to a temp path."""
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            yield tmp_path

    def test_init_creates_config(self, runner, mock_cwd):
        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Initialized successfully" in result.output

        config_path = mock_cwd / ".edgebundle/config.yaml"
        with open(config_path) as f:
            raw = yaml.safe_load(f)

        assert raw["version"] == "1.0"
        assert raw["title"] == mock_cwd.name
        assert "bands" not in raw

    def test_written_config_round_trips(self, runner, mock_cwd):
        runner.invoke(init)
        config = load_config(mock_cwd / ".edgebundle/config.yaml")
        assert config == BundleConfig(title=mock_cwd.name)

    @patch("edgebundle.cli.commands.initialize.Confirm.ask", return_value=False)
    def test_existing_config_kept_when_declined(self, mock_confirm, runner, mock_cwd):
        config_path = mock_cwd / ".edgebundle/config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("title: mine\n")

        result = runner.invoke(init)

        assert "Aborted" in result.output
        assert config_path.read_text() == "title: mine\n"

    def test_force_overwrites(self, runner, mock_cwd):
        config_path = mock_cwd / ".edgebundle/config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("title: mine\n")

        result = runner.invoke(init, ["--force"])

        assert result.exit_code == 0
        assert yaml.safe_load(config_path.read_text())["title"] == mock_cwd.name
