"""
Unit tests for the 'inspect' command.
"""

import pytest
from click.testing import CliRunner

from edgebundle.cli.commands.inspect import inspect


class TestInspectCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_shows_both_directions(self, runner, write_doc, org_doc):
        result = runner.invoke(inspect, [write_doc(org_doc), "Org.Teams.Data"])

        assert result.exit_code == 0
        assert "Outgoing (2)" in result.output
        assert "Org.Projects.Atlas" in result.output
        assert "Org.Projects.Ghost (unresolved, not drawn)" in result.output
        assert "Incoming (1)" in result.output
        assert "Org.People.Ben" in result.output

    def test_unknown_leaf_suggests_full_id(self, runner, write_doc, org_doc):
        result = runner.invoke(inspect, [write_doc(org_doc), "Data"])

        assert result.exit_code == 1
        assert "Leaf not found: Data" in result.output
        assert "Org.Teams.Data" in result.output

    def test_missing_document(self, runner, tmp_path):
        result = runner.invoke(inspect, [str(tmp_path / "missing.json"), "G.X"])
        assert result.exit_code == 1
