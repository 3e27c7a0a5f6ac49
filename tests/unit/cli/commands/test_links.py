"""
Unit tests for the 'links' command.
"""

import json

import pytest
from click.testing import CliRunner

from edgebundle.cli.commands.links import links


class TestLinksCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_table_output(self, runner, write_doc, scenario_doc):
        result = runner.invoke(links, [write_doc(scenario_doc)])

        assert result.exit_code == 0
        assert "G.X" in result.output
        assert "G.Y" in result.output
        assert "Depends On" in result.output

    def test_no_links(self, runner, write_doc, make_scenario):
        result = runner.invoke(links, [write_doc(make_scenario(target="G.Z"))])
        assert result.exit_code == 0
        assert "No links to draw" in result.output

    def test_json_envelope(self, runner, write_doc, org_doc):
        result = runner.invoke(links, [write_doc(org_doc), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["meta"]["status"] == "success"
        assert payload["meta"]["command"] == "links"
        assert payload["data"]["count"] == 6
        assert payload["data"]["links"][0] == {
            "source": "Org.Teams.Platform",
            "target": "Org.Projects.Atlas",
            "type": "Contributes To",
        }

    def test_type_filter(self, runner, write_doc, org_doc):
        result = runner.invoke(links, [write_doc(org_doc), "--json", "--type", "Member Of"])
        payload = json.loads(result.stdout)
        assert [l["source"] for l in payload["data"]["links"]] == ["Org.People.Ana", "Org.People.Ben"]

    def test_json_load_failure(self, runner, tmp_path):
        result = runner.invoke(links, [str(tmp_path / "missing.json"), "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["meta"]["status"] == "error"
        assert payload["error"]["code"] == "DATA_LOAD_FAILED"
