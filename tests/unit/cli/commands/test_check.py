"""
Unit tests for the 'check' command.
"""

import json

import pytest
from click.testing import CliRunner

from edgebundle.cli.commands.check import check


class TestCheckCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_clean_document_passes(self, runner, write_doc, scenario_doc):
        result = runner.invoke(check, [write_doc(scenario_doc)])

        assert result.exit_code == 0
        assert "No issues found" in result.output

    def test_issues_warn_by_default(self, runner, write_doc, org_doc):
        result = runner.invoke(check, [write_doc(org_doc)])

        assert result.exit_code == 0
        assert "unresolved_target" in result.output
        assert "untyped_edge" in result.output
        assert "Result: WARN" in result.output

    def test_strict_fails_on_issues(self, runner, write_doc, org_doc):
        result = runner.invoke(check, [write_doc(org_doc), "--strict"])
        assert result.exit_code == 1
        assert "Result: FAIL" in result.output

    def test_quiet(self, runner, write_doc, org_doc):
        result = runner.invoke(check, [write_doc(org_doc), "-q"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_duplicate_ids_reported(self, runner, write_doc):
        doc = {"name": "D", "children": [{"name": "B"}, {"name": "B"}]}
        result = runner.invoke(check, [write_doc(doc), "--json"])

        payload = json.loads(result.stdout)
        assert payload["data"]["result"] == "WARN"
        assert payload["data"]["issues"] == [{
            "kind": "duplicate_id",
            "source": "D.B",
            "target": None,
            "message": "2 leaves share the id 'D.B'; edges resolve to the last one",
        }]

    def test_json_envelope(self, runner, write_doc, org_doc):
        result = runner.invoke(check, [write_doc(org_doc), "--json"])

        payload = json.loads(result.stdout)
        assert payload["meta"]["command"] == "check"
        assert payload["data"]["leaf_count"] == 6
        assert payload["data"]["link_count"] == 6
        assert [i["kind"] for i in payload["data"]["issues"]] == ["unresolved_target", "untyped_edge"]

    def test_load_failure(self, runner, tmp_path):
        result = runner.invoke(check, [str(tmp_path / "missing.json"), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error"]["code"] == "DATA_LOAD_FAILED"
