"""Unit tests for the rendering session."""

import pytest

from edgebundle.core.exceptions import DataLoadError
from edgebundle.core.highlight import BackgroundClicked, LabelClicked, LockState
from edgebundle.session import BundleSession


class TestBundleSession:
    def test_from_path_builds_pipeline(self, write_doc, org_doc):
        session = BundleSession.from_path(write_doc(org_doc))

        assert len(session.graph) == 6
        assert len(session.links) == 6
        assert len(session.layout) == 10
        assert session.frame.state is LockState.UNLOCKED

    def test_from_path_failure(self, tmp_path):
        with pytest.raises(DataLoadError):
            BundleSession.from_path(tmp_path / "missing.json")

    def test_dispatch(self, write_doc, scenario_doc):
        session = BundleSession.from_path(write_doc(scenario_doc))
        assert session.dispatch(LabelClicked("G.Y")).locked == frozenset({"G.Y"})
        assert session.dispatch(BackgroundClicked()).locked == frozenset()

    def test_initial_locks(self, write_doc, scenario_doc):
        session = BundleSession.from_path(write_doc(scenario_doc), locked=["G.X"])
        assert session.scene().locked == ["G.X"]

    def test_unknown_ids(self, write_doc, scenario_doc):
        session = BundleSession.from_path(write_doc(scenario_doc))
        assert session.unknown_ids(["G.X", "G.Q", "G"]) == ["G.Q", "G"]

    def test_interactions_leave_graph_untouched(self, write_doc, org_doc):
        session = BundleSession.from_path(write_doc(org_doc))
        edges_before = session.graph.edges
        links_before = session.links
        session.dispatch(LabelClicked("Org.Teams.Data"))
        session.dispatch(BackgroundClicked())
        assert session.graph.edges is edges_before
        assert session.links is links_before

    def test_write(self, write_doc, scenario_doc, tmp_path):
        session = BundleSession.from_path(write_doc(scenario_doc))
        out = session.write(tmp_path / "out.html")
        assert out.read_text(encoding="utf-8") == session.to_html()
