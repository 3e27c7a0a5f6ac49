"""Shared fixtures: small hierarchy documents used across the suite."""

import json
from typing import Any, Dict

import pytest

from edgebundle.core.bilink import BilinkGraph, build_bilinks
from edgebundle.core.hierarchy import build_hierarchy
from edgebundle.core.types import TreeNode


def graph_from(doc: Dict[str, Any]) -> BilinkGraph:
    return build_bilinks(build_hierarchy(TreeNode.model_validate(doc)))


def scenario(edge_type: str = "Depends On", target: str = "G.Y") -> Dict[str, Any]:
    """G with two leaves, X importing `target`."""
    return {
        "name": "G",
        "children": [
            {"name": "X", "imports_with_type": [{"target": target, "type": edge_type}]},
            {"name": "Y"},
        ],
    }


@pytest.fixture
def scenario_doc() -> Dict[str, Any]:
    return scenario()


@pytest.fixture
def org_doc() -> Dict[str, Any]:
    """
    Three groups, six leaves.

    Leaf order: Platform, Data, Atlas, Beacon, Ana, Ben.
    Atlas -> Platform is untyped and Data -> Ghost does not resolve.
    """
    return {
        "name": "Org",
        "children": [
            {
                "name": "Teams",
                "children": [
                    {"name": "Platform", "imports_with_type": [
                        {"target": "Org.Projects.Atlas", "type": "Contributes To"},
                    ]},
                    {"name": "Data", "imports_with_type": [
                        {"target": "Org.Projects.Atlas", "type": "Depends On"},
                        {"target": "Org.Projects.Ghost", "type": "Reviews"},
                    ]},
                ],
            },
            {
                "name": "Projects",
                "children": [
                    {"name": "Atlas", "imports_with_type": [
                        {"target": "Org.Teams.Platform", "type": ""},
                    ]},
                    {"name": "Beacon", "imports_with_type": [
                        {"target": "Org.People.Ana", "type": "Reviews"},
                    ]},
                ],
            },
            {
                "name": "People",
                "children": [
                    {"name": "Ana", "imports_with_type": [
                        {"target": "Org.Teams.Platform", "type": "Member Of"},
                    ]},
                    {"name": "Ben", "imports_with_type": [
                        {"target": "Org.Teams.Data", "type": "Member Of"},
                        {"target": "Org.Projects.Beacon", "type": "Contributes To"},
                    ]},
                ],
            },
        ],
    }


@pytest.fixture
def org_graph(org_doc) -> BilinkGraph:
    return graph_from(org_doc)


@pytest.fixture
def write_doc(tmp_path):
    """Write a document to a JSON file and return its path as a string."""
    def _write(doc: Dict[str, Any], name: str = "data.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(doc))
        return str(path)
    return _write


@pytest.fixture
def build_graph():
    return graph_from


@pytest.fixture
def make_scenario():
    return scenario
