"""Unit tests for the link projector."""

from edgebundle.core.projection import project_links


class TestProjectLinks:
    def test_scenario_single_link(self, build_graph, scenario_doc):
        graph = build_graph(scenario_doc)
        links = project_links(graph)

        assert len(links) == 1
        assert links[0].source is graph.get_leaf("G.X")
        assert links[0].target is graph.get_leaf("G.Y")
        assert links[0].type == "Depends On"

    def test_untyped_scenario_has_no_links(self, build_graph, make_scenario):
        assert project_links(build_graph(make_scenario(edge_type=""))) == ()

    def test_unresolved_scenario_has_no_links(self, build_graph, make_scenario):
        assert project_links(build_graph(make_scenario(target="G.Z"))) == ()

    def test_order_is_leaf_order_then_import_order(self, org_graph):
        links = project_links(org_graph)
        assert [(l.source.name, l.target.name) for l in links] == [
            ("Platform", "Atlas"),
            ("Data", "Atlas"),
            ("Beacon", "Ana"),
            ("Ana", "Platform"),
            ("Ben", "Data"),
            ("Ben", "Beacon"),
        ]

    def test_unresolved_targets_never_projected(self, org_graph):
        links = project_links(org_graph)
        assert all(link.target is not None for link in links)
        assert "Org.Projects.Ghost" not in {link.target_id for link in links}

    def test_touches(self, org_graph):
        link = project_links(org_graph)[0]
        assert link.touches("Org.Teams.Platform")
        assert link.touches("Org.Projects.Atlas")
        assert not link.touches("Org.People.Ana")
