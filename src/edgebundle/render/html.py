"""
Standalone D3 page.

Embeds a precomputed `Scene` into a single HTML file that loads D3 v7 from
the CDN. D3 draws the bands, the bundled curves (`curveBundle` over the
layout control points) and the labels. The page re-applies the same
highlight rules as `HighlightStateMachine` on every click:

- label click: toggle the lock on that leaf, never bubbling to the background
- background click: clear every lock
"""

import html
import json
import logging
import webbrowser
from pathlib import Path

from .scene import Scene

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <script src="https://d3js.org/d3.v7.min.js"></script>
    <style>
        body {
            margin: 0;
            display: flex;
            justify-content: center;
            background: #ffffff;
        }
        .label { cursor: pointer; user-select: none; }
        .legend text { font-size: 11px; }
    </style>
</head>
<body>
    <div id="chart"></div>
    <script>
        const scene = __SCENE_DATA__;
        const style = scene.style;

        const svg = d3.select("#chart")
            .append("svg")
            .attr("width", style.width)
            .attr("height", style.width)
            .attr("viewBox", [-style.radius, -style.radius, style.width, style.width])
            .attr("style", `font-family: ${style.font_family}; font-size: ${style.font_size};`);

        const g = svg.append("g");

        // ============================================================
        // GROUP BANDS
        // ============================================================
        const arc = d3.arc()
            .innerRadius(style.band_inner)
            .outerRadius(style.band_outer)
            .startAngle(d => d.start)
            .endAngle(d => d.end);

        g.append("g")
            .selectAll("path")
            .data(scene.bands)
            .join("path")
            .attr("d", arc)
            .attr("fill", d => d.color)
            .attr("stroke", "none");

        g.append("g")
            .selectAll("text")
            .data(scene.bands)
            .join("text")
            .attr("transform", d => d.label_transform)
            .attr("text-anchor", "middle")
            .attr("alignment-baseline", "middle")
            .style("font-size", "14px")
            .style("fill", "#333")
            .style("font-weight", "bold")
            .text(d => d.label);

        // ============================================================
        // LINKS
        // ============================================================
        const line = d3.lineRadial()
            .curve(d3.curveBundle.beta(style.bundle_beta))
            .angle(d => d[0])
            .radius(d => d[1]);

        const edgePaths = g.append("g")
            .attr("fill", "none")
            .selectAll("path")
            .data(scene.links)
            .join("path")
            .attr("d", d => line(d.points))
            .attr("stroke", d => d.color)
            .attr("stroke-width", style.stroke_width)
            .attr("stroke-opacity", d => d.opacity);

        edgePaths.append("title").text(d => `${d.source} \\u2192 ${d.target} (${d.type})`);

        // ============================================================
        // LABELS & LOCKING
        // ============================================================
        const lockedNodes = new Set(scene.locked);

        const labels = g.append("g")
            .selectAll("text")
            .data(scene.leaves)
            .join("text")
            .attr("dy", "0.31em")
            .attr("transform", d => d.transform)
            .attr("text-anchor", d => d.anchor)
            .attr("class", "label")
            .style("font-weight", d => d.weight)
            .text(d => d.name)
            .on("click", function (event, d) {
                if (lockedNodes.has(d.id)) {
                    lockedNodes.delete(d.id);
                } else {
                    lockedNodes.add(d.id);
                }
                updateHighlight();
                event.stopPropagation();
            });

        svg.on("click", () => {
            lockedNodes.clear();
            updateHighlight();
        });

        function updateHighlight() {
            if (lockedNodes.size === 0) {
                edgePaths.attr("stroke-opacity", style.neutral_opacity);
                labels.style("font-weight", "normal");
                return;
            }
            edgePaths.attr("stroke-opacity", l =>
                lockedNodes.has(l.source) || lockedNodes.has(l.target)
                    ? style.emphasized_opacity
                    : style.dimmed_opacity);
            labels.style("font-weight", d => lockedNodes.has(d.id) ? "bold" : "normal");
        }

        // ============================================================
        // LEGEND
        // ============================================================
        const legend = svg.append("g")
            .attr("class", "legend")
            .attr("transform", `translate(${-style.radius + 20},${-style.radius + 20})`);
        legend.append("text").text("Connection Type").attr("font-weight", "bold");
        scene.legend.forEach((entry, i) => {
            legend.append("circle")
                .attr("cx", 0).attr("cy", 15 + i * 16).attr("r", 6).attr("fill", entry.color);
            legend.append("text")
                .attr("x", 10).attr("y", 15 + i * 16 + 3)
                .text(entry.type);
        });
    </script>
</body>
</html>
"""


def _script_safe_json(scene: Scene) -> str:
    # A literal "</script>" inside a name would end the script element
    return json.dumps(scene.model_dump(mode="json")).replace("</", "<\\/")


def generate_html(scene: Scene) -> str:
    """Generate the HTML content for a scene."""
    return (
        HTML_TEMPLATE
        .replace("__TITLE__", html.escape(scene.title))
        .replace("__SCENE_DATA__", _script_safe_json(scene))
    )


def write_html(scene: Scene, output_path: Path) -> Path:
    """Write the page to disk and return its path."""
    out_file = Path(output_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(generate_html(scene), encoding="utf-8")
    logger.info(f"Wrote {len(scene.links)} links, {len(scene.leaves)} labels to {out_file}")
    return out_file


def open_visualization(scene: Scene, output_path: str = "bundle.html") -> str:
    """Generate the page and open it in the browser."""
    out_file = write_html(scene, Path(output_path))
    webbrowser.open(out_file.resolve().as_uri())
    return str(out_file)
