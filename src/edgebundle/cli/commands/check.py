"""
Check Command - Report what the renderer silently tolerates.

The diagram degrades gracefully on malformed data: untyped imports,
unresolved targets and duplicate leaf ids never stop a render. This
command surfaces them so the input can be fixed.
Standardized output version.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import List

import click
from pydantic import BaseModel, Field

from ...config import load_config
from ...core.bilink import BuildDiagnostics
from ...session import BundleSession
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_success, echo_warning


# --- API Models ---
class CheckResultStatus(str, Enum):
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


class ApiIssue(BaseModel):
    kind: str
    source: str
    target: str | None = None
    message: str


class CheckResponse(BaseModel):
    result: CheckResultStatus
    exit_code: int
    leaf_count: int
    link_count: int
    issues: List[ApiIssue] = Field(default_factory=list)


def collect_issues(diagnostics: BuildDiagnostics) -> List[ApiIssue]:
    issues = []
    for leaf_id, count in sorted(diagnostics.duplicate_ids.items()):
        issues.append(ApiIssue(
            kind="duplicate_id",
            source=leaf_id,
            message=f"{count} leaves share the id '{leaf_id}'; edges resolve to the last one",
        ))
    for edge in diagnostics.unresolved:
        issues.append(ApiIssue(
            kind="unresolved_target",
            source=edge.source.id,
            target=edge.target_id,
            message=f"'{edge.target_id}' is not a leaf id; edge not drawn",
        ))
    for item in diagnostics.suppressed:
        issues.append(ApiIssue(
            kind="untyped_edge",
            source=item.source_id,
            target=item.target_id or None,
            message="import has no relationship type; edge ignored",
        ))
    return issues


def run_check(session: BundleSession, strict: bool) -> CheckResponse:
    issues = collect_issues(session.graph.diagnostics)
    if not issues:
        status = CheckResultStatus.PASS
    else:
        status = CheckResultStatus.FAIL if strict else CheckResultStatus.WARN
    return CheckResponse(
        result=status,
        exit_code=1 if status is CheckResultStatus.FAIL else 0,
        leaf_count=len(session.graph),
        link_count=len(session.links),
        issues=issues,
    )


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
@click.option("--strict", is_flag=True, help="Exit 1 when any issue is found")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON (Standard Envelope)")
@click.option("--quiet", "-q", is_flag=True)
def check(input_file: str, config_file: str | None, strict: bool, as_json: bool, quiet: bool):
    """Validate INPUT_FILE and list edges that would not be drawn."""
    renderer = JsonRenderer("check")

    error_to_report = None
    api_response = None

    with renderer.capture():
        try:
            config = load_config(Path(config_file) if config_file else None)
            session = BundleSession.from_path(input_file, config=config)
            api_response = run_check(session, strict)
        except Exception as e:
            error_to_report = e

    if as_json:
        if error_to_report:
            renderer.render_error(error_to_report)
            sys.exit(1)
        renderer.render_success(api_response)
        sys.exit(api_response.exit_code)

    if error_to_report:
        echo_error(str(error_to_report))
        sys.exit(1)

    if not quiet:
        _print_report(api_response)
    sys.exit(api_response.exit_code)


def _print_report(response: CheckResponse) -> None:
    click.echo(f"Leaves: {response.leaf_count}   Links: {response.link_count}")
    if not response.issues:
        echo_success("No issues found")
        return

    for issue in response.issues:
        where = issue.source if issue.target is None else f"{issue.source} → {issue.target}"
        echo_warning(f"[{issue.kind}] {where}: {issue.message}")
    click.echo(f"Result: {response.result.value}")
